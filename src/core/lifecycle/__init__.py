"""
Ciclo de Vida Genérico - Create, List, Get, Update, Soft-Delete.

Este módulo contém a orquestração compartilhada por todos os tipos
gerenciados, incluindo:
- Entidades base (LifecycleEntity, LifecycleModel)
- Página de resultados e contexto de chamada (Page, PageRequest, Parameters)
- Mappers (LifecycleMapper, LifecycleDTOMapper)
- Ports (LifecycleRepository, InMemoryLifecycleRepository)
- Use Case (LifecycleService)

Invariantes compartilhadas:
- Versão monotônica para concorrência otimista
- Remoção lógica (nada é removido fisicamente)
- Timestamps de auditoria
- Duplicidade traduzida em erro de domínio
"""

from .entities import LifecycleEntity, LifecycleModel
from .dtos import Page, PageRequest, Parameters
from .mappers import (
    LifecycleMapper,
    LifecycleDTOMapper,
    IdentityConversion,
    EntityAsModelMapper,
)
from .ports import LifecycleRepository, InMemoryLifecycleRepository
from .use_cases import LifecycleService

__all__ = [
    # Entities
    "LifecycleEntity",
    "LifecycleModel",
    # DTOs
    "Page",
    "PageRequest",
    "Parameters",
    # Mappers
    "LifecycleMapper",
    "LifecycleDTOMapper",
    "IdentityConversion",
    "EntityAsModelMapper",
    # Ports
    "LifecycleRepository",
    "InMemoryLifecycleRepository",
    # Use Cases
    "LifecycleService",
]
