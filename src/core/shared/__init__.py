"""
Shared Domain Components.

Contém componentes compartilhados entre todos os tipos gerenciados:
- Erros de domínio e exceções
- Result (Ok / Err)
- Interfaces (Ports) e capacidades
- Instant providers
"""

from .exceptions import (
    DomainError,
    DomainException,
    ValidationError,
    DomainErrorException,
    DuplicateEntityError,
    IntegrityViolationError,
)
from .result import Ok, Err, Result
from .interfaces import UnitOfWork, NullUnitOfWork, InstantProvider
from .clock import SystemInstantProvider, AdjustableInstantProvider

__all__ = [
    "DomainError",
    "DomainException",
    "ValidationError",
    "DomainErrorException",
    "DuplicateEntityError",
    "IntegrityViolationError",
    "Ok",
    "Err",
    "Result",
    "UnitOfWork",
    "NullUnitOfWork",
    "InstantProvider",
    "SystemInstantProvider",
    "AdjustableInstantProvider",
]
