"""
Entidades base do Ciclo de Vida.

Todo tipo gerenciado (User, Foo, ...) estende LifecycleEntity com seus
campos específicos. Entidades são snapshots imutáveis: cada mutação
produz uma nova instância via dataclasses.replace.

Invariantes:
- deleted_at preenchido ⇒ ausente logicamente de buscas e listagens,
  mas fisicamente mantida
- version começa em 0 e incrementa exatamente 1 por mutação bem-sucedida
- created_at nunca muda; updated_at é renovado a cada mutação
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional, TypeVar

E = TypeVar("E", bound="LifecycleEntity")


@dataclass(frozen=True)
class LifecycleEntity:
    """
    Entidade versionada, com timestamps de auditoria e remoção lógica.

    Attributes:
        id: Identificador único dentro do tipo
        version: Versão usada no lock otimista (>= 0)
        created_at: Instante de criação
        updated_at: Instante da última atualização
        deleted_at: Instante da remoção lógica ou None
    """

    id: Any
    version: int
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    def __post_init__(self):
        if self.version < 0:
            raise ValueError(f"version deve ser >= 0, recebido {self.version}")

    @property
    def is_deleted(self) -> bool:
        """Verifica se entidade foi removida logicamente."""
        return self.deleted_at is not None

    def next_version(self: E, now: datetime, **changes: Any) -> E:
        """
        Produz a próxima versão lógica desta entidade.

        Args:
            now: Instante usado como novo updated_at
            **changes: Campos alterados (ex: deleted_at)

        Returns:
            Nova entidade com version + 1
        """
        return replace(self, version=self.version + 1, updated_at=now, **changes)

    def soft_deleted(self: E, now: datetime) -> E:
        """Próxima versão marcada como removida em `now`."""
        return self.next_version(now, deleted_at=now)


@dataclass(frozen=True)
class LifecycleModel:
    """
    Projeção somente-leitura de uma entidade para o domínio.

    Subclasses adicionam os campos específicos do tipo.
    """

    id: Any
    version: int
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]
