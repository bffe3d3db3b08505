"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as capacidades pequenas e componíveis que o
orquestrador exige dos tipos de cada domínio, além dos Ports
transversais (relógio, transação, geração de ids).

Capacidades:
- HasId: possui identificador
- HasVersion: possui versão para lock otimista
- SoftDeletable: pode estar removida logicamente
- Persistable: HasId + HasVersion + SoftDeletable (exigida pelos repositórios)
- Lifecycled: Persistable que sabe produzir a próxima versão (exigida pelo
  orquestrador)
- Convertible: converte Source em Target

Qualquer tipo que satisfaça as capacidades pode ser gerenciado; herdar de
LifecycleEntity é apenas a forma mais curta de satisfazê-las.

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Protocol, TypeVar, runtime_checkable
import itertools
import uuid


S = TypeVar("S", contravariant=True)
T = TypeVar("T", covariant=True)
L = TypeVar("L", bound="Lifecycled")


@runtime_checkable
class HasId(Protocol):
    """Qualquer valor que carrega um identificador."""

    @property
    def id(self) -> Any:
        ...


@runtime_checkable
class HasVersion(Protocol):
    """Qualquer valor versionado para controle de concorrência otimista."""

    @property
    def version(self) -> int:
        ...


@runtime_checkable
class SoftDeletable(Protocol):
    """Qualquer valor que pode estar logicamente removido."""

    @property
    def is_deleted(self) -> bool:
        ...


@runtime_checkable
class Persistable(HasId, HasVersion, SoftDeletable, Protocol):
    """O que um repositório do ciclo de vida precisa saber de uma entidade."""


@runtime_checkable
class Lifecycled(Persistable, Protocol):
    """
    Entidade que o orquestrador consegue evoluir.

    next_version e soft_deleted devolvem uma nova instância do mesmo tipo,
    com version + 1 e updated_at = now.
    """

    def next_version(self: L, now: datetime, **changes: Any) -> L:
        ...

    def soft_deleted(self: L, now: datetime) -> L:
        ...


class Convertible(Protocol[S, T]):
    """
    Conversão pura e total de Source para Target.

    Example:
        to_model: Convertible[UserEntity, User] = mapper.entity_to_model
    """

    def __call__(self, source: S) -> T:
        ...


class InstantProvider(Protocol):
    """Fonte do instante atual (injetada para determinismo)."""

    def now(self) -> datetime:
        ...


class IdGenerator(Protocol):
    """Gerador de identificadores."""

    def next(self) -> Any:
        ...


class UUIDIdGenerator:
    """Gera UUIDs aleatórios como string."""

    def next(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """Gera inteiros sequenciais a partir de `start` + 1 (útil em testes)."""

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start + 1)

    def next(self) -> int:
        return next(self._counter)


class UnitOfWork(ABC):
    """
    Unit of Work - Delimita a fronteira transacional de uma operação.

    Pattern: Context Manager
        with uow:
            repo.insert(entity)
            repo.flush()
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Example:
        class DjangoUnitOfWork(UnitOfWork):
            def commit(self):
                transaction.commit()
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todas as mudanças."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class NullUnitOfWork(UnitOfWork):
    """UoW que não faz nada; usado quando nenhuma transação é injetada."""

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass
