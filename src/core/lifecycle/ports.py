"""
Ports (Interfaces) de Persistência do Ciclo de Vida.

Define o contrato que qualquer adapter de persistência deve implementar
para que o LifecycleService orquestre create/list/get/update/delete.

Ports:
- LifecycleRepository: leitura de não-removidos, inserção,
  update condicionado à versão e flush
- InMemoryLifecycleRepository: implementação de referência para testes,
  reproduzindo a semântica de concorrência e duplicidade de um banco real

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoUserRepository(DjangoLifecycleRepository[UserEntity, UserModel]):
        model_class = UserModel
"""

from typing import Any, Callable, Dict, Generic, Iterable, Optional, Protocol, TypeVar, runtime_checkable
import logging
import threading

from src.core.shared.exceptions import DuplicateEntityError
from src.core.shared.interfaces import Persistable

from .dtos import Page, PageRequest

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Persistable)

# (candidata, armazenada) -> True se violam a unicidade do tipo
DuplicatePredicate = Callable[[Any, Any], bool]


@runtime_checkable
class LifecycleRepository(Protocol[E]):
    """
    Interface de persistência consumida pelo orquestrador.

    Implementações:
    - DjangoLifecycleRepository (ORM, update condicional)
    - InMemoryLifecycleRepository (para testes)

    Methods:
        page_non_deleted: Página ordenada de entidades não removidas
        find_non_deleted: Busca por id ignorando removidas
        insert: Persiste entidade nova
        update_if_version: Escreve apenas se versão armazenada confere
        flush: Força visibilidade das escritas pendentes
    """

    def page_non_deleted(self, page_index: int, page_size: int) -> Page[E]:
        """
        Lista uma página de entidades não removidas.

        A ordem é estável entre chamadas (ordem de criação) e
        total_pages considera apenas entidades não removidas.
        """
        ...

    def find_non_deleted(self, entity_id: Any) -> Optional[E]:
        """Busca entidade não removida por id, ou None."""
        ...

    def insert(self, entity: E) -> E:
        """
        Persiste entidade nova.

        Raises:
            DuplicateEntityError: Se viola unicidade do tipo
        """
        ...

    def update_if_version(self, entity: E, expected_version: int) -> int:
        """
        Substitui a entidade armazenada se sua versão for expected_version.

        Deve ser atômico em relação a escritores concorrentes do mesmo id;
        é o único ponto de serialização do lock otimista.

        Returns:
            Linhas afetadas: 1 ou 0

        Raises:
            DuplicateEntityError: Se os novos valores violam unicidade
        """
        ...

    def flush(self) -> None:
        """Torna escritas pendentes duráveis/visíveis."""
        ...


class InMemoryLifecycleRepository(Generic[E]):
    """
    Implementação em memória do LifecycleRepository.

    Útil para:
    - Testes unitários
    - Verificar a semântica que um banco real precisa fornecer

    Não usar em produção!

    Regras reproduzidas:
    - insert/update_if_version rodam o predicado de duplicidade contra
      todas as OUTRAS entidades não removidas
    - entidades removidas nunca contam como duplicadas
    - update_if_version só grava se a versão armazenada for a esperada
    - nada é removido fisicamente

    Example:
        repo = InMemoryLifecycleRepository(
            type_name="User",
            are_duplicates=lambda a, b: a.name == b.name,
        )
        repo.insert(user_entity)
        found = repo.find_non_deleted(user_entity.id)
    """

    def __init__(
        self,
        type_name: str = "Entity",
        are_duplicates: Optional[DuplicatePredicate] = None,
        initial: Iterable[E] = (),
    ):
        self.type_name = type_name
        self._are_duplicates = are_duplicates or (lambda candidate, stored: False)
        self._entities: Dict[Any, E] = {}
        self._lock = threading.RLock()
        self.reset(initial)

    @property
    def entities(self) -> Dict[Any, E]:
        """Snapshot de todas as entidades (inclusive removidas), para testes."""
        with self._lock:
            return dict(self._entities)

    def page_non_deleted(self, page_index: int, page_size: int) -> Page[E]:
        request = PageRequest(page_index, page_size)
        with self._lock:
            alive = [e for e in self._entities.values() if not e.is_deleted]
        items = alive[request.offset:request.offset + request.page_size]
        return Page.of(items, request.page_index, request.page_size, len(alive))

    def find_non_deleted(self, entity_id: Any) -> Optional[E]:
        with self._lock:
            entity = self._entities.get(entity_id)
        if entity is None or entity.is_deleted:
            return None
        return entity

    def insert(self, entity: E) -> E:
        with self._lock:
            self._check_duplicates(entity)
            self._entities[entity.id] = entity
        logger.debug(f"Inserted {self.type_name} {entity.id}")
        return entity

    def update_if_version(self, entity: E, expected_version: int) -> int:
        with self._lock:
            self._check_duplicates(entity)
            existing = self._entities.get(entity.id)
            if existing is None or existing.version != expected_version:
                logger.debug(
                    f"Version check failed for {self.type_name} {entity.id}: "
                    f"expected {expected_version}, "
                    f"stored {existing.version if existing else None}"
                )
                return 0
            self._entities[entity.id] = entity
        return 1

    def flush(self) -> None:
        logger.debug(f"Flushed {self.type_name} repository: {len(self._entities)} entities")

    def reset(self, initial: Iterable[E] = ()) -> None:
        """Volta ao estado inicial dado (útil para testes)."""
        with self._lock:
            self._entities.clear()
            for entity in initial:
                self._entities[entity.id] = entity

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self.reset()

    def _check_duplicates(self, candidate: E) -> None:
        if candidate.is_deleted:
            return
        for stored in self._entities.values():
            if stored.id == candidate.id or stored.is_deleted:
                continue
            if self._are_duplicates(candidate, stored):
                raise DuplicateEntityError(
                    f"{self.type_name} {candidate.id} duplicates {stored.id}",
                    type_name=self.type_name,
                )
