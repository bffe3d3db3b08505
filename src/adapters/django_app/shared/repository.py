"""
Repository Base - Implementação do LifecycleRepository com Django ORM.

Fornece a semântica exigida pelo orquestrador do ciclo de vida:
- Leitura apenas de registros não removidos (deleted_at IS NULL)
- Paginação com ordem estável (created_at, id)
- Insert/update com tradução de violações de unicidade para DuplicateEntityError
  (demais IntegrityError, como NOT NULL ou FK, são propagados sem alteração)
- Update condicionado à versão (UPDATE ... WHERE id = ? AND version = ?)

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Unicidade é garantida pelas constraints do banco
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Tuple, Type, TypeVar
import logging

from django.db import IntegrityError, models, transaction
from django.db.models import QuerySet

from src.core.lifecycle.dtos import Page, PageRequest
from src.core.shared.exceptions import DuplicateEntityError
from src.core.shared.interfaces import Persistable

logger = logging.getLogger(__name__)

# SQLSTATE de unique_violation no Postgres
UNIQUE_VIOLATION = "23505"

# Type variables
T = TypeVar("T", bound=Persistable)  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class DjangoLifecycleRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios de ciclo de vida.

    Subclasses definem o model e as conversões; o controle de versão
    e a remoção lógica ficam aqui.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoUserRepository(DjangoLifecycleRepository[UserEntity, UserModel]):
            model_class = UserModel
            type_name = "User"

            def to_entity(self, model):
                return UserModelMapper.to_entity(model)

            def to_fields(self, entity):
                return UserModelMapper.to_fields(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Nome do tipo usado em mensagens de erro
    type_name: str = "Entity"

    # Ordem estável de listagem
    order_fields = ("created_at", "id")

    # Constraints cuja violação significa duplicidade
    unique_constraint_names: Tuple[str, ...] = ()

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """
        Converte Model Django para Entity de domínio.

        Args:
            model: Model Django

        Returns:
            Entity de domínio
        """
        raise NotImplementedError

    @abstractmethod
    def to_fields(self, entity: T) -> Dict[str, Any]:
        """
        Converte Entity para os valores de coluna (sem o id).

        Args:
            entity: Entity de domínio

        Returns:
            Dict campo → valor
        """
        raise NotImplementedError

    def _is_unique_violation(self, error: IntegrityError) -> bool:
        """
        Verifica se o IntegrityError veio de uma constraint de unicidade.

        Postgres informa o nome da constraint e o SQLSTATE 23505; SQLite
        informa apenas "UNIQUE constraint failed" e as colunas.
        """
        message = str(error)
        if any(name in message for name in self.unique_constraint_names):
            return True
        cause = error.__cause__
        sqlstate = getattr(cause, "pgcode", None) or getattr(cause, "sqlstate", None)
        if sqlstate == UNIQUE_VIOLATION:
            return True
        return message.startswith("UNIQUE constraint failed")

    def _duplicate_from(self, error: IntegrityError, entity: T, action: str) -> DuplicateEntityError:
        logger.debug(f"{action} of {self.type_name} {entity.id} rejected: {error}")
        return DuplicateEntityError(
            f"{self.type_name} {entity.id} violates a unique constraint",
            type_name=self.type_name,
        )

    def _non_deleted(self) -> QuerySet[M]:
        return self.model_class.objects.filter(deleted_at__isnull=True)

    def page_non_deleted(self, page_index: int, page_size: int) -> Page[T]:
        request = PageRequest(page_index, page_size)
        if request.page_size == 0:
            return Page.empty(request.page_index, request.page_size)

        qs = self._non_deleted().order_by(*self.order_fields)
        total = qs.count()
        models_page = qs[request.offset:request.offset + request.page_size]
        entities = [self.to_entity(m) for m in models_page]
        return Page.of(entities, request.page_index, request.page_size, total)

    def find_non_deleted(self, entity_id: Any) -> Optional[T]:
        try:
            model = self._non_deleted().get(id=entity_id)
        except self.model_class.DoesNotExist:
            return None
        return self.to_entity(model)

    def insert(self, entity: T) -> T:
        try:
            with transaction.atomic():
                self.model_class.objects.create(id=entity.id, **self.to_fields(entity))
        except IntegrityError as e:
            if not self._is_unique_violation(e):
                raise
            raise self._duplicate_from(e, entity, "Insert") from e

        logger.debug(f"{self.model_class.__name__} inserted: {entity.id}")
        return entity

    def update_if_version(self, entity: T, expected_version: int) -> int:
        try:
            with transaction.atomic():
                affected = self.model_class.objects.filter(
                    id=entity.id,
                    version=expected_version,
                ).update(**self.to_fields(entity))
        except IntegrityError as e:
            if not self._is_unique_violation(e):
                raise
            raise self._duplicate_from(e, entity, "Update") from e

        logger.debug(
            f"{self.model_class.__name__} {entity.id} updated from version "
            f"{expected_version}: {affected} row(s)"
        )
        return affected

    def flush(self) -> None:
        # O ORM executa cada escrita imediatamente
        logger.debug(f"Flush requested for {self.model_class.__name__}")
