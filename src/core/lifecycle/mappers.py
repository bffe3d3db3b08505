"""
Mapping Pipeline - Conversões puras entre intents, entidades, models e DTOs.

Responsabilidades:
- CreateIntent → Entity (carimba id, versão 0 e timestamps)
- Entity → Model (projeção)
- Entity + UpdateIntent → Entity (aplica apenas os campos do tipo;
  versão e timestamps são responsabilidade do orquestrador)
- DTOs ↔ intents/models (camada de transporte)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Conversões totais e sem efeitos colaterais
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, TypeVar

from src.core.shared.interfaces import IdGenerator, Lifecycled, UUIDIdGenerator

from .entities import LifecycleEntity

E = TypeVar("E", bound=Lifecycled)
M = TypeVar("M")
CI = TypeVar("CI")
UI = TypeVar("UI")
D = TypeVar("D")
CD = TypeVar("CD")
UD = TypeVar("UD")
X = TypeVar("X")


class LifecycleMapper(ABC, Generic[E, M, CI, UI]):
    """
    Mapper entre intents, entidades e models de um tipo.

    Type Parameters:
        E: Entidade (qualquer Lifecycled, em geral um LifecycleEntity)
        M: Model de domínio
        CI: Create intent
        UI: Update intent

    Example:
        class UserMapper(LifecycleMapper[UserEntity, User, CreateUser, UpdateUser]):
            def entity_to_be_created_from(self, intent, now):
                return UserEntity(id=self.new_id(), version=0, ...)
    """

    def __init__(self, id_generator: IdGenerator = None):
        self._id_generator = id_generator or UUIDIdGenerator()

    def new_id(self):
        """Gera identificador para uma nova entidade."""
        return self._id_generator.next()

    @abstractmethod
    def entity_to_be_created_from(self, intent: CI, now: datetime) -> E:
        """
        Constrói entidade nova a partir do create intent.

        Args:
            intent: Dados do tipo para criação
            now: Instante atual (created_at = updated_at = now)

        Returns:
            Entidade com version 0 e deleted_at None
        """
        raise NotImplementedError

    @abstractmethod
    def entity_to_model(self, entity: E) -> M:
        """Projeta entidade para model de domínio."""
        raise NotImplementedError

    @abstractmethod
    def updated_entity_with(self, entity: E, intent: UI) -> E:
        """
        Aplica o delta do update intent sobre a entidade.

        Deve alterar apenas campos específicos do tipo; versão e
        updated_at são definidos pelo orquestrador.
        """
        raise NotImplementedError


class LifecycleDTOMapper(ABC, Generic[M, D, CI, UI, CD, UD]):
    """
    Mapper da camada de transporte: DTOs ↔ intents/models.

    Type Parameters:
        M: Model de domínio
        D: DTO de saída
        CI/UI: Create/Update intents
        CD/UD: Create/Update DTOs de entrada
    """

    @abstractmethod
    def model_to_dto(self, model: M) -> D:
        raise NotImplementedError

    @abstractmethod
    def create_dto_to_intent(self, dto: CD) -> CI:
        raise NotImplementedError

    @abstractmethod
    def update_dto_to_intent(self, dto: UD) -> UI:
        raise NotImplementedError


class IdentityConversion(Generic[X]):
    """
    Conversão identidade, para tipos sem DTO/model distintos.

    Example:
        to_dto = IdentityConversion()
        assert to_dto(user) is user
    """

    def __call__(self, source: X) -> X:
        return source


class EntityAsModelMapper(LifecycleMapper[E, E, CI, UI]):
    """
    Mapper para tipos cujo model é a própria entidade imutável.

    Subclasses implementam apenas criação e aplicação de update.
    """

    _identity = IdentityConversion()

    def entity_to_model(self, entity: E) -> E:
        return self._identity(entity)


def audit_fields(entity: LifecycleEntity) -> dict:
    """Campos de auditoria de uma entidade, para montar models."""
    return {
        "id": entity.id,
        "version": entity.version,
        "created_at": entity.created_at,
        "updated_at": entity.updated_at,
        "deleted_at": entity.deleted_at,
    }

