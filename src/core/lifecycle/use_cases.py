"""
Use Cases (Application Services) do Ciclo de Vida.

Este módulo contém o orquestrador genérico que sequencia create, list,
get, update e delete para qualquer tipo gerenciado, coordenando mapper,
repositório, relógio e transação.

Responsabilidades:
- Construir entidades a partir de intents no instante atual
- Aplicar update intents produzindo a próxima versão
- Persistir mutações via update condicionado à versão
- Traduzir sinais de duplicidade em DomainError (conflito)
- Emitir pontos de log de entrada/saída de cada operação

Pontos de extensão:
- Toda operação aceita Parameters (caminho + query) opcionais
- O acesso ao repositório passa por hooks _*_using_repository, que tipos
  especializados sobrescrevem para usar esses parâmetros

Política de falhas:
- NotFound / Conflict: retornados como Err(DomainError)
- IntegrityViolationError: escrita versionada afetou 0 linhas, propagada
- Qualquer outra exceção: propagada sem alteração
"""

from datetime import datetime
from typing import Any, Callable, Generic, Optional, TypeVar
import logging

from src.core.shared.clock import SystemInstantProvider
from src.core.shared.exceptions import (
    DomainError,
    DuplicateEntityError,
    IntegrityViolationError,
)
from src.core.shared.interfaces import (
    Convertible,
    InstantProvider,
    Lifecycled,
    NullUnitOfWork,
    UnitOfWork,
)
from src.core.shared.result import Err, Ok, Result

from .dtos import DEFAULT_PAGE_SIZE, Page, PageRequest, Parameters
from .mappers import LifecycleMapper
from .ports import LifecycleRepository

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Lifecycled)
M = TypeVar("M")
CI = TypeVar("CI")
UI = TypeVar("UI")
A = TypeVar("A")

NO_PARAMETERS = Parameters()


class LifecycleService(Generic[E, M, CI, UI]):
    """
    Use Case genérico: ciclo de vida completo de um tipo.

    Fluxo de update:
    1. Buscar entidade não removida
    2. Aplicar intent (mapper) e gerar próxima versão
    3. Persistir com a versão ANTERIOR como pré-condição
    4. 0 linhas afetadas ⇒ IntegrityViolationError
    5. Retornar model da nova versão

    Attributes:
        type_name: Nome do tipo gerenciado (ex: "User")
        repository: Port de persistência
        mapper: Conversões intent/entidade/model
        instant_provider: Fonte do instante atual
        uow: Unit of Work que delimita a transação das mutações
        default_page_size: Tamanho de página quando get_all não recebe um

    Example:
        service = LifecycleService("User", repo, UserMapper())
        result = service.create(CreateUser(name="Alice", birth_date=date(1991, 3, 23)))
        user = result.unwrap()

    Example com hook:
        class OwnedNoteService(LifecycleService[...]):
            def _get_using_repository(self, entity_id, parameters):
                note = super()._get_using_repository(entity_id, parameters)
                if note is not None and note.owner != parameters.path_variable("owner"):
                    return None
                return note
    """

    def __init__(
        self,
        type_name: str,
        repository: LifecycleRepository[E],
        mapper: LifecycleMapper[E, M, CI, UI],
        instant_provider: Optional[InstantProvider] = None,
        uow: Optional[UnitOfWork] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.type_name = type_name
        self.repository = repository
        self.mapper = mapper
        self.instant_provider = instant_provider or SystemInstantProvider()
        self.uow = uow or NullUnitOfWork()
        self.default_page_size = default_page_size

    def now(self) -> datetime:
        return self.instant_provider.now()

    @property
    def to_model(self) -> Convertible[E, M]:
        return self.mapper.entity_to_model

    def create(self, intent: CI, parameters: Optional[Parameters] = None) -> Result[M]:
        """
        Cria nova entidade a partir do create intent.

        Args:
            intent: Dados do tipo para criação
            parameters: Contexto da chamada, repassado ao hook de inserção

        Returns:
            Ok(model) com versão 0, ou Err(already_exists) se duplicado
        """
        parameters = parameters or NO_PARAMETERS
        logger.info(f"Creating new {self.type_name}: {intent}")
        entity = self.mapper.entity_to_be_created_from(intent, self.now())
        logger.debug(f"Built {self.type_name}Entity: {entity}")

        try:
            with self.uow:
                saved = self._persist(lambda: self._create_using_repository(entity, parameters))
        except DuplicateEntityError:
            logger.info(f"{self.type_name} already exists: {intent}")
            return Err(DomainError.already_exists(self.type_name, intent))

        logger.debug(f"Saved {self.type_name}Entity: {saved}")
        model = self.to_model(saved)
        logger.debug(f"Built {self.type_name}: {model}")
        return Ok(model)

    def get_all(
        self,
        page_index: int = 0,
        page_size: Optional[int] = None,
        parameters: Optional[Parameters] = None,
    ) -> Page[M]:
        """
        Lista uma página de entidades não removidas.

        Args:
            page_index: Página (0-indexed)
            page_size: Itens por página (0 produz página vazia;
                None usa default_page_size)
            parameters: Contexto da chamada, repassado ao hook de listagem

        Returns:
            Página de models; página fora do intervalo vem sem itens
            mas com total_pages correto

        Raises:
            ValueError: Se page_index ou page_size negativos
        """
        if page_size is None:
            page_size = self.default_page_size
        request = PageRequest(page_index, page_size)
        logger.info(f"Getting {self.type_name} page {request.page_index} of size {request.page_size}")
        entities = self._list_using_repository(request, parameters or NO_PARAMETERS)
        logger.debug(f"Found {self.type_name}Entity page: {list(entities.items)}")
        return entities.map(self.to_model)

    def get(self, entity_id: Any, parameters: Optional[Parameters] = None) -> Optional[M]:
        """
        Busca entidade não removida por id.

        Returns:
            Model ou None (quem chama decide se isso é not found)
        """
        logger.info(f"Getting {self.type_name} {entity_id}")
        entity = self._get_using_repository(entity_id, parameters or NO_PARAMETERS)
        if entity is None:
            logger.debug(f"{self.type_name}Entity {entity_id} not found")
            return None
        logger.debug(f"Found {self.type_name}Entity {entity_id}: {entity}")
        return self.to_model(entity)

    def update(
        self,
        entity_id: Any,
        intent: UI,
        parameters: Optional[Parameters] = None,
    ) -> Result[M]:
        """
        Atualiza entidade com os dados do update intent.

        Args:
            entity_id: Id da entidade
            intent: Delta do tipo
            parameters: Contexto da chamada, repassado aos hooks de busca
                e de escrita

        Returns:
            Ok(model) com version + 1, Err(not_found) ou Err(already_exists)

        Raises:
            IntegrityViolationError: Se outro escritor alterou a versão
        """
        parameters = parameters or NO_PARAMETERS
        logger.info(f"Updating {self.type_name} {entity_id}: {intent}")
        try:
            with self.uow:
                entity = self._get_using_repository(entity_id, parameters)
                if entity is None:
                    return Err(DomainError.not_found(self.type_name, entity_id))
                logger.debug(f"Found {self.type_name}Entity {entity_id} to update: {entity}")

                updated = self.mapper.updated_entity_with(entity, intent).next_version(self.now())
                logger.debug(f"Built {self.type_name}Entity {entity_id} to update: {updated}")
                self._persist_version_checked(updated, entity.version, parameters)
        except DuplicateEntityError:
            logger.info(f"{self.type_name} already exists: {intent}")
            return Err(DomainError.already_exists(self.type_name, intent))

        logger.debug(f"Updated {self.type_name}Entity {entity_id}: {updated}")
        return Ok(self.to_model(updated))

    def delete(self, entity_id: Any, parameters: Optional[Parameters] = None) -> Result[None]:
        """
        Remove logicamente a entidade (deleted_at = agora).

        Returns:
            Ok(None) ou Err(not_found)

        Raises:
            IntegrityViolationError: Se outro escritor alterou a versão
        """
        parameters = parameters or NO_PARAMETERS
        logger.info(f"Deleting {self.type_name} {entity_id}")
        try:
            with self.uow:
                entity = self._get_using_repository(entity_id, parameters)
                if entity is None:
                    return Err(DomainError.not_found(self.type_name, entity_id))
                logger.debug(f"Found {self.type_name}Entity {entity_id} to delete: {entity}")

                deleted = entity.soft_deleted(self.now())
                self._persist_version_checked(deleted, entity.version, parameters)
        except DuplicateEntityError:
            # Não há intent na remoção: o id serve de contexto do erro
            logger.info(f"{self.type_name} {entity_id} conflicts on delete")
            return Err(DomainError.already_exists(self.type_name, f"id {entity_id}"))

        logger.debug(f"Deleted {self.type_name}Entity {entity_id}")
        return Ok(None)

    # Hooks de acesso ao repositório

    def _create_using_repository(self, entity: E, parameters: Parameters) -> E:
        return self.repository.insert(entity)

    def _list_using_repository(self, request: PageRequest, parameters: Parameters) -> Page[E]:
        return self.repository.page_non_deleted(request.page_index, request.page_size)

    def _get_using_repository(self, entity_id: Any, parameters: Parameters) -> Optional[E]:
        return self.repository.find_non_deleted(entity_id)

    def _update_using_repository(self, entity: E, expected_version: int, parameters: Parameters) -> int:
        return self.repository.update_if_version(entity, expected_version)

    def _persist(self, action: Callable[[], A]) -> A:
        """Executa a ação de escrita e força o flush (duplicidade surge aqui)."""
        result = action()
        self.repository.flush()
        return result

    def _persist_version_checked(self, entity: E, expected_version: int, parameters: Parameters) -> None:
        affected = self._persist(
            lambda: self._update_using_repository(entity, expected_version, parameters)
        )
        if affected != 1:
            logger.error(
                f"Version check failed for {self.type_name}Entity {entity.id}, "
                f"expected version {expected_version}"
            )
            raise IntegrityViolationError(self.type_name, entity.id, expected_version)
