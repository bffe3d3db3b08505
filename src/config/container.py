"""
Dependency Injection Container.

Configura e gerencia as dependências do ciclo de vida.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, relógio)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Tamanhos de página vindos dos settings

Adicionar um novo tipo gerenciado:
- Registrar repository e service seguindo o bloco de Users
"""

from dependency_injector import containers, providers
from typing import Optional

from src.core.lifecycle.dtos import DEFAULT_PAGE_SIZE, PageRequest
from src.core.shared.clock import AdjustableInstantProvider, SystemInstantProvider
from src.core.users.mappers import UserDTOMapper, UserMapper
from src.core.users.ports import InMemoryUserRepository
from src.core.users.use_cases import UserService

DEFAULT_CONFIG = {
    "default_page_size": DEFAULT_PAGE_SIZE,
    "max_page_size": 100,
}


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings do ciclo de vida
    - Infrastructure: relógio, Unit of Work
    - Repositories: Persistência (Django ORM)
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        container = get_container()
        service = container.user_service()
        result = service.create(CreateUser(name="Alice", birth_date=date(1991, 3, 23)))
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default=DEFAULT_CONFIG)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    instant_provider = providers.Singleton(SystemInstantProvider)

    # Nova instância por service (transação por mutação)
    unit_of_work = providers.Factory(
        # Lazy import: adapters Django exigem settings carregados
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['DjangoUnitOfWork']
        ).DjangoUnitOfWork()
    )

    page_request = providers.Callable(
        PageRequest.from_params,
        default_page_size=config.default_page_size,
        max_page_size=config.max_page_size,
    )

    # =========================================================================
    # Users
    # =========================================================================

    user_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.users.repositories',
            fromlist=['DjangoUserRepository']
        ).DjangoUserRepository()
    )

    user_mapper = providers.Singleton(UserMapper)

    user_dto_mapper = providers.Singleton(UserDTOMapper)

    user_service = providers.Factory(
        UserService,
        user_repo=user_repository,
        mapper=user_mapper,
        instant_provider=instant_provider,
        uow=unit_of_work,
        default_page_size=config.default_page_size,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def _settings_config() -> dict:
    """Lê a configuração do ciclo de vida dos Django settings."""
    from django.conf import settings

    return {
        "default_page_size": getattr(
            settings, "LIFECYCLE_DEFAULT_PAGE_SIZE", DEFAULT_CONFIG["default_page_size"]
        ),
        "max_page_size": getattr(
            settings, "LIFECYCLE_MAX_PAGE_SIZE", DEFAULT_CONFIG["max_page_size"]
        ),
    }


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), configurando
    a partir dos Django settings.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(_settings_config())

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes sem banco de dados.

    Usa implementações InMemory e relógio ajustável.

    Example:
        container = TestingContainer()
        service = container.user_service()
        container.instant_provider().adjust(lambda now: now + timedelta(days=1))
    """

    config = providers.Configuration(default=DEFAULT_CONFIG)

    instant_provider = providers.Singleton(AdjustableInstantProvider)

    unit_of_work = providers.Factory(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['InMemoryUnitOfWork']
        ).InMemoryUnitOfWork()
    )

    page_request = providers.Callable(
        PageRequest.from_params,
        default_page_size=config.default_page_size,
        max_page_size=config.max_page_size,
    )

    user_repository = providers.Singleton(InMemoryUserRepository)

    user_mapper = providers.Singleton(UserMapper)

    user_dto_mapper = providers.Singleton(UserDTOMapper)

    user_service = providers.Factory(
        UserService,
        user_repo=user_repository,
        mapper=user_mapper,
        instant_provider=instant_provider,
        uow=unit_of_work,
        default_page_size=config.default_page_size,
    )
