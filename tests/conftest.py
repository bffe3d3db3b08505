"""
Configurações globais do Pytest para o Lifecycle Orchestrator.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures compartilhadas pelos testes do Core.
"""

import pytest
from datetime import date, datetime, timezone
from pathlib import Path

from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
from src.config.container import reset_container
from src.core.shared.clock import AdjustableInstantProvider
from src.core.shared.interfaces import SequentialIdGenerator
from src.core.users.entities import CreateUser
from src.core.users.mappers import UserMapper
from src.core.users.ports import InMemoryUserRepository
from src.core.users.use_cases import UserService


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container limpo.
    """
    yield
    reset_container()


@pytest.fixture
def clock():
    """Relógio ajustável começando em 2024-01-01 12:00 UTC."""
    return AdjustableInstantProvider(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def user_repo():
    """Repositório de usuários em memória."""
    return InMemoryUserRepository()


@pytest.fixture
def uow():
    """Unit of Work em memória."""
    return InMemoryUnitOfWork()


@pytest.fixture
def user_mapper():
    """Mapper com ids sequenciais (1, 2, 3...)."""
    return UserMapper(id_generator=SequentialIdGenerator())


@pytest.fixture
def user_service(user_repo, user_mapper, clock, uow):
    """UserService com dependências em memória."""
    return UserService(user_repo, mapper=user_mapper, instant_provider=clock, uow=uow)


@pytest.fixture
def alice():
    """Intent de criação da Alice."""
    return CreateUser(name="Alice", birth_date=date(1991, 3, 23))


@pytest.fixture
def bob():
    """Intent de criação do Bob."""
    return CreateUser(name="Bob", birth_date=date(1985, 7, 2))
