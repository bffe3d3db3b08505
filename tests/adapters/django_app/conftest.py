"""
Fixtures para testes com Django.

O banco de testes (SQLite em memória) é criado pelo pytest-django a
partir das migrations; testes que o usam recebem a marca django_db.
"""

import pytest

from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.adapters.django_app.users.repositories import DjangoUserRepository
from src.core.users.use_cases import UserService


@pytest.fixture
def django_user_repo():
    """Repositório Django de usuários."""
    return DjangoUserRepository()


@pytest.fixture
def django_uow():
    """Unit of Work transacional."""
    return DjangoUnitOfWork()


@pytest.fixture
def django_user_service(django_user_repo, django_uow, clock):
    """UserService persistindo via ORM."""
    return UserService(django_user_repo, instant_provider=clock, uow=django_uow)


@pytest.fixture
def user_model_factory(clock):
    """Factory para criar UserModel diretamente no banco."""
    from src.adapters.django_app.users.models import UserModel
    import uuid
    from datetime import date

    def create_user(**kwargs):
        now = clock.now()
        defaults = {
            'id': str(uuid.uuid4()),
            'version': 0,
            'created_at': now,
            'updated_at': now,
            'deleted_at': None,
            'name': 'Usuário de Teste',
            'birth_date': date(1990, 1, 1),
        }
        defaults.update(kwargs)
        return UserModel.objects.create(**defaults)

    return create_user
