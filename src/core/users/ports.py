"""
Ports (Interfaces) do Domínio de Usuários.

UserRepository é o LifecycleRepository especializado em UserEntity.
InMemoryUserRepository aplica a regra de unicidade de nome.
"""

from typing import Iterable

from src.core.lifecycle.ports import InMemoryLifecycleRepository, LifecycleRepository

from .entities import UserEntity, users_are_duplicates

UserRepository = LifecycleRepository[UserEntity]


class InMemoryUserRepository(InMemoryLifecycleRepository[UserEntity]):
    """
    Implementação em memória do UserRepository.

    Example:
        repo = InMemoryUserRepository()
        repo.insert(user_entity)
    """

    def __init__(self, initial: Iterable[UserEntity] = ()):
        super().__init__(
            type_name="User",
            are_duplicates=users_are_duplicates,
            initial=initial,
        )
