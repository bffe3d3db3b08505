"""
Repositório Django para persistência de Usuários.

Implementa o UserRepository (LifecycleRepository[UserEntity]) do Core.
É um DRIVEN ADAPTER - acionado pelo UserService.

A unicidade de nome vem da constraint parcial users_unique_active_name;
violações chegam como DuplicateEntityError.
"""

from typing import Any, Dict

from src.core.users.entities import UserEntity

from ..shared.repository import DjangoLifecycleRepository
from .mappers import UserModelMapper
from .models import UserModel


class DjangoUserRepository(DjangoLifecycleRepository[UserEntity, UserModel]):
    """
    Implementação Django do UserRepository.

    Example:
        repo = DjangoUserRepository()
        service = UserService(repo, uow=DjangoUnitOfWork())
    """

    model_class = UserModel
    type_name = "User"
    unique_constraint_names = ("users_unique_active_name",)

    def to_entity(self, model: UserModel) -> UserEntity:
        return UserModelMapper.to_entity(model)

    def to_fields(self, entity: UserEntity) -> Dict[str, Any]:
        return UserModelMapper.to_fields(entity)
