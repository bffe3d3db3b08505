"""
Use Cases do Domínio de Usuários.

UserService especializa o LifecycleService genérico com o tipo "User".
"""

from typing import Optional

from src.core.lifecycle.dtos import DEFAULT_PAGE_SIZE
from src.core.lifecycle.use_cases import LifecycleService
from src.core.shared.interfaces import InstantProvider, UnitOfWork

from .entities import CreateUser, UpdateUser, User, UserEntity
from .mappers import UserMapper
from .ports import UserRepository


class UserService(LifecycleService[UserEntity, User, CreateUser, UpdateUser]):
    """
    Use Case: ciclo de vida de usuários.

    Example:
        service = UserService(InMemoryUserRepository())
        alice = service.create(CreateUser("Alice", date(1991, 3, 23))).unwrap()
    """

    TYPE_NAME = "User"

    def __init__(
        self,
        user_repo: UserRepository,
        mapper: Optional[UserMapper] = None,
        instant_provider: Optional[InstantProvider] = None,
        uow: Optional[UnitOfWork] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        super().__init__(
            type_name=self.TYPE_NAME,
            repository=user_repo,
            mapper=mapper or UserMapper(),
            instant_provider=instant_provider,
            uow=uow,
            default_page_size=default_page_size,
        )
