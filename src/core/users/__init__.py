"""
Domínio de Usuários - Tipo de referência do ciclo de vida.

Este módulo contém:
- Entidades e intents (UserEntity, User, CreateUser, UpdateUser)
- DTOs (CreateUserDTO, UpdateUserDTO, UserDTO)
- Mappers (UserMapper, UserDTOMapper)
- Ports (UserRepository, InMemoryUserRepository)
- Use Case (UserService)
"""

from .entities import UserEntity, User, CreateUser, UpdateUser
from .dtos import CreateUserDTO, UpdateUserDTO, UserDTO
from .mappers import UserMapper, UserDTOMapper
from .ports import UserRepository, InMemoryUserRepository
from .use_cases import UserService

__all__ = [
    # Entities
    "UserEntity",
    "User",
    "CreateUser",
    "UpdateUser",
    # DTOs
    "CreateUserDTO",
    "UpdateUserDTO",
    "UserDTO",
    # Mappers
    "UserMapper",
    "UserDTOMapper",
    # Ports
    "UserRepository",
    "InMemoryUserRepository",
    # Use Cases
    "UserService",
]
