"""
Mappers do Domínio de Usuários.

- UserMapper: intents ↔ UserEntity ↔ User
- UserDTOMapper: DTOs ↔ intents/models
"""

from dataclasses import replace
from datetime import datetime

from src.core.lifecycle.mappers import LifecycleDTOMapper, LifecycleMapper, audit_fields

from .dtos import CreateUserDTO, UpdateUserDTO, UserDTO
from .entities import CreateUser, UpdateUser, User, UserEntity


class UserMapper(LifecycleMapper[UserEntity, User, CreateUser, UpdateUser]):
    """Conversões puras entre intents, entidade e model de usuário."""

    def entity_to_be_created_from(self, intent: CreateUser, now: datetime) -> UserEntity:
        return UserEntity(
            id=self.new_id(),
            version=0,
            created_at=now,
            updated_at=now,
            deleted_at=None,
            name=intent.name.strip(),
            birth_date=intent.birth_date,
        )

    def entity_to_model(self, entity: UserEntity) -> User:
        return User(
            **audit_fields(entity),
            name=entity.name,
            birth_date=entity.birth_date,
        )

    def updated_entity_with(self, entity: UserEntity, intent: UpdateUser) -> UserEntity:
        return replace(entity, name=intent.name.strip(), birth_date=intent.birth_date)


class UserDTOMapper(LifecycleDTOMapper[User, UserDTO, CreateUser, UpdateUser, CreateUserDTO, UpdateUserDTO]):
    """Conversões da camada de transporte de usuário."""

    def model_to_dto(self, model: User) -> UserDTO:
        return UserDTO(
            id=str(model.id),
            name=model.name,
            birth_date=model.birth_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def create_dto_to_intent(self, dto: CreateUserDTO) -> CreateUser:
        return CreateUser(name=dto.name, birth_date=dto.birth_date)

    def update_dto_to_intent(self, dto: UpdateUserDTO) -> UpdateUser:
        return UpdateUser(name=dto.name, birth_date=dto.birth_date)
