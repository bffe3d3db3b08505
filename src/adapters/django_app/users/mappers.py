"""
Mappers para conversão entre UserEntity (Core) e UserModel (Django).

Responsabilidades:
- UserModel → UserEntity (para uso no Core)
- UserEntity → valores de coluna (para insert/update condicional)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
"""

from typing import Any, Dict

from src.core.users.entities import UserEntity

from .models import UserModel


class UserModelMapper:
    """Mapper entre UserEntity e UserModel."""

    @staticmethod
    def to_entity(model: UserModel) -> UserEntity:
        """
        Converte UserModel para UserEntity.

        Args:
            model: Model Django carregado do banco

        Returns:
            Entidade imutável do Core
        """
        return UserEntity(
            id=str(model.id),
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
            name=model.name,
            birth_date=model.birth_date,
        )

    @staticmethod
    def to_fields(entity: UserEntity) -> Dict[str, Any]:
        """Valores de coluna da entidade, exceto o id."""
        return {
            "version": entity.version,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
            "deleted_at": entity.deleted_at,
            "name": entity.name,
            "birth_date": entity.birth_date,
        }
