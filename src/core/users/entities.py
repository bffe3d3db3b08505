"""
Entidades do Domínio de Usuários.

Tipo de referência gerenciado pelo ciclo de vida genérico.

Entidades:
- UserEntity: registro persistido (versionado, remoção lógica)
- User: model de domínio (projeção somente-leitura)
- CreateUser / UpdateUser: intents de criação e atualização

Regra de unicidade:
- Dois usuários não removidos não podem ter o mesmo nome
"""

from dataclasses import dataclass
from datetime import date

from src.core.lifecycle.entities import LifecycleEntity, LifecycleModel
from src.core.shared.exceptions import ValidationError

NAME_MAX_LENGTH = 100


def _validar_nome(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Nome é obrigatório", field="name")
    if len(name.strip()) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Nome deve ter no máximo {NAME_MAX_LENGTH} caracteres",
            field="name"
        )


def _validar_data_nascimento(birth_date: date) -> None:
    if not isinstance(birth_date, date):
        raise ValidationError("Data de nascimento inválida", field="birth_date")


@dataclass(frozen=True)
class UserEntity(LifecycleEntity):
    """
    Entidade de Domínio: Usuário.

    Attributes:
        name: Nome único entre usuários não removidos
        birth_date: Data de nascimento
    """

    name: str
    birth_date: date

    def __repr__(self) -> str:
        return (
            f"UserEntity(id={self.id}, name='{self.name}', "
            f"version={self.version}, deleted_at={self.deleted_at})"
        )


@dataclass(frozen=True)
class User(LifecycleModel):
    """Model de domínio: Usuário."""

    name: str
    birth_date: date


@dataclass(frozen=True)
class CreateUser:
    """
    Intent de criação de usuário.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.
    """

    name: str
    birth_date: date

    def __post_init__(self):
        _validar_nome(self.name)
        _validar_data_nascimento(self.birth_date)


@dataclass(frozen=True)
class UpdateUser:
    """Intent de atualização de usuário (substitui nome e data)."""

    name: str
    birth_date: date

    def __post_init__(self):
        _validar_nome(self.name)
        _validar_data_nascimento(self.birth_date)


def users_are_duplicates(candidate: UserEntity, stored: UserEntity) -> bool:
    """Espelha a unique constraint de nome do banco."""
    return candidate.name == stored.name
