"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

DTOs são a forma de transporte: não expõem versão nem deleted_at.

Tipos de DTOs:
- CreateUserDTO / UpdateUserDTO: entrada (de APIs/forms)
- UserDTO: saída
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict

from src.core.shared.exceptions import ValidationError


def _parse_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Data inválida: {value}", field=field_name)


@dataclass(frozen=True)
class CreateUserDTO:
    """
    DTO de entrada para criar usuário.

    Attributes:
        name: Nome do usuário
        birth_date: Data de nascimento
    """

    name: str
    birth_date: date

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateUserDTO":
        """Constrói a partir de payload JSON (birth_date em ISO-8601)."""
        return cls(
            name=data.get("name", ""),
            birth_date=_parse_date(data.get("birth_date"), "birth_date"),
        )


@dataclass(frozen=True)
class UpdateUserDTO:
    """DTO de entrada para atualizar usuário."""

    name: str
    birth_date: date

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateUserDTO":
        return cls(
            name=data.get("name", ""),
            birth_date=_parse_date(data.get("birth_date"), "birth_date"),
        )


@dataclass(frozen=True)
class UserDTO:
    """
    DTO de saída de usuário.

    Attributes:
        id: Identificador
        name: Nome
        birth_date: Data de nascimento
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização
    """

    id: str
    name: str
    birth_date: date
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        """Converte para dicionário (formatos serializáveis)."""
        return {
            "id": self.id,
            "name": self.name,
            "birth_date": self.birth_date.isoformat(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
