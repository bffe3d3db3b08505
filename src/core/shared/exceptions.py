"""
Exceções e Erros de Domínio do Lifecycle Manager.

Este módulo define os erros que permitem comunicar falhas de forma
clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    ├── DomainErrorException (embrulha um DomainError para quem prefere raise)
    ├── DuplicateEntityError (sinal de chave duplicada vindo da persistência)
    └── IntegrityViolationError (escrita versionada afetou 0 linhas - fatal)

DomainError é um valor (não exceção) com status code, mensagem e rótulo.
NotFound e Conflict são modelados como DomainError e retornados pelo
orquestrador dentro de um Result; apenas IntegrityViolationError é
propagada sem captura.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DomainError:
    """
    Erro esperado e modelado de uma operação de ciclo de vida.

    Attributes:
        status_code: Código numérico equivalente ao status HTTP
        message: Mensagem descrevendo o que deu errado
        status_label: Rótulo do status (ex: "Not Found")

    Example:
        error = DomainError.not_found("User", user_id)
        error.to_dict()  # {"code": 404, "message": ..., "type": "Not Found"}
    """

    status_code: int
    message: str
    status_label: str

    @classmethod
    def not_found(cls, what: str, entity_id: Any) -> "DomainError":
        """Erro 404 para entidade inexistente (ou removida logicamente)."""
        return cls(404, f"{what} with id {entity_id} is not found.", "Not Found")

    @classmethod
    def already_exists(cls, what: str, data: Any) -> "DomainError":
        """Erro 409 para violação de unicidade do tipo."""
        return cls(409, f"{what} with {data} already exists.", "Conflict")

    @classmethod
    def unexpected(cls) -> "DomainError":
        """Erro 500 genérico para falhas não modeladas."""
        return cls(500, "An unexpected error occurred!", "Internal Server Error")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409

    def to_dict(self) -> dict:
        """Serializa erro para dicionário (útil para APIs)."""
        return {
            "code": self.status_code,
            "message": self.message,
            "type": self.status_label,
        }


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando intents/DTOs não atendem aos requisitos mínimos
    para processamento.

    Example:
        if not name.strip():
            raise ValidationError("Nome é obrigatório", field="name")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class DomainErrorException(DomainException):
    """
    DomainError embrulhado como exceção.

    Usada na fronteira de transporte por quem prefere tratar
    NotFound/Conflict via exceção (ver Result.unwrap).

    Example:
        try:
            user = service.update(user_id, intent).unwrap()
        except DomainErrorException as e:
            return JsonResponse(e.error.to_dict(), status=e.error.status_code)
    """

    def __init__(self, error: DomainError):
        self.error = error
        super().__init__(error.message, error.status_label.upper().replace(" ", "_"))

    def to_dict(self) -> dict:
        return self.error.to_dict()


class DuplicateEntityError(DomainException):
    """
    Sinal de duplicidade emitido pela camada de persistência.

    Equivale à violação de uma unique constraint em um banco real.
    O orquestrador traduz este sinal em DomainError.already_exists.
    """

    def __init__(self, message: str = "Duplicate entity", type_name: str = None):
        self.type_name = type_name
        super().__init__(message, "DUPLICATE_ENTITY")


class IntegrityViolationError(DomainException):
    """
    Escrita com checagem de versão afetou zero linhas.

    Indica uma pré-condição de lock otimista não verificada ou uma
    corrida real com outro escritor. Nunca é tratada nem repetida
    internamente.

    Example:
        if affected != 1:
            raise IntegrityViolationError("User", user_id, expected_version)
    """

    def __init__(self, type_name: str, entity_id: Any, expected_version: int):
        self.type_name = type_name
        self.entity_id = entity_id
        self.expected_version = expected_version
        super().__init__(
            f"Cannot update {type_name}Entity {entity_id}, "
            f"entity version wasn't {expected_version}!",
            "INTEGRITY_VIOLATION",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["entity_type"] = self.type_name
        result["entity_id"] = str(self.entity_id)
        result["expected_version"] = self.expected_version
        return result
