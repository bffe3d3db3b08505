"""
Result - Retorno explícito de sucesso ou erro modelado.

Operações de ciclo de vida retornam Ok(valor) ou Err(DomainError) em vez
de lançar exceções para casos esperados (not found, conflito).

Example:
    result = service.create(CreateUser(name="Alice", birth_date=...))
    if result.is_ok:
        user = result.value
    else:
        logger.warning(result.error.message)
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .exceptions import DomainError, DomainErrorException

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Resultado de sucesso."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        return Ok(f(self.value))

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Resultado de erro modelado."""

    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def map(self, f: Callable) -> "Err":
        return self

    def unwrap(self):
        """
        Lança o erro como DomainErrorException.

        Raises:
            DomainErrorException: Sempre
        """
        raise DomainErrorException(self.error)


Result = Union[Ok[T], Err]
