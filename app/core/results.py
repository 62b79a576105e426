from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from app.core.errors import NotFoundError, ServiceError, ValidationError

T = TypeVar("T")


class OutcomeKind(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass
class Outcome(Generic[T]):
    """Resultado de una operación del servicio.

    Distingue éxito, registro inexistente y datos inválidos sin usar
    excepciones como control de flujo; ``unwrap()`` vuelve al estilo con
    excepciones cuando el llamador lo prefiere (la capa HTTP).
    """
    kind: OutcomeKind
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(kind=OutcomeKind.OK, value=value)

    @classmethod
    def not_found(cls, message: str) -> "Outcome[T]":
        return cls(kind=OutcomeKind.NOT_FOUND, error=NotFoundError(message))

    @classmethod
    def invalid(cls, error: ValidationError) -> "Outcome[T]":
        return cls(kind=OutcomeKind.INVALID, error=error)

    @property
    def is_ok(self) -> bool:
        return self.kind == OutcomeKind.OK

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
