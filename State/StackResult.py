from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Resultado exitoso de una operación sobre la pila."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """
    Resultado fallido: guarda la excepción en lugar de lanzarla.
    unwrap() la lanza en el momento en que el llamador decide consumirla.
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default):
        return default


StackResult = Union[Ok[T], Err]
