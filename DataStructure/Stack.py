from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, TypeVar

from State.StackResult import Err, Ok, StackResult
from State.StackState import StackState

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Se intentó extraer o consultar el tope de una pila vacía."""


class Stack(ABC, Generic[T]):
    """
    Pila (LIFO) abstracta. Define el contrato común de LinkedStack y
    ArrayStack; cada backend decide cómo guarda los elementos.

    Complejidad: O(1) push/pop/top/size, O(n) recorrido
    """

    @classmethod
    def create(cls) -> "Stack[T]":
        """Crea una pila vacía"""
        return cls()

    @abstractmethod
    def push(self, value: T) -> None:
        """Agrega value al tope de la pila"""

    @abstractmethod
    def pop(self) -> T:
        """Extrae y retorna el item del tope. Lanza EmptyStackError si está vacía."""

    @abstractmethod
    def top(self) -> T:
        """Retorna el item del tope sin extraerlo. Lanza EmptyStackError si está vacía."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""

    @abstractmethod
    def size(self) -> int:
        """Retorna el tamaño de la pila"""

    @abstractmethod
    def items(self) -> Iterator[T]:
        """
        Recorre los elementos del tope hacia el fondo sin modificar la pila.
        Cada llamada inicia un recorrido nuevo.
        """

    def peek(self) -> T:
        return self.top()

    def try_pop(self) -> StackResult:
        """Como pop(), pero retorna Ok(valor) o Err(EmptyStackError)"""
        if self.is_empty():
            return Err(EmptyStackError("pop from empty stack"))
        return Ok(self.pop())

    def try_top(self) -> StackResult:
        """Como top(), pero retorna Ok(valor) o Err(EmptyStackError)"""
        if self.is_empty():
            return Err(EmptyStackError("top from empty stack"))
        return Ok(self.top())

    def state(self) -> StackState:
        if self.is_empty():
            return StackState.EMPTY
        return StackState.NON_EMPTY

    def to_list(self) -> List[T]:
        """Convierte a lista Python, el tope primero"""
        return list(self.items())

    def clear(self):
        """Limpia la pila"""
        while not self.is_empty():
            self.pop()

    def __repr__(self):
        return f"{type(self).__name__}({self.to_list()!r})"
