from typing import Generic, Iterable, Iterator, Optional, TypeVar

from DataStructure.Stack import EmptyStackError, Stack

T = TypeVar("T")


class StackNode(Generic[T]):
    """Nodo para pila enlazada"""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Optional[StackNode[T]]" = None):
        self.value = value
        self.next = next


class LinkedStack(Stack[T]):
    """
    Pila sobre una cadena de nodos simplemente enlazada.
    La pila solo guarda el nodo del tope; cada nodo apunta a su sucesor
    y el último apunta a None.

    Complejidad: O(1) push/pop/top/size, O(n) recorrido
    """

    def __init__(self, values: Iterable[T] = ()):
        self._top: Optional[StackNode[T]] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Agrega value al tope; el tope anterior pasa a ser su sucesor"""
        self._top = StackNode(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Extrae y retorna el item del tope"""
        if self._top is None:
            raise EmptyStackError("pop from empty stack")

        node = self._top
        self._top = node.next
        node.next = None  # el nodo extraído no debe seguir apuntando a la cadena
        self._size -= 1
        return node.value

    def top(self) -> T:
        """Retorna el item del tope sin extraerlo"""
        if self._top is None:
            raise EmptyStackError("top from empty stack")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def size(self) -> int:
        return self._size

    def items(self) -> Iterator[T]:
        current = self._top
        while current:
            yield current.value
            current = current.next

    def clear(self):
        """Limpia la pila"""
        self._top = None
        self._size = 0
