from typing import Iterable, Iterator, List, TypeVar

from DataStructure.Stack import EmptyStackError, Stack

T = TypeVar("T")


class ArrayStack(Stack[T]):
    """
    Pila sobre una lista de Python (arreglo dinámico contiguo).
    Los elementos quedan en orden de inserción; el tope es el último.
    El tamaño se deriva de len() de la lista, no hay contador aparte.

    Complejidad: O(1) amortizado push, O(1) pop/top/size
    """

    def __init__(self, values: Iterable[T] = ()):
        self._items: List[T] = list(values)

    def push(self, value: T) -> None:
        """Agrega item al tope de la pila"""
        self._items.append(value)

    def pop(self) -> T:
        """Extrae y retorna el item del tope"""
        if self.is_empty():
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Retorna el item del tope sin extraerlo"""
        if self.is_empty():
            raise EmptyStackError("top from empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return len(self._items) == 0

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return len(self._items)

    def items(self) -> Iterator[T]:
        return reversed(self._items)

    def clear(self):
        self._items.clear()
