from enum import Enum


class StackState(Enum):
    """Estados lógicos de una pila"""

    EMPTY = "empty"
    NON_EMPTY = "non_empty"

    def __str__(self) -> str:
        return self.value
