from typing import Dict, Iterable, List, Optional, Type

from DataStructure.ArrayStack import ArrayStack
from DataStructure.LinkedStack import LinkedStack
from DataStructure.Stack import Stack

DEFAULT_BACKEND = "linked"

STACK_BACKENDS: Dict[str, Type[Stack]] = {
    "linked": LinkedStack,
    "array": ArrayStack,
}


class StackFactory:
    """
    Crea pilas según el backend configurado ("linked" o "array").
    Ambos backends cumplen el mismo contrato y son intercambiables.
    """

    def __init__(self, default_backend: str = DEFAULT_BACKEND):
        self._check_backend(default_backend)
        self.default_backend = default_backend

    def create(self, backend: Optional[str] = None, values: Iterable = ()) -> Stack:
        """
        Retorna una pila nueva del backend pedido (o el por defecto),
        con values apilados en orden.
        """
        name = backend or self.default_backend
        self._check_backend(name)
        return STACK_BACKENDS[name](values)

    def available_backends(self) -> List[str]:
        return sorted(STACK_BACKENDS)

    def _check_backend(self, name: str):
        if name not in STACK_BACKENDS:
            raise ValueError(
                f"Backend de pila desconocido: {name!r} (disponibles: {', '.join(self.available_backends())})"
            )

    def __repr__(self) -> str:
        return f"<StackFactory default_backend={self.default_backend!r}>"
