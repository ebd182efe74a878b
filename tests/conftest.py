"""Fixtures compartidos: cada prueba de contrato corre contra ambos backends."""

import pytest

from DataStructure.ArrayStack import ArrayStack
from DataStructure.LinkedStack import LinkedStack


@pytest.fixture(params=[LinkedStack, ArrayStack], ids=["linked", "array"])
def stack_cls(request):
    return request.param


@pytest.fixture
def stack(stack_cls):
    return stack_cls.create()


@pytest.fixture
def demo_stack(stack_cls):
    """Pila con 10, 20, 30, 5, 1 apilados en ese orden."""
    s = stack_cls.create()
    for value in [10, 20, 30, 5, 1]:
        s.push(value)
    return s
