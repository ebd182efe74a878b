import pytest

from DataStructure.ArrayStack import ArrayStack
from DataStructure.LinkedStack import LinkedStack
from Management.StackFactory import DEFAULT_BACKEND, StackFactory


def test_default_backend_is_linked():
    assert DEFAULT_BACKEND == "linked"
    assert isinstance(StackFactory().create(), LinkedStack)


@pytest.mark.parametrize(
    "backend,expected",
    [("linked", LinkedStack), ("array", ArrayStack)],
)
def test_create_backend(backend, expected):
    s = StackFactory().create(backend, [1, 2, 3])
    assert isinstance(s, expected)
    assert s.to_list() == [3, 2, 1]


def test_configured_default():
    factory = StackFactory(default_backend="array")
    assert isinstance(factory.create(), ArrayStack)


def test_each_create_returns_independent_stack():
    factory = StackFactory()
    a = factory.create()
    b = factory.create()
    a.push(1)
    assert b.is_empty()


def test_unknown_backend():
    with pytest.raises(ValueError, match="array, linked"):
        StackFactory().create("deque")
    with pytest.raises(ValueError):
        StackFactory(default_backend="deque")


def test_available_backends():
    assert StackFactory().available_backends() == ["array", "linked"]
