from typing import List

from DataStructure.Stack import EmptyStackError, Stack
from Management.StackFactory import StackFactory
from Management.StackPrinter import StackPrinter

DEMO_VALUES = [10, 20, 30, 5, 1]


def _run_stack_demo(backend: str) -> List[int]:
    stack: Stack[int] = StackFactory().create(backend)
    printer = StackPrinter()
    for value in DEMO_VALUES:
        stack.push(value)

    printer.print_stack(stack)
    print(f"SIZE: {stack.size()}")
    try:
        print(f"TOP: {stack.top()}")
    except EmptyStackError as e:
        print(f"ERROR: {e}")
    return printer.show_stack(stack)


def run_linked_demo() -> List[int]:
    """Pila sobre nodos enlazados"""
    return _run_stack_demo("linked")


def run_array_demo() -> List[int]:
    """Pila sobre arreglo dinámico con su propia clase"""
    return _run_stack_demo("array")


def run_list_demo() -> List[int]:
    """
    La lista de Python usada directamente como pila: append/pop/[-1].
    Se imprime en orden de inserción, el tope queda al final.
    """
    stack: List[int] = []
    for value in DEMO_VALUES:
        stack.append(value)

    print(f"STACK: {stack}")
    print(f"SIZE: {len(stack)}")
    if stack:
        print(f"TOP: {stack[-1]}")

    popped = []
    line = "POPPED ELEMENTS:"
    while stack:
        value = stack.pop()
        popped.append(value)
        line += f"\t{value}"
    print(line)
    return popped


def main():
    print("== Pila enlazada ==")
    run_linked_demo()
    print("== Pila sobre arreglo ==")
    run_array_demo()
    print("== Lista como pila ==")
    run_list_demo()


if __name__ == "__main__":
    main()
