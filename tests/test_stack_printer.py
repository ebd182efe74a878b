from DataStructure.ArrayStack import ArrayStack
from DataStructure.LinkedStack import LinkedStack
from Management.StackPrinter import StackPrinter


def test_render(demo_stack):
    assert StackPrinter().render(demo_stack) == "STACK: { 1 5 30 20 10 }"
    assert demo_stack.size() == 5


def test_render_empty():
    assert StackPrinter().render(LinkedStack()) == "Empty Stack"


def test_print_stack(capsys):
    StackPrinter().print_stack(ArrayStack([1, 2]))
    assert capsys.readouterr().out == "STACK: { 2 1 }\n"


def test_show_stack_drains(capsys, demo_stack):
    popped = StackPrinter().show_stack(demo_stack)
    assert popped == [1, 5, 30, 20, 10]
    assert demo_stack.is_empty()
    assert capsys.readouterr().out == "POPPED ELEMENTS:\t1\t5\t30\t20\t10\n"


def test_show_stack_empty(capsys):
    assert StackPrinter().show_stack(LinkedStack()) == []
    assert capsys.readouterr().out == "POPPED ELEMENTS:\n"
