from typing import List

from DataStructure.Stack import Stack


class StackPrinter:
    """Salida por consola de pilas, para los demos."""

    def render(self, stack: Stack) -> str:
        """Texto de la pila del tope al fondo, sin modificarla"""
        if stack.is_empty():
            return "Empty Stack"
        values = " ".join(str(value) for value in stack.items())
        return f"STACK: {{ {values} }}"

    def print_stack(self, stack: Stack):
        print(self.render(stack))

    def show_stack(self, stack: Stack) -> List:
        """
        Vacía la pila imprimiendo cada elemento extraído.
        Retorna los valores en el orden en que salieron.
        """
        popped = []
        line = "POPPED ELEMENTS:"
        while not stack.is_empty():
            result = stack.try_pop()
            if result.is_ok():
                popped.append(result.unwrap())
                line += f"\t{result.unwrap()}"
            else:
                line += "\tERR"
                break
        print(line)
        return popped
