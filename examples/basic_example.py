"""Basic example demonstrating core functionality.

This example shows how to use the main features of persona.
"""

from rich.console import Console
from rich.table import Table

from persona import Person, multiply, sum, variable  # noqa: A004

console = Console()


def main() -> None:
    """Run the basic example."""
    console.rule("persona - Basic Example")

    # Example 1: Using Person
    console.print("\n1. Using Person:")
    ada = Person.create("Ada", 30)
    console.print(f"   Created: {ada!r}")
    console.print(f"   Greeting: {ada.greet('Hello')}")
    ada.birthday()
    console.print(f"   After birthday: {ada!r}")

    # Example 2: Using the arithmetic helpers
    console.print("\n2. Using sum and multiply:")
    table = Table("x", "y", "sum", "multiply")
    for x, y in [(2, 3), (-1, 1), (4, 5), (0, 100)]:
        table.add_row(str(x), str(y), str(sum(x, y)), str(multiply(x, y)))
    console.print(table)

    # Example 3: The module constant
    console.print(f"\n3. variable = {variable}")

    console.rule("Example completed!")


if __name__ == "__main__":
    main()
