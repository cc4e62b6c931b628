"""Perimeter and area of common plane shapes, with an interactive menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pocketcalc.console import Console

PI = 3.14


def _whole(value: float) -> int:
    """Drop the fractional part, as integer results do."""
    return int(value)


def rectangle_perimeter(length: int, breadth: int) -> int:
    return 2 * (length + breadth)


def rectangle_area(length: int, breadth: int) -> int:
    return length * breadth


def square_perimeter(side: int) -> int:
    return 4 * side


def square_area(side: int) -> int:
    return side * side


def triangle_perimeter(first: int, second: int, third: int) -> int:
    return first + second + third


def triangle_area(base: int, height: int) -> int:
    return _whole(0.5 * base * height)


def right_triangle_perimeter(perpendicular: int, base: int, height: int) -> int:
    return perpendicular + base + height


def right_triangle_area(base: int, height: int) -> int:
    return _whole(0.5 * base * height)


def equilateral_perimeter(side: int) -> int:
    return 3 * side


def equilateral_area(base: int, height: int) -> int:
    return _whole(0.5 * base * height)


def isosceles_perimeter(side: int, hypotenuse: int) -> int:
    return 2 * side + hypotenuse


def isosceles_area(side: int) -> int:
    return _whole(0.5 * side * side)


def parallelogram_perimeter(first: int, second: int) -> int:
    return 2 * (first + second)


def parallelogram_area(side: int, height: int) -> int:
    return side * height


def rhombus_perimeter(side: int) -> int:
    return 4 * side


def rhombus_area(first_diagonal: int, second_diagonal: int) -> int:
    return _whole(0.5 * first_diagonal * second_diagonal)


def trapezium_perimeter(shorter: int, longer: int, side: int) -> int:
    return side + side + shorter + longer


def trapezium_area(shorter: int, longer: int, height: int) -> int:
    return _whole(0.5 * height * (shorter + longer))


def circle_perimeter(radius: float) -> float:
    return 2 * PI * radius


def circle_area(radius: float) -> float:
    return PI * radius * radius


@dataclass(frozen=True)
class _Formula:
    prompts: tuple[str, ...]
    compute: Callable[..., float]
    result: str


@dataclass(frozen=True)
class _Shape:
    noun: str
    perimeter: _Formula
    area: _Formula
    complains: bool = True
    decimal: bool = False


_RECT_SIDES = (
    "\nPlease enter the length of the rectangle: ",
    "\nPlease enter the breadth of the rectangle:",
)
_RATRI = "Right - Angled Triangle"
_ISO = (
    "\nEnter the identical side of the Isosceles Triangle: ",
    "\nEnter the hypotenuse of the Isosceles Triangle:",
)

_SHAPES: dict[int, _Shape] = {
    1: _Shape(
        "a rectangle",
        _Formula(_RECT_SIDES, rectangle_perimeter, "\nThe Perimeter of the rectangle is: "),
        _Formula(_RECT_SIDES, rectangle_area, "\nThe Area of the rectangle is: "),
    ),
    2: _Shape(
        "a Square",
        _Formula(
            ("\nPlease enter the side of the Square: ",),
            square_perimeter,
            "\nThe Perimeter of the Square is: ",
        ),
        _Formula(
            ("\nPlease enter the side of the Square: ",),
            square_area,
            "\nThe Area of the Square is: ",
        ),
    ),
    3: _Shape(
        "a Triangle",
        _Formula(
            (
                "\nEnter the first side of the Triangle: ",
                "\nEnter the second side of the Triangle: ",
                "\nEnter the third side of the Triangle: ",
            ),
            triangle_perimeter,
            "\nThe Perimeter of the Triangle is: ",
        ),
        _Formula(
            ("\nEnter the base of the Triangle: ", "\nEnter the height of the Triangle:"),
            triangle_area,
            "\nThe Area of the Triangle is: ",
        ),
        complains=False,
    ),
    4: _Shape(
        f"a {_RATRI}",
        _Formula(
            (
                f"\nEnter the perpendicular of the {_RATRI}: ",
                f"\nEnter the base of the {_RATRI}: ",
                f"\nEnter the height of the {_RATRI}: ",
            ),
            right_triangle_perimeter,
            f"\n The Perimeter of the {_RATRI} is: ",
        ),
        _Formula(
            (f"\nEnter the base of the {_RATRI}: ", f"\nEnter the height of the {_RATRI}:"),
            right_triangle_area,
            f"\nThe Area of the {_RATRI} is: ",
        ),
        complains=False,
    ),
    5: _Shape(
        "an Equilateral Triangle",
        _Formula(
            ("\nEnter the side of the Equilateral Triangle: ",),
            equilateral_perimeter,
            "\nThe Perimeter of the Equilateral Triangle is: ",
        ),
        _Formula(
            (
                "\nEnter the base of the Equilateral Triangle: ",
                "\nEnter the height of the Equilateral Triangle:",
            ),
            equilateral_area,
            "\nThe Area of the Equilateral Triangle is: ",
        ),
        complains=False,
    ),
    6: _Shape(
        "an Isosceles Triangle",
        _Formula(_ISO, isosceles_perimeter, "\nThe Perimeter of the Isosceles Triangle is: "),
        _Formula(
            _ISO,
            lambda side, _hypotenuse: isosceles_area(side),
            "\nThe Area of the Isosceles Triangle is: ",
        ),
        complains=False,
    ),
    7: _Shape(
        "a Parallelogram",
        _Formula(
            (
                "\nPlease enter the first side of the Parallelogram: ",
                "\nPlease enter the second side of the Parallelogram:",
            ),
            parallelogram_perimeter,
            "\nThe Perimeter of the Parallelogram is: ",
        ),
        _Formula(
            (
                "\nPlease enter the first side of the Parallelogram: ",
                "\nPlease enter the height of the Parallelogram:",
            ),
            parallelogram_area,
            "\nThe Area of the Parallelogram is: ",
        ),
    ),
    8: _Shape(
        "a Rhombus",
        _Formula(
            ("\nPLease enter the side of the Rhombus: ",),
            rhombus_perimeter,
            "\nThe Perimeter of the Rhombus is: ",
        ),
        _Formula(
            (
                "\nPLease enter the first diagonal of the Rhombus: ",
                "\nPLease enter the second diagonal of the Rhombus: ",
            ),
            rhombus_area,
            "\nThe Area of the Rhombus is: ",
        ),
    ),
    9: _Shape(
        "a Trapezium",
        _Formula(
            (
                "\nPLease enter the shorter side of the Trapezium: ",
                "\nPLease enter the longer side of the Trapezium: ",
                "\nPLease enter the identical side of the Trapezium: ",
            ),
            trapezium_perimeter,
            "\nThe Perimeter of the Trapezium is: ",
        ),
        _Formula(
            (
                "\nPLease enter the shorter side of the Trapezium: ",
                "\nPLease enter the longer side of the Trapezium: ",
                "\nPlease enter the height of the Trapezium: ",
            ),
            trapezium_area,
            "\nThe Area of the Trapezium is: ",
        ),
    ),
    10: _Shape(
        "a Circle",
        _Formula(
            ("\nPLease enter the radius of the Circle: ",),
            circle_perimeter,
            "\nThe Perimeter of the Circle is: ",
        ),
        _Formula(
            ("\nPLease enter the radius of the Circle: ",),
            circle_area,
            "\nThe Area of the Circle is: ",
        ),
        decimal=True,
    ),
}

_MENU = (
    "Choose a shape: "
    "\n1.RECTANGLE \n2.SQUARE \n3.TRIANGLE \n4.RIGHT-ANGLED TRIANGLE "
    "\n5.EQUILATERAL TRIANGLE \n6.ISOSCELES TRIANGLE  \n7.PARALLELOGRAM "
    "\n8.RHOMBUS \n9.TRAPEZIUM \n10.CIRCLE"
    "\nChoose a shape and enter the corresponding number to it:"
)
_INVALID = "Please enter a valid input"


def _measure(shape: _Shape, console: Console) -> None:
    console.write("What do you want to calculate?:")
    console.write(f"\n1. Perimeter of {shape.noun} \n2. Area of {shape.noun}")
    choice = console.read_int("\nEnter the number corresponding to your choice: ")
    formula = {1: shape.perimeter, 2: shape.area}.get(choice)
    if formula is None:
        if shape.complains:
            console.write(_INVALID)
        return
    read = console.read_float if shape.decimal else console.read_int
    values = [read(prompt) for prompt in formula.prompts]
    result = formula.compute(*values)
    console.write(f"{formula.result}{result:{'f' if shape.decimal else 'd'}}")


def run(console: Console) -> None:
    """Ask for a shape and a measurement, then print the result."""
    choice = console.read_int(_MENU)
    shape = _SHAPES.get(choice)
    if shape is None:
        console.write(_INVALID)
        return
    _measure(shape, console)