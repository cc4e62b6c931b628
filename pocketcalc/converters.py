"""Distance, temperature and time unit conversions, with interactive menus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pocketcalc.console import Console


@dataclass(frozen=True)
class _Conversion:
    label: str
    apply: Callable[[float], float]
    template: str


@dataclass(frozen=True)
class _Program:
    header: str
    choice_prompt: str
    value_prompt: str
    conversions: dict[int, _Conversion]


_DISTANCE = {
    1: _Conversion("Millimeters to Centimeters", lambda v: v / 10, "Result: {:.2f} cm\n"),
    2: _Conversion("Centimeters to Millimeters", lambda v: v * 10, "Result: {:.2f} mm\n"),
    3: _Conversion("Centimeters to Meters", lambda v: v / 100, "Result: {:.2f} m\n"),
    4: _Conversion("Meters to Centimeters", lambda v: v * 100, "Result: {:.2f} cm\n"),
    5: _Conversion("Meters to Kilometers", lambda v: v / 1000, "Result: {:.2f} km\n"),
    6: _Conversion("Kilometers to Meters", lambda v: v * 1000, "Result: {:.2f} m\n"),
}

_TEMPERATURE = {
    1: _Conversion(
        "Celsius to Fahrenheit",
        lambda v: (v * 9 / 5) + 32,
        "Temperature in Fahrenheit: {:.2f}Fare\n",
    ),
    2: _Conversion(
        "Fahrenheit to Celsius",
        lambda v: (v - 32) * 5 / 9,
        "Temperature in Celsius: {:.2f}Cel\n",
    ),
    3: _Conversion(
        "Celsius to Kelvin", lambda v: v + 273.15, "Temperature in Kelvin: {:.2f}Kel\n"
    ),
    4: _Conversion(
        "Kelvin to Celsius", lambda v: v - 273.15, "Temperature in Celsius: {:.2f}Cel\n"
    ),
}

_TIME = {
    1: _Conversion("Seconds to Minutes", lambda v: v / 60, "Result: {:.2f} minutes\n"),
    2: _Conversion("Minutes to Seconds", lambda v: v * 60, "Result: {:.2f} seconds\n"),
    3: _Conversion("Minutes to Hours", lambda v: v / 60, "Result: {:.2f} hours\n"),
    4: _Conversion("Hours to Minutes", lambda v: v * 60, "Result: {:.2f} minutes\n"),
    5: _Conversion("Hours to Days", lambda v: v / 24, "Result: {:.2f} days\n"),
    6: _Conversion("Days to Hours", lambda v: v * 24, "Result: {:.2f} hours\n"),
    7: _Conversion("Days to Months", lambda v: v / 30.44, "Result: {:.2f} months\n"),
    8: _Conversion("Months to Days", lambda v: v * 30.44, "Result: {:.2f} days\n"),
    9: _Conversion("Months to Years", lambda v: v / 12, "Result: {:.2f} years\n"),
    10: _Conversion("Years to Months", lambda v: v * 12, "Result: {:.2f} months\n"),
}

_PROGRAMS = {
    "distance": _Program(
        "---- Distance Converter ----\nSelect conversion:\n",
        "Enter your choice (1-6): ",
        "Enter the distance value: ",
        _DISTANCE,
    ),
    "temperature": _Program(
        "---- Temperature Converter ----\nChoose conversion:\n",
        "Enter your choice (1-4): ",
        "Enter the temperature: ",
        _TEMPERATURE,
    ),
    "time": _Program(
        "\n--- Time Conversion Menu ---\n",
        "Enter your choice (1-10): ",
        "Enter the time value: ",
        _TIME,
    ),
}


def _lookup(table: dict[int, _Conversion], choice: int) -> _Conversion:
    try:
        return table[choice]
    except KeyError:
        raise ValueError(f"unknown conversion choice: {choice}") from None


def convert_distance(choice: int, value: float) -> float:
    """Convert a distance using menu option 1-6."""
    return _lookup(_DISTANCE, choice).apply(value)


def convert_temperature(choice: int, value: float) -> float:
    """Convert a temperature using menu option 1-4."""
    return _lookup(_TEMPERATURE, choice).apply(value)


def convert_time(choice: int, value: float) -> float:
    """Convert a time span using menu option 1-10."""
    return _lookup(_TIME, choice).apply(value)


def run(program: str, console: Console) -> None:
    """Run the named converter ("distance", "temperature" or "time")."""
    try:
        spec = _PROGRAMS[program]
    except KeyError:
        raise ValueError(f"unknown converter: {program!r}") from None
    menu = "".join(f"{number}. {conv.label}\n" for number, conv in spec.conversions.items())
    console.write(spec.header + menu)
    choice = console.read_int(spec.choice_prompt)
    value = console.read_float(spec.value_prompt)
    conversion = spec.conversions.get(choice)
    if conversion is None:
        console.write("Invalid choice.\n")
        return
    console.write(conversion.template.format(conversion.apply(value)))