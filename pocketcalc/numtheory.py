"""Small number-theory checks and sequences, with interactive prompts."""

from __future__ import annotations

import math
from typing import Callable

from pocketcalc.console import Console


def _signed_digits(number: int) -> list[int]:
    """Decimal digits of ``number``, each carrying the number's sign."""
    sign = -1 if number < 0 else 1
    return [sign * int(ch) for ch in str(abs(number))]


def is_armstrong(number: int) -> bool:
    """True if the number equals the sum of its digits raised to the digit count."""
    digits = _signed_digits(number)
    power = len(digits)
    return sum(d**power for d in digits) == number


def to_binary(number: int) -> str:
    """Binary digits of a non-negative number; negative numbers give an empty string."""
    if number < 0:
        return ""
    return format(number, "b")


def count_digits(number: int) -> int:
    """Number of decimal digits of a positive number."""
    if number <= 0:
        raise ValueError(f"digit count is defined for positive numbers only, got {number}")
    return len(str(number))


def digit_sum(number: int) -> int:
    """Sum of the decimal digits; negative numbers give a negative sum."""
    return sum(_signed_digits(number))


def is_even(number: int) -> bool:
    return number % 2 == 0


def factorial(number: int) -> int:
    """Factorial of a non-negative integer."""
    if number < 0:
        raise ValueError("Factorial is not defined for negative numbers.")
    return math.factorial(number)


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting from 0."""
    if count <= 0:
        raise ValueError("Please enter a positive number of terms.")
    terms = []
    first, second = 0, 1
    for _ in range(count):
        terms.append(first)
        first, second = second, first + second
    return terms


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def reverse_number(number: int) -> int:
    """Digits of the number in reverse order, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def is_palindrome(number: int) -> bool:
    return reverse_number(number) == number


def is_prime(number: int) -> bool:
    if number <= 1:
        return False
    return all(number % d for d in range(2, math.isqrt(number) + 1))


def _armstrong(console: Console) -> int:
    number = console.read_int("Enter an integer: ")
    verdict = "is" if is_armstrong(number) else "is not"
    console.write(f"{number} {verdict} an Armstrong number.\n")
    return 0


def _binary(console: Console) -> int:
    number = console.read_int("Enter a decimal number: ")
    console.write(f"Binary: {to_binary(number)}\n")
    return 0


def _digit_sum(console: Console) -> int:
    expected = console.read_int("Enter how many digits the number should have: ")
    if expected <= 0:
        console.write("Invalid number of digits.\n")
        return 1
    number = console.read_int(f"Enter a {expected}-digit number: ")
    try:
        matches = count_digits(number) == expected
    except ValueError:
        matches = False
    if not matches:
        console.write(f"The number you entered does not have {expected} digits.\n")
        return 1
    console.write(f"The sum of the digits of {number} is {digit_sum(number)}\n")
    return 0


def _even_odd(console: Console) -> int:
    number = console.read_int("Enter an integer: ")
    console.write(f"{number} is {'even' if is_even(number) else 'odd'}.\n")
    return 0


def _factorial(console: Console) -> int:
    number = console.read_int("Enter a positive integer: ")
    try:
        result = factorial(number)
    except ValueError as exc:
        console.write(f"{exc}\n")
        return 0
    console.write(f"Factorial of {number} = {result}\n")
    return 0


def _fibonacci(console: Console) -> int:
    count = console.read_int("Enter the number of terms: ")
    try:
        terms = fibonacci(count)
    except ValueError as exc:
        console.write(f"{exc}\n")
        return 1
    console.write("Fibonacci Series: " + "".join(f"{t} " for t in terms) + "\n")
    return 0


def _leap_year(console: Console) -> int:
    year = console.read_int("Enter a year: ")
    verdict = "is" if is_leap_year(year) else "is not"
    console.write(f"{year} {verdict} a leap year.\n")
    return 0


def _palindrome(console: Console) -> int:
    number = console.read_int("Enter an integer: ")
    verdict = "is" if is_palindrome(number) else "is not"
    console.write(f"{number} {verdict} a palindrome.\n")
    return 0


def _prime(console: Console) -> int:
    number = console.read_int("Enter a positive integer: ")
    verdict = "is" if is_prime(number) else "is not"
    console.write(f"{number} {verdict} a prime number.\n")
    return 0


def _reverse(console: Console) -> int:
    number = console.read_int("Enter a number: ")
    console.write(f"Reversed number: {reverse_number(number)}\n")
    return 0


_PROGRAMS: dict[str, Callable[[Console], int]] = {
    "armstrong": _armstrong,
    "binary": _binary,
    "digit-sum": _digit_sum,
    "even-odd": _even_odd,
    "factorial": _factorial,
    "fibonacci": _fibonacci,
    "leap-year": _leap_year,
    "palindrome": _palindrome,
    "prime": _prime,
    "reverse": _reverse,
}


def run(program: str, console: Console) -> int:
    """Run the named program and return its exit status."""
    try:
        handler = _PROGRAMS[program]
    except KeyError:
        raise ValueError(f"unknown program: {program!r}") from None
    return handler(console)