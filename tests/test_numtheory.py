import io
import math

import pytest

from pocketcalc.console import Console
from pocketcalc.numtheory import (
    count_digits,
    digit_sum,
    factorial,
    fibonacci,
    is_armstrong,
    is_even,
    is_leap_year,
    is_palindrome,
    is_prime,
    reverse_number,
    run,
    to_binary,
)


def _run(program, text):
    out = io.StringIO()
    status = run(program, Console(io.StringIO(text), out))
    return status, out.getvalue()


@pytest.mark.parametrize("number", [0, 1, 9, 153, 370, 371, 407, 1634])
def test_armstrong_numbers(number):
    assert is_armstrong(number)


@pytest.mark.parametrize("number", [10, 100, 152, 372])
def test_not_armstrong_numbers(number):
    assert not is_armstrong(number)


def test_binary_round_trip():
    for number in range(300):
        bits = to_binary(number)
        assert int(bits, 2) == number
        assert number == 0 or bits.startswith("1")


def test_binary_of_negative_is_empty():
    assert to_binary(-5) == ""


def test_count_digits_powers_of_ten():
    for k in range(12):
        assert count_digits(10**k) == k + 1
        if k:
            assert count_digits(10**k - 1) == k


@pytest.mark.parametrize("number", [0, -5])
def test_count_digits_rejects_non_positive(number):
    with pytest.raises(ValueError):
        count_digits(number)


def test_digit_sum_invariants():
    for number in range(1, 2000):
        assert digit_sum(number) % 9 == number % 9
        assert digit_sum(-number) == -digit_sum(number)
        assert digit_sum(reverse_number(number)) == digit_sum(number)


def test_is_even_alternates():
    assert is_even(0)
    for number in range(-20, 20):
        assert is_even(number) is not is_even(number + 1)


def test_factorial_base_and_recurrence():
    assert factorial(0) == 1
    for n in range(1, 30):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_is_not_truncated():
    assert factorial(25) > 2**64


def test_factorial_negative_raises():
    with pytest.raises(ValueError, match="negative"):
        factorial(-1)


def test_fibonacci_first_term():
    assert fibonacci(1) == [0]


def test_fibonacci_recurrence_and_prefix():
    terms = fibonacci(20)
    assert len(terms) == 20
    assert all(terms[i] == terms[i - 1] + terms[i - 2] for i in range(2, 20))
    assert terms[:7] == fibonacci(7)


@pytest.mark.parametrize("count", [0, -3])
def test_fibonacci_rejects_non_positive(count):
    with pytest.raises(ValueError, match="positive number of terms"):
        fibonacci(count)


@pytest.mark.parametrize("year", [2000, 2024, 1600, 4])
def test_leap_years(year):
    assert is_leap_year(year)


@pytest.mark.parametrize("year", [1900, 2023, 2100, 1])
def test_common_years(year):
    assert not is_leap_year(year)


def test_reverse_is_involution_without_trailing_zero():
    for number in range(1, 3000):
        if number % 10:
            assert reverse_number(reverse_number(number)) == number
        assert reverse_number(-number) == -reverse_number(number)


def test_reverse_drops_trailing_zero_digits():
    assert reverse_number(reverse_number(1200)) == 12


def test_palindrome_matches_reverse():
    assert is_palindrome(121)
    assert not is_palindrome(123)
    for number in range(-500, 500):
        assert is_palindrome(number) == (reverse_number(number) == number)


@pytest.mark.parametrize("number", [2, 3, 5, 7, 11, 97, 7919])
def test_primes(number):
    assert is_prime(number)


@pytest.mark.parametrize("number", [-7, 0, 1, 4, 9, 91, 7917])
def test_non_primes(number):
    assert not is_prime(number)


def test_run_even_odd():
    status, output = _run("even-odd", "7\n")
    assert status == 0
    assert output.endswith("7 is odd.\n")


def test_run_leap_year():
    _, output = _run("leap-year", "2000\n")
    assert output.endswith("2000 is a leap year.\n")


def test_run_binary_zero():
    _, output = _run("binary", "0\n")
    assert output.endswith("Binary: 0\n")


def test_run_armstrong():
    _, output = _run("armstrong", "153\n")
    assert output.endswith("153 is an Armstrong number.\n")


def test_run_fibonacci_rejects_zero():
    status, output = _run("fibonacci", "0\n")
    assert status == 1
    assert "Please enter a positive number of terms." in output


def test_run_fibonacci_lists_terms():
    status, output = _run("fibonacci", "6\n")
    assert status == 0
    assert output.endswith("Fibonacci Series: " + "".join(f"{t} " for t in fibonacci(6)) + "\n")


def test_run_digit_sum_invalid_count():
    status, output = _run("digit-sum", "0\n")
    assert status == 1
    assert "Invalid number of digits." in output


def test_run_digit_sum_wrong_length():
    status, output = _run("digit-sum", "3\n12\n")
    assert status == 1
    assert "The number you entered does not have 3 digits." in output


def test_run_digit_sum_ok():
    status, output = _run("digit-sum", "3\n456\n")
    assert status == 0
    assert output.endswith(f"The sum of the digits of 456 is {digit_sum(456)}\n")


def test_run_factorial_negative():
    _, output = _run("factorial", "-1\n")
    assert "Factorial is not defined for negative numbers." in output


def test_run_prime_and_reverse():
    _, prime_out = _run("prime", "13\n")
    assert prime_out.endswith("13 is a prime number.\n")
    _, rev_out = _run("reverse", "-120\n")
    assert rev_out.endswith(f"Reversed number: {reverse_number(-120)}\n")


def test_run_unknown_program():
    with pytest.raises(ValueError):
        _run("nothing", "")


def test_factorial_matches_math_for_small_values():
    assert factorial(10) == math.prod(range(1, 11))