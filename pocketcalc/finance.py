"""Compound interest and tiered phone-bill calculations, with interactive prompts."""

from __future__ import annotations

from typing import Callable

from pocketcalc.console import Console

_FREE_CALLS = 150
_TIERS = (
    (250, 0.90),
    (400, 1.20),
)
_TOP_RATE = 1.50


def compound_interest(principal: float, rate: float, years: float, periods: float) -> float:
    """Total amount after compounding ``periods`` times a year at ``rate`` percent."""
    return principal * (1 + rate / (periods * 100)) ** (periods * years)


def phone_bill(calls: int) -> float:
    """Bill for a number of calls: the first 150 are free, later ones cost more per call."""
    bill = 0.0
    lower = _FREE_CALLS
    for upper, price in _TIERS:
        if calls <= lower:
            return bill
        bill += (min(calls, upper) - lower) * price
        lower = upper
    if calls > lower:
        bill += (calls - lower) * _TOP_RATE
    return bill


def _compound(console: Console) -> int:
    principal = console.read_float("Enter the principal amount: ")
    rate = console.read_float("Enter annual interest rate (in percentage): ")
    years = console.read_float("Enter time (in years): ")
    periods = console.read_float("Enter number of times interest is compounded per year: ")
    amount = compound_interest(principal, rate, years, periods)
    console.write(f"Compound Interest: {amount - principal:.2f}\n")
    console.write(f"Total Amount after {years:.2f} years: {amount:.2f}\n")
    return 0


def _phone_bill(console: Console) -> int:
    calls = console.read_int("Enter the number of calls made: ")
    console.write(f"Total calls: {calls}\n")
    console.write(f"Total bill amount: Rs.{phone_bill(calls):.2f}\n")
    return 0


_PROGRAMS: dict[str, Callable[[Console], int]] = {
    "compound-interest": _compound,
    "phone-bill": _phone_bill,
}


def run(program: str, console: Console) -> int:
    """Run the named program and return its exit status."""
    try:
        handler = _PROGRAMS[program]
    except KeyError:
        raise ValueError(f"unknown program: {program!r}") from None
    return handler(console)