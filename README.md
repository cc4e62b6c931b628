# pocketcalc

A pocket-sized set of console programs: calculators, converters,
number checks and a couple of small games. Each program is also
available as plain functions you can call from your own code.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `pocketcalc.console` | `Console`: writes prompts and reads integers, numbers, words, characters and lines from text streams |
| `pocketcalc.geometry` | Perimeter and area of rectangles, squares, triangles, parallelograms, rhombuses, trapeziums and circles |
| `pocketcalc.converters` | Distance, temperature and time conversions |
| `pocketcalc.numtheory` | Armstrong, prime, palindrome, even/odd and leap-year checks; binary form, digit count and sum, factorial, Fibonacci, number reversal |
| `pocketcalc.textutils` | Character classification, case toggling, character patterns |
| `pocketcalc.finance` | Compound interest and a tiered phone bill |
| `pocketcalc.bank` | A simple bank account with deposits and withdrawals |
| `pocketcalc.grading` | Grades and report cards from subject marks |
| `pocketcalc.games` | Number guessing and rock–paper–scissors |

## Using it as a library

```python
from pocketcalc.geometry import rectangle_area, circle_perimeter
from pocketcalc.numtheory import is_prime, to_binary, fibonacci
from pocketcalc.textutils import toggle_case

rectangle_area(3, 4)        # 12
is_prime(7)                 # True
to_binary(10)               # "1010"
fibonacci(5)                # [0, 1, 1, 2, 3]
toggle_case("Hello")        # "hELLO"
```

The bank account raises exceptions rather than printing warnings:

```python
from pocketcalc.bank import Account, InsufficientFundsError

account = Account()
account.deposit(100)
try:
    account.withdraw(500)
except InsufficientFundsError:
    print("Not enough money in the account")
```

Rock–paper–scissors decisions are available without any input or
randomness:

```python
from pocketcalc.games import Move, decide

decide(Move.ROCK, Move.SCISSORS)   # Outcome.WIN
```

## Running the interactive programs

Every module has a `run` function that drives its menu-style program
through a `Console`. A `Console()` with no arguments talks to the
terminal; give it any text streams to script the input or capture the
output.

```python
import io
from pocketcalc.console import Console
from pocketcalc import geometry, numtheory, bank, games

geometry.run(Console())                 # shape menu on the terminal
bank.run(Console())                     # bank menu until option 4

out = io.StringIO()
numtheory.run("prime", Console(io.StringIO("7\n"), out))
# out ends with "7 is a prime number.\n"
```

Program names accepted by the `run` functions:

- `converters.run`: `"distance"`, `"temperature"`, `"time"`
- `numtheory.run`: `"armstrong"`, `"binary"`, `"digit-sum"`, `"even-odd"`,
  `"factorial"`, `"fibonacci"`, `"leap-year"`, `"palindrome"`, `"prime"`,
  `"reverse"`
- `textutils.run`: `"character"`, `"toggle-case"`, `"pattern"`
- `finance.run`: `"compound-interest"`, `"phone-bill"`
- `games.run`: `"guess"`, `"rps"` (an optional `random.Random` may be passed)
- `geometry.run`, `bank.run` and `grading.run` take only the console.

An unknown program name raises `ValueError`.

## What it does not do

- Installing the package adds no shell command; the programs are started
  from Python through the `run` functions above.
- There are no array or matrix tools (reversal, magic-square, symmetry,
  trace or norm checks).