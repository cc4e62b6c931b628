"""A single-account bank with balance, deposit and withdrawal, and its menu."""

from __future__ import annotations

from dataclasses import dataclass

from pocketcalc.console import Console


class InvalidAmountError(ValueError):
    """Raised for a negative amount."""


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the balance."""


@dataclass
class Account:
    balance: float = 0.0

    def deposit(self, amount: float) -> float:
        """Add money and return the new balance."""
        if amount < 0:
            raise InvalidAmountError("Invalid amount!")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take money out and return the new balance."""
        if amount < 0:
            raise InvalidAmountError("Invalid amount!")
        if amount > self.balance:
            raise InsufficientFundsError(f"Insufficient funds: balance is {self.balance:.2f}")
        self.balance -= amount
        return self.balance


_MENU = (
    "\nSelect an option:\n"
    "\n1. Check Balance \n"
    "2. Deposit Money\n"
    "3. Withdraw Money\n"
    "4. Exit\n"
    "\nEnter your Choice: "
)


def _deposit(account: Account, console: Console) -> None:
    amount = console.read_float("\n Enter amount to deposit: Rs. ")
    try:
        account.deposit(amount)
    except InvalidAmountError:
        console.write("Invalid amount!")
    else:
        console.write(f"Successfully deposited Rs. {amount:.2f}\n")


def _withdraw(account: Account, console: Console) -> None:
    amount = console.read_float("\nEnter amount to withdraw: Rs. ")
    try:
        account.withdraw(amount)
    except InvalidAmountError:
        console.write("\nInvalid amount!\n")
    except InsufficientFundsError:
        console.write(f"Insufficent funds!\n Your balance is: Rs. {account.balance:.2f}\n")
    else:
        console.write(f"Successfully withdrew Rs.{amount:.2f}\n")


def run(console: Console) -> int:
    """Serve the bank menu until the user chooses to exit."""
    account = Account()
    console.write("WELCOME TO THE BANK")
    while True:
        choice = console.read_int(_MENU)
        if choice == 1:
            console.write(f"\n Your current balance is: Rs. {account.balance:.2f}\n")
        elif choice == 2:
            _deposit(account, console)
        elif choice == 3:
            _withdraw(account, console)
        elif choice == 4:
            console.write("\n Thank you for using the bank!\n")
            return 0
        else:
            console.write("\nplease enter a valid input\n")