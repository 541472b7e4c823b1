"""Accounts that move money between each other, grouped in a bank."""

from __future__ import annotations

from dataclasses import dataclass, field


class InsufficientFundsError(ValueError):
    """Raised when an account does not hold enough money for a transfer."""


class InvalidAmountError(ValueError):
    """Raised when a transfer amount is negative."""


@dataclass
class Account:
    """A single account with an owner and a balance."""

    id: int
    holder: str
    balance: int

    def summary(self) -> str:
        """Describe the holder and the current balance."""
        return f"{self.holder} has a balance of {self.balance}"

    def deposit(self, account: Account, amount: int) -> int:
        """Move ``amount`` from ``account`` into this account.

        Returns this account's new balance.
        """
        if amount > account.balance:
            raise InsufficientFundsError("Insufficient balance")
        if amount < 0:
            raise InvalidAmountError("Invalid amount")
        self.balance += amount
        account.balance -= amount
        return self.balance

    def withdraw(self, account: Account, amount: int) -> int:
        """Move ``amount`` from this account into ``account``.

        Returns this account's new balance.
        """
        if amount < 0:
            raise InvalidAmountError("Invalid amount")
        if amount > self.balance:
            raise InsufficientFundsError("Insufficient funds")
        self.balance -= amount
        account.balance += amount
        return self.balance


@dataclass
class Bank:
    """A collection of accounts."""

    accounts: list[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        self.accounts.append(account)

    def total_balance(self) -> int:
        return sum(account.balance for account in self.accounts)

    def summary(self) -> list[str]:
        return [account.summary() for account in self.accounts]


def _pretty_list(items: list[str]) -> str:
    if not items:
        return "[]"
    body = "".join(f"    {item!r},\n".replace("'", '"') for item in items)
    return f"[\n{body}]"


def main(argv: list[str] | None = None) -> int:
    bank = Bank()
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)

    account.deposit(other, 50)
    account.withdraw(other, 10)

    bank.add_account(account)
    print(_pretty_list(bank.summary()))
    print(bank.total_balance())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())