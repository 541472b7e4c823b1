import pytest

from toybox.bank import (
    Account,
    Bank,
    InsufficientFundsError,
    InvalidAmountError,
    main,
)


def test_summary_mentions_holder_and_balance():
    account = Account(1, "John", 10)
    assert account.summary() == "John has a balance of 10"


def test_deposit_moves_money_and_returns_new_balance():
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)
    result = account.deposit(other, 50)
    assert result == account.balance
    assert account.balance - 10 == 50
    assert other.balance == 100 - 50


def test_deposit_conserves_total():
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)
    account.deposit(other, 30)
    assert account.balance + other.balance == 110


def test_deposit_more_than_other_balance_raises():
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)
    with pytest.raises(InsufficientFundsError):
        account.deposit(other, 101)
    assert (account.balance, other.balance) == (10, 100)


def test_deposit_negative_raises():
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)
    with pytest.raises(InvalidAmountError):
        account.deposit(other, -5)
    assert (account.balance, other.balance) == (10, 100)


def test_withdraw_moves_money_and_conserves_total():
    account = Account(1, "John", 60)
    other = Account(2, "Jim", 50)
    result = account.withdraw(other, 10)
    assert result == account.balance
    assert account.balance + other.balance == 110
    assert other.balance - 50 == 10


def test_withdraw_more_than_balance_raises():
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)
    with pytest.raises(InsufficientFundsError):
        account.withdraw(other, 11)
    assert (account.balance, other.balance) == (10, 100)


def test_withdraw_negative_raises():
    account = Account(1, "John", 10)
    other = Account(2, "Jim", 100)
    with pytest.raises(InvalidAmountError):
        account.withdraw(other, -1)


def test_bank_total_and_summary():
    bank = Bank()
    first = Account(1, "John", 10)
    second = Account(2, "Jim", 100)
    bank.add_account(first)
    bank.add_account(second)
    assert bank.total_balance() == first.balance + second.balance
    assert bank.summary() == [first.summary(), second.summary()]


def test_empty_bank():
    bank = Bank()
    assert bank.total_balance() == 0
    assert bank.summary() == []


def test_main_prints_summary_and_total(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert '"John has a balance of 50",' in out
    assert out.splitlines()[-1] == "50"