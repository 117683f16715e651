"""
Ledger Exceptions

Domain-specific errors raised by the ledger and the account operations built
on top of it.
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base class for all account ledger errors"""
    pass


class ParseError(LedgerError, ValueError):
    """Raised when amount input is empty, non-numeric, non-finite or negative"""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot parse amount {value!r}: {reason}")


class InsufficientFunds(LedgerError):
    """Raised when a debit would drive the balance below zero"""

    def __init__(self, balance: Decimal, amount: Decimal):
        self.balance = balance
        self.amount = amount
        super().__init__(f"Insufficient funds: balance {balance}, requested {amount}")


class InvalidAmount(LedgerError, ValueError):
    """Raised when a balance write is non-finite or outside the allowed bounds"""
    pass
