"""
Account Operations Module

Translates user-facing actions (view balance, credit, debit) into ledger
reads and writes. Enforces overdraft protection and produces the result
messages shown to the user.
"""

from decimal import Decimal

from .currency import format_balance, parse_amount
from .errors import InsufficientFunds, InvalidAmount, ParseError
from .ledger import Ledger
from .logging_config import get_logger, log_action

logger = get_logger(__name__)

INVALID_AMOUNT_MESSAGE = "Invalid amount. Please enter a positive number."
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."


class AccountOperations:
    """
    View, credit and debit operations on a single ledger

    Each operation is one atomic step: read, compute, optionally write.
    Nothing is kept between calls.
    """

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def view_balance(self) -> str:
        """Return the current balance message"""
        return f"Current balance: {self.ledger.formatted()}"

    def apply_credit(self, amount: Decimal) -> Decimal:
        """
        Add an amount to the balance

        Args:
            amount: Non-negative amount to credit

        Returns:
            The balance as stored after the credit

        Raises:
            InvalidAmount: If the amount is negative or the resulting balance
                exceeds the ledger maximum
        """
        if amount < 0:
            raise InvalidAmount(f"Credit amount must not be negative: {amount}")

        with self.ledger.atomic():
            new_balance = self.ledger.read() + amount
            self.ledger.write(new_balance)
            return self.ledger.read()

    def apply_debit(self, amount: Decimal) -> Decimal:
        """
        Subtract an amount from the balance with overdraft protection

        Args:
            amount: Non-negative amount to debit

        Returns:
            The balance as stored after the debit

        Raises:
            InvalidAmount: If the amount is negative
            InsufficientFunds: If the amount exceeds the current balance
        """
        if amount < 0:
            raise InvalidAmount(f"Debit amount must not be negative: {amount}")

        with self.ledger.atomic():
            current = self.ledger.read()
            # Inclusive: debiting the exact balance leaves 0.00
            if current < amount:
                raise InsufficientFunds(current, amount)
            self.ledger.write(current - amount)
            return self.ledger.read()

    def credit(self, amount_input: str) -> str:
        """
        Credit the account from raw user input

        Invalid input is reported as a message and leaves the balance
        unchanged. InvalidAmount from an overflowing credit propagates.
        """
        try:
            amount = parse_amount(amount_input)
        except ParseError as e:
            log_action(logger, "warning", f"Credit rejected: {e.reason}",
                       action="credit", resource="balance",
                       extra={"input": amount_input})
            return INVALID_AMOUNT_MESSAGE

        new_balance = self.apply_credit(amount)
        log_action(logger, "info", "Amount credited",
                   action="credit", resource="balance",
                   extra={"amount": amount, "balance": new_balance})
        return f"Amount credited. New balance: {format_balance(new_balance)}"

    def debit(self, amount_input: str) -> str:
        """
        Debit the account from raw user input

        Invalid input and insufficient funds are reported as messages and
        leave the balance unchanged.
        """
        try:
            amount = parse_amount(amount_input)
        except ParseError as e:
            log_action(logger, "warning", f"Debit rejected: {e.reason}",
                       action="debit", resource="balance",
                       extra={"input": amount_input})
            return INVALID_AMOUNT_MESSAGE

        try:
            new_balance = self.apply_debit(amount)
        except InsufficientFunds as e:
            log_action(logger, "warning", "Debit rejected: insufficient funds",
                       action="debit", resource="balance",
                       extra={"amount": e.amount, "balance": e.balance})
            return INSUFFICIENT_FUNDS_MESSAGE

        log_action(logger, "info", "Amount debited",
                   action="debit", resource="balance",
                   extra={"amount": amount, "balance": new_balance})
        return f"Amount debited. New balance: {format_balance(new_balance)}"
