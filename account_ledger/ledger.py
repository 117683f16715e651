"""
Balance Ledger

Sole owner of the single account balance. The balance lives in memory for
the lifetime of the process and is only changed through an explicit write
that enforces the storage bounds [0.00, 999999.99].
"""

from decimal import Decimal, InvalidOperation
from typing import Union
from contextlib import contextmanager
import threading

from .currency import (
    DEFAULT_INITIAL_BALANCE, MIN_BALANCE, MAX_BALANCE,
    format_balance, is_within_bounds, round_amount
)
from .errors import InvalidAmount
from .logging_config import get_logger

logger = get_logger(__name__)

AmountLike = Union[Decimal, int, float, str]


def _to_decimal(value: AmountLike) -> Decimal:
    """Convert a numeric value to Decimal without going through binary float"""
    if isinstance(value, bool):
        raise InvalidAmount(f"Invalid balance value: {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmount(f"Invalid balance value: {value!r}")
    raise InvalidAmount(f"Invalid balance value: {value!r}")


class Ledger:
    """
    Single-cell balance store

    Reads and writes take a re-entrant lock; callers that need a
    read-compute-write sequence to be atomic wrap it in atomic().
    """

    def __init__(self, initial_balance: AmountLike = DEFAULT_INITIAL_BALANCE):
        self._lock = threading.RLock()
        self._balance = MIN_BALANCE
        self.write(initial_balance)

    def read(self) -> Decimal:
        """Return the current balance"""
        with self._lock:
            return self._balance

    def write(self, new_balance: AmountLike) -> None:
        """
        Replace the stored balance

        Args:
            new_balance: New balance, must be finite and within bounds

        Raises:
            InvalidAmount: If the value is not a finite number in
                [0.00, 999999.99]; the previous balance is kept
        """
        value = _to_decimal(new_balance)
        if not is_within_bounds(value):
            logger.debug(f"Rejected balance write of {value}")
            raise InvalidAmount(
                f"Balance {value} outside allowed range {MIN_BALANCE} to {MAX_BALANCE}"
            )

        with self._lock:
            # value >= 0 here; drop the sign of a negative zero
            self._balance = round_amount(value).copy_abs()
            logger.debug(f"Balance set to {self._balance}")

    def formatted(self) -> str:
        """Return the balance as a fixed-width string, e.g. '001000.00'"""
        return format_balance(self.read())

    @contextmanager
    def atomic(self):
        """Context manager holding the ledger lock for a read-compute-write"""
        with self._lock:
            yield self
