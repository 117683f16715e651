"""
Currency Handling Module

Parsing, rounding and fixed-width formatting of balance amounts. All
monetary values are Decimal with two fractional digits. NEVER uses float
for monetary values.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
import re

from .errors import ParseError

# Set global decimal context for financial precision
getcontext().prec = 28

CENT = Decimal('0.01')
MIN_BALANCE = Decimal('0.00')
MAX_BALANCE = Decimal('999999.99')  # 6 integer digits, 2 fractional digits
DEFAULT_INITIAL_BALANCE = Decimal('1000.00')

# Total field width of a formatted balance: 6 digits + point + 2 digits
BALANCE_WIDTH = 9

# Plain decimal notation only: no exponents, separators, symbols or NaN/Infinity
_AMOUNT_PATTERN = re.compile(r'^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$')


def parse_amount(value: str) -> Decimal:
    """
    Strictly convert user input to a non-negative Decimal

    Surrounding whitespace is ignored. The value is returned unrounded;
    rounding happens when the ledger stores a balance.

    Args:
        value: Raw amount text as typed by the user

    Returns:
        Parsed non-negative Decimal

    Raises:
        ParseError: If the text is empty, not a number, or negative
    """
    if not isinstance(value, str):
        raise ParseError(str(value), "amount must be a string")

    text = value.strip()
    if not text:
        raise ParseError(value, "amount is empty")

    if not _AMOUNT_PATTERN.match(text):
        raise ParseError(value, "not a number")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ParseError(value, "not a number")

    if amount < 0:
        raise ParseError(value, "amount is negative")

    return amount


def round_amount(value: Decimal) -> Decimal:
    """Round a Decimal to cent precision using ROUND_HALF_UP"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_balance(value: Decimal) -> str:
    """
    Format a balance as a fixed-width, zero-padded string

    Example: Decimal('1000') -> '001000.00'
    """
    return f"{round_amount(value):0{BALANCE_WIDTH}.2f}"


def is_within_bounds(value: Decimal) -> bool:
    """Check whether a value may be stored as a balance"""
    return value.is_finite() and MIN_BALANCE <= value <= MAX_BALANCE
