"""
Test suite for ledger module

Tests the single balance cell: initial value, bounded writes, rounding,
formatting and the atomic read-compute-write lock.
CRITICAL: A rejected write must leave the previous balance untouched.
"""

import pytest
import threading
from decimal import Decimal

from account_ledger.ledger import Ledger
from account_ledger.errors import InvalidAmount


class TestLedgerBasics:
    """Test ledger reads and writes"""

    def test_initial_balance(self):
        """Test that a new ledger starts at 1000.00"""
        ledger = Ledger()
        assert ledger.read() == Decimal('1000.00')

    def test_custom_initial_balance(self):
        """Test starting from a given balance"""
        ledger = Ledger(Decimal('250.75'))
        assert ledger.read() == Decimal('250.75')

    def test_invalid_initial_balance(self):
        """Test that an out-of-range starting balance is rejected"""
        with pytest.raises(InvalidAmount):
            Ledger(Decimal('-1'))

    def test_read_write(self):
        """Test that a write replaces the stored balance"""
        ledger = Ledger()
        ledger.write(Decimal('2500.00'))
        assert ledger.read() == Decimal('2500.00')

    def test_read_has_no_side_effects(self):
        """Test that repeated reads return the same value"""
        ledger = Ledger()
        assert ledger.read() == ledger.read() == Decimal('1000.00')

    def test_write_rounds_to_cents(self):
        """Test that writes are rounded half up to two places"""
        ledger = Ledger()
        ledger.write(Decimal('100.555'))
        assert ledger.read() == Decimal('100.56')

        ledger.write(Decimal('100.554'))
        assert ledger.read() == Decimal('100.55')

    def test_write_accepts_numeric_types(self):
        """Test that int, float and numeric strings are converted without float drift"""
        ledger = Ledger()

        ledger.write(42)
        assert ledger.read() == Decimal('42.00')

        ledger.write(0.1 + 0.2)
        assert ledger.read() == Decimal('0.30')

        ledger.write("19.99")
        assert ledger.read() == Decimal('19.99')

    def test_bounds_are_inclusive(self):
        """Test writing exactly zero and exactly the maximum"""
        ledger = Ledger()

        ledger.write(Decimal('0'))
        assert ledger.read() == Decimal('0.00')

        ledger.write(Decimal('999999.99'))
        assert ledger.read() == Decimal('999999.99')


class TestLedgerValidation:
    """Test rejected writes"""

    @pytest.mark.parametrize("value", [
        Decimal('-0.01'),
        Decimal('-100'),
        Decimal('1000000.00'),
        Decimal('999999.994'),
        Decimal('NaN'),
        Decimal('Infinity'),
        float('nan'),
        float('inf'),
        "abc",
        None,
        True,
    ])
    def test_rejected_write_keeps_balance(self, value):
        """Test that invalid writes raise and keep the prior balance"""
        ledger = Ledger(Decimal('321.09'))

        with pytest.raises(InvalidAmount):
            ledger.write(value)

        assert ledger.read() == Decimal('321.09')

    def test_invalid_amount_is_value_error(self):
        """Test that InvalidAmount can be caught as ValueError"""
        ledger = Ledger()
        with pytest.raises(ValueError):
            ledger.write(Decimal('-5'))


class TestLedgerFormatting:
    """Test formatted balance output"""

    def test_formatted_default(self):
        """Test the formatted starting balance"""
        assert Ledger().formatted() == "001000.00"

    def test_formatted_small_amount(self):
        """Test leading zeros for small balances"""
        ledger = Ledger()
        ledger.write(Decimal('5.5'))
        assert ledger.formatted() == "000005.50"

    @pytest.mark.parametrize("value", ["0", "0.01", "150.50", "98765.43", "999999.99"])
    def test_formatted_reproduces_written_value(self, value):
        """Test that the formatted balance shows exactly what was written"""
        ledger = Ledger()
        ledger.write(Decimal(value))

        formatted = ledger.formatted()
        assert Decimal(formatted) == Decimal(value)
        assert len(formatted) == 9

    @pytest.mark.parametrize("value", [Decimal('-0'), Decimal('-0.00'), "-0.00", -0.0])
    def test_negative_zero_formats_as_zero(self, value):
        """Test that a negative zero is stored and shown as plain zero"""
        ledger = Ledger()
        ledger.write(value)

        assert ledger.formatted() == "000000.00"
        assert not ledger.read().is_signed()

    def test_negative_zero_initial_balance(self):
        """Test that a ledger opened at negative zero shows a zero balance"""
        ledger = Ledger("-0.00")
        assert ledger.formatted() == "000000.00"


class TestLedgerAtomic:
    """Test the atomic read-compute-write context"""

    def test_atomic_yields_ledger(self):
        """Test that atomic() gives access to the same ledger"""
        ledger = Ledger()
        with ledger.atomic() as locked:
            assert locked is ledger
            locked.write(locked.read() + Decimal('1'))

        assert ledger.read() == Decimal('1001.00')

    def test_atomic_blocks_other_writers(self):
        """Test that another thread cannot write while atomic() is held"""
        ledger = Ledger()
        entered = threading.Event()
        release = threading.Event()

        def hold_lock():
            with ledger.atomic():
                entered.set()
                release.wait(timeout=5)
                ledger.write(Decimal('1.00'))

        def writer():
            ledger.write(Decimal('2.00'))

        holder = threading.Thread(target=hold_lock)
        holder.start()
        assert entered.wait(timeout=5)

        other = threading.Thread(target=writer)
        other.start()
        other.join(timeout=0.2)
        assert other.is_alive()

        release.set()
        holder.join(timeout=5)
        other.join(timeout=5)

        # The blocked write lands after the atomic block
        assert ledger.read() == Decimal('2.00')
