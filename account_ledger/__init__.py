"""
Account Ledger

A single-account balance ledger with overdraft protection, Decimal-precise
currency handling and an interactive text menu.
"""

__version__ = "1.0.0"
