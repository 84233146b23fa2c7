"""
Transaction data package.

Usage:
    from src.data import Transaction, load_transactions

    transactions = load_transactions("data/sample_transactions.json")
"""

from .exceptions import TransactionLoadError, TransactionParsingError
from .models import Transaction
from .loader import load_transactions, load_transactions_from_records

__all__ = [
    # Exceptions
    "TransactionLoadError",
    "TransactionParsingError",
    # Record type
    "Transaction",
    # Loaders
    "load_transactions",
    "load_transactions_from_records",
]
