"""
Custom exceptions for loading transaction data.

These give users clear error messages instead of confusing technical errors.
"""


class TransactionLoadError(Exception):
    """
    Base exception for transaction loading errors.

    Use this when the source file can't be opened or read.
    """

    pass


class TransactionParsingError(TransactionLoadError):
    """
    Raised when the source data is not shaped like a list of transactions.

    Example:
        raise TransactionParsingError("Record 3 is missing field: merchant")
    """

    pass
