"""
Custom exceptions for transaction analysis.
"""


class AnalysisError(Exception):
    """Base exception for analysis errors."""

    pass


class EmptyTransactionsError(AnalysisError):
    """
    Raised when a calculation needs at least one transaction.

    Example:
        raise EmptyTransactionsError("Cannot average zero transactions")
    """

    pass
