"""Transaction analysis package."""

from .analyzer import AnalysisSummary, TransactionAnalyzer
from .exceptions import AnalysisError, EmptyTransactionsError

__all__ = [
    "TransactionAnalyzer",
    "AnalysisSummary",
    "AnalysisError",
    "EmptyTransactionsError",
]
