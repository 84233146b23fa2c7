"""
Transaction analyzer over an in-memory list of transactions.

Filters keep the stored (insertion) order. Grouped summaries are built
with pandas, same as the rest of the analysis layer.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Optional, Sequence

import pandas as pd

from configs import get_logger, load_settings
from src.data.models import REQUIRED_FIELDS, Transaction, to_datetime
from .exceptions import EmptyTransactionsError

logger = get_logger(__name__)

DEBIT_TYPE = "debit"


@dataclass
class AnalysisSummary:
    """
    Headline numbers for the whole collection.

    average_amount is None for an empty collection.
    """

    total_amount: float
    total_debit_amount: float
    transaction_count: int
    average_amount: Optional[float]
    unique_types: List[str]
    by_type: pd.DataFrame = field(repr=False)


class TransactionAnalyzer:
    """
    Query and aggregate a list of transactions.

    The analyzer keeps its own copy of the list it is given, so later
    changes to the caller's list are not seen here. add_transaction() is
    the only way to change what is analyzed; everything else is a read.

    There is no shared default instance: build one per data set.
    """

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        """
        Initialize analyzer with an initial set of transactions.

        Args:
            transactions: Transactions in insertion order (copied; may be empty)
        """
        self.transactions: List[Transaction] = list(transactions or [])
        logger.info(
            f"Analyzer initialized with {len(self.transactions)} transactions"
        )

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction; visible to every later query."""
        self.transactions.append(transaction)
        logger.debug(f"Added transaction {transaction.id}")

    def get_all_transactions(self) -> List[Transaction]:
        """Return all transactions in insertion order (a new list)."""
        return list(self.transactions)

    def get_unique_transaction_types(self) -> List[str]:
        """Return the distinct transaction types, sorted ascending."""
        return sorted({t.type for t in self.transactions})

    # ========================================================================
    # TOTALS
    # ========================================================================

    def calculate_total_amount(self) -> float:
        """Sum of all amounts; 0 for an empty collection."""
        return sum(t.amount for t in self.transactions)

    def calculate_total_amount_by_date(self, year: int, month: int, day: int) -> float:
        """
        Sum of amounts for transactions on one calendar day.

        Out-of-range parts roll over like a calendar would: month 13 is
        January of the next year, and day 32 of January is February 1.

        Args:
            year: Year of the date
            month: Month of the date (1-12)
            day: Day of the month

        Returns:
            Total over [year-month-day 00:00, next day 00:00)
        """
        extra_years, month_index = divmod(month - 1, 12)
        start_date = datetime(year + extra_years, month_index + 1, 1) + timedelta(
            days=day - 1
        )
        end_date = start_date + timedelta(days=1)
        return sum(
            t.amount for t in self.transactions if start_date <= t.date < end_date
        )

    def calculate_average_transaction_amount(self) -> float:
        """
        Average amount over all transactions.

        Raises:
            EmptyTransactionsError: If there are no transactions
        """
        if not self.transactions:
            logger.warning("Average amount requested with no transactions")
            raise EmptyTransactionsError("Cannot average zero transactions")

        return self.calculate_total_amount() / len(self.transactions)

    def calculate_total_debit_amount(self) -> float:
        """Sum of amounts for transactions typed exactly "debit"."""
        return sum(t.amount for t in self.transactions if t.type == DEBIT_TYPE)

    # ========================================================================
    # FILTERS (stored order is kept)
    # ========================================================================

    def get_transactions_by_type(self, transaction_type: str) -> List[Transaction]:
        matches = [t for t in self.transactions if t.type == transaction_type]
        logger.debug(f"{len(matches)} transactions matched type '{transaction_type}'")
        return matches

    def get_transactions_in_date_range(
        self, start_date: Any, end_date: Any
    ) -> List[Transaction]:
        """
        Transactions with start_date <= date < end_date.

        Plain dates are treated as midnight of that day.
        """
        start_date = to_datetime(start_date)
        end_date = to_datetime(end_date)
        return [t for t in self.transactions if start_date <= t.date < end_date]

    def get_transactions_by_merchant(self, merchant: str) -> List[Transaction]:
        matches = [t for t in self.transactions if t.merchant == merchant]
        logger.debug(f"{len(matches)} transactions matched merchant '{merchant}'")
        return matches

    def get_transactions_by_amount_range(
        self, min_amount: float, max_amount: float
    ) -> List[Transaction]:
        """Transactions with min_amount <= amount <= max_amount."""
        return [t for t in self.transactions if min_amount <= t.amount <= max_amount]

    def get_transactions_before_date(self, date: Any) -> List[Transaction]:
        """Transactions strictly before the given date."""
        cutoff = to_datetime(date)
        return [t for t in self.transactions if t.date < cutoff]

    def find_transaction_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """
        First transaction (in stored order) with this id.

        Returns:
            The transaction, or None if no transaction has that id
        """
        for transaction in self.transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def map_transaction_descriptions(self) -> List[str]:
        return [t.description for t in self.transactions]

    # ========================================================================
    # FREQUENCIES
    # ========================================================================

    def find_most_transactions_month(self) -> Optional[int]:
        """
        Month of the year (1-12) holding the most transactions.

        Counts are per month of the year across all years. Ties go to the
        earliest month.

        Returns:
            Month number, or None if there are no transactions
        """
        return self._busiest_month(self.transactions)

    def find_most_debit_transaction_month(self) -> Optional[int]:
        """Same as find_most_transactions_month(), counting debits only."""
        return self._busiest_month(self.get_transactions_by_type(DEBIT_TYPE))

    def get_transaction_types_sorted_by_count(self) -> List[str]:
        """
        Distinct types, most frequent first.

        Types with equal counts are ordered alphabetically.
        """
        if not self.transactions:
            return []

        counts = pd.Series([t.type for t in self.transactions]).value_counts()
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [transaction_type for transaction_type, _ in ranked]

    # ========================================================================
    # GROUPED SUMMARIES
    # ========================================================================

    def to_dataframe(self) -> pd.DataFrame:
        """One row per transaction, in stored order."""
        return pd.DataFrame(
            [t.to_dict() for t in self.transactions], columns=list(REQUIRED_FIELDS)
        )

    def summarize_by_type(self) -> pd.DataFrame:
        """Count and total per type, largest total first."""
        return self._summarize_by_column("type")

    def summarize_by_merchant(self) -> pd.DataFrame:
        """Count and total per merchant, largest total first."""
        return self._summarize_by_column("merchant")

    def summarize_by_date(self) -> pd.DataFrame:
        """
        Count and total per calendar day, oldest day first.

        Returns:
            DataFrame with columns: date (datetime.date), count, amount
        """
        df = self.to_dataframe()

        if df.empty:
            return pd.DataFrame(columns=["date", "count", "amount"])

        df["date"] = [t.date.date() for t in self.transactions]

        return (
            df.groupby("date", sort=True)
            .agg(
                count=("id", "count"),
                amount=("amount", "sum"),
            )
            .reset_index()
        )

    def summarize_by_amount_range(
        self, edges: Optional[Sequence[float]] = None
    ) -> pd.DataFrame:
        """
        Count and total per amount bucket.

        Buckets are left-closed ([edge_i, edge_i+1)). Amounts outside the
        outermost edges are not counted. Empty buckets are kept with zeros.

        Args:
            edges: Bucket boundaries (optional, uses configs/analyzer.yaml
                if not provided)

        Returns:
            DataFrame with columns: amount_range (pd.Interval), count, amount
        """
        if edges is None:
            edges = load_settings().amount_range_edges

        edges = sorted(edges)
        df = self.to_dataframe()
        df["amount"] = df["amount"].astype(float)
        df["amount_range"] = pd.cut(df["amount"], bins=edges, right=False)

        outside = int(df["amount_range"].isna().sum())
        if outside:
            logger.warning(f"{outside} transactions fall outside the amount ranges")

        return (
            df.groupby("amount_range", observed=False)
            .agg(
                count=("id", "count"),
                amount=("amount", "sum"),
            )
            .reset_index()
        )

    def summarize(self) -> AnalysisSummary:
        """Collect the headline numbers in one object."""
        count = len(self.transactions)
        total = self.calculate_total_amount()

        return AnalysisSummary(
            total_amount=total,
            total_debit_amount=self.calculate_total_debit_amount(),
            transaction_count=count,
            average_amount=total / count if count else None,
            unique_types=self.get_unique_transaction_types(),
            by_type=self.summarize_by_type(),
        )

    # ============================================================================
    # HELPER FUNCTIONS
    # ============================================================================

    def _summarize_by_column(self, column: str) -> pd.DataFrame:
        df = self.to_dataframe()

        if df.empty:
            return pd.DataFrame(columns=[column, "count", "amount"])

        return (
            df.groupby(column)
            .agg(
                count=("id", "count"),
                amount=("amount", "sum"),
            )
            .sort_values(by="amount", ascending=False)
            .reset_index()
        )

    @staticmethod
    def _busiest_month(transactions: List[Transaction]) -> Optional[int]:
        if not transactions:
            return None

        counts = pd.Series([t.date.month for t in transactions]).value_counts()
        top = counts.max()
        return int(min(counts[counts == top].index))


# For testing
if __name__ == "__main__":
    import sys

    from configs import setup_logging
    from src.data import load_transactions

    setup_logging()

    if len(sys.argv) < 2:
        print("Transaction Analyzer")
        print("=" * 60)
        print("Usage:")
        print("  python -m src.analysis.analyzer data/sample_transactions.json")
        print("=" * 60)
        sys.exit(0)

    analyzer = TransactionAnalyzer(load_transactions(sys.argv[1]))
    summary = analyzer.summarize()
    print(f"Transactions: {summary.transaction_count}")
    print(f"Total amount: {summary.total_amount}")
    print(f"Total debit:  {summary.total_debit_amount}")
    print(f"Types:        {', '.join(summary.unique_types)}")
    print(summary.by_type.to_string(index=False))
