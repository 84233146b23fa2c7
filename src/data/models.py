"""
Transaction record used throughout the analysis layer.
"""

from dataclasses import asdict, dataclass
from datetime import date as date_type, datetime, timezone
from typing import Any, Dict, Mapping

import pandas as pd

REQUIRED_FIELDS = ("id", "date", "amount", "type", "description", "merchant")


def to_datetime(value: Any) -> datetime:
    """
    Normalize a date-like value to a naive Python datetime.

    Plain dates become midnight datetimes so they compare with stored values.
    Strings and pandas Timestamps go through pd.to_datetime. Values carrying
    a timezone are converted to UTC and the timezone is dropped.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    else:
        parsed = pd.to_datetime(value)
        if parsed is None or pd.isna(parsed):
            raise ValueError(f"Not a date: {value!r}")

    if isinstance(parsed, pd.Timestamp):
        if parsed.tzinfo is not None:
            parsed = parsed.tz_convert(None)
        return parsed.to_pydatetime()

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@dataclass(frozen=True)
class Transaction:
    """
    A single financial transaction.

    Records are immutable; the analyzer only ever appends new ones.
    """

    id: str
    date: datetime
    amount: float
    type: str  # "debit", "credit", or any other tag
    description: str
    merchant: str

    def __post_init__(self):
        object.__setattr__(self, "date", to_datetime(self.date))

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Transaction":
        """
        Build a Transaction from a mapping holding the six fields.

        Raises:
            KeyError: If a field is missing
            ValueError: If the date can't be parsed
        """
        return cls(
            id=str(record["id"]),
            date=record["date"],
            amount=record["amount"],
            type=record["type"],
            description=record["description"],
            merchant=record["merchant"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
