"""
JSON transaction loader.

The analyzer itself never touches files: callers load records here (or
anywhere else) and hand the list to TransactionAnalyzer.

Accepted layouts:
    [ {...}, {...} ]
    {"transactions": [ {...}, {...} ]}
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

from configs import get_logger
from .exceptions import TransactionLoadError, TransactionParsingError
from .models import REQUIRED_FIELDS, Transaction

logger = get_logger(__name__)


def load_transactions(path: Union[str, Path]) -> List[Transaction]:
    """
    loading transactions from a JSON file.

    Args:
        path: Path to the JSON file (string or Path object)

    Returns:
        List of Transaction objects in file order

    Raises:
        TransactionLoadError: If the file is missing or is not valid JSON
        TransactionParsingError: If the JSON is not a list of transaction records

    Example:
        >>> transactions = load_transactions("data/sample_transactions.json")
        >>> analyzer = TransactionAnalyzer(transactions)
    """
    path = Path(path)
    logger.info(f"Loading transactions: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)

    except FileNotFoundError as e:
        error_msg = f"Transaction file not found: {path}"
        logger.error(error_msg)
        raise TransactionLoadError(error_msg) from e

    except json.JSONDecodeError as e:
        error_msg = f"Invalid JSON in {path}: {e}"
        logger.error(error_msg)
        raise TransactionLoadError(error_msg) from e

    except OSError as e:
        error_msg = f"Unexpected error reading {path}: {str(e)}"
        logger.error(error_msg, exc_info=True)
        raise TransactionLoadError(error_msg) from e

    if isinstance(payload, dict):
        payload = payload.get("transactions")

    if not isinstance(payload, list):
        error_msg = f"Expected a list of transactions in {path}"
        logger.error(error_msg)
        raise TransactionParsingError(error_msg)

    transactions = load_transactions_from_records(payload)
    logger.info(f"Successfully loaded {len(transactions)} transactions from {path.name}")
    return transactions


def load_transactions_from_records(
    records: Iterable[Mapping[str, Any]],
) -> List[Transaction]:
    """
    converting already-deserialized records into Transaction objects.

    Args:
        records: Iterable of mappings with id, date, amount, type,
            description and merchant keys

    Returns:
        List of Transaction objects, same order as the input

    Raises:
        TransactionParsingError: If a record is not a mapping, misses a
            field, or has a date that can't be parsed
    """
    transactions = []

    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            error_msg = f"Record {index} is not an object"
            logger.error(error_msg)
            raise TransactionParsingError(error_msg)

        missing = [name for name in REQUIRED_FIELDS if name not in record]
        if missing:
            error_msg = f"Record {index} is missing field(s): {', '.join(missing)}"
            logger.error(error_msg)
            raise TransactionParsingError(error_msg)

        try:
            transactions.append(Transaction.from_dict(record))
        except (ValueError, TypeError) as e:
            error_msg = f"Record {index} has an unreadable date: {record['date']!r}"
            logger.error(error_msg)
            raise TransactionParsingError(error_msg) from e

    logger.debug(f"Converted {len(transactions)} records")
    return transactions
