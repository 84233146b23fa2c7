import json
from datetime import date, datetime, timedelta, timezone
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from src.data import (
    Transaction,
    TransactionLoadError,
    TransactionParsingError,
    load_transactions,
    load_transactions_from_records,
)


RECORD = {
    "id": "t1",
    "date": "2024-01-05T10:30:00",
    "amount": 42.5,
    "type": "debit",
    "description": "Lunch",
    "merchant": "Cafe",
}


def test_load_transactions_from_list(tmp_path: Path):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps([RECORD, dict(RECORD, id="t2")]))

    transactions = load_transactions(path)

    assert [t.id for t in transactions] == ["t1", "t2"]
    assert transactions[0].date == datetime(2024, 1, 5, 10, 30)
    assert transactions[0].amount == 42.5


def test_load_transactions_from_wrapped_object(tmp_path: Path):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps({"transactions": [RECORD]}))

    assert len(load_transactions(str(path))) == 1


def test_missing_file_raises_load_error(tmp_path: Path):
    with pytest.raises(TransactionLoadError):
        load_transactions(tmp_path / "nope.json")


def test_invalid_json_raises_load_error(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("[{not json")

    with pytest.raises(TransactionLoadError):
        load_transactions(path)


def test_non_list_payload_raises_parsing_error(tmp_path: Path):
    path = tmp_path / "odd.json"
    path.write_text(json.dumps({"rows": []}))

    with pytest.raises(TransactionParsingError):
        load_transactions(path)


def test_missing_field_raises_parsing_error():
    record = dict(RECORD)
    del record["merchant"]

    with pytest.raises(TransactionParsingError, match="merchant"):
        load_transactions_from_records([record])


def test_bad_date_raises_parsing_error():
    with pytest.raises(TransactionParsingError):
        load_transactions_from_records([dict(RECORD, date="not a date")])


def test_parsing_error_is_a_load_error():
    assert issubclass(TransactionParsingError, TransactionLoadError)


def test_plain_date_becomes_midnight():
    tx = Transaction(
        id="1",
        date=date(2024, 1, 5),
        amount=1,
        type="credit",
        description="",
        merchant="",
    )
    assert tx.date == datetime(2024, 1, 5)


def test_transaction_is_immutable():
    tx = Transaction.from_dict(RECORD)
    with pytest.raises(FrozenInstanceError):
        tx.amount = 0


def test_utc_suffix_is_stored_as_naive_utc(tmp_path: Path):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps([dict(RECORD, date="2024-01-05T10:30:00Z")]))

    tx = load_transactions(path)[0]

    assert tx.date.tzinfo is None
    assert tx.date == datetime(2024, 1, 5, 10, 30)


def test_offset_is_converted_to_utc():
    tx = Transaction.from_dict(dict(RECORD, date="2024-01-05T23:30:00-02:00"))

    assert tx.date.tzinfo is None
    assert tx.date == datetime(2024, 1, 6, 1, 30)


def test_aware_datetime_is_made_naive():
    aware = datetime(2024, 1, 5, 12, 0, tzinfo=timezone(timedelta(hours=3)))
    tx = Transaction.from_dict(dict(RECORD, date=aware))

    assert tx.date == datetime(2024, 1, 5, 9, 0)
