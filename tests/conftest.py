"""
Shared pytest setup.

Puts the repository root on `sys.path` (so `src` and `configs` import
without installing) and exposes the shipped sample data file.
"""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sample_transactions_path() -> Path:
    path = REPO_ROOT / "data" / "sample_transactions.json"
    assert path.exists(), "sample_transactions.json not found in data/"
    return path
