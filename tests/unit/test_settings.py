from pathlib import Path

import pytest
import yaml

from configs import AnalyzerSettings, load_settings
from configs.settings import DEFAULT_AMOUNT_RANGE_EDGES


def test_default_config_file_loads():
    settings = load_settings()
    assert settings.amount_range_edges == sorted(settings.amount_range_edges)
    assert len(settings.amount_range_edges) >= 2


def test_custom_edges_are_sorted(tmp_path: Path):
    cfg_path = tmp_path / "analyzer.yaml"
    cfg_path.write_text(yaml.safe_dump({"amount_range_edges": [100, 0, 50]}))

    settings = load_settings(config_path=str(cfg_path))

    assert settings.amount_range_edges == [0.0, 50.0, 100.0]


def test_missing_key_uses_defaults(tmp_path: Path):
    cfg_path = tmp_path / "analyzer.yaml"
    cfg_path.write_text("other: 1\n")

    settings = load_settings(config_path=str(cfg_path))

    assert settings == AnalyzerSettings()
    assert settings.amount_range_edges == DEFAULT_AMOUNT_RANGE_EDGES


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_settings(config_path=str(tmp_path / "missing.yaml"))
