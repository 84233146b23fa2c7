"""
YAML-backed analyzer settings.

Reads configs/analyzer.yaml (or a path you pass in).
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_AMOUNT_RANGE_EDGES = [-1_000_000.0, -1000.0, -100.0, 0.0, 100.0, 1000.0, 1_000_000.0]


@dataclass
class AnalyzerSettings:
    """Settings consumed by the analysis layer."""

    amount_range_edges: List[float] = field(
        default_factory=lambda: list(DEFAULT_AMOUNT_RANGE_EDGES)
    )


def load_settings(config_path: Optional[str] = None) -> AnalyzerSettings:
    """
    loading analyzer settings from YAML.

    Keys missing from the file fall back to their defaults.

    Args:
        config_path: Path to analyzer.yaml (optional, uses default if not provided)

    Returns:
        AnalyzerSettings

    Raises:
        FileNotFoundError: If the config file does not exist
        yaml.YAMLError: If the file is not valid YAML
    """
    if config_path is None:
        current_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(current_dir, "analyzer.yaml")

    logger.info(f"Loading analyzer settings from: {config_path}")

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(f"Analyzer config file not found: {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML config: {e}")
        raise

    edges = config.get("amount_range_edges")
    if edges is None:
        logger.debug("No amount_range_edges in config, using defaults")
        return AnalyzerSettings()

    return AnalyzerSettings(amount_range_edges=sorted(float(e) for e in edges))
