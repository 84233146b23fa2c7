"""Project-wide configuration: logging and analyzer settings."""

from .logging_config import setup_logging, get_logger
from .settings import AnalyzerSettings, load_settings

__all__ = ["setup_logging", "get_logger", "AnalyzerSettings", "load_settings"]
