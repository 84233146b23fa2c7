"""
Simple logging setup for the transaction analyzer.
"""

import logging
import sys


def setup_logging(level=logging.INFO):
    """
    Set up logging for the entire project.

    Call this ONCE at the start (scripts, notebooks, the __main__ blocks).
    Library modules never attach handlers themselves.

    What it does:
    1. Captures everything on the root logger
    2. Shows `level` and above in the terminal (INFO by default)

    Example:
        from configs import setup_logging
        setup_logging()  # That's it!
    """
    # Example output: "2024-01-15 10:30:45 - INFO - Loaded 12 transactions"
    log_format = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Remove any existing handlers (prevents duplicates)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(log_format)
    logger.addHandler(console)


def get_logger(name):
    """
    Get a logger for the module.

    Args:
        name: Usually just pass __name__ (the module name)

    Returns:
        A logger you can use

    Example:
        from configs import get_logger
        logger = get_logger(__name__)

        logger.info("Analyzer initialized")
        logger.debug("Filtering by merchant")
    """
    return logging.getLogger(name)


# ------------------------------------------------------------------------------
# LOG LEVELS USED IN THIS PROJECT
# ------------------------------------------------------------------------------
#
# logger.debug    -> per-query detail ("3 transactions matched type 'debit'")
# logger.info     -> lifecycle ("Analyzer initialized with 12 transactions")
# logger.warning  -> unexpected but recoverable ("average requested on empty set")
# logger.error    -> a load or config step failed and is about to raise
# ------------------------------------------------------------------------------
