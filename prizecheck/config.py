"""
Runtime settings for the prize checker.

Every value can be overridden through the environment.
"""
import os
import logging

# --- Paths ---
DATA_DIR = os.getenv("PRIZECHECK_DATA_DIR", "data")

# Draw history older than this is refetched (12 hours)
HISTORY_MAX_AGE_SECONDS = int(os.getenv("PRIZECHECK_HISTORY_MAX_AGE", "43200"))
HISTORY_TIMEOUT_SECONDS = 30

# --- Engine limits ---
# C(20, 6) = 38,760 sub-tickets for a double color multi-number row
MAX_RED_TOKENS = int(os.getenv("PRIZECHECK_MAX_RED_TOKENS", "20"))

# Signed 64-bit, the widest integer the JSON/DB consumers accept
MAX_PAYOUT = 2 ** 63 - 1

# --- Logging ---
LOG_LEVEL = os.getenv("PRIZECHECK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = None):
    """Install a stream handler on the root logger. Called by entry scripts only."""
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
