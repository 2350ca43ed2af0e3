"""
Settings and configuration for Suji.

Values are read from the environment once, at import time.
"""

import logging
import os

# Debug mode
DEBUG = os.environ.get("SUJI_DEBUG", "").lower() in ("1", "true", "yes")

# Maximum number of closure rounds when expanding romaji spelling variants
VARIANT_MAX_ROUNDS = int(os.environ.get("SUJI_VARIANT_MAX_ROUNDS", "6"))

# Optional seed for the module-level sampler generator
_seed = os.environ.get("SUJI_RANDOM_SEED", "").strip()
RANDOM_SEED = int(_seed) if _seed else None

# Marker used in every field of the unknown triple
UNKNOWN_MARKER = "?"

# Inclusive numeral domain
MIN_VALUE = 0
MAX_VALUE = 999_999_999_999_999


def configure_logging(level=None):
    """Attach a stderr handler to the ``suji`` logger.

    The library never does this on its own; applications call it when they
    want to see engine diagnostics. Defaults to DEBUG when ``SUJI_DEBUG`` is
    set and WARNING otherwise.
    """
    if level is None:
        level = logging.DEBUG if DEBUG else logging.WARNING

    logger = logging.getLogger("suji")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
