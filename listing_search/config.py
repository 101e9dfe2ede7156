"""
Configuration constants for the listing search interpreter.
Values that callers may want to tune live here; environment variables override the runtime ones.
"""

import os  # environment overrides
import sys  # log sink

from loguru import logger  # console logging


INTERPRETED_SEPARATOR = " · "  # joins "Label: value" fragments of the summary

PRICE_RANGE_FLOOR = 1000  # bare "A-B" ranges are prices only when both ends exceed this
ODOMETER_HEURISTIC_FLOOR = 50_000  # "under 150k" without a unit is odometer only at/above this
MODEL_MAX_TOKENS = 2  # model names are usually one or two words
AMOUNT_MAX_DIGITS = 12  # integer digits read from a typed amount; longer digit runs are not amounts

SEARCH_PATH = "/search"  # default path for generated search URLs
ALL_NZ_LOCATION_LABEL = "All NZ"  # stored preference meaning "no location filter"

LOG_LEVEL = os.getenv("LISTING_SEARCH_LOG_LEVEL", "INFO")
API_URL = os.getenv("LISTING_SEARCH_API_URL", "http://localhost:8000")


def configure_logging(level: str = LOG_LEVEL) -> None:
	"""Replace loguru's default stderr sink with one at the configured level."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
	logger.debug(f"[Config] Logging configured at level {level.upper()}")
