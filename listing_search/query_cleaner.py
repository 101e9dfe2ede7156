"""
Residual keyword query.
Strips filler words and everything already captured as a structured filter, leaving the
words the backend should still match as free text.
"""

import re  # phrase removal
from typing import Tuple

from loguru import logger  # console logging

from .gazetteers import CAMERA_BRANDS, CONDITION_KEYWORDS, FILLER_WORDS, NZ_LOCATIONS, VEHICLE_MAKES
from .ranges import NUMBER


def _phrase_pattern(phrase: str) -> re.Pattern:
	return re.compile(r"\b" + re.escape(phrase) + r"\b", re.I)


# Makes shared with camera/electronics brands stay in the query ("sony camera")
REMOVABLE_MAKES = tuple(m for m in VEHICLE_MAKES if m not in CAMERA_BRANDS)
# Longest first so "brand new" goes before "new" can split it
CONDITION_PHRASES = tuple(sorted(
	{phrase for phrases in CONDITION_KEYWORDS.values() for phrase in phrases},
	key=lambda p: (-len(p), p),
))

REMOVAL_PATTERNS: Tuple[re.Pattern, ...] = tuple(
	_phrase_pattern(p) for p in FILLER_WORDS + NZ_LOCATIONS + REMOVABLE_MAKES + CONDITION_PHRASES
)

PRICE_EXPRESSIONS: Tuple[re.Pattern, ...] = (
	re.compile(r"\b(?:under|below|above|over|less than|more than)\s+\$?" + NUMBER + r"\s*[km]?\b", re.I),
	re.compile(r"\bbetween\s+\$?" + NUMBER + r"\s*[km]?\b\s+and\s+\$?" + NUMBER + r"\s*[km]?\b", re.I),
	re.compile(r"\$" + NUMBER + r"(?:\s*[km]\b)?", re.I),
)

RE_WHITESPACE = re.compile(r"\s+")


def clean_query(query: str) -> str:
	"""
	Remove filler words, locations, vehicle makes, condition phrases and price expressions.
	The result is lowercased with collapsed whitespace; if nothing is left the original
	query comes back unmodified.
	"""
	cleaned = query.lower()

	for pattern in REMOVAL_PATTERNS:
		cleaned = pattern.sub(" ", cleaned)

	for pattern in PRICE_EXPRESSIONS:
		cleaned = pattern.sub(" ", cleaned)

	cleaned = RE_WHITESPACE.sub(" ", cleaned).strip()
	logger.debug(f"[Cleaner] '{query}' -> '{cleaned}'")
	return cleaned or query
