"""
Gazetteer-based entity extraction: make, model, location, color, condition and category.
Every function takes the lowercased query and scans a fixed table in declared order.
"""

import re  # whole-word matching
from typing import List, Optional, Tuple

from loguru import logger  # console logging

from .config import MODEL_MAX_TOKENS
from .gazetteers import (
	CATEGORY_KEYWORDS,
	CONDITION_KEYWORDS,
	LOCATION_PREPOSITIONS,
	MODEL_STOP_WORDS,
	NZ_LOCATIONS,
	VEHICLE_COLORS,
	VEHICLE_MAKES,
)


def _word_pattern(phrase: str) -> re.Pattern:
	return re.compile(r"\b" + re.escape(phrase) + r"\b")


# Pre-compiled (entry, pattern) pairs so each parse is a plain linear scan
MAKE_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple((m, _word_pattern(m)) for m in VEHICLE_MAKES)
COLOR_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple((c, _word_pattern(c)) for c in VEHICLE_COLORS)
LOCATION_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
	(loc, re.compile(r"\b(?:(?:" + "|".join(LOCATION_PREPOSITIONS) + r")\s+)?" + re.escape(loc) + r"\b"))
	for loc in NZ_LOCATIONS
)
CATEGORY_PATTERNS: Tuple[Tuple[str, Tuple[re.Pattern, ...]], ...] = tuple(
	(category, tuple(_word_pattern(k) for k in keywords)) for category, keywords in CATEGORY_KEYWORDS.items()
)

RE_MODEL_YEAR = re.compile(r"\d{4}")  # a year token ends the model
TRAILING_PUNCTUATION = ",.;:!?"


def capitalize_first(text: str) -> str:
	"""Upper-case the first character only: "land rover" -> "Land rover"."""
	return text[:1].upper() + text[1:]


def title_case(text: str) -> str:
	"""Upper-case the first character of every word: "palmerston north" -> "Palmerston North"."""
	return " ".join(capitalize_first(word) for word in text.split(" "))


def _find_make(query: str) -> Optional[Tuple[str, re.Match]]:
	for make, pattern in MAKE_PATTERNS:
		m = pattern.search(query)
		if m:
			return make, m
	return None


def extract_make(query: str) -> Optional[str]:
	"""First gazetteer make found anywhere in the query (gazetteer order, not string order)."""
	found = _find_make(query)
	if not found:
		return None
	make = capitalize_first(found[0])
	logger.debug(f"[Entities] Make match '{found[0]}' -> {make}")
	return make


def extract_model(query: str, make: Optional[str]) -> Optional[str]:
	"""
	Collect up to two tokens following the make.
	Stops at a stop word (after, near, under, ...), a 4-digit year or a "$" price.
	"""
	if not make:
		return None

	m = _word_pattern(make.lower()).search(query)
	if not m:
		return None

	parts: List[str] = []
	for word in query[m.end():].split():
		clean = word.rstrip(TRAILING_PUNCTUATION)
		if not clean:
			continue
		if clean in MODEL_STOP_WORDS or RE_MODEL_YEAR.fullmatch(clean) or clean.startswith("$"):
			break
		parts.append(clean)
		if len(parts) >= MODEL_MAX_TOKENS:
			break

	if not parts:
		return None
	model = " ".join(parts)
	logger.debug(f"[Entities] Model after '{make}' -> '{model}'")
	return model


def extract_location(query: str) -> Optional[str]:
	"""First gazetteer place found, either bare or after in/near/at/around/from."""
	for location, pattern in LOCATION_PATTERNS:
		if pattern.search(query):
			logger.debug(f"[Entities] Location match '{location}'")
			return title_case(location)
	return None


def extract_color(query: str) -> Optional[str]:
	for color, pattern in COLOR_PATTERNS:
		if pattern.search(query):
			return capitalize_first(color)
	return None


def extract_condition(query: str) -> Optional[str]:
	"""First canonical label with any trigger phrase contained in the query."""
	for condition, phrases in CONDITION_KEYWORDS.items():
		for phrase in phrases:
			if phrase in query:
				logger.debug(f"[Entities] Condition phrase '{phrase}' -> {condition}")
				return condition
	return None


def extract_category(query: str) -> Optional[str]:
	"""
	Map category keywords to a category slug ("sofa" -> "furniture").
	Kept available for callers that opt in; the default parser does not set a category so
	keyword search stays cross-category.
	"""
	for category, patterns in CATEGORY_PATTERNS:
		if any(p.search(query) for p in patterns):
			logger.debug(f"[Entities] Category -> {category}")
			return category
	return None
