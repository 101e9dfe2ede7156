"""
Numeric range extraction: model years, prices and odometer readings.

Each extractor is an ordered list of regex rules evaluated front to back over the
lowercased query. A rule may be told which character spans other extractors have
already consumed (``claimed``); a match overlapping a claimed span is skipped and the
next occurrence is tried, so one group of digits never feeds two different filters.
"""

import re  # rule patterns
from decimal import Decimal, ROUND_HALF_UP  # exact compact-number scaling
from typing import List, Optional, Sequence

from loguru import logger  # console logging

from .config import AMOUNT_MAX_DIGITS, ODOMETER_HEURISTIC_FLOOR, PRICE_RANGE_FLOOR
from .gazetteers import MILEAGE_CONTEXT_WORDS, VEHICLE_CONTEXT_WORDS
from .models import NumericRange, Span


# 15000, 15,000, 1.5; at most AMOUNT_MAX_DIGITS integer digits, so a longer digit run never matches
NUMBER = r"(?:\d{1,3}(?:,\d{3}){1,3}|\d{1,%d})(?:\.\d+)?" % AMOUNT_MAX_DIGITS
YEAR = r"(19\d{2}|20\d{2})"  # plausible vehicle years
UNITS = r"(?:kilometres|kilometers|kms|km|mileage|odometer)"  # distance/usage words
AMOUNT = r"\$?(" + NUMBER + r")\s*([km])?\b"  # optional currency symbol and compact suffix

MULTIPLIERS = {"": 1, "k": 1_000, "m": 1_000_000}

# Year rules
RE_YEAR_AFTER = re.compile(r"\b(?:after|since|from)\s+" + YEAR + r"\b")  # after 2012
RE_YEAR_BEFORE = re.compile(r"\b(?:before|until)\s+" + YEAR + r"\b")  # before 2020
RE_YEAR_RANGE = re.compile(r"\b" + YEAR + r"\s*(?:-|\bto\b)\s*" + YEAR + r"\b")  # 2015-2018, 2015 to 2018
RE_YEAR_EXACT = re.compile(r"(?<!\$)\b" + YEAR + r"\b(?!\s*" + UNITS + r"\b)")  # 2020, but not $2020 or 2000 km

# Price rules
RE_PRICE_UNDER = re.compile(r"\b(?:under|below|less than)\s+" + AMOUNT)  # under $20k
RE_PRICE_OVER = re.compile(r"\b(?:over|above|more than)\s+" + AMOUNT)  # over 10k
RE_PRICE_BETWEEN = re.compile(r"\bbetween\s+" + AMOUNT + r"\s+and\s+" + AMOUNT)  # between $10000 and $20000
RE_PRICE_DASH = re.compile(
	r"(?<![\w.,$])\$?(" + NUMBER + r")\s*([km])?\s*(?:-|\bto\b)\s*\$?(" + NUMBER + r")\s*([km])?\b"
)  # $15000-$25000, 15000 to 25000

# Odometer rules
RE_ODO_TRAILING = re.compile(
	r"\b(\d{1,3}(?:\.\d+)?)k\b\s*(?:or\s+)?(?:below|under|less)\b(?:\s*(" + UNITS + r")\b)?"
)  # 100k or below mileage
RE_ODO_UNDER_UNIT = re.compile(r"\b(?:under|below|less than)\s+(" + NUMBER + r")\s*(k)?\s*" + UNITS + r"\b")
RE_ODO_OVER_UNIT = re.compile(r"\b(?:over|above|more than)\s+(" + NUMBER + r")\s*(k)?\s*" + UNITS + r"\b")
RE_ODO_UNDER_K = re.compile(r"\b(?:under|below|less than)\s+(\d{1,3}(?:\.\d+)?)k\b")  # cars under 150k
RE_ODO_OVER_K = re.compile(r"\b(?:over|above|more than)\s+(\d{1,3}(?:\.\d+)?)k\b")  # cars over 50k

RE_VEHICLE_CONTEXT = re.compile(r"\b(?:" + "|".join(VEHICLE_CONTEXT_WORDS) + r")\b")
RE_MILEAGE_CONTEXT = re.compile(r"\b(?:" + "|".join(MILEAGE_CONTEXT_WORDS) + r")\b")


def parse_compact_number(num_str: str, suffix: Optional[str] = None) -> int:
	"""
	Convert "1,500", "1.5" + "k" or "2" + "m" into an integer.
	Commas are dropped, the suffix scales by a thousand or a million, and the result rounds half up.
	Inputs come from NUMBER, so results stay below 10**(AMOUNT_MAX_DIGITS + 6).
	"""
	value = Decimal(num_str.replace(",", "")) * MULTIPLIERS[(suffix or "").lower()]
	return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def has_vehicle_context(query: str) -> bool:
	return RE_VEHICLE_CONTEXT.search(query) is not None


def has_mileage_context(query: str) -> bool:
	return RE_MILEAGE_CONTEXT.search(query) is not None


def _overlaps(span: Span, claimed: Sequence[Span]) -> bool:
	start, end = span
	return any(start < c_end and c_start < end for c_start, c_end in claimed)


def _first_free(pattern: re.Pattern, query: str, claimed: Sequence[Span]) -> Optional[re.Match]:
	"""First match of pattern that does not touch a claimed span."""
	for m in pattern.finditer(query):
		if _overlaps(m.span(), claimed):
			logger.debug("[Ranges] Skipping claimed match '{}' at {}", m.group(0), m.span())
			continue
		return m
	return None


def extract_year_range(query: str, claimed: Sequence[Span] = (), include_exact: bool = True) -> NumericRange:
	"""
	Find an explicit or implicit model-year interval.
	Rules: "after|since|from YYYY" -> min, "before|until YYYY" -> max, "YYYY-YYYY" fills the
	bounds still open (first = min, second = max), and only when none of these matched a bare
	year sets both bounds. Pass include_exact=False to leave the bare-year rule to the caller.
	"""
	year_min: Optional[int] = None
	year_max: Optional[int] = None
	spans: List[Span] = []

	m = _first_free(RE_YEAR_AFTER, query, claimed)
	if m:
		year_min = int(m.group(1))
		spans.append(m.span())
		logger.debug("[Ranges] Year lower bound from '{}' -> {}", m.group(0), year_min)

	m = _first_free(RE_YEAR_BEFORE, query, claimed)
	if m:
		year_max = int(m.group(1))
		spans.append(m.span())
		logger.debug("[Ranges] Year upper bound from '{}' -> {}", m.group(0), year_max)

	for m in RE_YEAR_RANGE.finditer(query):
		if _overlaps(m.span(), claimed):
			continue
		start, end = int(m.group(1)), int(m.group(2))
		spans.append(m.span())  # a descending pair is still claimed as years
		if start > end:
			logger.debug("[Ranges] Ignoring descending year range '{}'", m.group(0))
			break
		if year_min is None:
			year_min = start
		if year_max is None:
			year_max = end
		logger.debug("[Ranges] Year range from '{}' -> ({}, {})", m.group(0), year_min, year_max)
		break

	if not spans:
		return extract_exact_year(query, claimed) if include_exact else NumericRange()

	result = NumericRange(year_min, year_max, tuple(spans)).consistent()
	if result.is_empty and year_min is not None:
		logger.debug("[Ranges] Year bounds conflict ({} > {}), dropping both", year_min, year_max)
	return result


def extract_exact_year(query: str, claimed: Sequence[Span] = ()) -> NumericRange:
	"""A bare year such as "2020" pins both bounds to that year."""
	m = _first_free(RE_YEAR_EXACT, query, claimed)
	if not m:
		return NumericRange()
	year = int(m.group(1))
	logger.debug("[Ranges] Exact year -> {}", year)
	return NumericRange(year, year, (m.span(),))


def extract_price_range(query: str, claimed: Sequence[Span] = ()) -> NumericRange:
	"""
	Find a monetary interval.
	"under/below/less than X" -> max, "over/above/more than X" -> min, "between A and B" -> (A, B)
	in the order written, and failing "between" a bare "A-B"/"A to B" range whose ends both
	exceed the price floor, ordered by magnitude. Earlier rules win; later ones only fill open bounds.
	"""
	price_min: Optional[int] = None
	price_max: Optional[int] = None
	spans: List[Span] = []

	m = _first_free(RE_PRICE_UNDER, query, claimed)
	if m:
		price_max = parse_compact_number(m.group(1), m.group(2))
		spans.append(m.span())
		logger.debug("[Ranges] Price upper bound from '{}' -> {}", m.group(0), price_max)

	m = _first_free(RE_PRICE_OVER, query, claimed)
	if m:
		price_min = parse_compact_number(m.group(1), m.group(2))
		spans.append(m.span())
		logger.debug("[Ranges] Price lower bound from '{}' -> {}", m.group(0), price_min)

	between = _first_free(RE_PRICE_BETWEEN, query, claimed)
	if between:
		low = parse_compact_number(between.group(1), between.group(2))
		high = parse_compact_number(between.group(3), between.group(4))
		if price_min is None:
			price_min = low
		if price_max is None:
			price_max = high
		spans.append(between.span())
		logger.debug("[Ranges] Price 'between' from '{}' -> ({}, {})", between.group(0), low, high)
	else:
		for m in RE_PRICE_DASH.finditer(query):
			if _overlaps(m.span(), claimed):
				logger.debug("[Ranges] Skipping claimed range '{}'", m.group(0))
				continue
			first = parse_compact_number(m.group(1), m.group(2))
			second = parse_compact_number(m.group(3), m.group(4))
			if first <= PRICE_RANGE_FLOOR or second <= PRICE_RANGE_FLOOR:
				logger.debug("[Ranges] Range '{}' below price floor, not a price", m.group(0))
				continue
			if price_min is None:
				price_min = min(first, second)
			if price_max is None:
				price_max = max(first, second)
			spans.append(m.span())
			logger.debug("[Ranges] Price range from '{}' -> ({}, {})", m.group(0), price_min, price_max)
			break

	result = NumericRange(price_min, price_max, tuple(spans)).consistent()
	if result.is_empty and spans:
		logger.debug("[Ranges] Price bounds conflict ({} > {}), dropping both", price_min, price_max)
	return result


def extract_odometer_range(query: str) -> NumericRange:
	"""
	Find a distance/usage interval, telling it apart from a price.
	Explicit units ("km", "mileage", ...) or a trailing "or below" make a value an odometer
	reading. Without a unit, "under 150k" only counts when the query talks about vehicles or
	mileage and the value reaches the odometer floor; smaller figures stay prices.
	"""
	context = has_vehicle_context(query) or has_mileage_context(query)
	odo_min: Optional[int] = None
	odo_max: Optional[int] = None
	spans: List[Span] = []

	# "100k or below mileage"
	for m in RE_ODO_TRAILING.finditer(query):
		value = parse_compact_number(m.group(1), "k")
		if m.group(2) is None and not context and value < ODOMETER_HEURISTIC_FLOOR:
			logger.debug("[Ranges] '{}' has no unit or vehicle context, leaving it to price", m.group(0))
			continue
		odo_max = value
		spans.append(m.span())
		logger.debug("[Ranges] Odometer upper bound from '{}' -> {}", m.group(0), odo_max)
		break

	# "under 150,000 km", "below 200k km"
	if odo_max is None:
		m = RE_ODO_UNDER_UNIT.search(query)
		if m:
			odo_max = parse_compact_number(m.group(1), m.group(2))
			spans.append(m.span())
			logger.debug("[Ranges] Odometer upper bound from '{}' -> {}", m.group(0), odo_max)

	# "over 50k km", "more than 100k mileage"
	m = RE_ODO_OVER_UNIT.search(query)
	if m:
		odo_min = parse_compact_number(m.group(1), m.group(2))
		spans.append(m.span())
		logger.debug("[Ranges] Odometer lower bound from '{}' -> {}", m.group(0), odo_min)

	# Vehicle queries with large unitless k-values: "cars under 150k"
	if context:
		if odo_max is None:
			m = RE_ODO_UNDER_K.search(query)
			if m and parse_compact_number(m.group(1), "k") >= ODOMETER_HEURISTIC_FLOOR:
				odo_max = parse_compact_number(m.group(1), "k")
				spans.append(m.span())
				logger.debug("[Ranges] Heuristic odometer upper bound from '{}' -> {}", m.group(0), odo_max)
		if odo_min is None:
			m = RE_ODO_OVER_K.search(query)
			if m and parse_compact_number(m.group(1), "k") >= ODOMETER_HEURISTIC_FLOOR:
				odo_min = parse_compact_number(m.group(1), "k")
				spans.append(m.span())
				logger.debug("[Ranges] Heuristic odometer lower bound from '{}' -> {}", m.group(0), odo_min)

	result = NumericRange(odo_min, odo_max, tuple(spans)).consistent()
	if result.is_empty and spans:
		logger.debug("[Ranges] Odometer bounds conflict ({} > {}), dropping both", odo_min, odo_max)
	return result
