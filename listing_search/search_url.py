"""
Search URL helpers around the interpreter.
- build_search_url: project a parsed query into /search?q=...&make=... parameters
- resolve_search_location: explicit location first, then the user's stored preference
- filters_from_params / filters_from_query_string: rebuild SearchFilters from those parameters

These are the consumers of ParsedQuery; the interpreter itself never touches URLs.
"""

import re  # plain numeric literals only
from decimal import Decimal  # exact rounding of "1500.0"
from typing import Any, List, Mapping, Optional, Tuple  # type hints
from urllib.parse import parse_qs, urlencode  # query-string codec

from loguru import logger  # console logging

from .config import ALL_NZ_LOCATION_LABEL, AMOUNT_MAX_DIGITS, SEARCH_PATH
from .models import SearchFilters
from .query_parser import QueryParser, interpret

# Digits and an optional fraction; the "m" suffix can add six digits to a parsed amount
RE_PLAIN_NUMBER = re.compile(r"\d{1,%d}(?:\.\d{1,6})?" % (AMOUNT_MAX_DIGITS + 6))


def resolve_search_location(explicit: Optional[str], preferred: Optional[str] = None) -> Optional[str]:
	"""
	Pick the location filter for a search.
	An explicit location from the query wins; otherwise the stored preference is used unless
	it is blank or the "All NZ" label.
	"""
	explicit = (explicit or "").strip()
	if explicit:
		return explicit
	preferred = (preferred or "").strip()
	if not preferred or preferred == ALL_NZ_LOCATION_LABEL:
		return None
	return preferred


def build_search_url(
	raw_query: str,
	search_path: str = SEARCH_PATH,
	preferred_location: Optional[str] = None,
	parser: Optional[QueryParser] = None,
) -> str:
	"""
	Build a search URL such as
	/search?q=camry&original=Toyota+Camry+in+Auckland&make=Toyota&model=camry&location=Auckland&interpreted=...
	Blank input returns the bare search path.
	"""
	normalized = (raw_query or "").strip()
	if not normalized:
		return search_path

	parsed = parser.parse(normalized) if parser else interpret(normalized)
	f = parsed.filters

	params: List[Tuple[str, str]] = []
	params.append(("q", (f.query or normalized).strip() or normalized))  # backend keyword query
	params.append(("original", normalized))  # what the user typed

	if f.make:
		params.append(("make", f.make))
	if f.model:
		params.append(("model", f.model))

	# Numeric ranges
	for name, value in (
		("yearMin", f.year_min),
		("yearMax", f.year_max),
		("priceMin", f.price_min),
		("priceMax", f.price_max),
		("odometerMin", f.odometer_min),
		("odometerMax", f.odometer_max),
	):
		if value is not None:
			params.append((name, str(value)))

	location = resolve_search_location(f.location, preferred_location)
	if location:
		params.append(("location", location))
	if f.color:
		params.append(("color", f.color))
	if f.condition:
		params.append(("condition", ",".join(f.condition)))
	if f.category:
		params.append(("category", f.category))
	if parsed.interpreted_as:
		params.append(("interpreted", parsed.interpreted_as))

	url = f"{search_path}?{urlencode(params)}"
	logger.debug(f"[SearchURL] '{normalized}' -> {url}")
	return url


def _values(params: Mapping[str, Any], key: str) -> List[str]:
	"""All values for key, whether the mapping holds plain strings or lists (parse_qs)."""
	raw = params.get(key)
	if raw is None:
		return []
	if isinstance(raw, str):
		return [raw]
	return [str(v) for v in raw]


def _first(params: Mapping[str, Any], *keys: str) -> Optional[str]:
	for key in keys:
		for value in _values(params, key):
			if value.strip():
				return value.strip()
	return None


def _int_param(params: Mapping[str, Any], *keys: str) -> Optional[int]:
	raw = _first(params, *keys)
	if raw is None:
		return None
	if not RE_PLAIN_NUMBER.fullmatch(raw):
		logger.warning(f"[SearchURL] Ignoring non-numeric parameter {keys[0]}='{raw[:40]}'")
		return None
	return int(Decimal(raw))


def filters_from_params(params: Mapping[str, Any]) -> SearchFilters:
	"""
	Rebuild SearchFilters from query-string parameters.
	Accepts camelCase and snake_case spellings (priceMin, minPrice, price_min, ...) and
	condition given either comma-separated or repeated.
	"""
	conditions = [
		c.strip()
		for value in _values(params, "condition")
		for c in value.split(",")
		if c.strip()
	]
	return SearchFilters(
		query=_first(params, "q") or "",
		make=_first(params, "make"),
		model=_first(params, "model"),
		year_min=_int_param(params, "yearMin", "year_min"),
		year_max=_int_param(params, "yearMax", "year_max"),
		price_min=_int_param(params, "priceMin", "minPrice", "price_min"),
		price_max=_int_param(params, "priceMax", "maxPrice", "price_max"),
		odometer_min=_int_param(params, "odometerMin", "odometer_min"),
		odometer_max=_int_param(params, "odometerMax", "odometer_max"),
		location=_first(params, "location"),
		color=_first(params, "color"),
		condition=tuple(conditions) if conditions else None,
		category=_first(params, "category"),
	)


def filters_from_query_string(query_string: str) -> SearchFilters:
	"""Same as filters_from_params for a raw query string or a full search URL."""
	if "?" in query_string:
		query_string = query_string.split("?", 1)[1]
	return filters_from_params(parse_qs(query_string))
