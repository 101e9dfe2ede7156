"""Serialization helpers for the interpreter's results."""
from dataclasses import asdict
from typing import Any, Dict

from .models import ParsedQuery, SearchFilters

# Attribute name -> wire name used in JSON payloads and query strings
FILTER_FIELD_NAMES: Dict[str, str] = {
	"query": "query",
	"make": "make",
	"model": "model",
	"year_min": "yearMin",
	"year_max": "yearMax",
	"price_min": "priceMin",
	"price_max": "priceMax",
	"odometer_min": "odometerMin",
	"odometer_max": "odometerMax",
	"location": "location",
	"color": "color",
	"condition": "condition",
	"category": "category",
}


def serialize_filters(filters: SearchFilters) -> Dict[str, Any]:
	"""Convert SearchFilters to a JSON-serializable dict with camelCase keys, dropping unset fields."""
	data = asdict(filters)
	payload: Dict[str, Any] = {}
	for attr, name in FILTER_FIELD_NAMES.items():
		value = data.get(attr)
		if value is None:
			continue
		payload[name] = list(value) if isinstance(value, tuple) else value
	return payload


def serialize_parsed_query(parsed: ParsedQuery) -> Dict[str, Any]:
	"""Convert a ParsedQuery to a plain dict; interpretedAs is omitted when absent."""
	payload: Dict[str, Any] = {
		"filters": serialize_filters(parsed.filters),
		"originalQuery": parsed.original_query,
	}
	if parsed.interpreted_as is not None:
		payload["interpretedAs"] = parsed.interpreted_as
	return payload
