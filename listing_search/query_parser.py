"""
Query parsing module.
Turns a free-text listing search ("Find me Lexus CT200h after 2012 with 100k or below mileage
near Auckland") into structured filters plus a short "interpreted as" summary.
Pure and deterministic: no I/O, no shared state, never raises for string input.
"""

from typing import List, Optional  # type annotations

from loguru import logger  # console logging

from .config import INTERPRETED_SEPARATOR  # joins summary fragments
from .entities import (  # gazetteer stages
	extract_category,
	extract_color,
	extract_condition,
	extract_location,
	extract_make,
	extract_model,
)
from .models import ParsedQuery, SearchFilters  # structured query representation
from .query_cleaner import clean_query  # residual keyword query
from .ranges import (  # numeric range stages
	extract_exact_year,
	extract_odometer_range,
	extract_price_range,
	extract_year_range,
)


class QueryParser:
	"""
	Parses natural language listing searches into a ParsedQuery.
	Each stage reads the lowercased query independently; the numeric stages share the
	character spans they consumed so a figure is read as a year, a price or an odometer
	value, never two of them.
	Category detection exists but is off by default so semantic search stays cross-category.
	"""

	def __init__(self, separator: str = INTERPRETED_SEPARATOR, detect_category: bool = False):
		self.separator = separator  # between "Label: value" fragments
		self.detect_category = detect_category  # opt-in category inference
		logger.debug(f"[Parser] Initialized (detect_category={detect_category})")

	def parse(self, query: Optional[str]) -> ParsedQuery:
		"""Main entry: produce a ParsedQuery from a raw string."""
		if query is None:  # treat a missing value like an empty search
			query = ""

		q = query.lower()  # every stage works on the lowercased text
		logger.debug(f"[Parser] Input query: '{query}'")

		# 1) Make, then model from the words after it
		make = extract_make(q)
		model = extract_model(q, make)

		# 2) Numeric ranges. Odometer goes first because units and vehicle context make it the
		#    most specific reading; explicit year rules come next; price skips both; a bare
		#    year is only considered once price has claimed its digits.
		odometer = extract_odometer_range(q)
		years = extract_year_range(q, claimed=odometer.spans, include_exact=False)
		price = extract_price_range(q, claimed=odometer.spans + years.spans)
		if not years.spans:
			years = extract_exact_year(q, claimed=odometer.spans + price.spans)

		# 3) Place, color, condition
		location = extract_location(q)
		color = extract_color(q)
		condition = extract_condition(q)

		# 4) Category inference stays disabled unless asked for
		category = extract_category(q) if self.detect_category else None

		filters = SearchFilters(
			query=clean_query(query),
			make=make,
			model=model,
			year_min=years.min,
			year_max=years.max,
			price_min=price.min,
			price_max=price.max,
			odometer_min=odometer.min,
			odometer_max=odometer.max,
			location=location,
			color=color,
			condition=(condition,) if condition else None,
			category=category,
		)
		parsed = ParsedQuery(
			filters=filters,
			interpreted_as=self.build_interpreted_as(filters),
			original_query=query,
		)
		logger.debug(f"[Parser] Parsed result | {parsed.filters} | interpreted_as={parsed.interpreted_as}")
		return parsed

	def build_interpreted_as(self, filters: SearchFilters) -> Optional[str]:
		"""Human-readable summary of the filters that were set, or None when there are none."""
		parts: List[str] = []
		if filters.make:
			parts.append(f"Make: {filters.make}")
		if filters.model:
			parts.append(f"Model: {filters.model}")
		if filters.year_min is not None:
			parts.append(f"From: {filters.year_min}")
		if filters.year_max is not None:
			parts.append(f"To: {filters.year_max}")
		if filters.price_min is not None:
			parts.append(f"Min price: ${filters.price_min:,}")
		if filters.price_max is not None:
			parts.append(f"Max price: ${filters.price_max:,}")
		if filters.odometer_min is not None:
			parts.append(f"Min odometer: {filters.odometer_min:,} km")
		if filters.odometer_max is not None:
			parts.append(f"Max odometer: {filters.odometer_max:,} km")
		if filters.location:
			parts.append(f"Location: {filters.location}")
		if filters.color:
			parts.append(f"Color: {filters.color}")
		if filters.condition:
			parts.append(f"Condition: {', '.join(filters.condition)}")
		if filters.category:
			parts.append(f"Category: {filters.category}")
		return self.separator.join(parts) if parts else None


_DEFAULT_PARSER = QueryParser()


def interpret(query: Optional[str]) -> ParsedQuery:
	"""Parse with the shared default parser."""
	return _DEFAULT_PARSER.parse(query)
