"""
Data models for the listing search interpreter.
Defines the structured filters, the parse result, and the numeric range produced by each range stage.
"""
# Frozen dataclasses: every filter set and parse result is an immutable value
from dataclasses import dataclass
from typing import Optional, Tuple  # absent filters and span pairs


Span = Tuple[int, int]  # (start, end) character offsets into the lowercased query


@dataclass(frozen=True)
class SearchFilters:
	"""
	The structured filter set handed to the search backend.
	Everything is optional except the residual keyword query.
	"""
	query: str  # residual free-text after removing recognised tokens
	make: Optional[str] = None  # manufacturer, first letter capitalised (e.g. "Toyota", "Bmw")
	model: Optional[str] = None  # lowercase 1-2 word model name (e.g. "3 series")
	year_min: Optional[int] = None  # earliest model year
	year_max: Optional[int] = None  # latest model year
	price_min: Optional[int] = None  # lowest price, currency-agnostic
	price_max: Optional[int] = None  # highest price, currency-agnostic
	odometer_min: Optional[int] = None  # lowest odometer reading in km
	odometer_max: Optional[int] = None  # highest odometer reading in km
	location: Optional[str] = None  # title-cased place name (e.g. "Palmerston North")
	color: Optional[str] = None  # capitalised color (e.g. "Grey")
	condition: Optional[Tuple[str, ...]] = None  # canonical condition labels, at most one today
	category: Optional[str] = None  # never set by the default parser


@dataclass(frozen=True)
class ParsedQuery:
	"""
	Represents the meaning we extract from the user's search phrase.
	Built once per input and never mutated.
	"""
	filters: SearchFilters  # structured filters
	interpreted_as: Optional[str]  # "Make: Toyota · Model: camry", None when nothing was detected
	original_query: str  # the text exactly as the user typed it


@dataclass(frozen=True)
class NumericRange:
	"""
	Output of a range stage: optional bounds plus the query spans that produced them.
	Spans let later stages avoid reading the same digits a second time.
	"""
	min: Optional[int] = None
	max: Optional[int] = None
	spans: Tuple[Span, ...] = ()

	@property
	def is_empty(self) -> bool:
		return self.min is None and self.max is None

	def consistent(self) -> "NumericRange":
		"""Return self, or a range without bounds (spans kept) when both bounds exist and min > max."""
		if self.min is not None and self.max is not None and self.min > self.max:
			return NumericRange(spans=self.spans)
		return self
