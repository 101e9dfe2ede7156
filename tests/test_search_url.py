"""Tests for the search URL builder, location preference and filter-state reader."""

from urllib.parse import parse_qs, urlsplit

from listing_search.config import ALL_NZ_LOCATION_LABEL
from listing_search.models import SearchFilters
from listing_search.query_parser import QueryParser
from listing_search.search_url import (
	build_search_url,
	filters_from_params,
	filters_from_query_string,
	resolve_search_location,
)


def _params(url):
	return parse_qs(urlsplit(url).query)


def test_basic_url():
	assert build_search_url("laptop") == "/search?q=laptop&original=laptop"


def test_blank_query_returns_search_path():
	assert build_search_url("   ") == "/search"
	assert build_search_url("") == "/search"


def test_parsed_location_is_included():
	url = build_search_url("coffee machine in Auckland")
	assert url.startswith("/search?q=coffee+machine")
	assert "location=Auckland" in url


def test_preferred_location_fallback():
	assert "location=Wellington" in build_search_url("sony camera", preferred_location="Wellington")
	assert "location=" not in build_search_url("sony camera", preferred_location=ALL_NZ_LOCATION_LABEL)
	assert "location=Auckland" in build_search_url("Sofa in Auckland", preferred_location="Wellington")


def test_full_parameter_set(parser: QueryParser):
	url = build_search_url("  Toyota Camry after 2015 under $20k  ", parser=parser)
	params = _params(url)
	assert params == {
		"q": ["camry after 2015"],
		"original": ["Toyota Camry after 2015 under $20k"],
		"make": ["Toyota"],
		"model": ["camry"],
		"yearMin": ["2015"],
		"priceMax": ["20000"],
		"interpreted": ["Make: Toyota · Model: camry · From: 2015 · Max price: $20,000"],
	}
	# fixed parameter order
	keys = [pair.split("=")[0] for pair in urlsplit(url).query.split("&")]
	assert keys == ["q", "original", "make", "model", "yearMin", "priceMax", "interpreted"]


def test_condition_and_custom_path():
	url = build_search_url("used white ute in Nelson", search_path="/listings")
	assert url.startswith("/listings?")
	params = _params(url)
	assert params["condition"] == ["Fair"]
	assert params["color"] == ["White"]
	assert params["location"] == ["Nelson"]


def test_resolve_search_location():
	assert resolve_search_location("Wellington", "Auckland") == "Wellington"
	assert resolve_search_location("", "Auckland") == "Auckland"
	assert resolve_search_location(None, "  Auckland  ") == "Auckland"
	assert resolve_search_location("", ALL_NZ_LOCATION_LABEL) is None
	assert resolve_search_location("", None) is None
	assert resolve_search_location("   ", "") is None


def test_filters_from_params_aliases():
	filters = filters_from_params({
		"q": "camry",
		"make": "Toyota",
		"minPrice": "100",
		"price_max": "500",
		"year_min": "2010",
		"yearMax": "2018",
		"odometerMax": "90000",
		"condition": ["New", "Good,Fair"],
	})
	assert filters == SearchFilters(
		query="camry",
		make="Toyota",
		price_min=100,
		price_max=500,
		year_min=2010,
		year_max=2018,
		odometer_max=90000,
		condition=("New", "Good", "Fair"),
	)


def test_filters_from_params_skips_bad_values():
	filters = filters_from_params({"priceMin": "cheap", "priceMax": "1500.0", "make": "  ", "condition": ""})
	assert filters.price_min is None
	assert filters.price_max == 1500
	assert filters.make is None
	assert filters.condition is None
	assert filters.query == ""


def test_filters_from_params_rejects_exponents_and_oversized_numbers():
	filters = filters_from_params({
		"priceMin": "1e5000",
		"priceMax": "1e999999999",
		"yearMin": "-2015",
		"odometerMax": "9" * 5000,
		"odometerMin": "1,500",
	})
	assert filters == SearchFilters(query="")
	assert filters_from_params({"priceMax": "9" * 18}).price_max == int("9" * 18)


def test_largest_parsed_amount_survives_url_round_trip(parser: QueryParser):
	text = "boat under $999999999999m"
	url = build_search_url(text, parser=parser)
	assert filters_from_query_string(url).price_max == 999999999999000000


def test_search_url_rehydrates_parser_filters(parser: QueryParser):
	text = "Find me Lexus CT200h after 2012 with 100k or below mileage near Auckland"
	url = build_search_url(text, parser=parser)
	assert filters_from_query_string(url) == parser.parse(text).filters
