"""Tests for the gazetteer stages."""

from listing_search.entities import (
	capitalize_first,
	extract_category,
	extract_color,
	extract_condition,
	extract_location,
	extract_make,
	extract_model,
	title_case,
)


def test_casing_helpers():
	assert capitalize_first("land rover") == "Land rover"
	assert capitalize_first("") == ""
	assert title_case("palmerston north") == "Palmerston North"
	assert title_case("bay of plenty") == "Bay Of Plenty"


def test_extract_make():
	assert extract_make("find me a land rover") == "Land rover"
	assert extract_make("alfa romeo giulia") == "Alfa romeo"
	assert extract_make("jeep or toyota") == "Toyota"
	assert extract_make("sony camera") is None
	assert extract_make("") is None


def test_extract_model():
	assert extract_model("bmw 3 series near auckland", "Bmw") == "3 series"
	assert extract_model("land rover defender 110", "Land rover") == "defender 110"
	assert extract_model("toyota under $20k", "Toyota") is None
	assert extract_model("toyota corolla", None) is None
	assert extract_model("honda civic, 2015", "Honda") == "civic"


def test_extract_location():
	assert extract_location("from tauranga") == "Tauranga"
	assert extract_location("flat in mount eden") == "Mount Eden"
	assert extract_location("house in bay of plenty") == "Bay Of Plenty"
	assert extract_location("cars in the shed") is None


def test_extract_color():
	assert extract_color("gold watch") == "Gold"
	assert extract_color("black and white tv") == "White"  # table order
	assert extract_color("golden retriever") is None


def test_extract_condition():
	assert extract_condition("pristine leather sofa") == "Like New"
	assert extract_condition("well maintained ute") == "Good"
	assert extract_condition("retro lamp") == "Like New"
	assert extract_condition("kayak") is None


def test_extract_category():
	assert extract_category("ps5 console") == "electronics"
	assert extract_category("golf clubs") == "sports"
	assert extract_category("washing machine") == "home"
	assert extract_category("campervan") == "vehicles"
	assert extract_category("antique spoon") is None
