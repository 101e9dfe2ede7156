"""Tests for the residual keyword query."""

import pytest

from listing_search.query_cleaner import CONDITION_PHRASES, clean_query


@pytest.mark.parametrize("query, expected", [
	("Find me a Toyota Camry in Auckland", "camry"),
	("looking for a sofa", "sofa"),
	("Sony camera", "sony camera"),
	("Canon DSLR near Wellington", "canon dslr"),
	("brand new sofa", "sofa"),
	("like new couch", "couch"),
	("headphones under $200", "headphones"),
	("bike between $100 and $300", "bike"),
	("camera $500", "camera"),
	("$5k camera", "camera"),
	("$5 kettle", "kettle"),
	("Dining table in Christchurch", "dining table"),
	("Mountain bike", "mountain bike"),
	("Toyota    Camry", "camry"),
])
def test_clean_query(query, expected):
	assert clean_query(query) == expected


def test_nothing_left_returns_input():
	assert clean_query("find me the a an") == "find me the a an"
	assert clean_query("Toyota in Auckland") == "Toyota in Auckland"
	assert clean_query("") == ""


def test_condition_phrases_longest_first():
	lengths = [len(p) for p in CONDITION_PHRASES]
	assert lengths == sorted(lengths, reverse=True)
	assert CONDITION_PHRASES.index("brand new") < CONDITION_PHRASES.index("new")
