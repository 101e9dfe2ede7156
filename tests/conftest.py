"""Shared pytest fixtures."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from listing_search.query_parser import QueryParser


@pytest.fixture(scope="session")
def parser() -> QueryParser:
	return QueryParser()
