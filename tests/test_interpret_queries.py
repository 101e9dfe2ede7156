"""Tests for the batch interpretation script."""

import json

from scripts.interpret_queries import DEFAULT_INPUT, interpret_file, main, read_queries


def test_read_queries_skips_blank_and_comment_lines(tmp_path):
	path = tmp_path / "queries.txt"
	path.write_text("# vehicles\nToyota Camry\n\n   \nSofa in Auckland\n", encoding="utf-8")
	assert list(read_queries(path)) == ["Toyota Camry", "Sofa in Auckland"]


def test_interpret_file(tmp_path):
	path = tmp_path / "queries.txt"
	path.write_text("Toyota Camry\nrandom stuff\n", encoding="utf-8")
	results = interpret_file(path)
	assert results[0]["filters"]["make"] == "Toyota"
	assert results[0]["interpretedAs"] == "Make: Toyota · Model: camry"
	assert results[1] == {"filters": {"query": "random stuff"}, "originalQuery": "random stuff"}


def test_main_writes_json_lines(tmp_path):
	out = tmp_path / "out" / "parsed.jsonl"
	assert main(["--input", str(DEFAULT_INPUT), "--output", str(out)]) == 0
	lines = out.read_text(encoding="utf-8").splitlines()
	assert len(lines) == len(list(read_queries(DEFAULT_INPUT)))
	first = json.loads(lines[0])
	assert first["originalQuery"] == "Toyota Camry"


def test_main_missing_input(tmp_path):
	assert main(["--input", str(tmp_path / "nope.txt")]) == 1
