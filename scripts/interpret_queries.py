"""
Interpret a file of search phrases in bulk.

This script:
1) Reads one query per line from data/sample_queries.txt (or --input)
2) Runs each through the QueryParser
3) Writes one JSON object per line (JSON Lines) to stdout or --output

Usage:
    python -m scripts.interpret_queries
    python -m scripts.interpret_queries --input my_queries.txt --output parsed.jsonl

Blank lines and lines starting with '#' are skipped.
"""

import argparse  # command-line flags
import json  # JSON Lines output
import sys  # stdout fallback
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths
from typing import Iterator, List, Optional

from loguru import logger  # console logging

from listing_search.config import configure_logging  # log level from environment
from listing_search.query_parser import QueryParser  # query interpreter
from listing_search.utils import serialize_parsed_query  # dict payload


ROOT = Path(__file__).resolve().parents[1]  # project root
DEFAULT_INPUT = ROOT / 'data' / 'sample_queries.txt'  # bundled examples


def read_queries(path: Path) -> Iterator[str]:
	with path.open('r', encoding='utf-8') as f:
		for line in f:
			line = line.strip()
			if not line or line.startswith('#'):
				continue
			yield line


def interpret_file(path: Path, parser: Optional[QueryParser] = None) -> List[dict]:
	"""Parse every query in path and return the serialized results in file order."""
	parser = parser or QueryParser()
	return [serialize_parsed_query(parser.parse(q)) for q in read_queries(path)]


def main(argv: Optional[List[str]] = None):
	configure_logging()
	ap = argparse.ArgumentParser(description="Interpret search phrases into structured filters (JSON Lines).")
	ap.add_argument('--input', type=Path, default=DEFAULT_INPUT, help="text file, one query per line")
	ap.add_argument('--output', type=Path, default=None, help="JSONL file to write (default: stdout)")
	args = ap.parse_args(argv)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Interpret Search Queries")
	logger.info("=" * 60)

	if not args.input.exists():
		logger.error(f"[Script] Input file not found: {args.input}")
		return 1

	# 1) Parse
	logger.info(f"[1/2] Interpreting queries from {args.input}...")
	t0 = time.time()  # start timer
	results = interpret_file(args.input)
	with_filters = sum(1 for r in results if 'interpretedAs' in r)
	logger.info(f"[OK] {len(results)} queries in {(time.time() - t0) * 1000:.1f} ms; {with_filters} with filters")

	# 2) Write
	logger.info("[2/2] Writing results...")
	lines = [json.dumps(r, ensure_ascii=False) for r in results]
	if args.output:
		args.output.parent.mkdir(parents=True, exist_ok=True)  # ensure exists
		args.output.write_text("\n".join(lines) + "\n", encoding='utf-8')
		logger.info(f"[OK] Saved to {args.output}")
	else:
		for line in lines:
			sys.stdout.write(line + "\n")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())
