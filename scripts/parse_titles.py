"""
Parse a file of listing titles and print the structured records.

This script:
1) Loads vocabulary overrides ($RELEASE_PARSER_CONFIG or --config), if any
2) Loads titles from data/sample_titles.txt (or the given file)
3) Parses every title
4) Prints one JSON record per line on stdout

Usage:
    python -m scripts.parse_titles [titles.txt|titles.jsonl] [--config vocab.json] [--verbose]
"""

import sys  # stdout/stderr sinks
import json  # record output
import time  # measure step timings
import argparse  # command-line options
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from release_parser.config import load_config  # vocabularies
from release_parser.data_loader import TitleLoader  # title ingestion
from release_parser.title_parser import TitleParser  # extraction pipeline


def main():
	root = Path(__file__).resolve().parents[1]  # project root
	cli = argparse.ArgumentParser(description="Parse release listing titles")
	cli.add_argument('path', nargs='?', default=str(root / 'data' / 'sample_titles.txt'), help="Titles file (.txt or .jsonl)")
	cli.add_argument('--config', default=None, help="JSON vocabulary override file")
	cli.add_argument('--verbose', action='store_true', help="Show per-step debug logs")
	args = cli.parse_args()

	# Logs go to stderr so stdout stays pure JSON
	logger.remove()
	logger.add(sys.stderr, level='DEBUG' if args.verbose else 'INFO')

	logger.info("=" * 60)
	logger.info("Release Title Parser")
	logger.info("=" * 60)

	# 1) Configuration
	logger.info("[1/3] Loading configuration...")
	parser = TitleParser(load_config(args.config))

	# 2) Titles
	logger.info("[2/3] Loading titles...")
	titles = TitleLoader().load_titles(args.path)

	# 3) Parse and print
	logger.info("[3/3] Parsing...")
	t0 = time.time()  # start timer
	records = parser.parse_many(titles)
	for record in records:
		print(json.dumps(record.to_dict(), ensure_ascii=False))
	logger.info(f"[OK] Parsed {len(records)} titles in {(time.time() - t0) * 1000:.2f} ms")
	logger.info("=" * 60)


if __name__ == '__main__':
	main()
