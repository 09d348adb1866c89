"""
Compiled regular expressions shared by the extractors.
All of them use FLAGS; vocabulary-driven patterns are built at runtime with
whole_word and any_word.
"""

import re
from typing import Iterable


# Word boundaries follow ASCII rules so accented letters never glue onto a keyword
FLAGS = re.IGNORECASE | re.ASCII

# Separator allowed between a keyword and its number: "Part-2", "Vol. 1", "Part – 2"
_NUM_SEP = r'\s*[-.:–—]?\s*'

# Content classification markers
SERIES_MARKERS = re.compile(r'\b(?:season|s\d+|ep|episode|series)\b', FLAGS)

# 1900-2099, never the prefix of a longer token such as 1080p
YEAR = re.compile(r'\b(?:19|20)\d{2}\b', FLAGS)

# Title boundaries
PAREN_YEAR = re.compile(r'\(\s*(?:19|20)\d{2}\s*\)', FLAGS)
BRACKET_YEAR = re.compile(r'\[\s*(?:19|20)\d{2}\s*\]', FLAGS)
SEASON_TOKEN = re.compile(r'\b(?:season|s\d+)\b', FLAGS)
EPISODE_TOKEN = re.compile(r'\b(?:episode|ep\s*\d+)\b', FLAGS)

# Title cleanup
DOWNLOAD_PREFIX = re.compile(r'^download\s+', FLAGS)
TRAILING_SEPARATOR = re.compile(r'[-|:–—]\s*$', FLAGS)
TRAILING_OPEN_BRACKET = re.compile(r'[(\[]$', FLAGS)

# Numbered metadata
SEASON_RANGE = re.compile(r'\b(?:season|s)\s*(\d+)\s*-\s*(\d+)\b', FLAGS)
SEASON_SINGLE = re.compile(r'\b(?:season|s)\s*(\d+)\b', FLAGS)
EPISODE_NUMBER = re.compile(r'\b(?:episode|ep)' + _NUM_SEP + r'(\d+)\b', FLAGS)
PART_NUMBER = re.compile(r'\bpart' + _NUM_SEP + r'(\d+)\b', FLAGS)
VOLUME_NUMBER = re.compile(r'\b(?:volume|vol)' + _NUM_SEP + r'(\d+)\b', FLAGS)

# Update annotations
ADDED_SPAN = re.compile(r'[\[(][^\])]*added[^\])]*[\])]?', FLAGS)
ADDED_WORD = re.compile(r'added', FLAGS)
PART_LIST = re.compile(r'\bpart' + _NUM_SEP + r'\d+\s*&\s*\d+', FLAGS)
PART_ADDED = re.compile(r'\bpart\s*added\b', FLAGS)
COMPLETE = re.compile(r'\b(?:complete|all episodes)\b', FLAGS)


def whole_word(term: str) -> re.Pattern:
	"""Case-insensitive whole-word pattern for a literal vocabulary entry."""
	return re.compile(r'\b' + re.escape(term) + r'\b', FLAGS)


def any_word(terms: Iterable[str]) -> str:
	"""Alternation of escaped literals, longest first so 'web series' beats 'series'."""
	return '|'.join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
