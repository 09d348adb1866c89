"""
Classification module.
Decides whether a listing is a movie or a series and finds its release year.
"""

from typing import Union  # year is an int or the unknown sentinel

from loguru import logger  # console logging

from . import patterns  # shared compiled regexes
from .models import MOVIE, SERIES, UNKNOWN_YEAR  # sentinels


class ContentClassifier:
	"""Series when any season/episode/series marker is present, movie otherwise."""

	def classify(self, title: str) -> str:
		m = patterns.SERIES_MARKERS.search(title)
		if m:
			logger.debug(f"[Classifier] Series marker '{m.group(0)}' at {m.start()}")
			return SERIES
		return MOVIE


class YearExtractor:
	"""
	Returns the leftmost 19xx/20xx token. In listing titles the first year-looking
	token is the release year; later digit groups are sizes or bitrates.
	"""

	def extract(self, title: str) -> Union[int, str]:
		m = patterns.YEAR.search(title)
		if m:
			logger.debug(f"[Classifier] Year token '{m.group(0)}' at {m.start()}")
			return int(m.group(0))
		return UNKNOWN_YEAR
