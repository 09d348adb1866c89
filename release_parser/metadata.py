"""
Metadata extraction module.
Pulls season/episode/part/volume numbers, audio languages, quality tags and the
source platform out of the full raw title. Runs on the raw title rather than the
display title because most metadata sits after the title boundary.
"""

from dataclasses import dataclass  # result container
from typing import Optional, Tuple, Union  # type annotations

from loguru import logger  # console logging

from . import patterns  # shared compiled regexes
from .config import ParserConfig  # vocabularies
from .models import UNKNOWN_PLATFORM  # platform fallback


@dataclass
class TitleMetadata:
	season: Union[None, int, Tuple[int, ...]] = None  # 4 or (1, 2, 3, 4, 5)
	episode: Optional[int] = None
	part: Optional[int] = None
	volume: Optional[int] = None
	languages: Tuple[str, ...] = ()  # vocabulary order
	qualities: Tuple[str, ...] = ()  # vocabulary order
	platform: str = UNKNOWN_PLATFORM


def first_number(pattern, text: str) -> Optional[int]:
	"""Integer captured by the first match of a one-group pattern, if any."""
	m = pattern.search(text)
	return int(m.group(1)) if m else None


class MetadataExtractor:
	"""
	Vocabulary-driven extraction. Patterns for the configured qualities are
	compiled once here; language and platform checks are plain substring tests.
	"""

	def __init__(self, config: Optional[ParserConfig] = None):
		self.config = config or ParserConfig()
		self._quality_res = [(q, patterns.whole_word(q)) for q in self.config.qualities]
		self._language_keys = [(lang, lang.lower()) for lang in self.config.languages]

	def extract(self, title: str) -> TitleMetadata:
		meta = TitleMetadata(
			season=self.extract_season(title),
			episode=first_number(patterns.EPISODE_NUMBER, title),
			part=first_number(patterns.PART_NUMBER, title),
			volume=first_number(patterns.VOLUME_NUMBER, title),
			languages=self.extract_languages(title),
			qualities=self.extract_qualities(title),
			platform=self.extract_platform(title),
		)
		logger.debug(
			f"[Metadata] season={meta.season} | episode={meta.episode} | part={meta.part} | "
			f"volume={meta.volume} | platform={meta.platform}"
		)
		return meta

	def extract_season(self, title: str) -> Union[None, int, Tuple[int, ...]]:
		# Range first: "Season 1-5", "S01-05"
		r = patterns.SEASON_RANGE.search(title)
		if r:
			start, end = int(r.group(1)), int(r.group(2))
			if start > end:  # normalize order
				start, end = end, start
			if end - start <= self.config.max_season_span:
				return tuple(range(start, end + 1))
			logger.warning(f"[Metadata] Season range {start}-{end} wider than {self.config.max_season_span}, keeping season {start}")
			return start
		return first_number(patterns.SEASON_SINGLE, title)

	def extract_languages(self, title: str) -> Tuple[str, ...]:
		lowered = title.lower()
		return tuple(lang for lang, key in self._language_keys if key in lowered)

	def extract_qualities(self, title: str) -> Tuple[str, ...]:
		return tuple(q for q, regex in self._quality_res if regex.search(title))

	def extract_platform(self, title: str) -> str:
		lowered = title.lower()
		# Vocabulary order is the priority order
		for platform in self.config.platforms:
			if platform in lowered:
				return self.config.display_platform(platform)
		return UNKNOWN_PLATFORM
