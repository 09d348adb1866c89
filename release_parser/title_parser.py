"""
Title parsing module.
Turns a raw listing title such as
"Panchayat (2025) Season 4 Hindi Complete Amazon Original WEB Series 480p | 720p"
into a ParsedTitleRecord: display title, machine title, canonical key, type,
year, season/part/volume/episode, update info, languages, qualities, platform
and a confidence score.
"""

from typing import Iterable, List, Optional  # type annotations

from loguru import logger  # console logging

from .config import ParserConfig  # shared read-only vocabularies
from .models import ParsedTitleRecord  # structured result
from .classifier import ContentClassifier, YearExtractor  # type and year
from .title_boundary import BoundaryTitleExtractor  # display title
from .normalizer import KeyNormalizer  # machine title
from .metadata import MetadataExtractor  # numbers, languages, qualities, platform
from .update_info import UpdateInfoExtractor  # added/complete annotations
from .confidence import ConfidenceScorer  # completeness score


class TitleParser:
	"""
	Runs the extraction steps in a fixed order and assembles the record.
	Every component reads the same ParserConfig, which never changes after
	construction, so one parser may be shared between threads.
	"""

	def __init__(
		self,
		config: Optional[ParserConfig] = None,
		title_extractor: Optional[BoundaryTitleExtractor] = None,
		scorer: Optional[ConfidenceScorer] = None,
	):
		self.config = config or ParserConfig()
		self.classifier = ContentClassifier()
		self.year_extractor = YearExtractor()
		self.title_extractor = title_extractor or BoundaryTitleExtractor(self.config)
		self.normalizer = KeyNormalizer(self.config)
		self.metadata_extractor = MetadataExtractor(self.config)
		self.update_extractor = UpdateInfoExtractor()
		self.scorer = scorer or ConfidenceScorer()
		logger.debug(
			f"[Parser] Initialized with {len(self.config.platforms)} platforms, "
			f"{len(self.config.languages)} languages, {len(self.config.qualities)} qualities"
		)

	def parse(self, raw_title: str) -> Optional[ParsedTitleRecord]:
		"""Main entry: None for empty or non-string input, otherwise a fully populated record."""
		if not raw_title:  # empty input guard
			return None
		if not isinstance(raw_title, str):
			logger.warning(f"[Parser] Ignoring non-string title of type {type(raw_title).__name__}")
			return None

		title = raw_title.strip()
		logger.debug(f"[Parser] Input title: '{title}'")

		# 1) Content type
		content_type = self.classifier.classify(title)

		# 2) Release year
		year = self.year_extractor.extract(title)

		# 3) Display title
		display_title = self.title_extractor.extract(title)

		# 4) Machine title
		machine_title = self.normalizer.normalize(display_title)

		# 5) Numbers, languages, qualities, platform
		meta = self.metadata_extractor.extract(title)

		# 6) Added / complete annotations
		update_info = self.update_extractor.extract(title)

		# 7) Canonical key
		canonical_key = f"{machine_title}|{year}|{content_type}"

		# 8) Confidence
		confidence = self.scorer.score(display_title, year, content_type, meta.qualities, meta.languages)

		record = ParsedTitleRecord(
			display_title=display_title,
			machine_title=machine_title,
			canonical_key=canonical_key,
			type=content_type,
			year=year,
			season=meta.season,
			part=meta.part,
			volume=meta.volume,
			episode=meta.episode,
			update_info=update_info,
			languages=meta.languages,
			qualities=meta.qualities,
			platform=meta.platform,
			confidence=confidence,
		)
		logger.debug(
			f"[Parser] Parsed result | key={record.canonical_key} | "
			f"display='{record.display_title}' | confidence={record.confidence}"
		)
		return record

	def parse_many(self, titles: Iterable[str]) -> List[ParsedTitleRecord]:
		"""Parse several titles, dropping the ones that yield no record."""
		records = []
		for title in titles:
			record = self.parse(title)
			if record is not None:
				records.append(record)
		logger.debug(f"[Parser] Parsed {len(records)} records")
		return records


_default_parser = TitleParser()  # built once at import, shared and read-only


def parse(raw_title: str) -> Optional[ParsedTitleRecord]:
	"""Parse with the default vocabularies."""
	return _default_parser.parse(raw_title)
