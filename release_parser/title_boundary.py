"""
Display title extraction.
Cuts the raw title at the earliest metadata boundary (year, season, episode) and
then strips trailing noise (separators, platform phrases, dangling brackets)
until nothing more changes.

Both steps are driven by ordered rule lists so the priority between rules is
data that callers and tests can inspect or replace.
"""

import re  # cleanup patterns built from the platform vocabulary
from dataclasses import dataclass  # rule objects
from typing import List, Optional, Sequence  # type hints

from loguru import logger  # console logging

from . import patterns  # shared compiled regexes
from .config import ParserConfig  # platform vocabulary


@dataclass(frozen=True)
class BoundaryRule:
	"""A pattern whose first match marks where release metadata begins."""
	name: str
	pattern: re.Pattern

	def find(self, text: str) -> Optional[int]:
		m = self.pattern.search(text)
		return m.start() if m else None


@dataclass(frozen=True)
class CleanupRule:
	"""A pattern removed once from the candidate title, followed by a trim."""
	name: str
	pattern: re.Pattern

	def strip(self, text: str) -> str:
		return self.pattern.sub('', text, count=1).strip()


DEFAULT_BOUNDARY_RULES: Sequence[BoundaryRule] = (
	BoundaryRule('paren_year', patterns.PAREN_YEAR),  # (2025)
	BoundaryRule('bracket_year', patterns.BRACKET_YEAR),  # [2025]
	BoundaryRule('season', patterns.SEASON_TOKEN),  # Season 5, S05
	BoundaryRule('episode', patterns.EPISODE_TOKEN),  # Episode 5, Ep 5
)


def platform_phrase_rule(config: ParserConfig) -> CleanupRule:
	"""
	Trailing "<platform> [original|series|web series|tv show]", optionally after a
	hyphen or pipe. Suffix words are not platform names on their own here.
	"""
	names = [p for p in config.platforms if p not in config.platform_suffixes]
	suffixes = patterns.any_word(config.platform_suffixes)
	if not names:
		# (?!) never matches
		return CleanupRule('platform_phrase', re.compile(r'(?!)'))
	regex = r'\s*[-|]?\s*\b(?:' + patterns.any_word(names) + r')\s*(?:' + suffixes + r')?\s*$'
	return CleanupRule('platform_phrase', re.compile(regex, patterns.FLAGS))


def default_cleanup_rules(config: ParserConfig) -> List[CleanupRule]:
	return [
		CleanupRule('trailing_separator', patterns.TRAILING_SEPARATOR),
		platform_phrase_rule(config),
		CleanupRule('trailing_open_bracket', patterns.TRAILING_OPEN_BRACKET),
	]


class BoundaryTitleExtractor:
	"""
	Produces the display title from a raw listing title.
	The result may be empty when the title starts with metadata.
	"""

	def __init__(
		self,
		config: Optional[ParserConfig] = None,
		boundary_rules: Optional[Sequence[BoundaryRule]] = None,
		cleanup_rules: Optional[Sequence[CleanupRule]] = None,
	):
		config = config or ParserConfig()
		self.boundary_rules = tuple(boundary_rules if boundary_rules is not None else DEFAULT_BOUNDARY_RULES)
		self.cleanup_rules = tuple(cleanup_rules if cleanup_rules is not None else default_cleanup_rules(config))

	def extract(self, title: str) -> str:
		cutoff = self.find_cutoff(title)
		candidate = title[:cutoff].strip()
		logger.debug(f"[Boundary] Cutoff {cutoff} -> candidate '{candidate}'")
		return self.clean(candidate)

	def find_cutoff(self, title: str) -> int:
		"""Leftmost start offset among all boundary rules, or len(title)."""
		cutoff = len(title)
		for rule in self.boundary_rules:
			index = rule.find(title)
			if index is not None and index < cutoff:
				cutoff = index
		return cutoff

	def clean(self, candidate: str) -> str:
		text = patterns.DOWNLOAD_PREFIX.sub('', candidate, count=1)

		# Every accepted change shortens the text, so the loop ends after at most len(text) passes
		changed = True
		while changed:
			changed = False
			for rule in self.cleanup_rules:
				stripped = rule.strip(text)
				if len(stripped) < len(text):
					logger.debug(f"[Boundary] {rule.name}: '{text}' -> '{stripped}'")
					text = stripped
					changed = True
		return text
