"""
Configuration module.
Holds the vocabularies every extractor reads (stopwords, roman numerals, platforms,
languages, qualities) and loads catalog-specific overrides from a JSON file.
A ParserConfig is read-only once built, so one instance can back many parsers.
"""

import os  # env-based config file lookup
import json  # override files are plain JSON
from dataclasses import dataclass, field, replace  # immutable settings container
from pathlib import Path  # filesystem-safe paths
from types import MappingProxyType  # read-only dict views
from typing import Dict, List, Mapping, Optional, Tuple  # type hints

from loguru import logger  # console logging
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator  # override file schema


CONFIG_ENV_VAR = 'RELEASE_PARSER_CONFIG'  # path to a JSON override file

DEFAULT_STOPWORDS: Tuple[str, ...] = ('the', 'a', 'an')
DEFAULT_NUMERALS: Dict[str, int] = {
	'i': 1, 'ii': 2, 'iii': 3, 'iv': 4, 'v': 5,
	'vi': 6, 'vii': 7, 'viii': 8, 'ix': 9, 'x': 10,
}
# Order matters: the first platform found in a title wins
DEFAULT_PLATFORMS: Tuple[str, ...] = (
	'netflix', 'amazon', 'hulu', 'disney', 'hotstar', 'zee5', 'sony',
	'appletv', 'hbo', 'prime', 'original', 'series',
)
DEFAULT_PLATFORM_DISPLAY: Dict[str, str] = {'appletv': 'AppleTV', 'hbo': 'HBO', 'zee5': 'Zee5'}
# Words that may trail a platform name ("Netflix Original", "Amazon WEB Series")
DEFAULT_PLATFORM_SUFFIXES: Tuple[str, ...] = ('original', 'series', 'web series', 'tv show')
DEFAULT_LANGUAGES: Tuple[str, ...] = (
	'Hindi', 'English', 'Tamil', 'Telugu', 'Malayalam', 'Kannada', 'Korean',
	'Japanese', 'Chinese', 'Spanish', 'French', 'Dual Audio', 'Multi Audio',
)
DEFAULT_QUALITIES: Tuple[str, ...] = (
	'480p', '720p', '1080p', '2160p', '4K', 'HDR', 'SDR', 'WEB-DL', 'BluRay', 'HDTC', 'CAM',
)
# "S1-99999999" is a typo or an ID, not a season pack
DEFAULT_MAX_SEASON_SPAN = 100


class ConfigurationError(ValueError):
	"""Raised when a vocabulary override file or value is unusable."""


def _clean_entries(name: str, values, lower: bool = False) -> Tuple[str, ...]:
	entries = []
	for value in values:
		text = str(value).strip()
		if not text:  # empty entries would match everywhere
			raise ConfigurationError(f"{name}: entries must be non-empty strings")
		entries.append(text.lower() if lower else text)
	return tuple(entries)


@dataclass(frozen=True)
class ParserConfig:
	"""
	Vocabularies used by the extraction pipeline.
	Sequences are stored as tuples and mappings as read-only proxies, so nothing
	can be changed after construction.
	"""
	stopwords: Tuple[str, ...] = DEFAULT_STOPWORDS
	numerals: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_NUMERALS))
	platforms: Tuple[str, ...] = DEFAULT_PLATFORMS
	platform_display: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_PLATFORM_DISPLAY))
	platform_suffixes: Tuple[str, ...] = DEFAULT_PLATFORM_SUFFIXES
	languages: Tuple[str, ...] = DEFAULT_LANGUAGES
	qualities: Tuple[str, ...] = DEFAULT_QUALITIES
	max_season_span: int = DEFAULT_MAX_SEASON_SPAN  # widest season range that is expanded

	def __post_init__(self):
		# Matching happens on lowercased text, so keys and keywords are lowercased here
		object.__setattr__(self, 'stopwords', _clean_entries('stopwords', self.stopwords, lower=True))
		object.__setattr__(self, 'platforms', _clean_entries('platforms', self.platforms, lower=True))
		object.__setattr__(self, 'platform_suffixes', _clean_entries('platform_suffixes', self.platform_suffixes, lower=True))
		object.__setattr__(self, 'languages', _clean_entries('languages', self.languages))
		object.__setattr__(self, 'qualities', _clean_entries('qualities', self.qualities))

		numerals = {}
		for key, value in dict(self.numerals).items():
			token = _clean_entries('numerals', [key], lower=True)[0]
			try:
				numerals[token] = int(value)
			except (TypeError, ValueError) as e:
				raise ConfigurationError(f"numerals: '{token}' must map to an integer, got {value!r}") from e
		object.__setattr__(self, 'numerals', MappingProxyType(numerals))

		display = {k.strip().lower(): v for k, v in dict(self.platform_display).items()}
		object.__setattr__(self, 'platform_display', MappingProxyType(display))

		if isinstance(self.max_season_span, bool) or not isinstance(self.max_season_span, int) or self.max_season_span < 1:
			raise ConfigurationError(f"max_season_span: must be a positive integer, got {self.max_season_span!r}")

	def display_platform(self, platform: str) -> str:
		"""Canonical display form: explicit override, else first letter capitalized."""
		key = platform.lower()
		if key in self.platform_display:
			return self.platform_display[key]
		return key[:1].upper() + key[1:]

	def with_overrides(self, overrides: 'VocabularyOverrides') -> 'ParserConfig':
		"""Return a new config with every field the override file sets replaced."""
		changes = overrides.model_dump(exclude_none=True)
		return replace(self, **changes)


class VocabularyOverrides(BaseModel):
	"""
	Schema of a JSON override file. Keys mirror ParserConfig fields; every key
	is optional and an omitted key keeps the default vocabulary.
	"""
	model_config = ConfigDict(extra='forbid')

	stopwords: Optional[List[str]] = None
	numerals: Optional[Dict[str, int]] = None
	platforms: Optional[List[str]] = None
	platform_display: Optional[Dict[str, str]] = None
	platform_suffixes: Optional[List[str]] = None
	languages: Optional[List[str]] = None
	qualities: Optional[List[str]] = None
	max_season_span: Optional[int] = None

	@field_validator('stopwords', 'platforms', 'platform_suffixes', 'languages', 'qualities')
	@classmethod
	def _no_blank_entries(cls, v: Optional[List[str]]) -> Optional[List[str]]:
		if v is not None and any(not item.strip() for item in v):
			raise ValueError("entries must be non-empty strings")
		return v

	@field_validator('numerals')
	@classmethod
	def _positive_numerals(cls, v: Optional[Dict[str, int]]) -> Optional[Dict[str, int]]:
		if v is not None:
			for token, value in v.items():
				if not token.strip().isalpha():
					raise ValueError(f"numeral '{token}' must be letters only")
				if value < 1:
					raise ValueError(f"numeral '{token}' must map to a positive integer")
		return v

	@field_validator('max_season_span')
	@classmethod
	def _positive_span(cls, v: Optional[int]) -> Optional[int]:
		if v is not None and v < 1:
			raise ValueError("max_season_span must be a positive integer")
		return v


def format_validation_errors(error: ValidationError) -> str:
	"""One 'field: message' line per pydantic error."""
	lines = []
	for err in error.errors():
		loc_path = '.'.join(str(loc) for loc in err['loc'])
		lines.append(f"{loc_path}: {err['msg']}")
	return '\n'.join(lines)


def load_config(path: Optional[str] = None) -> ParserConfig:
	"""
	Build a ParserConfig from a JSON override file.
	Falls back to $RELEASE_PARSER_CONFIG, then to the built-in vocabularies.
	"""
	path = path or os.getenv(CONFIG_ENV_VAR)
	if not path:
		logger.debug("[Config] No override file, using default vocabularies")
		return ParserConfig()

	filepath = Path(path)  # normalize path
	if not filepath.exists():
		raise FileNotFoundError(f"Parser config file not found: {filepath}")

	logger.info(f"[Config] Loading vocabulary overrides from {filepath}...")
	try:
		with open(filepath, 'r', encoding='utf-8') as f:
			data = json.load(f)
	except json.JSONDecodeError as e:
		raise ConfigurationError(f"Invalid JSON in {filepath}: {e}") from e

	if not isinstance(data, dict):
		raise ConfigurationError(f"{filepath}: top-level value must be an object")

	try:
		overrides = VocabularyOverrides(**data)
	except ValidationError as e:
		raise ConfigurationError(f"Config validation failed for {filepath}:\n{format_validation_errors(e)}") from e

	config = ParserConfig().with_overrides(overrides)
	logger.info(f"[Config] Applied overrides: {sorted(overrides.model_dump(exclude_none=True))}")
	return config
