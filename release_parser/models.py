"""
Data models for the Release Title Parser.
Defines the value objects produced for every parsed listing title.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field, asdict  # frozen records + dict export
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, Optional, Tuple, Union  # optional values and unions


# Sentinels shared by the extractors and the record
UNKNOWN_YEAR = 'unknown'  # year token when no 19xx/20xx year is present
UNKNOWN_PLATFORM = 'Unknown'  # platform when no vocabulary entry is present
MOVIE = 'movie'  # default content type
SERIES = 'series'  # content type when series markers are present


@dataclass(frozen=True)
class UpdateInfo:
	"""
	Incremental-release annotations found in a title, e.g. "[Ep-09 Added]".
	part_added is False when absent, True for "Part 1 & 2" style lists or an
	unnumbered "Part Added", and an int for a single numbered part.
	complete is None when absent and never False.
	"""
	episode_added: Optional[int] = None  # newly added episode number
	volume_added: Optional[int] = None  # newly added volume number
	part_added: Union[bool, int] = False  # see class docstring
	complete: Optional[bool] = None  # True for "Complete" / "All Episodes"


@dataclass(frozen=True)
class ParsedTitleRecord:
	"""
	Everything we extract from one raw listing title.
	Created once per parse call and never mutated afterwards.
	"""
	display_title: str  # human-facing title with trailing metadata stripped
	machine_title: str  # lowercase alphanumeric key derived from display_title
	canonical_key: str  # "<machine_title>|<year>|<type>"
	type: str  # MOVIE or SERIES
	year: Union[int, str]  # release year or UNKNOWN_YEAR
	season: Union[None, int, Tuple[int, ...]] = None  # single season or inclusive range
	part: Optional[int] = None  # "Part 2"
	volume: Optional[int] = None  # "Vol. 1"
	episode: Optional[int] = None  # "Ep 8"
	update_info: UpdateInfo = field(default_factory=UpdateInfo)  # added/complete signals
	languages: Tuple[str, ...] = ()  # audio languages in vocabulary order
	qualities: Tuple[str, ...] = ()  # quality tags in vocabulary order
	platform: str = UNKNOWN_PLATFORM  # source platform display form
	confidence: float = 0.0  # heuristic completeness score (0..1)

	def to_dict(self) -> Dict[str, Any]:
		"""Plain JSON-serializable view of the record (nested update_info included)."""
		return asdict(self)
