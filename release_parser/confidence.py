"""
Confidence module.
Scores how much structured information was extracted from a title.
"""

from typing import Sequence, Union

from .models import UNKNOWN_YEAR


class ConfidenceScorer:
	"""
	Additive credit per extracted signal, no penalties:
	- display title present
	- year known
	- type assigned (always true, since classification defaults to movie)
	- at least one quality tag
	- at least one language
	"""

	def __init__(
		self,
		title_weight: float = 0.4,
		year_weight: float = 0.3,
		type_weight: float = 0.1,
		quality_weight: float = 0.1,
		language_weight: float = 0.1,
	):
		self.title_weight = title_weight
		self.year_weight = year_weight
		self.type_weight = type_weight
		self.quality_weight = quality_weight
		self.language_weight = language_weight

	def score(
		self,
		display_title: str,
		year: Union[int, str],
		content_type: str,
		qualities: Sequence[str],
		languages: Sequence[str],
	) -> float:
		"""Combine the signals into a single score (0..1)."""
		score = 0.0
		if display_title:
			score += self.title_weight
		if year != UNKNOWN_YEAR:
			score += self.year_weight
		if content_type:
			score += self.type_weight
		if qualities:
			score += self.quality_weight
		if languages:
			score += self.language_weight
		# Clamp, and round away float noise such as 0.7000000000000001
		return round(max(0.0, min(1.0, score)), 2)
