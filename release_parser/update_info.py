"""
Update annotation extraction.
Listings for running series carry notes such as "[Ep-09 Added]",
"(S05 Vol3 Ep08 Added)", "[Part 1 & 2 Added]" or "Complete"; this module turns
them into an UpdateInfo.
"""

from typing import List, Optional, Union  # type hints

from loguru import logger  # console logging

from . import patterns  # shared compiled regexes
from .metadata import first_number  # same numeric patterns as the metadata pass
from .models import UpdateInfo  # result value object


class UpdateInfoExtractor:

	def extract(self, title: str) -> UpdateInfo:
		episode_added: Optional[int] = None
		volume_added: Optional[int] = None
		part_added: Union[bool, int] = False

		# Spans are visited left to right; a field keeps the first value found
		for span in self.find_spans(title):
			if episode_added is None:
				episode_added = first_number(patterns.EPISODE_NUMBER, span)
			if volume_added is None:
				volume_added = first_number(patterns.VOLUME_NUMBER, span)
			if part_added is False:
				part_added = self.resolve_part(span)

		complete = True if patterns.COMPLETE.search(title) else None

		info = UpdateInfo(
			episode_added=episode_added,
			volume_added=volume_added,
			part_added=part_added,
			complete=complete,
		)
		logger.debug(f"[Update] {info}")
		return info

	def find_spans(self, title: str) -> List[str]:
		"""Bracketed runs mentioning "added"; the whole title if "added" is unbracketed."""
		spans = patterns.ADDED_SPAN.findall(title)
		if not spans and patterns.ADDED_WORD.search(title):
			spans = [title]
		return spans

	def resolve_part(self, span: str) -> Union[bool, int]:
		# "Part 1 & 2" is a list, not part 1
		if patterns.PART_LIST.search(span):
			return True
		number = first_number(patterns.PART_NUMBER, span)
		if number is not None:
			return number
		if patterns.PART_ADDED.search(span):
			return True
		return False
