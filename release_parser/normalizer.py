"""
Machine title normalization.
Turns a display title into a lowercase alphanumeric key used for equality and
grouping, never for display.
"""

import re  # token replacement
from typing import Optional  # type hints

from loguru import logger  # console logging

from . import patterns  # escaped alternations
from .config import ParserConfig  # stopwords and numeral table


class KeyNormalizer:
	"""
	lowercase -> roman numerals to digits -> drop stopwords -> keep only [a-z0-9].
	Only whole tokens are replaced, so "vivid" keeps its v and i.
	"""

	RE_NON_ALNUM = re.compile(r'[^a-z0-9]')

	def __init__(self, config: Optional[ParserConfig] = None):
		config = config or ParserConfig()
		self.numerals = config.numerals
		self._numeral_re = self._token_pattern(config.numerals.keys())
		self._stopword_re = self._token_pattern(config.stopwords)

	@staticmethod
	def _token_pattern(tokens) -> Optional[re.Pattern]:
		tokens = list(tokens)
		if not tokens:
			return None
		return re.compile(r'\b(?:' + patterns.any_word(tokens) + r')\b', re.ASCII)

	def normalize(self, display_title: str) -> str:
		key = self._normalize_once(display_title)
		# A collapsed key can itself spell a numeral or stopword ("t.h.e" -> "the");
		# the second pass settles it and is a fixed point
		settled = self._normalize_once(key)
		if settled != key:
			logger.debug(f"[Normalizer] Settled '{key}' -> '{settled}'")
		return settled

	def _normalize_once(self, text: str) -> str:
		text = text.lower()
		if self._numeral_re is not None:
			text = self._numeral_re.sub(lambda m: str(self.numerals[m.group(0)]), text)
		if self._stopword_re is not None:
			text = self._stopword_re.sub('', text)
		return self.RE_NON_ALNUM.sub('', text)
