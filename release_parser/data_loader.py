"""
Title loading module.
Reads listing titles from plain text (one per line) or JSON Lines files so they
can be fed to the parser in bulk.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines
from typing import List  # type hints
from pathlib import Path  # filesystem-safe paths

# Console logging
from loguru import logger  # console logger


class TitleLoader:
	"""
	Loads raw listing titles.
	.jsonl files hold one object per line with a "title" key; any other
	extension is read as text with one title per line.
	"""

	COMMENT_PREFIX = '#'  # ignored lines in text files

	def load_titles(self, filepath: str) -> List[str]:
		"""Dispatch on extension and return the titles in file order."""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Title file not found: {filepath}")

		logger.info(f"[Loader] Loading titles from {filepath}...")  # log action
		if filepath.suffix.lower() == '.jsonl':
			titles = self.load_titles_from_jsonl(filepath)
		else:
			titles = self.load_titles_from_text(filepath)
		logger.info(f"[Loader] Successfully loaded {len(titles)} titles.")  # summary
		return titles

	def load_titles_from_text(self, filepath: Path) -> List[str]:
		titles = []
		with open(filepath, 'r', encoding='utf-8') as f:
			for line in f:
				text = line.strip()
				if not text or text.startswith(self.COMMENT_PREFIX):  # blank or comment
					continue
				titles.append(text)
		return titles

	def load_titles_from_jsonl(self, filepath: Path) -> List[str]:
		titles = []  # accumulator
		# Read line-by-line; bad lines are reported and skipped
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():
					continue
				try:
					data = json.loads(line.strip())  # parse JSON object per line
				except json.JSONDecodeError as e:
					logger.warning(f"[Loader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue
				title = data.get('title') if isinstance(data, dict) else None
				if not isinstance(title, str) or not title.strip():
					logger.warning(f"[Loader] Skipping line {line_num}: no 'title' string")
					continue
				titles.append(title.strip())
		return titles
