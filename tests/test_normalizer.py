"""
Unit tests for KeyNormalizer: numerals, stopwords, charset, idempotence.
Run: python tests/test_normalizer.py
"""

import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from release_parser.config import ParserConfig
from release_parser.normalizer import KeyNormalizer


NORMALIZER = KeyNormalizer()

TRICKY = [
	"The Godfather Part II",
	"Rocky IV",
	"A Quiet Place",
	"Vivid Dreams",
	"Mission: Impossible – Dead Reckoning",
	"t.h.e",
	"x_",
	"X",
	"Amélie & Nino's Café!",
	"",
]


def assert_equal(actual, expected, msg):
	if actual != expected:
		raise AssertionError(f"{msg} | expected={expected}, actual={actual}")


def test_roman_numerals_whole_tokens_only():
	assert_equal(NORMALIZER.normalize("The Godfather Part II"), 'godfatherpart2', "ii -> 2")
	assert_equal(NORMALIZER.normalize("Rocky IV"), 'rocky4', "iv -> 4")
	assert_equal(NORMALIZER.normalize("Vivid Dreams"), 'vividdreams', "numerals inside words untouched")
	assert_equal(NORMALIZER.normalize("Ocean's X"), 'oceans10', "x -> 10")


def test_stopwords_removed():
	assert_equal(NORMALIZER.normalize("A Quiet Place"), 'quietplace', "leading a")
	assert_equal(NORMALIZER.normalize("An American Tail"), 'americantail', "leading an")
	assert_equal(NORMALIZER.normalize("Theory of Everything"), 'theoryofeverything', "stopword prefix inside a word")


def test_only_lowercase_alphanumerics_remain():
	for text in TRICKY:
		key = NORMALIZER.normalize(text)
		assert_equal(re.fullmatch(r'[a-z0-9]*', key) is not None, True, f"charset for {text!r} -> {key!r}")


def test_idempotent():
	for text in TRICKY:
		once = NORMALIZER.normalize(text)
		assert_equal(NORMALIZER.normalize(once), once, f"idempotence for {text!r}")


def test_collapsed_key_spelling_a_stopword_is_settled():
	assert_equal(NORMALIZER.normalize("t.h.e"), '', "t.h.e collapses to a stopword")
	assert_equal(NORMALIZER.normalize("x_"), '10', "x_ collapses to a numeral")


def test_custom_tables():
	n = KeyNormalizer(ParserConfig(stopwords=('la',), numerals={'xi': 11}))
	assert_equal(n.normalize("La Casa XI"), 'casa11', "custom stopword and numeral")
	assert_equal(n.normalize("The Casa II"), 'thecasaii', "defaults replaced")


def main():
	print("Running KeyNormalizer tests...")
	for name, fn in sorted(globals().items()):
		if name.startswith('test_') and callable(fn):
			fn()
			print(f" - {name[5:].replace('_', ' ')} ok")
	print("All KeyNormalizer tests passed!")


if __name__ == '__main__':
	main()
