"""
Unit tests for MetadataExtractor and the classification helpers.
Run: python tests/test_metadata.py
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from release_parser.classifier import ContentClassifier, YearExtractor
from release_parser.config import ParserConfig
from release_parser.metadata import MetadataExtractor
from release_parser.models import UNKNOWN_YEAR


EXTRACTOR = MetadataExtractor()


def assert_equal(actual, expected, msg):
	if actual != expected:
		raise AssertionError(f"{msg} | expected={expected}, actual={actual}")


def test_classifier_markers():
	c = ContentClassifier()
	assert_equal(c.classify("Foo (Season 2)"), 'series', "season")
	assert_equal(c.classify("Foo S03 720p"), 'series', "s<digits>")
	assert_equal(c.classify("Foo Ep 4"), 'series', "ep")
	assert_equal(c.classify("Foo NF Series"), 'series', "series")
	assert_equal(c.classify("Foo (2020) Full Movie 1080p"), 'movie', "default movie")
	assert_equal(c.classify("Seasons Greetings"), 'movie', "whole words only")


def test_year_leftmost_and_whole_word():
	y = YearExtractor()
	assert_equal(y.extract("Blade Runner 2049 (2017) 2160p"), 2049, "leftmost wins")
	assert_equal(y.extract("Foo 1080p 2160p"), UNKNOWN_YEAR, "resolutions are not years")
	assert_equal(y.extract("Foo 1899 2100"), UNKNOWN_YEAR, "outside 1900-2099")
	assert_equal(y.extract("Foo [1999]"), 1999, "bracketed")


def test_season_range_before_single():
	assert_equal(EXTRACTOR.extract_season("Foo (Season 1-5) [Ep08 Added]"), (1, 2, 3, 4, 5), "season range")
	assert_equal(EXTRACTOR.extract_season("Foo S01-05 WEB-DL"), (1, 2, 3, 4, 5), "short range")
	assert_equal(EXTRACTOR.extract_season("Foo Season 5-3"), (3, 4, 5), "reversed range normalized")
	assert_equal(EXTRACTOR.extract_season("Foo S04 720p"), 4, "single")
	assert_equal(EXTRACTOR.extract_season("Foo 720p"), None, "none")


def test_oversized_season_range_keeps_first_season():
	assert_equal(EXTRACTOR.extract_season("Foo S1-99999999"), 1, "huge range collapses to its start")
	assert_equal(EXTRACTOR.extract_season("Foo Season 99999999-1"), 1, "reversed huge range")
	assert_equal(EXTRACTOR.extract_season("Foo Season 1-101"), tuple(range(1, 102)), "range at the limit still expands")
	assert_equal(EXTRACTOR.extract_season("Foo Season 1-102"), 1, "one past the limit")

	narrow = MetadataExtractor(ParserConfig(max_season_span=3))
	assert_equal(narrow.extract_season("Foo S02-05"), (2, 3, 4, 5), "custom span at the limit")
	assert_equal(narrow.extract_season("Foo S01-05"), 1, "custom span exceeded")


def test_numbered_fields():
	meta = EXTRACTOR.extract("Stranger Things: Season 4 – Vol. 1 (2022) Netflix Original")
	assert_equal(meta.volume, 1, "Vol. 1")
	assert_equal(meta.season, 4, "season")
	assert_equal(EXTRACTOR.extract("Foo Part – 2 (2012)").part, 2, "en dash separator")
	assert_equal(EXTRACTOR.extract("Foo [S02 PART-2]").part, 2, "hyphen separator")
	assert_equal(EXTRACTOR.extract("Foo [Ep-09 Added]").episode, 9, "Ep-09")
	assert_equal(EXTRACTOR.extract("Foo Episode 12").episode, 12, "Episode 12")
	assert_equal(EXTRACTOR.extract("Foo Volume 3").volume, 3, "Volume 3")
	assert_equal(EXTRACTOR.extract("Foo 1080p").episode, None, "no episode")


def test_languages_in_vocabulary_order():
	langs = EXTRACTOR.extract_languages("Foo Dual Audio {Hindi-English} 480p")
	assert_equal(langs, ('Hindi', 'English', 'Dual Audio'), "dual audio")
	langs = EXTRACTOR.extract_languages("Foo Multi Audio [Hindi ORG. + English + Korean + Tamil]")
	assert_equal(langs, ('Hindi', 'English', 'Tamil', 'Korean', 'Multi Audio'), "multi audio")
	assert_equal(EXTRACTOR.extract_languages("Foo [Hindi (DD2.0) & Korea]"), ('Hindi',), "Korea is not Korean")


def test_qualities_whole_words():
	assert_equal(EXTRACTOR.extract_qualities("Foo HQ-HDTC 480p | 720p"), ('480p', '720p', 'HDTC'), "HDTC")
	assert_equal(EXTRACTOR.extract_qualities("Foo 1080px CAMERA"), (), "partial tokens")
	assert_equal(EXTRACTOR.extract_qualities("Foo 4k bluray web-dl"), ('4K', 'WEB-DL', 'BluRay'), "case-insensitive, canonical spelling")


def test_platform_priority_and_display():
	assert_equal(EXTRACTOR.extract_platform("Foo NETFLIX Series"), 'Netflix', "netflix")
	assert_equal(EXTRACTOR.extract_platform("Foo Amazon Prime Video"), 'Amazon', "amazon before prime")
	assert_equal(EXTRACTOR.extract_platform("Foo Prime Video"), 'Prime', "prime")
	assert_equal(EXTRACTOR.extract_platform("Foo AppleTV+ Original"), 'AppleTV', "AppleTV override")
	assert_equal(EXTRACTOR.extract_platform("Foo HBO Max"), 'HBO', "HBO override")
	assert_equal(EXTRACTOR.extract_platform("Foo ZEE5"), 'Zee5', "Zee5 override")
	assert_equal(EXTRACTOR.extract_platform("Foo WEB Series"), 'Series', "generic series")
	assert_equal(EXTRACTOR.extract_platform("Foo 1080p"), 'Unknown', "fallback")


def test_custom_vocabularies():
	e = MetadataExtractor(ParserConfig(languages=('Bengali',), qualities=('HEVC',), platforms=('mubi',)))
	meta = e.extract("Foo Bengali 10Bit HEVC MUBI Netflix")
	assert_equal(meta.languages, ('Bengali',), "custom languages")
	assert_equal(meta.qualities, ('HEVC',), "custom qualities")
	assert_equal(meta.platform, 'Mubi', "custom platform")


def main():
	print("Running MetadataExtractor tests...")
	for name, fn in sorted(globals().items()):
		if name.startswith('test_') and callable(fn):
			fn()
			print(f" - {name[5:].replace('_', ' ')} ok")
	print("All MetadataExtractor tests passed!")


if __name__ == '__main__':
	main()
