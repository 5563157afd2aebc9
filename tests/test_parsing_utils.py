"""Tests for annotation stripping stages."""

import unittest
from tagscrub.utils.parsing import (
    remove_year_annotation,
    remove_mp3_format_label,
    remove_bitrate_annotation,
    remove_redundant_whitespace,
)


class TestRemoveYearAnnotation(unittest.TestCase):
    """Test removal of punctuation-framed years."""

    def test_removes_year_in_parentheses(self):
        """Test '(2019)' is replaced by a single space."""
        self.assertEqual(remove_year_annotation("IGOR (2019)"), "IGOR  ")

    def test_removes_year_in_brackets(self):
        """Test '[1997]' is replaced by a single space."""
        self.assertEqual(remove_year_annotation("[1997] Album"), "  Album")

    def test_removes_year_with_trailing_punctuation_only(self):
        """Test a year followed by punctuation is removed."""
        self.assertEqual(remove_year_annotation("Best of 1999."), "Best of  ")

    def test_keeps_bare_year(self):
        """Test years without framing punctuation are preserved."""
        self.assertEqual(remove_year_annotation("Song 2019"), "Song 2019")
        self.assertEqual(
            remove_year_annotation("Released 2019 album"), "Released 2019 album"
        )

    def test_keeps_year_with_leading_punctuation_only(self):
        """Test a year needs a trailing boundary to be removed."""
        self.assertEqual(remove_year_annotation("(2019 Remaster"), "(2019 Remaster")

    def test_keeps_numbers_outside_year_range(self):
        """Test only 19xx and 20xx are treated as years."""
        self.assertEqual(remove_year_annotation("Opus (1850)"), "Opus (1850)")
        self.assertEqual(remove_year_annotation("Future (2100)"), "Future (2100)")

    def test_keeps_digits_glued_to_word(self):
        """Test digits inside a longer token are not treated as a year."""
        self.assertEqual(remove_year_annotation("Track12019)"), "Track12019)")

    def test_removes_adjacent_years(self):
        """Test consecutive year annotations are all removed."""
        self.assertEqual(remove_year_annotation("(2019)(2020)"), "  ")

    def test_separates_words_around_year(self):
        """Test removal never fuses neighbouring words."""
        self.assertEqual(remove_year_annotation("Live(2019)Tour"), "Live Tour")

    def test_handles_empty_string(self):
        """Test that empty strings are handled gracefully."""
        self.assertEqual(remove_year_annotation(""), "")


class TestRemoveMp3FormatLabel(unittest.TestCase):
    """Test removal of the mp3 format label."""

    def test_removes_bracketed_label(self):
        """Test '[Mp3]' is replaced by a single space."""
        self.assertEqual(remove_mp3_format_label("IGOR [Mp3]"), "IGOR  ")

    def test_removal_is_case_insensitive(self):
        """Test MP3, mp3 and Mp3 are all removed."""
        for label in ("MP3", "mp3", "Mp3", "mP3"):
            with self.subTest(label=label):
                self.assertEqual(remove_mp3_format_label(f"Song {label}"), "Song ")

    def test_removes_label_framed_by_whitespace(self):
        """Test a label between words is replaced by one space."""
        self.assertEqual(remove_mp3_format_label("IGOR Mp3 (320 kbps)"), "IGOR (320 kbps)")

    def test_removes_repeated_labels(self):
        """Test every occurrence is removed."""
        self.assertEqual(remove_mp3_format_label("Mp3 Mp3").strip(), "")

    def test_keeps_label_inside_word(self):
        """Test 'mp3' that is part of a longer word is preserved."""
        self.assertEqual(remove_mp3_format_label("Mp3Gain"), "Mp3Gain")
        self.assertEqual(remove_mp3_format_label("Stamp3"), "Stamp3")

    def test_underscore_frames_consecutive_labels(self):
        """Test labels sharing an underscore frame are both removed in one pass."""
        self.assertEqual(remove_mp3_format_label("Song mp3_mp3"), "Song  ")
        self.assertEqual(remove_mp3_format_label(" mp3_mp3-").strip(), "")

    def test_no_label_returns_unchanged(self):
        """Test that text without the label is unchanged."""
        self.assertEqual(remove_mp3_format_label("Regular Title"), "Regular Title")


class TestRemoveBitrateAnnotation(unittest.TestCase):
    """Test removal of bitrate annotations."""

    def test_removes_bitrate_variants(self):
        """Test 320kbps, 320 kbps and 320KBPS are all removed."""
        for annotation in ("320kbps", "320 kbps", "320KBPS", "128 Kbps"):
            with self.subTest(annotation=annotation):
                self.assertEqual(
                    remove_bitrate_annotation(f"Song {annotation}"), "Song "
                )

    def test_removes_parenthesised_bitrate(self):
        """Test '(320 kbps)' is replaced by a single space."""
        self.assertEqual(remove_bitrate_annotation("IGOR (320 kbps)"), "IGOR  ")

    def test_keeps_kbps_without_digits(self):
        """Test a partial annotation is left untouched."""
        self.assertEqual(remove_bitrate_annotation("Song kbps"), "Song kbps")

    def test_keeps_digits_glued_to_word(self):
        """Test digits that belong to a longer token are preserved."""
        self.assertEqual(remove_bitrate_annotation("v320kbps"), "v320kbps")

    def test_underscore_frames_consecutive_bitrates(self):
        """Test bitrates sharing an underscore frame are both removed in one pass."""
        self.assertEqual(remove_bitrate_annotation("2kbps_9kbps)["), "  [")


class TestRemoveRedundantWhitespace(unittest.TestCase):
    """Test whitespace normalization."""

    def test_collapses_and_strips(self):
        """Test runs are collapsed and the ends stripped."""
        self.assertEqual(
            remove_redundant_whitespace("  Artist   -   Song  Title  "),
            "Artist - Song Title",
        )

    def test_collapses_mixed_whitespace(self):
        """Test tabs and newlines count as whitespace."""
        self.assertEqual(remove_redundant_whitespace("\tA\n\nB  "), "A B")

    def test_whitespace_only_becomes_empty(self):
        """Test whitespace-only strings return empty."""
        self.assertEqual(remove_redundant_whitespace("   "), "")

    def test_handles_empty_string(self):
        """Test that empty strings return empty."""
        self.assertEqual(remove_redundant_whitespace(""), "")


if __name__ == '__main__':
    unittest.main()
