"""Tests for markup cleanup and abstract segmentation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MrmReader.formatting import clean_text, segment_abstract


class TestCleanText(unittest.TestCase):
    def test_decodes_ampersand(self) -> None:
        self.assertEqual(clean_text("A &amp; B"), "A & B")

    def test_small_caps_tags_are_dropped(self) -> None:
        self.assertEqual(clean_text("<scp>MRI</scp> study"), "MRI study")

    def test_subscript_and_superscript(self) -> None:
        self.assertEqual(clean_text("T<sub>2</sub>"), "T_2")
        self.assertEqual(clean_text("Fast <sup>23</sup>Na imaging"), "Fast ^23Na imaging")

    def test_other_tags_are_stripped(self) -> None:
        raw = '<jats:title>Abstract</jats:title><jats:p>Some <i>italic</i> text</jats:p>'
        self.assertEqual(clean_text(raw), "AbstractSome italic text")

    def test_quote_entities(self) -> None:
        self.assertEqual(clean_text("&quot;x&quot; &apos;y&apos; &lt;z&gt;"), "\"x\" 'y' <z>")

    def test_dash_entities(self) -> None:
        raw = "a&minus;b&hyphen;c&ndash;d&#8208;e&#8209;f&#8210;g&#8211;h"
        self.assertEqual(clean_text(raw), "a-b-c-d-e-f-g-h")

    def test_em_dash_entities(self) -> None:
        self.assertEqual(clean_text("x&mdash;y&#8212;z"), "x—y—z")

    def test_unknown_entities_pass_through(self) -> None:
        self.assertEqual(clean_text("5&nbsp;mm &copy;"), "5&nbsp;mm &copy;")

    def test_decoding_is_single_pass(self) -> None:
        self.assertEqual(clean_text("&amp;lt;"), "&lt;")

    def test_decoded_angle_brackets_are_not_treated_as_tags(self) -> None:
        self.assertEqual(clean_text("&lt;b&gt;bold&lt;/b&gt;"), "<b>bold</b>")

    def test_unmatched_tags_do_not_raise(self) -> None:
        self.assertEqual(clean_text("open <sub>2 and </sup> close"), "open 2 and  close")

    def test_empty_input(self) -> None:
        self.assertEqual(clean_text(""), "")

    def test_idempotent_on_plain_text(self) -> None:
        for text in ("Plain title", "T_2 mapping at 7 T", "x—y and ^1H"):
            with self.subTest(text=text):
                self.assertEqual(clean_text(clean_text(text)), clean_text(text))


class TestSegmentAbstract(unittest.TestCase):
    def test_labels_inserted_in_order(self) -> None:
        text = segment_abstract("AbstractPurpose we study X.Methods we did Y.Results Z happened.Conclusion W.")
        self.assertEqual(
            text,
            "[Purpose]: we study X.\n\n[Methods]: we did Y.\n\n[Results]: Z happened.\n\n[Conclusion]: W.",
        )

    def test_purpose_first_has_no_leading_newline(self) -> None:
        text = segment_abstract("Purpose first.")
        self.assertTrue(text.startswith("[Purpose]:"))

    def test_purpose_after_text_keeps_single_newline(self) -> None:
        text = segment_abstract("Intro. Purpose second.")
        self.assertEqual(text, "Intro. \n[Purpose]: second.")

    def test_abstract_prefix_is_case_sensitive(self) -> None:
        self.assertEqual(segment_abstract("abstract text"), "abstract text")

    def test_abstract_prefix_only_at_start(self) -> None:
        self.assertEqual(segment_abstract("An Abstract idea"), "An Abstract idea")

    def test_keywords_match_inside_words(self) -> None:
        text = segment_abstract("MultiPurpose coils")
        self.assertEqual(text, "Multi\n[Purpose]: coils")

    def test_unstructured_abstract_is_unchanged(self) -> None:
        self.assertEqual(segment_abstract("We present a method."), "We present a method.")


if __name__ == "__main__":
    unittest.main()
