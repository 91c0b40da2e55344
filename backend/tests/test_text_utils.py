"""
Text helper tests.
"""

import pytest

from authority.utils.text import (
    count_present,
    extract_sentence_window,
    is_list_item,
    split_sentences,
)


class TestSentences:
    def test_split_keeps_spans(self):
        text = "First one. Second one!"
        sentences = split_sentences(text)
        assert [s.text for s in sentences] == ["First one", "Second one"]
        assert text[sentences[1].start:sentences[1].end].strip() == "Second one"

    def test_blank_pieces_are_dropped(self):
        assert [s.text for s in split_sentences("One... Two?!  ")] == ["One", "Two"]

    def test_window_in_the_middle(self):
        text = "A. B. C. D. E."
        assert extract_sentence_window(text, text.index("C")) == "B. C. D"

    def test_window_at_the_end(self):
        text = "A. B. C"
        assert extract_sentence_window(text, text.index("C")) == "B. C"

    def test_offset_on_delimiter_uses_next_sentence(self):
        text = "A. B. C. D."
        assert extract_sentence_window(text, 1) == "A. B. C"

    def test_empty_text(self):
        assert extract_sentence_window("", 0) == ""


class TestListItems:
    @pytest.mark.parametrize("line,expected", [
        ("1. DirectDrive", True),
        ("  9. DirectDrive", True),
        ("- DirectDrive", True),
        ("* DirectDrive", True),
        ("• DirectDrive", True),
        ("DirectDrive", False),
        ("0. DirectDrive", False),
    ])
    def test_markers(self, line, expected):
        assert is_list_item(line) is expected


def test_count_present_counts_distinct_words():
    assert count_present("Shipping and SHIPPING logistics", ["shipping", "logistics", "cargo"]) == 2
