"""Unit tests for text normalization."""

import pytest

from plagiarism_checker.normalization import character_set, normalize_text


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_strips_full_width_punctuation_and_keeps_cjk(self):
        text = "今天是星期天，天气晴，今天晚上我要去看电影。"
        assert normalize_text(text) == "今天是星期天天气晴今天晚上我要去看电影"

    def test_strips_ascii_punctuation_and_lowercases(self):
        assert normalize_text("Hello, World! 123") == "helloworld123"

    def test_whitespace_is_deleted_not_replaced(self):
        assert normalize_text("a b\tc\nd\r\n e") == "abcde"

    def test_empty_and_none(self):
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    def test_only_disallowed_characters(self):
        assert normalize_text("，。！？ ...---") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "ＡＢＣ",  # full-width Latin
            "１２３",  # full-width digits
            "ｱｲｳ",  # half-width katakana
            "한국어",  # Hangul
            "Привет",  # Cyrillic
            "〇",  # ideographic zero, outside the CJK block
            "\U00020000",  # CJK extension B
            "\u212a",  # Kelvin sign
        ],
    )
    def test_characters_outside_allowed_alphabet_removed(self, text):
        assert normalize_text(text) == ""

    def test_accented_letter_dropped_from_word(self):
        assert normalize_text("Café") == "caf"

    def test_cjk_block_boundaries(self):
        assert normalize_text("\u4e00") == "\u4e00"
        assert normalize_text("\u9fa5") == "\u9fa5"
        assert normalize_text("\u4dff\u9fa6") == ""

    def test_mixed_scripts_keep_order(self):
        assert normalize_text("Python 3 很好用!") == "python3很好用"

    def test_idempotent(self):
        once = normalize_text("Hello, 世界! 42")
        assert normalize_text(once) == once


class TestCharacterSet:
    """Tests for character_set."""

    def test_collapses_duplicates(self):
        assert character_set("aabbcc") == frozenset("abc")

    def test_order_irrelevant(self):
        assert character_set("abc") == character_set("cba")

    def test_empty(self):
        assert character_set("") == frozenset()
