"""
Tests for Counter Domain Value Objects
"""
import pytest
from dataclasses import FrozenInstanceError

from src.counters.domain.value_objects import (
    AdjustSign,
    KeyCode,
    KeyEventKind,
    KeyPress,
)


class TestAdjustSign:
    """Tests for AdjustSign."""

    def test_positive_applies_amount(self):
        assert AdjustSign.POSITIVE.apply(10) == 10

    def test_negative_negates_amount(self):
        assert AdjustSign.NEGATIVE.apply(10) == -10

    def test_titles(self):
        assert AdjustSign.POSITIVE.title == "Adding"
        assert AdjustSign.NEGATIVE.title == "Subtracting"

    def test_verbs(self):
        assert AdjustSign.POSITIVE.verb == "add"
        assert AdjustSign.NEGATIVE.verb == "subtract"


class TestKeyPress:
    """Tests for KeyPress."""

    def test_of_char(self):
        key = KeyPress.of_char("n")
        assert key.code == KeyCode.CHAR
        assert key.char == "n"
        assert key.is_press

    def test_of_code(self):
        key = KeyPress.of_code(KeyCode.ENTER)
        assert key.code == KeyCode.ENTER
        assert key.char == ""

    def test_char_requires_single_character(self):
        with pytest.raises(ValueError):
            KeyPress(code=KeyCode.CHAR, char="ab")
        with pytest.raises(ValueError):
            KeyPress(code=KeyCode.CHAR)

    def test_release_is_not_press(self):
        key = KeyPress.of_char("q", kind=KeyEventKind.RELEASE)
        assert not key.is_press

    def test_is_char_matches_any(self):
        key = KeyPress.of_char("k")
        assert key.is_char("k", "j")
        assert not key.is_char("j")

    def test_special_key_is_not_char(self):
        assert not KeyPress.of_code(KeyCode.UP).is_char("k")

    @pytest.mark.parametrize("char", list("0123456789"))
    def test_ascii_digits(self, char):
        assert KeyPress.of_char(char).is_digit

    @pytest.mark.parametrize("char", ["a", "-", "+", " ", "٣", "½"])
    def test_non_ascii_digits_rejected(self, char):
        assert not KeyPress.of_char(char).is_digit

    def test_immutability(self):
        key = KeyPress.of_char("a")
        with pytest.raises(FrozenInstanceError):
            key.char = "b"
