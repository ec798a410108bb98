"""
Counter Domain Value Objects

Value objects are immutable and defined by their attributes.
They have no identity beyond their values.
"""
from dataclasses import dataclass
from enum import Enum


class AdjustSign(Enum):
    """
    Direction applied to the amount typed in adjusting mode.
    """
    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def title(self) -> str:
        """Title shown on the input box."""
        titles = {
            "positive": "Adding",
            "negative": "Subtracting",
        }
        return titles[self.value]

    @property
    def verb(self) -> str:
        """Verb used in the footer hint."""
        verbs = {
            "positive": "add",
            "negative": "subtract",
        }
        return verbs[self.value]

    def apply(self, amount: int) -> int:
        """Return the signed delta for an unsigned amount."""
        return amount if self is AdjustSign.POSITIVE else -amount


class SelectionDirection(Enum):
    """Movement of the selection cursor through the list."""
    PREVIOUS = "previous"
    NEXT = "next"


class KeyEventKind(Enum):
    """
    Kind of key event reported by the terminal backend.

    Only PRESS is acted on; some platforms also report repeats and releases.
    """
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


class KeyCode(Enum):
    """
    Keys the dispatcher distinguishes.

    CHAR covers every printable character; the character itself
    travels in KeyPress.char.
    """
    CHAR = "char"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    DELETE = "delete"


@dataclass(frozen=True)
class KeyPress:
    """
    A single keyboard event, independent of the terminal library.

    Value Object: Immutable, defined by key code, character and kind.
    """
    code: KeyCode
    char: str = ""
    kind: KeyEventKind = KeyEventKind.PRESS

    def __post_init__(self):
        if self.code == KeyCode.CHAR and len(self.char) != 1:
            raise ValueError("CHAR key events need exactly one character")

    @classmethod
    def of_char(cls, char: str, kind: KeyEventKind = KeyEventKind.PRESS) -> 'KeyPress':
        """Build a printable-character key event."""
        return cls(code=KeyCode.CHAR, char=char, kind=kind)

    @classmethod
    def of_code(cls, code: KeyCode, kind: KeyEventKind = KeyEventKind.PRESS) -> 'KeyPress':
        """Build a special-key event."""
        return cls(code=code, kind=kind)

    @property
    def is_press(self) -> bool:
        return self.kind == KeyEventKind.PRESS

    def is_char(self, *chars: str) -> bool:
        """True when this is a printable key matching one of ``chars``."""
        return self.code == KeyCode.CHAR and self.char in chars

    @property
    def is_digit(self) -> bool:
        """ASCII digits only, so the adjusting buffer always parses."""
        return self.code == KeyCode.CHAR and self.char in "0123456789"
