"""
Counter Domain Entities

Entities are objects with identity that persists over time.
They contain business logic and maintain invariants.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .value_objects import AdjustSign, SelectionDirection

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def clamp_i64(value: int) -> int:
    """Saturate ``value`` to the signed 64-bit range."""
    return max(I64_MIN, min(I64_MAX, value))


@dataclass
class Counter:
    """
    A named integer counter.

    Owned by a CounterStore; never shared between stores.
    """
    name: str
    count: int = 0

    def add(self, delta: int) -> None:
        """Add ``delta``, saturating at the signed 64-bit bounds."""
        self.count = clamp_i64(self.count + delta)

    @property
    def label(self) -> str:
        return f"{self.count}: {self.name}"


@dataclass
class CounterStore:
    """
    Aggregate Root: ordered counters plus the current selection.

    Invariant: ``selection`` is either None or a valid index into
    ``counters``. Every operation is total: invalid indexes and an
    absent selection are silently ignored.
    """
    counters: List[Counter] = field(default_factory=list)
    selection: Optional[int] = None

    def __post_init__(self):
        self._revalidate()

    def __len__(self) -> int:
        return len(self.counters)

    @property
    def is_empty(self) -> bool:
        return not self.counters

    @property
    def selected(self) -> Optional[Counter]:
        """The selected counter, if any."""
        if self.selection is None:
            return None
        return self.counters[self.selection]

    def _valid(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self.counters)

    def _revalidate(self) -> None:
        if not self._valid(self.selection):
            self.selection = None

    def append(self, name: str) -> int:
        """Add a counter at zero to the end of the list and return its index."""
        self.counters.append(Counter(name=name))
        return len(self.counters) - 1

    def adjust(self, index: Optional[int], delta: int) -> None:
        """Add ``delta`` to the counter at ``index``; no-op if index is invalid."""
        if not self._valid(index):
            return
        self.counters[index].add(delta)

    def adjust_selected(self, delta: int) -> None:
        self.adjust(self.selection, delta)

    def remove(self, index: Optional[int]) -> None:
        """
        Remove the counter at ``index`` and re-validate the selection.

        The selection keeps its index when that index still exists (it then
        points at the counter that followed the removed one) and becomes
        None when it would point past the end.
        """
        if not self._valid(index):
            return
        del self.counters[index]
        self._revalidate()

    def remove_selected(self) -> None:
        self.remove(self.selection)

    def select(self, index: Optional[int]) -> None:
        """Select ``index``; anything out of range clears the selection."""
        self.selection = index if self._valid(index) else None

    def clear_selection(self) -> None:
        self.selection = None

    def move_selection(self, direction: SelectionDirection) -> None:
        """
        Move the selection one step without wrapping.

        With nothing selected, NEXT selects the first counter and
        PREVIOUS selects the last one. Empty lists keep no selection.
        """
        if not self.counters:
            self.selection = None
            return

        last = len(self.counters) - 1
        if self.selection is None:
            self.selection = 0 if direction == SelectionDirection.NEXT else last
        elif direction == SelectionDirection.NEXT:
            self.selection = min(self.selection + 1, last)
        else:
            self.selection = max(self.selection - 1, 0)


class TextBuffer:
    """
    Single-line editable text with a cursor.

    Cursor positions are character offsets in ``0..len(value)``.
    Edits that would move past either end do nothing.
    """

    def __init__(self, value: str = "", cursor: Optional[int] = None):
        self._value = value
        self._cursor = len(value) if cursor is None else max(0, min(cursor, len(value)))

    def __repr__(self):
        return f"TextBuffer(value={self._value!r}, cursor={self._cursor})"

    def __eq__(self, other):
        if not isinstance(other, TextBuffer):
            return NotImplemented
        return self._value == other._value and self._cursor == other._cursor

    @property
    def value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return not self._value

    def insert(self, char: str) -> None:
        self._value = self._value[:self._cursor] + char + self._value[self._cursor:]
        self._cursor += len(char)

    def backspace(self) -> None:
        if self._cursor == 0:
            return
        self._value = self._value[:self._cursor - 1] + self._value[self._cursor:]
        self._cursor -= 1

    def delete(self) -> None:
        if self._cursor >= len(self._value):
            return
        self._value = self._value[:self._cursor] + self._value[self._cursor + 1:]

    def move_left(self) -> None:
        self._cursor = max(self._cursor - 1, 0)

    def move_right(self) -> None:
        self._cursor = min(self._cursor + 1, len(self._value))

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._value)

    def reset(self) -> None:
        self._value = ""
        self._cursor = 0

    def copy(self) -> 'TextBuffer':
        return TextBuffer(self._value, self._cursor)


@dataclass
class NormalMode:
    """Browsing the list; single keys run commands."""


@dataclass
class CreatingCounterMode:
    """Typing the name of a new counter."""
    buffer: TextBuffer = field(default_factory=TextBuffer)


@dataclass
class AdjustingCounterMode:
    """Typing an amount to add to or subtract from the selected counter."""
    buffer: TextBuffer = field(default_factory=TextBuffer)
    sign: AdjustSign = AdjustSign.POSITIVE


InputMode = Union[NormalMode, CreatingCounterMode, AdjustingCounterMode]
