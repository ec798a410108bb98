"""
Frame layout for the counter screen.

Decides what is visible and what it says; drawing is left to a
FrameRenderer.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from src.counters.domain.entities import (
    AdjustingCounterMode,
    CounterStore,
    CreatingCounterMode,
    InputMode,
    NormalMode,
)

LIST_TITLE = "Counters"
NEW_COUNTER_TITLE = "New Counter"
HIGHLIGHT_SYMBOL = ">"
INPUT_BOX_HEIGHT = 3
FOOTER_HEIGHT = 1

EMPTY_LIST_HINT = "Use n to make a new counter, and q to exit."
NORMAL_HINT = (
    "Use ↓↑/jk to move, d to delete, ←→/l; to increment the counter, "
    "n to make a new counter, a/s to add/subtract, and q to exit."
)
CREATING_HINT = "Type a new counter name. Use enter to add and esc to return."
ADJUSTING_HINT = "Use ↓↑/jk to move, Type numbers, then enter to {verb} and esc to return"


@dataclass(frozen=True)
class CounterLine:
    """One row of the counter list."""
    text: str
    selected: bool = False

    @property
    def marked(self) -> str:
        """Text with the selection column; unselected rows keep the column blank."""
        prefix = HIGHLIGHT_SYMBOL if self.selected else " " * len(HIGHLIGHT_SYMBOL)
        return f"{prefix}{self.text}"


@dataclass(frozen=True)
class InputBox:
    """The text entry box shown above the list in input modes."""
    title: str
    text: str
    cursor: int = 0


@dataclass(frozen=True)
class Frame:
    """
    Everything a renderer needs to draw one screen.

    Vertical layout, top to bottom: optional input box
    (INPUT_BOX_HEIGHT rows), counter list (fills the rest), footer
    (FOOTER_HEIGHT rows).
    """
    lines: Tuple[CounterLine, ...]
    footer: str
    input_box: Optional[InputBox] = None
    list_title: str = LIST_TITLE

    @property
    def shows_input(self) -> bool:
        return self.input_box is not None


def footer_hint(mode: InputMode, store: CounterStore) -> str:
    """Context-sensitive hint text for the footer."""
    if isinstance(mode, CreatingCounterMode):
        return CREATING_HINT
    if isinstance(mode, AdjustingCounterMode):
        return ADJUSTING_HINT.format(verb=mode.sign.verb)
    if store.is_empty:
        return EMPTY_LIST_HINT
    return NORMAL_HINT


def input_box_for(mode: InputMode) -> Optional[InputBox]:
    if isinstance(mode, NormalMode):
        return None
    if isinstance(mode, CreatingCounterMode):
        title = NEW_COUNTER_TITLE
    else:
        title = mode.sign.title
    return InputBox(title=title, text=mode.buffer.value, cursor=mode.buffer.cursor)


def build_frame(store: CounterStore, mode: InputMode) -> Frame:
    """Lay out the counter list, input box and footer for the current state."""
    lines = tuple(
        CounterLine(text=counter.label, selected=index == store.selection)
        for index, counter in enumerate(store.counters)
    )
    return Frame(
        lines=lines,
        footer=footer_hint(mode, store),
        input_box=input_box_for(mode),
    )


__all__ = [
    'CounterLine',
    'InputBox',
    'Frame',
    'footer_hint',
    'input_box_for',
    'build_frame',
]
