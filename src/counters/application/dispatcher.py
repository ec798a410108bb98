"""
Key Event Dispatcher

Maps (current input mode, key event) to a state mutation and an
optional persistence request.

Modes:
- NormalMode: single keys run list commands
- CreatingCounterMode: keys edit the name of a new counter
- AdjustingCounterMode: digits edit an amount for the selected counter
"""
from dataclasses import dataclass

from src.counters.domain.entities import (
    AdjustingCounterMode,
    CreatingCounterMode,
    NormalMode,
    TextBuffer,
)
from src.counters.domain.value_objects import (
    AdjustSign,
    KeyCode,
    KeyPress,
    SelectionDirection,
)
from src.counters.application.session import CounterSession


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of dispatching one key event."""
    handled: bool = False
    persist: bool = False


IGNORED = DispatchOutcome()
HANDLED = DispatchOutcome(handled=True)
PERSIST = DispatchOutcome(handled=True, persist=True)


class EventDispatcher:
    """
    Finite state machine over the session's input mode.

    Every handler is total: keys with no meaning in the current mode are
    ignored, and commands on a missing selection change nothing.
    """

    def dispatch(self, session: CounterSession, key: KeyPress) -> DispatchOutcome:
        """Apply ``key`` to ``session`` and report whether a save is due."""
        if not key.is_press:
            return IGNORED

        mode = session.mode
        if isinstance(mode, NormalMode):
            return self._handle_normal(session, key)
        if isinstance(mode, CreatingCounterMode):
            return self._handle_creating(session, mode, key)
        if isinstance(mode, AdjustingCounterMode):
            return self._handle_adjusting(session, mode, key)
        return IGNORED

    def _navigate(self, session: CounterSession, key: KeyPress) -> bool:
        """Shared Up/k and Down/j handling."""
        if key.code == KeyCode.UP or key.is_char("k"):
            session.store.move_selection(SelectionDirection.PREVIOUS)
            return True
        if key.code == KeyCode.DOWN or key.is_char("j"):
            session.store.move_selection(SelectionDirection.NEXT)
            return True
        return False

    def _handle_normal(self, session: CounterSession, key: KeyPress) -> DispatchOutcome:
        store = session.store

        if self._navigate(session, key):
            return HANDLED

        if key.code == KeyCode.RIGHT or key.is_char("l"):
            store.adjust_selected(1)
            return PERSIST
        if key.code == KeyCode.LEFT or key.is_char(";"):
            store.adjust_selected(-1)
            return PERSIST
        if key.code == KeyCode.ESCAPE:
            store.clear_selection()
            return HANDLED

        if key.is_char("q"):
            session.request_exit()
        elif key.is_char("n"):
            session.mode = CreatingCounterMode()
        elif key.is_char("a"):
            session.mode = AdjustingCounterMode(sign=AdjustSign.POSITIVE)
        elif key.is_char("s"):
            session.mode = AdjustingCounterMode(sign=AdjustSign.NEGATIVE)
        elif key.is_char("d"):
            store.remove_selected()
            return PERSIST
        else:
            return IGNORED
        return HANDLED

    def _handle_creating(
        self,
        session: CounterSession,
        mode: CreatingCounterMode,
        key: KeyPress,
    ) -> DispatchOutcome:
        if key.code == KeyCode.ESCAPE:
            session.mode = NormalMode()
            return HANDLED
        if key.code == KeyCode.ENTER:
            session.store.append(mode.buffer.value)
            mode.buffer.reset()
            session.mode = NormalMode()
            return PERSIST
        if key.code == KeyCode.CHAR:
            mode.buffer.insert(key.char)
            return HANDLED
        return HANDLED if edit_buffer(mode.buffer, key) else IGNORED

    def _handle_adjusting(
        self,
        session: CounterSession,
        mode: AdjustingCounterMode,
        key: KeyPress,
    ) -> DispatchOutcome:
        if self._navigate(session, key):
            return HANDLED

        if key.code == KeyCode.ESCAPE:
            session.mode = NormalMode()
            return HANDLED
        if key.code == KeyCode.ENTER:
            return self._apply_adjustment(session, mode)
        if key.is_char("a"):
            session.mode = AdjustingCounterMode(buffer=mode.buffer.copy(), sign=AdjustSign.POSITIVE)
            return HANDLED
        if key.is_char("s"):
            session.mode = AdjustingCounterMode(buffer=mode.buffer.copy(), sign=AdjustSign.NEGATIVE)
            return HANDLED
        if key.is_digit:
            mode.buffer.insert(key.char)
            return HANDLED
        if key.code in (KeyCode.LEFT, KeyCode.RIGHT, KeyCode.BACKSPACE):
            edit_buffer(mode.buffer, key)
            return HANDLED
        return IGNORED

    def _apply_adjustment(
        self,
        session: CounterSession,
        mode: AdjustingCounterMode,
    ) -> DispatchOutcome:
        session.mode = NormalMode()
        if mode.buffer.is_empty:
            return HANDLED

        # Only ASCII digits ever reach the buffer.
        amount = int(mode.buffer.value)
        mode.buffer.reset()
        session.store.adjust_selected(mode.sign.apply(amount))
        return PERSIST


def edit_buffer(buffer: TextBuffer, key: KeyPress) -> bool:
    """Apply a cursor or deletion key to ``buffer``; False if ``key`` is not one."""
    edits = {
        KeyCode.BACKSPACE: buffer.backspace,
        KeyCode.DELETE: buffer.delete,
        KeyCode.LEFT: buffer.move_left,
        KeyCode.RIGHT: buffer.move_right,
        KeyCode.HOME: buffer.move_home,
        KeyCode.END: buffer.move_end,
    }
    edit = edits.get(key.code)
    if edit is None:
        return False
    edit()
    return True
