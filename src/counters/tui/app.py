"""
Terminal TUI Application using Textual

Draws the counter list, the input box and the hint footer, and feeds
key presses into the AppLoop. Works over SSH like any terminal program.
"""
from typing import Optional, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static
from rich import box
from rich.panel import Panel
from rich.text import Text

from src.counters.application.layout import (
    CounterLine,
    Frame,
    InputBox,
    LIST_TITLE,
)
from src.counters.application.services import AppLoop
from src.counters.application.session import CounterSession
from src.counters.domain.value_objects import KeyCode, KeyPress

TEXTUAL_KEYS = {
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "enter": KeyCode.ENTER,
    "escape": KeyCode.ESCAPE,
    "backspace": KeyCode.BACKSPACE,
    "delete": KeyCode.DELETE,
}


def to_key_press(event: events.Key) -> Optional[KeyPress]:
    """Translate a Textual key event; None for keys the app does not use."""
    code = TEXTUAL_KEYS.get(event.key)
    if code is not None:
        return KeyPress.of_code(code)
    if event.is_printable and event.character and len(event.character) == 1:
        return KeyPress.of_char(event.character)
    return None


class CounterListWidget(Static):
    """Widget displaying the counters, one per row."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._lines: Tuple[CounterLine, ...] = ()
        self._title = LIST_TITLE

    @property
    def lines(self) -> Tuple[CounterLine, ...]:
        return self._lines

    def update_lines(self, lines: Tuple[CounterLine, ...], title: str = LIST_TITLE):
        """Replace the displayed rows."""
        self._lines = lines
        self._title = title
        self.refresh()

    def render(self) -> Panel:
        """Render the counter list."""
        content = Text(no_wrap=True, overflow="ellipsis")
        for position, line in enumerate(self._lines):
            if position:
                content.append("\n")
            content.append(line.marked, style="bold" if line.selected else "white")
        return Panel(content, title=self._title, box=box.ROUNDED)


class InputBoxWidget(Static):
    """Widget displaying the text being typed."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._box: Optional[InputBox] = None

    @property
    def input_box(self) -> Optional[InputBox]:
        return self._box

    def update_box(self, input_box: Optional[InputBox]):
        """Show ``input_box``, or hide the widget when there is none."""
        self._box = input_box
        self.display = input_box is not None
        self.refresh()

    def render(self) -> Panel:
        """Render the input box with its cursor."""
        if self._box is None:
            return Panel(Text(""), box=box.ROUNDED)

        value, cursor = self._box.text, self._box.cursor
        content = Text(justify="center", no_wrap=True)
        content.append(value[:cursor])
        content.append(value[cursor:cursor + 1] or " ", style="reverse")
        content.append(value[cursor + 1:])
        return Panel(content, title=self._box.title, box=box.ROUNDED)


class HintBar(Static):
    """Single-line footer with the hints for the current mode."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._hint = ""

    @property
    def hint(self) -> str:
        return self._hint

    def update_hint(self, hint: str):
        self._hint = hint
        self.refresh()

    def render(self) -> Text:
        return Text(self._hint, justify="center", no_wrap=True, overflow="ellipsis")


class TextualFrameRenderer:
    """FrameRenderer drawing into the widgets of a CounterTUI."""

    def __init__(self, app: 'CounterTUI'):
        self._app = app

    def render(self, frame: Frame) -> None:
        self._app.query_one("#input", InputBoxWidget).update_box(frame.input_box)
        self._app.query_one("#counters", CounterListWidget).update_lines(frame.lines, frame.list_title)
        self._app.query_one("#footer", HintBar).update_hint(frame.footer)


class CounterTUI(App):
    """
    Main Terminal TUI Application.

    Every key press goes through the AppLoop; the app exits with the
    session's end message as its return value.
    """

    TITLE = "Counters"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }

    #input {
        height: 3;
    }

    #counters {
        height: 1fr;
    }

    #footer {
        height: 1;
    }
    """

    def __init__(self, session: Optional[CounterSession] = None, **kwargs):
        super().__init__(**kwargs)
        self._session = session or CounterSession.ephemeral()
        self._counter_loop = AppLoop(self._session, renderer=TextualFrameRenderer(self))

    @property
    def session(self) -> CounterSession:
        return self._session

    @property
    def loop(self) -> AppLoop:
        return self._counter_loop

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield InputBoxWidget(id="input")
        yield CounterListWidget(id="counters")
        yield HintBar(id="footer")

    def on_mount(self):
        """Draw the first frame."""
        self._counter_loop.render()

    def on_key(self, event: events.Key) -> None:
        """Feed a key press into the loop."""
        key = to_key_press(event)
        if key is None:
            return
        event.stop()
        event.prevent_default()
        if self._counter_loop.step(key):
            self.exit(self._counter_loop.end_message)


def run_tui(session: Optional[CounterSession] = None) -> str:
    """
    Run the TUI application until the user quits.

    Returns:
        The session's end message
    """
    app = CounterTUI(session=session)
    return app.run() or ""


if __name__ == "__main__":
    message = run_tui()
    if message:
        print(message)
