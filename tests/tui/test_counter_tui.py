"""
Tests for the Textual counter application.

Widget tests run without an app; interaction tests drive the app
headlessly through Textual's pilot.
"""
import pytest
from unittest.mock import MagicMock

from textual import events

from src.counters.application.layout import CounterLine, InputBox
from src.counters.application.session import CounterSession
from src.counters.domain.entities import Counter, CounterStore
from src.counters.domain.value_objects import KeyCode, KeyPress
from src.counters.tui.app import (
    CounterListWidget,
    CounterTUI,
    HintBar,
    InputBoxWidget,
    to_key_press,
)
from tests.utils.session_test_helpers import InMemoryRepository


class TestKeyTranslation:
    """Tests for Textual key event translation."""

    @pytest.mark.parametrize("key, code", [
        ("up", KeyCode.UP),
        ("down", KeyCode.DOWN),
        ("left", KeyCode.LEFT),
        ("right", KeyCode.RIGHT),
        ("enter", KeyCode.ENTER),
        ("escape", KeyCode.ESCAPE),
        ("backspace", KeyCode.BACKSPACE),
        ("delete", KeyCode.DELETE),
        ("home", KeyCode.HOME),
        ("end", KeyCode.END),
    ])
    def test_special_keys(self, key, code):
        assert to_key_press(events.Key(key, None)) == KeyPress.of_code(code)

    def test_printable_character(self):
        assert to_key_press(events.Key("semicolon", ";")) == KeyPress.of_char(";")

    def test_unused_key(self):
        assert to_key_press(events.Key("f1", None)) is None


class TestWidgets:
    """Tests for widget state."""

    def test_counter_list_update(self):
        widget = CounterListWidget()
        lines = (CounterLine("1: a", selected=True),)
        widget.update_lines(lines)
        assert widget.lines == lines

    def test_input_box_update(self):
        widget = InputBoxWidget()
        widget.update_box(InputBox(title="Adding", text="12", cursor=2))
        assert widget.input_box.title == "Adding"

    def test_input_box_clear(self):
        widget = InputBoxWidget()
        widget.update_box(None)
        assert widget.input_box is None

    def test_hint_bar_update(self):
        widget = HintBar()
        widget.update_hint("hello")
        assert widget.hint == "hello"


class TestCounterTUI:
    """Tests for the main TUI application."""

    def test_app_creation(self):
        app = CounterTUI()
        assert app.session.is_ephemeral
        assert app.loop.session is app.session

    @pytest.mark.asyncio
    async def test_loop_survives_app_startup(self):
        """The counter loop stays reachable while Textual is running."""
        from src.counters.application.services import AppLoop

        app = CounterTUI()
        async with app.run_test() as pilot:
            await pilot.press("n", "x", "enter")
            await pilot.pause()
            assert isinstance(app.loop, AppLoop)
            assert [c.name for c in app.session.store.counters] == ["x"]

    @pytest.mark.asyncio
    async def test_initial_frame(self):
        app = CounterTUI()
        async with app.run_test() as pilot:
            await pilot.pause()
            footer = app.query_one("#footer", HintBar)
            assert footer.hint == "Use n to make a new counter, and q to exit."
            assert app.query_one("#input", InputBoxWidget).display is False

    @pytest.mark.asyncio
    async def test_create_and_increment(self):
        app = CounterTUI()
        async with app.run_test() as pilot:
            await pilot.press("n", "p", "u", "s", "h")
            assert app.query_one("#input", InputBoxWidget).display is True
            assert app.query_one("#input", InputBoxWidget).input_box.text == "push"
            await pilot.press("enter", "j", "l", "l", "right")
            await pilot.pause()
            lines = app.query_one("#counters", CounterListWidget).lines
            assert [line.marked for line in lines] == [">3: push"]
            assert app.query_one("#input", InputBoxWidget).display is False

    @pytest.mark.asyncio
    async def test_adjust_and_quit_returns_message(self):
        repo = InMemoryRepository([Counter("Pushups", 2)], fail_saves=True)
        session = CounterSession(store=CounterStore(counters=repo.load(), selection=0), repository=repo)
        app = CounterTUI(session=session)
        async with app.run_test() as pilot:
            await pilot.press("a", "1", "0", "enter", "q")
            await pilot.pause()
        assert session.store.counters[0].count == 12
        assert session.should_exit
        assert "attempt 1" in app.return_value

    @pytest.mark.asyncio
    async def test_quit_without_errors(self):
        app = CounterTUI()
        async with app.run_test() as pilot:
            await pilot.press("q")
            await pilot.pause()
        assert app.return_value == ""

    def test_renderer_is_used_by_loop(self):
        app = CounterTUI()
        renderer = MagicMock()
        app.loop.renderer = renderer
        app.loop.step(KeyPress.of_char("j"))
        renderer.render.assert_called_once()
