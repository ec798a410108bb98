"""
Tests for CounterSession and the AppLoop.

Includes the end-to-end keyboard scenarios: create, increment,
add/subtract, delete and quit.
"""
import pytest

from src.counters.application.services import AppLoop
from src.counters.application.session import CounterSession
from src.counters.domain.entities import Counter, CounterStore, NormalMode
from src.counters.infrastructure.json_repository import JsonSnapshotRepository
from tests.utils.session_test_helpers import (
    DOWN,
    ENTER,
    InMemoryRepository,
    RecordingRenderer,
    ScriptedKeySource,
    keys,
)


def run_keys(session: CounterSession, *parts) -> tuple:
    source = ScriptedKeySource(keys(*parts))
    renderer = RecordingRenderer()
    message = AppLoop(session).run(source, renderer)
    return message, source, renderer


class TestCounterSession:
    """Tests for session construction and saving."""

    def test_ephemeral_session_defaults(self):
        session = CounterSession.ephemeral()
        assert session.is_ephemeral
        assert session.store.is_empty
        assert isinstance(session.mode, NormalMode)
        assert not session.should_exit
        assert session.end_message == ""

    def test_ephemeral_save_succeeds(self):
        session = CounterSession.ephemeral()
        session.store.append("a")
        assert session.save() is True

    def test_from_repository_loads_existing(self):
        repo = InMemoryRepository([Counter("Pushups", 3), Counter("Squats", -1)])
        session = CounterSession.from_repository(repo)
        assert [(c.name, c.count) for c in session.store.counters] == [("Pushups", 3), ("Squats", -1)]
        assert session.store.selection is None

    def test_from_repository_missing_starts_empty(self):
        repo = InMemoryRepository()
        session = CounterSession.from_repository(repo)
        assert session.store.is_empty
        assert session.repository is repo

    def test_save_failure_is_captured(self):
        repo = InMemoryRepository(fail_saves=True)
        session = CounterSession(repository=repo)
        assert session.save() is False
        assert "attempt 1" in session.end_message

    def test_last_save_error_wins(self):
        repo = InMemoryRepository(fail_saves=True)
        session = CounterSession(repository=repo)
        session.save()
        session.save()
        assert "attempt 2" in session.end_message

    def test_sessions_are_independent(self):
        first = CounterSession.ephemeral()
        second = CounterSession.ephemeral()
        first.store.append("a")
        first.request_exit()
        assert second.store.is_empty
        assert not second.should_exit


class TestScenarios:
    """Keyboard scenarios run through the loop."""

    def test_create_counter(self):
        session = CounterSession.ephemeral()
        run_keys(session, "n", "Pushups", ENTER, "q")
        assert [(c.name, c.count) for c in session.store.counters] == [("Pushups", 0)]
        assert isinstance(session.mode, NormalMode)

    def test_increment_and_decrement(self):
        session = CounterSession.ephemeral()
        loop = AppLoop(session)
        for key in keys("n", "Pushups", ENTER, DOWN, "lll"):
            loop.step(key)
        assert session.store.counters[0].count == 3
        loop.step(keys(";")[0])
        assert session.store.counters[0].count == 2

    def test_add_and_subtract(self):
        store = CounterStore(counters=[Counter("Pushups", 2)], selection=0)
        session = CounterSession(store=store)
        run_keys(session, "a", "10", ENTER, "q")
        assert store.counters[0].count == 12
        session.should_exit = False
        run_keys(session, "s", "5", ENTER, "q")
        assert store.counters[0].count == 7

    def test_full_scenario_in_one_session(self):
        session = CounterSession.ephemeral()
        run_keys(
            session,
            "n", "Pushups", ENTER,
            "j", "lll", ";",
            "a", "10", ENTER,
            "s", "5", ENTER,
            "q",
        )
        assert [(c.name, c.count) for c in session.store.counters] == [("Pushups", 7)]

    def test_delete_first_of_two(self):
        session = CounterSession.ephemeral()
        run_keys(session, "n", "first", ENTER, "n", "second", ENTER, "j", "d", "q")
        assert [c.name for c in session.store.counters] == ["second"]
        assert session.store.selection == 0

    def test_quit_stops_reading(self):
        """No events after q are read."""
        session = CounterSession.ephemeral()
        message, source, _ = run_keys(session, "q", "n", "x", ENTER)
        assert session.should_exit
        assert source.read_count == 1
        assert source.remaining == 3
        assert session.store.is_empty
        assert message == ""


class TestAppLoop:
    """Tests for loop mechanics."""

    def test_renders_initial_frame_and_one_per_event(self):
        session = CounterSession.ephemeral()
        _, source, renderer = run_keys(session, "j", "q")
        assert source.read_count == 2
        assert len(renderer.frames) == 3

    def test_initial_frame_shows_empty_hint(self):
        session = CounterSession.ephemeral()
        _, _, renderer = run_keys(session, "q")
        assert renderer.frames[0].footer == "Use n to make a new counter, and q to exit."

    def test_frame_after_create_lists_counter(self):
        session = CounterSession.ephemeral()
        _, _, renderer = run_keys(session, "n", "Pushups", ENTER, "q")
        assert [line.text for line in renderer.last.lines] == ["0: Pushups"]
        assert renderer.last.input_box is None

    def test_mutations_persist(self):
        repo = InMemoryRepository()
        session = CounterSession.from_repository(repo)
        run_keys(session, "n", "Pushups", ENTER, "j", "ll", "q")
        assert repo.snapshot == [("Pushups", 2)]
        assert repo.save_calls == 3

    def test_navigation_does_not_persist(self):
        repo = InMemoryRepository([Counter("a"), Counter("b")])
        session = CounterSession.from_repository(repo)
        run_keys(session, "jjk", "q")
        assert repo.save_calls == 0

    def test_save_errors_do_not_stop_loop(self):
        """Failed saves keep in-memory changes and become the end message."""
        repo = InMemoryRepository(fail_saves=True)
        session = CounterSession(repository=repo)
        message, _, _ = run_keys(session, "n", "a", ENTER, "j", "l", "q")
        assert session.store.counters[0].count == 1
        assert repo.save_calls == 2
        assert "attempt 2" in message

    def test_step_returns_exit_flag(self):
        loop = AppLoop(CounterSession.ephemeral())
        assert loop.step(keys("j")[0]) is False
        assert loop.step(keys("q")[0]) is True

    def test_run_against_json_file(self, tmp_path):
        path = tmp_path / "pushups.json"
        session = CounterSession.from_repository(JsonSnapshotRepository(path))
        run_keys(session, "n", "Pushups", ENTER, "j", "l", "q")

        reloaded = CounterSession.from_repository(JsonSnapshotRepository(path))
        assert [(c.name, c.count) for c in reloaded.store.counters] == [("Pushups", 1)]
