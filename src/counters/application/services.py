"""
Counter Application Services

The AppLoop drives a session: read an event, dispatch it, save when
asked, render, and stop once the exit flag is set.
"""
from typing import Optional

from src.counters.domain.ports import FrameRenderer, KeyEventSource
from src.counters.domain.value_objects import KeyPress
from .dispatcher import DispatchOutcome, EventDispatcher
from .layout import Frame, build_frame
from .session import CounterSession


class AppLoop:
    """
    Single-threaded, turn-based update loop.

    Each key is fully processed (dispatch, save, render) before the next
    one is read. Save failures never stop the loop; the last one becomes
    the session's end message.
    """

    def __init__(
        self,
        session: CounterSession,
        dispatcher: Optional[EventDispatcher] = None,
        renderer: Optional[FrameRenderer] = None,
    ):
        self._session = session
        self._dispatcher = dispatcher or EventDispatcher()
        self._renderer = renderer

    @property
    def session(self) -> CounterSession:
        return self._session

    @property
    def renderer(self) -> Optional[FrameRenderer]:
        return self._renderer

    @renderer.setter
    def renderer(self, renderer: Optional[FrameRenderer]) -> None:
        self._renderer = renderer

    @property
    def end_message(self) -> str:
        return self._session.end_message

    def frame(self) -> Frame:
        """Lay out the current state."""
        return build_frame(self._session.store, self._session.mode)

    def render(self) -> None:
        if self._renderer is not None:
            self._renderer.render(self.frame())

    def step(self, key: KeyPress) -> bool:
        """
        Process one key event.

        Returns:
            True once the session should exit
        """
        outcome: DispatchOutcome = self._dispatcher.dispatch(self._session, key)
        if outcome.persist:
            self._session.save()
        self.render()
        return self._session.should_exit

    def run(self, source: KeyEventSource, renderer: Optional[FrameRenderer] = None) -> str:
        """
        Run until the exit flag is set.

        Args:
            source: Blocking supplier of key events
            renderer: Renderer to draw frames with, replacing the current one

        Returns:
            The last save error message, or an empty string
        """
        if renderer is not None:
            self._renderer = renderer

        self.render()
        while not self._session.should_exit:
            self.step(source.read_event())
        return self.end_message
