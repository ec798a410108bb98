"""
Counter Ports (Interfaces)

Ports define the contracts the core consumes and exposes.
These are Protocol classes following the Ports & Adapters pattern.
Implementations live in the infrastructure and presentation layers.
"""
from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

from .entities import Counter
from .value_objects import KeyPress

if TYPE_CHECKING:
    from src.counters.application.layout import Frame


@runtime_checkable
class SnapshotRepository(Protocol):
    """
    Port for counter list persistence.

    A save fully replaces the previous snapshot.
    """

    def exists(self) -> bool:
        """Whether a snapshot is already stored."""
        ...

    def load(self) -> List[Counter]:
        """Read the stored counters in display order."""
        ...

    def save(self, counters: List[Counter]) -> None:
        """Replace the stored snapshot with ``counters``."""
        ...


@runtime_checkable
class KeyEventSource(Protocol):
    """Port delivering keyboard input; blocks until an event arrives."""

    def read_event(self) -> KeyPress:
        ...


@runtime_checkable
class FrameRenderer(Protocol):
    """Port drawing a laid-out frame."""

    def render(self, frame: 'Frame') -> None:
        ...
