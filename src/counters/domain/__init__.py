# Counter Domain Layer
"""
Domain layer containing:
- Entities: Counters, the counter store, text buffers and input modes
- Value Objects: Immutable objects defined by their attributes
- Ports: Contracts for persistence, input and rendering
"""
from .entities import (
    Counter,
    CounterStore,
    TextBuffer,
    InputMode,
    NormalMode,
    CreatingCounterMode,
    AdjustingCounterMode,
)
from .value_objects import (
    AdjustSign,
    SelectionDirection,
    KeyCode,
    KeyEventKind,
    KeyPress,
)
from .ports import (
    SnapshotRepository,
    KeyEventSource,
    FrameRenderer,
)

__all__ = [
    'Counter',
    'CounterStore',
    'TextBuffer',
    'InputMode',
    'NormalMode',
    'CreatingCounterMode',
    'AdjustingCounterMode',
    'AdjustSign',
    'SelectionDirection',
    'KeyCode',
    'KeyEventKind',
    'KeyPress',
    'SnapshotRepository',
    'KeyEventSource',
    'FrameRenderer',
]
