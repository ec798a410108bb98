# Counter Application Layer
"""
Application layer containing:
- Session: The state of one run of the application
- Dispatcher: Key event handling per input mode
- Layout: What each frame shows
- Services: The update loop tying them together
"""
from .session import CounterSession
from .dispatcher import DispatchOutcome, EventDispatcher
from .layout import CounterLine, Frame, InputBox, build_frame
from .services import AppLoop

__all__ = [
    'CounterSession',
    'DispatchOutcome',
    'EventDispatcher',
    'CounterLine',
    'Frame',
    'InputBox',
    'build_frame',
    'AppLoop',
]
