# Terminal TUI Package
"""
Terminal User Interface using Textual.
"""
from .app import (
    CounterTUI,
    CounterListWidget,
    InputBoxWidget,
    HintBar,
    TextualFrameRenderer,
    run_tui,
)

__all__ = [
    'CounterTUI',
    'CounterListWidget',
    'InputBoxWidget',
    'HintBar',
    'TextualFrameRenderer',
    'run_tui',
]
