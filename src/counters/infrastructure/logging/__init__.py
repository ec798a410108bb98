from .counter_logger import (
    CounterLogger,
    LogContext,
    create_counter_logger,
)

__all__ = [
    'CounterLogger',
    'LogContext',
    'create_counter_logger',
]
