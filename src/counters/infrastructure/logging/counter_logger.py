"""
Session logging for the counter application.

Records carry the session id and snapshot path of the run that wrote
them. The TUI owns the terminal, so records only ever go to a log file;
without one they are dropped.
"""
import logging
import json
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional
from pathlib import Path

LOGGER_PREFIX = "counters"


@dataclass(frozen=True)
class LogContext:
    """Identifies the session and snapshot a record belongs to."""
    session_id: Optional[str] = None
    snapshot: Optional[str] = None
    operation: Optional[str] = None

    def with_operation(self, operation: str) -> 'LogContext':
        return replace(self, operation=operation)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SessionFormatter(logging.Formatter):
    """
    Formats records as one JSON object per line, or as a short human line.

    Human lines look like::

        [12:00:00] [INFO] [session 1a2b3c4d] Session started with 2 counters counters=2
    """

    def __init__(self, json_output: bool = False):
        super().__init__()
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        fields = getattr(record, 'fields', {})
        duration_ms = getattr(record, 'duration_ms', None)

        if self._json_output:
            data = {
                'timestamp': _now().isoformat(),
                'level': record.levelname,
                'message': record.getMessage(),
                'component': getattr(record, 'component', None),
                'session_id': getattr(record, 'session_id', None),
                'snapshot': getattr(record, 'snapshot', None),
                'operation': getattr(record, 'operation', None),
                'duration_ms': duration_ms,
            }
            data = {k: v for k, v in data.items() if v is not None}
            if fields:
                data['fields'] = fields
            return json.dumps(data, default=str, ensure_ascii=False)

        tag = getattr(record, 'component', None) or record.name
        session_id = getattr(record, 'session_id', None)
        if session_id:
            tag = f"{tag} {session_id}"
        parts = [
            f"[{_now().strftime('%H:%M:%S')}]",
            f"[{record.levelname}]",
            f"[{tag}]",
            record.getMessage(),
        ]
        if duration_ms is not None:
            parts.append(f"({duration_ms:.2f}ms)")
        parts.extend(f"{key}={value}" for key, value in fields.items())
        return " ".join(parts)


class CounterLogger:
    """
    Logger for one component of the application.

    Creating a CounterLogger never changes where records go; that is
    decided once by ``create_counter_logger``. Until then records are
    discarded.

    Usage:
        logger = CounterLogger("session")
        ctx = LogContext(session_id="1a2b3c4d", snapshot="pushups.json")

        with logger.timed_operation("save", ctx):
            repository.save(counters)
    """

    def __init__(self, component: str):
        self._component = component
        self._logger = logging.getLogger(f"{LOGGER_PREFIX}.{component}")
        self._logger.propagate = False
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @property
    def component(self) -> str:
        return self._component

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[LogContext] = None,
        duration_ms: Optional[float] = None,
        **fields,
    ) -> None:
        extra = {
            'component': self._component,
            'duration_ms': duration_ms,
            'fields': fields,
        }
        if context:
            extra['session_id'] = context.session_id
            extra['snapshot'] = context.snapshot
            extra['operation'] = context.operation
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[LogContext] = None, **fields) -> None:
        self._log(logging.DEBUG, message, context, **fields)

    def info(self, message: str, context: Optional[LogContext] = None, **fields) -> None:
        self._log(logging.INFO, message, context, **fields)

    def warning(self, message: str, context: Optional[LogContext] = None, **fields) -> None:
        self._log(logging.WARNING, message, context, **fields)

    def error(self, message: str, context: Optional[LogContext] = None, **fields) -> None:
        self._log(logging.ERROR, message, context, **fields)

    def timed_operation(
        self,
        operation: str,
        context: Optional[LogContext] = None,
    ) -> 'TimedOperation':
        """Time the enclosed block and log how it ended."""
        return TimedOperation(self, operation, context)


class TimedOperation:
    """Logs a debug record on success and a warning on failure, with the duration."""

    def __init__(
        self,
        logger: CounterLogger,
        operation: str,
        context: Optional[LogContext] = None,
    ):
        self._logger = logger
        self._operation = operation
        self._context = (context or LogContext()).with_operation(operation)
        self._start_time: Optional[datetime] = None

    def __enter__(self):
        self._start_time = _now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (_now() - self._start_time).total_seconds() * 1000

        if exc_type:
            self._logger.warning(
                f"Failed {self._operation}: {exc_val}",
                self._context,
                duration_ms=duration_ms,
            )
        else:
            self._logger.debug(
                f"Completed {self._operation}",
                self._context,
                duration_ms=duration_ms,
            )

        return False


def create_counter_logger(
    component: str,
    level: str = "INFO",
    json_output: bool = False,
    log_dir: Optional[str] = None,
) -> CounterLogger:
    """
    Configure the ``counters.<component>`` logger and return a wrapper for it.

    Replaces any handlers from an earlier call. With ``log_dir`` set,
    records go to ``<log_dir>/counters_<component>.log``.

    Raises:
        OSError: If the log directory or file cannot be created
    """
    logger = logging.getLogger(f"{LOGGER_PREFIX}.{component}")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path / f"counters_{component}.log", encoding="utf-8")
        file_handler.setFormatter(SessionFormatter(json_output=json_output))
        logger.addHandler(file_handler)

    return CounterLogger(component)
