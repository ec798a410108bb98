"""
Counter CLI configuration and settings.

Centralizes configuration for the counter CLI,
including default values, paths, and environment variables.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any
from pathlib import Path
import os

from src.counters.infrastructure.errors import SetupError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CounterCliConfig:
    """Configuration for counter CLI sessions."""

    # Snapshot files
    snapshot_extension: str = "json"

    # Logging
    log_dir: Optional[str] = None
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> 'CounterCliConfig':
        """Create config from environment variables."""
        return cls(
            log_dir=os.getenv("COUNTERS_LOG_DIR") or None,
            log_level=_log_level(os.getenv("COUNTERS_LOG_LEVEL", "INFO")),
            json_logs=os.getenv("COUNTERS_JSON_LOGS", "false").lower() == "true",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "snapshot_extension": self.snapshot_extension,
            "log_dir": self.log_dir,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
        }

    def resolve_snapshot_path(self, name: str, cwd: Optional[Path] = None) -> Path:
        """
        Resolve a snapshot name against the working directory.

        The suffix is replaced by the snapshot extension, so ``pushups``
        and ``pushups.txt`` both become ``pushups.json``.

        Raises:
            SetupError: If the working directory is unavailable or the
                name cannot carry an extension
        """
        if Path(name).name in ("", ".", ".."):
            raise SetupError(f"Invalid snapshot name {name!r}")

        if cwd is None:
            try:
                cwd = Path.cwd()
            except OSError as e:
                raise SetupError(f"Couldn't get working directory: {e}") from e

        try:
            return (cwd / name).with_suffix(f".{self.snapshot_extension}")
        except ValueError as e:
            raise SetupError(f"Invalid snapshot name {name!r}: {e}") from e


def _log_level(value: str) -> str:
    """Normalise a level name; unknown names fall back to INFO."""
    level = value.strip().upper()
    return level if level in LOG_LEVELS else "INFO"
