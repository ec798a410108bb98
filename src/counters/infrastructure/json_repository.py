"""
JSON snapshot repository.

Stores the counter list as a pretty-printed JSON array of
``{"name": ..., "count": ...}`` objects. Every save replaces the whole file.
"""
import json
from pathlib import Path
from typing import Any, List

from src.counters.domain.entities import Counter, I64_MAX, I64_MIN
from src.counters.infrastructure.errors import SnapshotLoadError, SnapshotSaveError


def counters_to_json(counters: List[Counter]) -> List[dict]:
    """Convert counters to JSON-ready records."""
    return [{"name": counter.name, "count": counter.count} for counter in counters]


def counters_from_json(data: Any) -> List[Counter]:
    """
    Build counters from decoded JSON.

    Raises:
        ValueError: If the structure is not a list of name/count records
    """
    if not isinstance(data, list):
        raise ValueError("expected a list of counters")

    counters = []
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"counter {position} is not an object")
        name = record.get("name")
        count = record.get("count")
        if not isinstance(name, str):
            raise ValueError(f"counter {position} has no string name")
        # bool is an int subclass
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValueError(f"counter {position} has no integer count")
        if not I64_MIN <= count <= I64_MAX:
            raise ValueError(f"counter {position} count is out of range")
        counters.append(Counter(name=name, count=count))
    return counters


class JsonSnapshotRepository:
    """SnapshotRepository backed by a single JSON file."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> List[Counter]:
        """
        Read counters from the snapshot file.

        Raises:
            SnapshotLoadError: If the file cannot be opened or parsed
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SnapshotLoadError(f"Failed to open file: {self._path}: {e}", path=self._path) from e
        except ValueError as e:
            raise SnapshotLoadError(f"Failed to parse file: {self._path}: {e}", path=self._path) from e

        try:
            return counters_from_json(data)
        except ValueError as e:
            raise SnapshotLoadError(f"Failed to parse file: {self._path}: {e}", path=self._path) from e

    def save(self, counters: List[Counter]) -> None:
        """
        Rewrite the snapshot file with ``counters``.

        The records are written to a sibling ``.tmp`` file which then
        replaces the snapshot, so a failed save leaves the previous
        contents in place.

        Raises:
            SnapshotSaveError: If the file cannot be created or written
        """
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(counters_to_json(counters), f, ensure_ascii=False, indent=2)
            tmp.replace(self._path)
        except OSError as e:
            if tmp.is_file():
                tmp.unlink()
            raise SnapshotSaveError(f"Failed to open file: {self._path}: {e}", path=self._path) from e
