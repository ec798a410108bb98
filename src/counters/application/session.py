"""
Counter session state.

One CounterSession exists per run of the application. It owns the
counter store, the active input mode, the exit flag, the optional save
target and the last save error.
"""
from typing import Optional
from uuid import uuid4

from src.counters.domain.entities import CounterStore, InputMode, NormalMode
from src.counters.domain.ports import SnapshotRepository
from src.counters.infrastructure.errors import SnapshotSaveError
from src.counters.infrastructure.logging.counter_logger import (
    CounterLogger,
    LogContext,
)


class CounterSession:
    """
    Aggregate of everything a running session mutates.

    A session without a repository is ephemeral: saves succeed without
    touching the disk.
    """

    def __init__(
        self,
        store: Optional[CounterStore] = None,
        repository: Optional[SnapshotRepository] = None,
        logger: Optional[CounterLogger] = None,
    ):
        self.store = store if store is not None else CounterStore()
        self.mode: InputMode = NormalMode()
        self.should_exit = False
        self.end_message = ""
        self._repository = repository
        self._logger = logger or CounterLogger("session")
        self._context = LogContext(
            session_id=uuid4().hex[:8],
            snapshot=str(getattr(repository, "path", "")) or None,
        )

    @classmethod
    def ephemeral(cls, logger: Optional[CounterLogger] = None) -> 'CounterSession':
        """Start an empty session that never writes to disk."""
        return cls(logger=logger)

    @classmethod
    def from_repository(
        cls,
        repository: SnapshotRepository,
        logger: Optional[CounterLogger] = None,
    ) -> 'CounterSession':
        """
        Start a session saving to ``repository``.

        Existing snapshots are loaded; a missing one starts an empty list.

        Raises:
            SnapshotLoadError: If an existing snapshot cannot be read
        """
        store = CounterStore()
        if repository.exists():
            store = CounterStore(counters=repository.load())
        session = cls(store=store, repository=repository, logger=logger)
        session._logger.info(
            f"Session started with {len(store)} counters",
            session._context,
        )
        return session

    @property
    def repository(self) -> Optional[SnapshotRepository]:
        return self._repository

    @property
    def is_ephemeral(self) -> bool:
        return self._repository is None

    def request_exit(self) -> None:
        self.should_exit = True

    def save(self) -> bool:
        """
        Write the counters to the repository.

        Failures do not propagate: the message is kept as ``end_message``
        (last error wins) and reported when the session ends.

        Returns:
            True if the snapshot was written or the session is ephemeral
        """
        if self._repository is None:
            return True

        try:
            with self._logger.timed_operation("save", self._context):
                self._repository.save(self.store.counters)
        except SnapshotSaveError as e:
            self.end_message = str(e)
            return False
        return True
