import threading
from typing import Callable

from logly import logger
from PySide6.QtCore import QObject, Signal, Slot

from vslocate.application.vswhere_finder import find_installations, get_installation
from vslocate.core.errors import VswhereError
from vslocate.core.vswhere_options import SearchOptions


class SearchWorker(QObject):
    """Runs a vswhere query in a background Qt thread.

    The worker is meant to be moved to a `QThread` and started via a signal/slot.
    Exactly one of `found` or `failed` is emitted per run.
    """

    found = Signal(object)  # list[Installation]
    failed = Signal(str)

    def __init__(self, query: Callable[[threading.Event], list]):
        """Initializes the worker.

        Args:
            query: Callable receiving the worker's cancellation event and
                returning a list of installations.
        """
        super().__init__()
        self._query = query
        self._cancel = threading.Event()

    @classmethod
    def for_options(
        cls, options: SearchOptions | None = None, timeout_sec: float | None = None
    ) -> "SearchWorker":
        """Creates a worker that runs `find_installations(options)`."""
        return cls(
            lambda cancel: find_installations(
                options, timeout_sec=timeout_sec, cancel=cancel
            )
        )

    @classmethod
    def for_path(cls, path: str, timeout_sec: float | None = None) -> "SearchWorker":
        """Creates a worker that runs `get_installation(path)`; emits a one-item list."""
        return cls(
            lambda cancel: [
                get_installation(path, timeout_sec=timeout_sec, cancel=cancel)
            ]
        )

    def request_cancel(self) -> None:
        """Asks the running query to stop; the vswhere process is killed."""
        self._cancel.set()

    @Slot()
    def run(self):
        """Executes the configured query and emits `found` or `failed`."""
        try:
            installs = self._query(self._cancel)
        except VswhereError as e:
            logger.warning(f"vswhere query failed: {e}")
            self.failed.emit(str(e))
            return
        except Exception as e:
            logger.exception("vswhere query failed unexpectedly")
            self.failed.emit(str(e))
            return
        self.found.emit(installs)
