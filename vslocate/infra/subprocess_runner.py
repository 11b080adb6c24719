import os
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Final

from logly import logger

from vslocate.core.errors import ExecutionError, SearchCancelledError, SearchTimeoutError

_CREATE_NO_WINDOW: Final[int] = 0x08000000
_POLL_INTERVAL_SEC: Final[float] = 0.1


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Output of a finished process."""

    stdout: bytes
    stderr: bytes
    returncode: int


def _kill(proc: subprocess.Popen) -> None:
    """Kills the process and reaps it so no pipe or zombie is left behind."""
    proc.kill()
    proc.communicate()


def run_process(
    argv: list[str],
    timeout_sec: float | None = None,
    cancel: threading.Event | None = None,
) -> ProcessResult:
    """Runs a command to completion and captures stdout and stderr.

    The call blocks until the process exits. When `cancel` is set or the
    deadline passes first, the process is killed before the error is raised.

    Args:
        argv: Command and arguments.
        timeout_sec: Seconds to wait before giving up. None waits forever.
        cancel: Event another thread may set to abort the call.

    Returns:
        The captured output and exit status. A non-zero status is not an error here.

    Raises:
        SearchCancelledError: If `cancel` was set before the process exited.
        SearchTimeoutError: If `timeout_sec` elapsed before the process exited.
        ExecutionError: If the process could not be started.
    """
    if cancel is not None and cancel.is_set():
        raise SearchCancelledError(f"cancelled before starting {argv[0]}")

    kwargs: dict = {
        "stdout": subprocess.PIPE,
        "stderr": subprocess.PIPE,
    }
    if os.name == "nt":
        kwargs["creationflags"] = _CREATE_NO_WINDOW

    logger.info(f"Starting subprocess timeout={timeout_sec}s argv={' '.join(argv)}")
    try:
        proc = subprocess.Popen(argv, **kwargs)
    except (OSError, ValueError) as e:
        raise ExecutionError(f"vswhere failed: {e}") from e

    deadline = None if timeout_sec is None else time.monotonic() + timeout_sec
    with proc:
        while True:
            wait = _POLL_INTERVAL_SEC if cancel is not None else None
            if deadline is not None:
                remaining = max(deadline - time.monotonic(), 0.0)
                wait = remaining if wait is None else min(wait, remaining)
            try:
                stdout, stderr = proc.communicate(timeout=wait)
                break
            except subprocess.TimeoutExpired as e:
                if cancel is not None and cancel.is_set():
                    logger.warning("Subprocess cancelled")
                    _kill(proc)
                    raise SearchCancelledError(f"cancelled while running {argv[0]}") from e
                if deadline is not None and time.monotonic() >= deadline:
                    logger.warning("Subprocess timed out")
                    _kill(proc)
                    raise SearchTimeoutError(
                        f"{argv[0]} did not exit within {timeout_sec}s"
                    ) from e

    logger.info(f"Subprocess finished returncode={proc.returncode}")
    return ProcessResult(stdout=stdout, stderr=stderr, returncode=proc.returncode)
