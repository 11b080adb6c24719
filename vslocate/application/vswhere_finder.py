import threading

from logly import logger

from vslocate.core.errors import ExternalToolError, InstallationNotFoundError
from vslocate.core.vswhere_options import SearchOptions, build_path_args, build_search_args
from vslocate.core.vswhere_parser import decode_output, parse_installations
from vslocate.core.vswhere_types import Installation
from vslocate.infra.subprocess_runner import run_process
from vslocate.infra.vswhere_path import find_vswhere_executable


def search(
    args: list[str],
    timeout_sec: float | None = None,
    cancel: threading.Event | None = None,
) -> list[Installation]:
    """Runs vswhere once with `args` and decodes its JSON output.

    Args:
        args: vswhere arguments, expected to request `-format json`.
        timeout_sec: Seconds to wait for vswhere. None waits forever.
        cancel: Event another thread may set to abort the call.

    Returns:
        Every installation vswhere reported, in its order.

    Raises:
        ExecutionError: vswhere could not run to completion.
        ExternalToolError: vswhere exited with a non-zero status.
        DecodeError: The output was not the expected JSON.
    """
    argv = [find_vswhere_executable(), *args]
    result = run_process(argv, timeout_sec=timeout_sec, cancel=cancel)

    if result.returncode != 0:
        err = decode_output(result.stderr)
        logger.warning(f"vswhere exited with returncode={result.returncode}")
        raise ExternalToolError(result.returncode, result.stderr, err)

    return parse_installations(decode_output(result.stdout))


def find_installations(
    options: SearchOptions | None = None,
    *,
    timeout_sec: float | None = None,
    cancel: threading.Event | None = None,
) -> list[Installation]:
    """Finds installations matching `options`.

    Without options vswhere's defaults apply: complete, launchable, released
    instances of the default product set.
    """
    installs = search(
        build_search_args(options or SearchOptions()),
        timeout_sec=timeout_sec,
        cancel=cancel,
    )
    logger.info(f"vswhere found {len(installs)} installation(s)")
    return installs


def get_installation(
    path: str,
    *,
    timeout_sec: float | None = None,
    cancel: threading.Event | None = None,
) -> Installation:
    """Returns the installation rooted at `path`.

    Raises:
        InstallationNotFoundError: If vswhere reports nothing at `path`.
    """
    installs = search(build_path_args(path), timeout_sec=timeout_sec, cancel=cancel)
    if not installs:
        raise InstallationNotFoundError(path)
    return installs[0]
