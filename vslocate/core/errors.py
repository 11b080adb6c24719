class VswhereError(Exception):
    """Base class for every failure raised while querying vswhere."""


class ExecutionError(VswhereError):
    """vswhere could not be launched or did not run to completion."""


class SearchCancelledError(ExecutionError):
    """The caller cancelled the search before vswhere exited."""


class SearchTimeoutError(ExecutionError):
    """vswhere did not exit before the caller's deadline."""


class ExternalToolError(VswhereError):
    """vswhere ran and exited with a non-zero status.

    Attributes:
        returncode: Exit status reported by the process.
        stderr: Captured standard error, byte for byte.
    """

    def __init__(self, returncode: int, stderr: bytes, message: str):
        super().__init__(f"vswhere failed: {message}")
        self.returncode = returncode
        self.stderr = stderr


class DecodeError(VswhereError):
    """vswhere output did not match the expected JSON shape."""


class InstallationNotFoundError(VswhereError):
    """No installation exists at the queried path."""

    def __init__(self, path: str):
        super().__init__(f"no install at path {path}")
        self.path = path
