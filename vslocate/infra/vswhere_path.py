import os
from typing import Final

PROGRAM_FILES_ENV: Final[str] = "ProgramFiles(x86)"
VSWHERE_DIR_SEGMENTS: Final[tuple[str, ...]] = ("Microsoft Visual Studio", "Installer")
VSWHERE_EXE: Final[str] = "vswhere.exe"


def find_vswhere_executable() -> str:
    """Returns the path vswhere is installed at by the Visual Studio Installer.

    The location is fixed: `%ProgramFiles(x86)%\\Microsoft Visual Studio\\Installer\\vswhere.exe`.
    When the environment variable is unset the result is a relative path and
    launching it fails later.

    Returns:
        The executable path to use with subprocess.
    """
    return os.path.join(
        os.environ.get(PROGRAM_FILES_ENV, ""), *VSWHERE_DIR_SEGMENTS, VSWHERE_EXE
    )
