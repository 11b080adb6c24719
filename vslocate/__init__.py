"""Locate Visual Studio installations through Microsoft's vswhere.

vswhere must be installed at
`%ProgramFiles(x86)%\\Microsoft Visual Studio\\Installer\\vswhere.exe`, which is
where the Visual Studio Installer puts it.
"""

from vslocate.application.vswhere_finder import find_installations, get_installation
from vslocate.core.errors import (
    DecodeError,
    ExecutionError,
    ExternalToolError,
    InstallationNotFoundError,
    SearchCancelledError,
    SearchTimeoutError,
    VswhereError,
)
from vslocate.core.vswhere_options import SearchOptions
from vslocate.core.vswhere_types import Catalog, Installation, Properties

__all__ = [
    "Catalog",
    "DecodeError",
    "ExecutionError",
    "ExternalToolError",
    "Installation",
    "InstallationNotFoundError",
    "Properties",
    "SearchCancelledError",
    "SearchOptions",
    "SearchTimeoutError",
    "VswhereError",
    "find_installations",
    "get_installation",
]
