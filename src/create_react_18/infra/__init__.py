"""Infrastructure layer — external system integration.

This layer wraps all interaction with git, the package manager and the
local filesystem.  Every raw ``OSError``/``json`` exception must be
caught here and re-raised as a
:class:`~create_react_18.exceptions.ScaffoldError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from create_react_18.infra.subprocess_runner import SubprocessCommandRunner
from create_react_18.infra.toolchain import (
    ToolStatus,
    detect_git,
    detect_package_manager,
    detect_tool,
    require_tool,
)
from create_react_18.infra.workspace import LocalWorkspace

__all__: list[str] = [
    "LocalWorkspace",
    "SubprocessCommandRunner",
    "ToolStatus",
    "detect_git",
    "detect_package_manager",
    "detect_tool",
    "require_tool",
]
