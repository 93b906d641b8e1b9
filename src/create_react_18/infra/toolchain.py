"""Infrastructure: toolchain detection and platform guidance.

This module is responsible for locating ``git`` and the package
manager on the system PATH and providing platform-specific
installation guidance when they are missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from create_react_18.core.commands import package_manager_executable
from create_react_18.exceptions import EnvironmentCheckError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one executable.

    Attributes
    ----------
    name : str
        The executable that was looked up (e.g. ``"pnpm.cmd"``).
    found : bool
        Whether it was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(executable: str, tool: str | None = None) -> ToolStatus:
    """Probe PATH for *executable*.

    *tool* is the platform-independent name used to look up install
    guidance (``"pnpm"`` for ``"pnpm.cmd"``); it defaults to
    *executable*.
    """
    result = shutil.which(executable)
    if result is not None:
        return ToolStatus(
            name=executable,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )
    return ToolStatus(
        name=executable,
        found=False,
        path=None,
        install_commands=_platform_install_commands(tool or executable),
    )


def detect_git() -> ToolStatus:
    return detect_tool("git")


def detect_package_manager(package_manager: str, host_platform: str) -> ToolStatus:
    """Probe PATH for the platform-specific executable of *package_manager*."""
    return detect_tool(
        package_manager_executable(package_manager, host_platform),
        package_manager,
    )


def require_tool(status: ToolStatus) -> Path:
    """Return the path of a detected tool or raise :class:`EnvironmentCheckError`."""
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append(f"Install {status.name} using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise EnvironmentCheckError(
            f"{status.name} is not installed or not on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

_NODE_TOOL_COMMANDS: dict[str, tuple[str, ...]] = {
    "pnpm": ("npm install -g pnpm", "corepack enable pnpm"),
    "yarn": ("npm install -g yarn", "corepack enable yarn"),
}


def _platform_install_commands(tool: str) -> tuple[str, ...]:
    """Return install commands for *tool* appropriate for the current OS."""
    if tool in _NODE_TOOL_COMMANDS:
        return _NODE_TOOL_COMMANDS[tool]

    system = platform.system().lower()
    if tool == "git":
        if system == "windows":
            return ("winget install Git.Git", "choco install git")
        if system == "linux":
            return (
                "sudo apt install git",
                "sudo dnf install git",
                "sudo pacman -S git",
            )
        if system == "darwin":
            return ("brew install git", "xcode-select --install")
        return ("Please install git from https://git-scm.com/downloads",)

    # npm ships with Node.js.
    if system == "windows":
        return ("winget install OpenJS.NodeJS.LTS", "choco install nodejs-lts")
    if system == "linux":
        return (
            "sudo apt install nodejs npm",
            "sudo dnf install nodejs npm",
            "sudo pacman -S nodejs npm",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Please install Node.js from https://nodejs.org/en/download",)
