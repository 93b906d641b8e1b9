"""Pure builders for the external commands issued by the pipeline.

Every builder returns an argv tuple — no shell strings, no quoting, no
subprocess calls.  Keeping the commands as data lets tests assert on
exactly what would be executed without running git or a package
manager.
"""

from __future__ import annotations

from create_react_18.core.models import ScaffoldConfig

# Platforms whose package-manager shims are batch files.  Without the
# suffix, ``CreateProcess`` fails to resolve ``pnpm``/``npm`` or hangs.
_EXECUTABLE_SUFFIXES: dict[str, str] = {
    "win32": ".cmd",
    "cygwin": ".cmd",
}

_DEV_COMMANDS: dict[str, tuple[str, ...]] = {
    "npm": ("npm", "run", "dev"),
    "pnpm": ("pnpm", "dev"),
    "yarn": ("yarn", "dev"),
}


# ---------------------------------------------------------------------------
# Package manager
# ---------------------------------------------------------------------------

def package_manager_executable(package_manager: str, platform: str) -> str:
    """Return the executable name of *package_manager* on *platform*.

    >>> package_manager_executable("pnpm", "win32")
    'pnpm.cmd'
    >>> package_manager_executable("pnpm", "linux")
    'pnpm'
    """
    return package_manager + _EXECUTABLE_SUFFIXES.get(platform, "")


def install_command(config: ScaffoldConfig) -> tuple[str, ...]:
    return (package_manager_executable(config.package_manager, config.platform), "install")


def dev_command(config: ScaffoldConfig) -> str:
    """Human-readable command that starts the dev server (shown as a hint)."""
    return " ".join(_DEV_COMMANDS[config.package_manager])


# ---------------------------------------------------------------------------
# git
# ---------------------------------------------------------------------------

def clone_command(config: ScaffoldConfig, project_name: str) -> tuple[str, ...]:
    """Clone argv; ``--`` keeps a name such as ``-demo`` from being read as an option."""
    return ("git", "clone", "--", config.template_url, project_name)


def reinit_commands(config: ScaffoldConfig) -> tuple[tuple[str, ...], ...]:
    """Commands that create a fresh single-commit repository, in order."""
    return (
        ("git", "init"),
        ("git", "add", "."),
        ("git", "commit", "-m", config.commit_message),
        ("git", "branch", "-M", config.branch),
    )
