"""Domain models for create-react-18.

All models are **frozen** dataclasses — immutable value objects with
little behaviour beyond data access.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from create_react_18.exceptions import ConfigurationError, InvalidProjectNameError

DEFAULT_TEMPLATE_URL: str = "https://github.com/Lin-PQ/react-playground.git"
DEFAULT_PROJECT_NAME: str = "my-app"
DEFAULT_PACKAGE_MANAGER: str = "pnpm"
SUPPORTED_PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "pnpm", "yarn")


# ---------------------------------------------------------------------------
# Scaffold request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldRequest:
    """The single user input of a run, bound to the invocation directory."""

    project_name: str
    """Directory name of the new project, also written to ``package.json``."""

    cwd: Path
    """Absolute directory the CLI was invoked from."""

    @classmethod
    def create(cls, project_name: str | None, cwd: Path) -> ScaffoldRequest:
        """Validate *project_name* and bind it to *cwd*.

        Raises
        ------
        InvalidProjectNameError
            When the name is ``None``, empty or whitespace only.
        """
        name = (project_name or "").strip()
        if not name:
            raise InvalidProjectNameError(
                "Project name must not be empty.",
                hint="Pass a name as the first argument or type one at the prompt.",
            )
        return cls(project_name=name, cwd=Path(cwd).absolute())

    @property
    def target_path(self) -> Path:
        """Absolute location where the project is created."""
        return self.cwd / self.project_name


# ---------------------------------------------------------------------------
# Pipeline configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldConfig:
    """Recognised options of the scaffold pipeline."""

    template_url: str = DEFAULT_TEMPLATE_URL
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    default_project_name: str = DEFAULT_PROJECT_NAME
    manifest_version: str = "1.0.0"
    commit_message: str = "feat: init"
    branch: str = "main"
    platform: str = field(default_factory=lambda: sys.platform)

    def __post_init__(self) -> None:
        if self.package_manager not in SUPPORTED_PACKAGE_MANAGERS:
            raise ConfigurationError(
                f"Unsupported package manager: {self.package_manager!r}.",
                hint="Choose one of: " + ", ".join(SUPPORTED_PACKAGE_MANAGERS),
            )
        if not self.template_url.strip():
            raise ConfigurationError("Template URL must not be empty.")

    @classmethod
    def from_options(
        cls,
        *,
        template_url: str | None = None,
        package_manager: str | None = None,
    ) -> ScaffoldConfig:
        """Build a config from optional CLI flags, keeping defaults for ``None``."""
        return cls(
            template_url=template_url or DEFAULT_TEMPLATE_URL,
            package_manager=package_manager or DEFAULT_PACKAGE_MANAGER,
        )


# ---------------------------------------------------------------------------
# Command execution result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one external command run to completion."""

    args: tuple[str, ...]
    cwd: Path
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Captured stderr, falling back to stdout when stderr is blank."""
        if self.stderr.strip():
            return self.stderr
        return self.stdout
