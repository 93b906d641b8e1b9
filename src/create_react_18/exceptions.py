"""Custom exception hierarchy for create-react-18.

All exceptions that cross layer boundaries must inherit from
:class:`ScaffoldError`.  Raw ``OSError``, ``subprocess`` and ``json``
exceptions must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ScaffoldError
├── InvalidProjectNameError
├── TargetExistsError
├── ConfigurationError
├── CommandError
│   ├── CommandNotFoundError
│   └── CommandFailedError
├── WorkspaceError
├── ManifestError
└── EnvironmentError
    └── EnvironmentCheckError
"""

from __future__ import annotations

from collections.abc import Sequence


class ScaffoldError(Exception):
    """Base exception for all create-react-18 errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""
        self.reported: bool = False
        """True once a step reporter has already shown this failure."""


# --- Request validation ----------------------------------------------------

class InvalidProjectNameError(ScaffoldError):
    """Raised when no usable project name was supplied."""


class TargetExistsError(ScaffoldError):
    """Raised when the target directory is already present on disk."""


class ConfigurationError(ScaffoldError):
    """Raised when CLI options describe an unsupported configuration."""


# --- External commands -----------------------------------------------------

class CommandError(ScaffoldError):
    """Base class for failures of an external command (git, npm, ...)."""

    def __init__(
        self,
        message: str,
        *,
        args: Sequence[str] = (),
        output: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command: tuple[str, ...] = tuple(args)
        """The argv that was executed."""
        self.output: str = output
        """Captured stderr, or stdout when stderr was empty."""


class CommandNotFoundError(CommandError):
    """Raised when the executable is not present on PATH."""


class CommandFailedError(CommandError):
    """Raised when a command exits with a non-zero return code."""


# --- Filesystem ------------------------------------------------------------

class WorkspaceError(ScaffoldError):
    """Raised when a filesystem operation inside the target fails."""


class ManifestError(ScaffoldError):
    """Raised when ``package.json`` cannot be read, parsed or written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ScaffoldError):
    """Raised when a required runtime dependency is not available."""


class EnvironmentCheckError(EnvironmentError):
    """Raised when a required environment precondition is not met."""


def append_cleanup_suggestion(hint: str | None, project_name: str) -> str:
    """Append manual-cleanup guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = f"Remove the partially created '{project_name}' directory"
    if hint and marker in hint:
        return hint
    suggestion = f"{marker} before retrying with the same name."
    if not hint:
        return suggestion
    return "\n".join((hint, suggestion))
