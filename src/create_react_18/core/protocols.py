"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

from create_react_18.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for running an external command to completion.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Run *args* with *cwd* as working directory and wait for it.

        Implementations must never raise on a non-zero exit code; the
        caller inspects :attr:`CommandResult.returncode`.

        Raises
        ------
        CommandNotFoundError
            When the executable cannot be started at all.
        """
        ...  # pragma: no cover


class Workspace(Protocol):
    """Contract for the filesystem operations of the pipeline."""

    def exists(self, path: Path) -> bool:
        """Return ``True`` if any entry (even a dangling symlink) is at *path*."""
        ...  # pragma: no cover

    def remove_tree(self, path: Path) -> None:
        """Recursively remove *path*; a missing path is not an error.

        Raises
        ------
        WorkspaceError
            When the removal fails.
        """
        ...  # pragma: no cover

    def read_manifest(self, path: Path) -> dict[str, Any]:
        """Read and parse the JSON object at *path*.

        Raises
        ------
        ManifestError
            When the file is missing, undecodable or not a JSON object.
        """
        ...  # pragma: no cover

    def write_manifest(self, path: Path, data: Mapping[str, Any]) -> None:
        """Serialise *data* to *path* as indented JSON.

        Raises
        ------
        ManifestError
            When the file cannot be written.
        """
        ...  # pragma: no cover


class StepReporter(Protocol):
    """Receives progress notifications for each pipeline step."""

    def start(self, text: str) -> None:
        ...  # pragma: no cover

    def succeed(self, text: str) -> None:
        ...  # pragma: no cover

    def fail(self, text: str, *, detail: str | None = None) -> None:
        """Mark the running step as failed, optionally showing *detail*."""
        ...  # pragma: no cover
