"""Local filesystem implementation of :class:`~create_react_18.core.protocols.Workspace`.

All ``OSError`` and ``json`` exceptions are caught here and re-raised
as :class:`~create_react_18.exceptions.WorkspaceError` or
:class:`~create_react_18.exceptions.ManifestError`.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import stat
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from create_react_18.exceptions import ManifestError, WorkspaceError

logger = logging.getLogger(__name__)


def _make_writable_and_retry(func: Any, path: str, _exc: object) -> None:
    """``rmtree`` error handler for read-only files (git objects on Windows)."""
    os.chmod(path, stat.S_IWRITE)
    func(path)


class LocalWorkspace:
    """Concrete :class:`Workspace` operating on the local disk."""

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def remove_tree(self, path: Path) -> None:
        """Recursively delete *path*; a missing path is ignored.

        Raises
        ------
        WorkspaceError
            When the tree exists but cannot be fully removed.
        """
        if not os.path.lexists(path):
            logger.debug("Nothing to remove at %s", path)
            return

        logger.debug("Removing %s", path)
        try:
            if path.is_dir() and not path.is_symlink():
                if sys.version_info >= (3, 12):
                    shutil.rmtree(path, onexc=_make_writable_and_retry)
                else:
                    shutil.rmtree(path, onerror=_make_writable_and_retry)
            else:
                path.unlink()
        except OSError as exc:
            raise WorkspaceError(
                f"Could not remove {path}: {exc.strerror or exc}",
                hint="Check file permissions and that no other program holds the files open.",
            ) from exc

    def read_manifest(self, path: Path) -> dict[str, Any]:
        """Parse *path* as a UTF-8 JSON object.

        Raises
        ------
        ManifestError
            When the file is missing, unreadable, not valid JSON, or not
            a JSON object.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestError(
                f"{path.name} not found in {path.parent}.",
                hint="The template repository must contain a package.json at its root.",
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestError(f"Could not read {path}: {exc}") from exc

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(
                f"{path.name} is not valid JSON (line {exc.lineno}, column {exc.colno}).",
            ) from exc

        if not isinstance(data, dict):
            raise ManifestError(
                f"{path.name} must contain a JSON object, got {type(data).__name__}.",
            )
        return data

    def write_manifest(self, path: Path, data: Mapping[str, Any]) -> None:
        """Write *data* to *path* as 2-space indented JSON."""
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Could not write {path}: {exc}") from exc
        logger.debug("Wrote %s", path)
