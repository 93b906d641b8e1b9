"""Core scaffold service — orchestrates the scaffold pipeline.

This service delegates every side effect to collaborators injected at
construction time:

* a :class:`~create_react_18.core.protocols.CommandRunner` for git and
  the package manager,
* a :class:`~create_react_18.core.protocols.Workspace` for filesystem
  access,
* a :class:`~create_react_18.core.protocols.StepReporter` for progress.

Guarantees
----------
* Steps run strictly in order, one external command at a time.
* The first failing step aborts the pipeline; nothing is retried and
  nothing is rolled back.
* Only :class:`~create_react_18.exceptions.ScaffoldError` subclasses
  escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from create_react_18.core import commands
from create_react_18.core.manifest import MANIFEST_FILENAME, rename_manifest
from create_react_18.core.models import ScaffoldConfig, ScaffoldRequest
from create_react_18.core.protocols import CommandRunner, StepReporter, Workspace
from create_react_18.exceptions import (
    CommandError,
    CommandFailedError,
    ScaffoldError,
    TargetExistsError,
    append_cleanup_suggestion,
)

logger = logging.getLogger(__name__)


class _SilentReporter:
    """Reporter used when the caller does not want progress output."""

    def start(self, text: str) -> None:
        pass

    def succeed(self, text: str) -> None:
        pass

    def fail(self, text: str, *, detail: str | None = None) -> None:
        pass


class ScaffoldService:
    """Drives the clone → clean → reinit → manifest → install pipeline.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    workspace:
        Any object satisfying the :class:`Workspace` protocol.
    config:
        Template source, package manager and fixed values.
    reporter:
        Optional progress sink.  Defaults to a silent reporter.
    """

    FAIL_TEXT: str = "Operation failed"

    def __init__(
        self,
        runner: CommandRunner,
        workspace: Workspace,
        config: ScaffoldConfig,
        reporter: StepReporter | None = None,
    ) -> None:
        self._runner: CommandRunner = runner
        self._workspace: Workspace = workspace
        self._config: ScaffoldConfig = config
        self._reporter: StepReporter = reporter or _SilentReporter()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_target(self, request: ScaffoldRequest) -> None:
        """Refuse to scaffold into an existing path.

        Raises
        ------
        TargetExistsError
            When any filesystem entry is present at the target path.
        """
        if self._workspace.exists(request.target_path):
            raise TargetExistsError(
                f"Directory {request.project_name} already exists.",
                hint="Choose another project name or remove the directory.",
            )

    def scaffold(self, request: ScaffoldRequest) -> Path:
        """Run the whole pipeline for *request* and return the target path.

        Raises
        ------
        TargetExistsError
            Before any side effect, when the target already exists.
        ScaffoldError
            When any later step fails.  The hint then tells the user to
            remove the partially created directory.
        """
        self.check_target(request)
        target = request.target_path
        logger.debug("Scaffolding %s into %s", self._config.template_url, target)

        try:
            self._step(
                "Downloading template...",
                "Template downloaded",
                lambda: self._run_checked(
                    commands.clone_command(self._config, request.project_name),
                    cwd=request.cwd,
                ),
            )
            self._step(
                "Cleaning git history...",
                "Git history cleaned",
                lambda: self._workspace.remove_tree(target / ".git"),
            )
            self._step(
                "Initialising git repository...",
                f"Git repository initialised on branch {self._config.branch}",
                lambda: self._reinit_repository(target),
            )
            self._step(
                f"Updating {MANIFEST_FILENAME}...",
                f"{MANIFEST_FILENAME} updated",
                lambda: self._rewrite_manifest(request),
            )
            self._step(
                "Installing dependencies (this may take a few minutes)...",
                "Dependencies installed!",
                lambda: self._run_checked(commands.install_command(self._config), cwd=target),
            )
        except ScaffoldError as exc:
            if self._workspace.exists(target):
                exc.hint = append_cleanup_suggestion(exc.hint, request.project_name)
            raise

        return target

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _step(self, start_text: str, done_text: str, action: Callable[[], object]) -> None:
        self._reporter.start(start_text)
        try:
            action()
        except CommandError as exc:
            self._reporter.fail(self.FAIL_TEXT, detail=exc.output or str(exc))
            exc.reported = True
            raise
        except ScaffoldError as exc:
            self._reporter.fail(self.FAIL_TEXT, detail=str(exc))
            exc.reported = True
            raise
        self._reporter.succeed(done_text)

    def _reinit_repository(self, target: Path) -> None:
        for args in commands.reinit_commands(self._config):
            self._run_checked(args, cwd=target)

    def _rewrite_manifest(self, request: ScaffoldRequest) -> None:
        path = request.target_path / MANIFEST_FILENAME
        manifest = self._workspace.read_manifest(path)
        updated = rename_manifest(
            manifest,
            name=request.project_name,
            version=self._config.manifest_version,
        )
        self._workspace.write_manifest(path, updated)

    def _run_checked(self, args: Sequence[str], *, cwd: Path) -> str:
        """Run *args* and return its stdout, raising on a non-zero exit."""
        result = self._runner.run(args, cwd=cwd)
        if not result.ok:
            raise CommandFailedError(
                f"Command failed: {' '.join(args)}",
                args=args,
                output=result.output,
            )
        return result.stdout
