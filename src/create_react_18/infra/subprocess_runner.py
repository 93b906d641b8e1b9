"""``subprocess`` backed implementation of :class:`~create_react_18.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that starts external
processes.  A missing executable is re-raised as
:class:`~create_react_18.exceptions.CommandNotFoundError`; a non-zero
exit code is returned to the caller untouched.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from create_react_18.core.models import CommandResult
from create_react_18.exceptions import CommandNotFoundError

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Concrete :class:`CommandRunner` running commands to completion.

    Output is captured as text, never streamed to the terminal, so the
    spinner owns the screen while the command runs.  There is no timeout:
    a hung clone or install blocks until interrupted with Ctrl+C.
    """

    def run(self, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Run *args* in *cwd* and return its captured result.

        Raises
        ------
        CommandNotFoundError
            When the executable does not exist or cannot be started.
        """
        argv = tuple(args)
        logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd)

        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise CommandNotFoundError(
                f"Command not found: {argv[0]}",
                args=argv,
                hint=f"Make sure '{argv[0]}' is installed and on your PATH "
                "(run 'create-react-18 doctor').",
            ) from exc
        except OSError as exc:
            raise CommandNotFoundError(
                f"Could not start {argv[0]}: {exc}",
                args=argv,
            ) from exc

        logger.debug("%s exited with %d", argv[0], completed.returncode)
        return CommandResult(
            args=argv,
            cwd=Path(cwd),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
