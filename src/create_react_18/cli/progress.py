"""Rich-based spinner display driven by pipeline step notifications.

This module bridges the core :class:`~create_react_18.core.protocols.StepReporter`
protocol with a Rich :class:`~rich.status.Status` spinner.  The core
layer only reports ``start``/``succeed``/``fail``; rendering happens
here.

Design
------
* One spinner is live at a time, matching the one-command-at-a-time
  pipeline.
* ``succeed``/``fail`` stop the spinner and leave a permanent
  ✔ / ✖ line behind.
* Shutdown-safe: notifications without a running spinner still print
  their line, and :meth:`stop` is idempotent.
"""

from __future__ import annotations

from typing import Any

from create_react_18.cli.console import get_rich_console
from create_react_18.exceptions import EnvironmentError


class RichStepSpinner:
    """:class:`StepReporter` implementation rendering Rich spinners.

    Usage::

        with RichStepSpinner() as spinner:
            ScaffoldService(runner, workspace, config, reporter=spinner).scaffold(request)
    """

    def __init__(self) -> None:
        try:
            from rich.markup import escape
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._escape: Any = escape
        self._console: Any = get_rich_console()
        self._status: Any = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichStepSpinner:
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # StepReporter protocol
    # ------------------------------------------------------------------

    def start(self, text: str) -> None:
        """Show a spinner labelled *text*, replacing any running one."""
        self.stop()
        self._status = self._console.status(f"[bold blue]{self._escape(text)}", spinner="dots")
        self._status.start()

    def succeed(self, text: str) -> None:
        self.stop()
        self._console.print(f"[green]✔[/green] {self._escape(text)}")

    def fail(self, text: str, *, detail: str | None = None) -> None:
        """Stop the spinner with a red cross and dump *detail* verbatim."""
        self.stop()
        self._console.print(f"[red]✖ {self._escape(text)}[/red]")
        if detail:
            self._console.print(detail.rstrip(), markup=False, highlight=False)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def stop(self) -> None:
        """Stop the live spinner, if any (idempotent)."""
        if self._status is not None:
            self._status.stop()
            self._status = None
