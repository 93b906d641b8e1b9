"""CLI application entry point and command routing for create-react-18.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_react_18.exceptions.ScaffoldError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the pipeline is delegated to
  :class:`~create_react_18.core.scaffold_service.ScaffoldService`.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from create_react_18.cli import exit_codes
from create_react_18.cli.console import configure_logging, console
from create_react_18.core.models import SUPPORTED_PACKAGE_MANAGERS, ScaffoldConfig
from create_react_18.exceptions import ScaffoldError
from create_react_18.version import __version__

logger = logging.getLogger(__name__)

DOCTOR_COMMAND: str = "doctor"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands are not used; the CLI supports:
    * ``create-react-18``          — prompt for a name, then scaffold
    * ``create-react-18 <name>``   — scaffold without prompting
    * ``create-react-18 doctor``   — environment diagnostics
    * ``create-react-18 --version``
    """
    parser = argparse.ArgumentParser(
        prog="create-react-18",
        description="Scaffold a React 18 project from a template repository.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted), or 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "--template",
        metavar="URL",
        default=None,
        help="git URL of the template repository.",
    )
    parser.add_argument(
        "--package-manager",
        choices=SUPPORTED_PACKAGE_MANAGERS,
        default=None,
        help="Package manager used to install dependencies (default: pnpm).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every command that is run.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_scaffold(project_name: str | None, config: ScaffoldConfig) -> int:
    """Create a new project.

    Flow:
    1. Prompt for the project name unless given on the command line.
    2. Refuse an existing target directory.
    3. Check that git and the package manager are on PATH.
    4. Run the scaffold pipeline with Rich spinners.
    5. Print next-step hints.
    """
    from create_react_18.cli.name_prompt import prompt_project_name
    from create_react_18.cli.progress import RichStepSpinner
    from create_react_18.core.commands import dev_command
    from create_react_18.core.models import ScaffoldRequest
    from create_react_18.core.scaffold_service import ScaffoldService
    from create_react_18.infra.subprocess_runner import SubprocessCommandRunner
    from create_react_18.infra.toolchain import detect_git, detect_package_manager, require_tool
    from create_react_18.infra.workspace import LocalWorkspace

    console.print("[bold blue]🚀  create-react-18[/bold blue]\n")

    if project_name is None:
        project_name = prompt_project_name(config.default_project_name)
    request = ScaffoldRequest.create(project_name, Path.cwd())

    with RichStepSpinner() as spinner:
        service = ScaffoldService(
            SubprocessCommandRunner(),
            LocalWorkspace(),
            config,
            reporter=spinner,
        )
        service.check_target(request)

        require_tool(detect_git())
        require_tool(detect_package_manager(config.package_manager, config.platform))

        target = service.scaffold(request)

    logger.debug("Project created at %s", target)
    console.print(f"\n[green]✨  Project {request.project_name} created![/green]")
    console.print(f"\n[cyan]👉  cd {request.project_name}[/cyan]")
    console.print(f"[cyan]👉  {dev_command(config)}[/cyan]\n")
    return exit_codes.SUCCESS


def _handle_doctor(config: ScaffoldConfig) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from create_react_18.cli.doctor import run_doctor

    return run_doctor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-react-18 CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    config = ScaffoldConfig.from_options(
        template_url=args.template,
        package_manager=args.package_manager,
    )

    target: str | None = args.target
    if target is not None and target.lower() == DOCTOR_COMMAND:
        return _handle_doctor(config)

    return _handle_scaffold(target, config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ScaffoldError as exc:
        if not exc.reported:
            console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
