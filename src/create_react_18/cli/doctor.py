"""``create-react-18 doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can scaffold a project: git must be on
PATH, the package manager should be.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys

from create_react_18.cli import exit_codes
from create_react_18.cli.console import console
from create_react_18.core.models import ScaffoldConfig
from create_react_18.infra.toolchain import ToolStatus, detect_git, detect_package_manager
from create_react_18.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(label: str, tool: ToolStatus, *, required: bool) -> Check:
    if tool.found:
        return label, str(tool.path) if tool.path else "found", "[green]OK[/green]"
    missing = f"{tool.name} not found"
    if required:
        return label, missing, "[red]FAIL[/red]"
    return label, missing, "[yellow]WARN[/yellow]"


def _git_check() -> Check:
    return _tool_check("git", detect_git(), required=True)


def _package_manager_check(config: ScaffoldConfig) -> Check:
    status = detect_package_manager(config.package_manager, config.platform)
    return _tool_check(config.package_manager, status, required=False)


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _self_version_check() -> Check:
    return "create-react-18", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ncreate-react-18 doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<38} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<16} {value:<38} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_install_guidance(tools: list[ToolStatus], rich_available: bool) -> None:
    for tool in tools:
        if tool.found or not tool.install_commands:
            continue
        if rich_available:
            console.print(f"[yellow]{tool.name} is not installed.[/yellow]")
            console.print("Install using one of the following commands:\n")
            for cmd in tool.install_commands:
                console.print(f"  [bold]{cmd}[/bold]")
            console.print()
        else:
            print(f"{tool.name} is not installed.", file=sys.stderr)
            print("Install using one of the following commands:\n", file=sys.stderr)
            for cmd in tool.install_commands:
                print(f"  {cmd}", file=sys.stderr)
            print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(config: ScaffoldConfig | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    config = config or ScaffoldConfig()
    checks = [
        _self_version_check(),
        _python_version_check(),
        _git_check(),
        _package_manager_check(config),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="create-react-18 doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    _print_install_guidance(
        [detect_git(), detect_package_manager(config.package_manager, config.platform)],
        rich_available,
    )

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
