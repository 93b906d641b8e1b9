"""Interactive project-name prompt for the CLI layer.

This module is responsible for:

* Asking for the project name via a questionary text prompt.
* Re-prompting while the answer is blank.
* Returning the stripped name as a string.
"""

from __future__ import annotations

from typing import Any

from create_react_18.exceptions import EnvironmentError, InvalidProjectNameError

EMPTY_NAME_MESSAGE: str = "Project name must not be empty"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def validate_project_name(value: str) -> bool | str:
    """questionary validator: ``True`` or the message shown under the input."""
    if value.strip():
        return True
    return EMPTY_NAME_MESSAGE


def prompt_project_name(default: str) -> str:
    """Ask the user for a project name, pre-filled with *default*.

    Returns
    -------
    str
        The non-empty, stripped project name.

    Raises
    ------
    InvalidProjectNameError
        If the user cancels the prompt (Esc / ``None`` return).
    """
    questionary = _import_questionary()

    answer: str | None = questionary.text(
        "Project name:",
        default=default,
        validate=validate_project_name,
    ).ask()  # Returns None on Ctrl+C / Esc

    if answer is None:
        raise InvalidProjectNameError(
            "No project name entered.",
            hint="Type a name and press Enter, or pass it as the first argument.",
        )

    return answer.strip()
