"""Core / service layer — pipeline orchestration and pure transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or subprocess access; side effects go through
  the protocols in :mod:`create_react_18.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from create_react_18.core.models import CommandResult, ScaffoldConfig, ScaffoldRequest
from create_react_18.core.protocols import CommandRunner, StepReporter, Workspace
from create_react_18.core.scaffold_service import ScaffoldService

__all__: list[str] = [
    "CommandResult",
    "CommandRunner",
    "ScaffoldConfig",
    "ScaffoldRequest",
    "ScaffoldService",
    "StepReporter",
    "Workspace",
]
