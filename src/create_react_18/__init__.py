"""create-react-18 — scaffold a React 18 project from a template repository.

Clones the template, resets its git history, renames the manifest and
installs dependencies, with a layered core/infra/cli architecture.
"""

from create_react_18.version import __version__

__all__: list[str] = ["__version__"]
