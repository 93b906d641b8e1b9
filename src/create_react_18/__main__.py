"""Allow ``python -m create_react_18`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m create_react_18`` behaves identically to the
``create-react-18`` console script.
"""

from __future__ import annotations

from create_react_18.cli.app import cli

if __name__ == "__main__":
    cli()
