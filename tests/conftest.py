"""Shared pytest fixtures and configuration for the create-react-18 test suite.

Guidelines
----------
* No internet access in any test.
* git and the package manager are never executed — commands go through
  :class:`fakes.FakeRunner`, which records them and simulates ``git clone``.
* Filesystem work happens under ``tmp_path`` only.
"""

from __future__ import annotations

import pytest

from fakes import FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
