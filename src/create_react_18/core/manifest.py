"""Pure manifest transformation.

The file I/O lives in :mod:`create_react_18.infra.workspace`; this
module only decides which fields change.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

MANIFEST_FILENAME: str = "package.json"


def rename_manifest(
    manifest: Mapping[str, Any],
    *,
    name: str,
    version: str,
) -> dict[str, Any]:
    """Return a copy of *manifest* with ``name`` and ``version`` replaced.

    Key order is preserved: existing keys keep their position and missing
    ones are appended.  All other fields pass through untouched.
    """
    updated = dict(manifest)
    updated["name"] = name
    updated["version"] = version
    return updated
