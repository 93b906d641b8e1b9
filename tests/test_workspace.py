"""Tests for the local filesystem workspace (infra/workspace.py) and the
pure manifest rewrite (core/manifest.py).

All filesystem work happens under ``tmp_path``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from create_react_18.core.manifest import rename_manifest
from create_react_18.exceptions import ManifestError, WorkspaceError
from create_react_18.infra.workspace import LocalWorkspace


# ---------------------------------------------------------------------------
# rename_manifest (pure)
# ---------------------------------------------------------------------------

class TestRenameManifest:
    def test_overwrites_name_and_version_only(self) -> None:
        original = {"name": "tpl", "version": "0.0.0", "private": True, "scripts": {"dev": "vite"}}
        updated = rename_manifest(original, name="demo", version="1.0.0")
        assert updated == {
            "name": "demo",
            "version": "1.0.0",
            "private": True,
            "scripts": {"dev": "vite"},
        }

    def test_input_not_mutated(self) -> None:
        original = {"name": "tpl", "version": "0.0.0"}
        rename_manifest(original, name="demo", version="1.0.0")
        assert original == {"name": "tpl", "version": "0.0.0"}

    def test_key_order_preserved(self) -> None:
        original = {"private": True, "version": "0.0.0", "type": "module", "name": "tpl"}
        updated = rename_manifest(original, name="demo", version="1.0.0")
        assert list(updated) == ["private", "version", "type", "name"]

    def test_missing_fields_are_added(self) -> None:
        updated = rename_manifest({"private": True}, name="demo", version="1.0.0")
        assert list(updated) == ["private", "name", "version"]


# ---------------------------------------------------------------------------
# exists
# ---------------------------------------------------------------------------

class TestExists:
    def test_directory(self, tmp_path: Path) -> None:
        assert LocalWorkspace().exists(tmp_path) is True

    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "demo"
        path.write_text("x", encoding="utf-8")
        assert LocalWorkspace().exists(path) is True

    def test_missing(self, tmp_path: Path) -> None:
        assert LocalWorkspace().exists(tmp_path / "demo") is False

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_dangling_symlink_counts(self, tmp_path: Path) -> None:
        link = tmp_path / "demo"
        link.symlink_to(tmp_path / "nowhere")
        assert LocalWorkspace().exists(link) is True


# ---------------------------------------------------------------------------
# remove_tree
# ---------------------------------------------------------------------------

class TestRemoveTree:
    def test_removes_nested_tree(self, tmp_path: Path) -> None:
        git_dir = tmp_path / ".git"
        (git_dir / "objects" / "ab").mkdir(parents=True)
        (git_dir / "objects" / "ab" / "cdef").write_text("blob", encoding="utf-8")
        (git_dir / "HEAD").write_text("ref", encoding="utf-8")

        LocalWorkspace().remove_tree(git_dir)

        assert not git_dir.exists()
        assert tmp_path.exists()

    def test_missing_path_is_ignored(self, tmp_path: Path) -> None:
        LocalWorkspace().remove_tree(tmp_path / ".git")

    def test_single_file(self, tmp_path: Path) -> None:
        # ``.git`` is a file in submodule checkouts.
        git_file = tmp_path / ".git"
        git_file.write_text("gitdir: ../.git/modules/x", encoding="utf-8")
        LocalWorkspace().remove_tree(git_file)
        assert not git_file.exists()

    def test_read_only_files_removed(self, tmp_path: Path) -> None:
        git_dir = tmp_path / ".git"
        git_dir.mkdir()
        packed = git_dir / "packed"
        packed.write_text("x", encoding="utf-8")
        packed.chmod(0o444)

        LocalWorkspace().remove_tree(git_dir)
        assert not git_dir.exists()

    def test_os_error_wrapped(self, tmp_path: Path) -> None:
        git_dir = tmp_path / ".git"
        git_dir.mkdir()
        with patch(
            "create_react_18.infra.workspace.shutil.rmtree",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(WorkspaceError, match="Could not remove") as exc_info:
                LocalWorkspace().remove_tree(git_dir)
        assert isinstance(exc_info.value.__cause__, PermissionError)


# ---------------------------------------------------------------------------
# read_manifest / write_manifest
# ---------------------------------------------------------------------------

class TestReadManifest:
    def test_reads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('{"name": "tpl", "version": "0.0.0"}', encoding="utf-8")
        assert LocalWorkspace().read_manifest(path) == {"name": "tpl", "version": "0.0.0"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="not found") as exc_info:
            LocalWorkspace().read_manifest(tmp_path / "package.json")
        assert exc_info.value.hint is not None

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('{"name": ', encoding="utf-8")
        with pytest.raises(ManifestError, match="not valid JSON"):
            LocalWorkspace().read_manifest(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ManifestError, match="JSON object"):
            LocalWorkspace().read_manifest(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(ManifestError, match="Could not read"):
            LocalWorkspace().read_manifest(path)


class TestWriteManifest:
    def test_indented_with_trailing_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        LocalWorkspace().write_manifest(path, {"name": "demo", "scripts": {"dev": "vite"}})
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "name": "demo",\n  "scripts": {\n    "dev": "vite"\n  }\n}\n'

    def test_non_ascii_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        LocalWorkspace().write_manifest(path, {"description": "演示"})
        assert "演示" in path.read_text(encoding="utf-8")
        assert json.loads(path.read_text(encoding="utf-8")) == {"description": "演示"}

    def test_os_error_wrapped(self, tmp_path: Path) -> None:
        missing_dir = tmp_path / "nope" / "package.json"
        with pytest.raises(ManifestError, match="Could not write"):
            LocalWorkspace().write_manifest(missing_dir, {"name": "demo"})
