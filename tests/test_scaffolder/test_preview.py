"""Tests for the tree previewer (archgen.scaffolder.preview)."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from archgen.scaffolder.errors import UnknownArchitecture
from archgen.scaffolder.preview import preview, preview_paths
from archgen.scaffolder.registry import SUPPORTED_ARCHITECTURES, lookup


pytestmark = pytest.mark.unit


class TestPreview:
    def test_flat_tree(self):
        assert preview("flat") == "\n".join(
            [
                "project_flat/",
                "├── go.mod",
                "├── main.go",
                "├── handlers.go",
                "├── models.go",
                "├── store.go",
                "├── .gitignore",
                "└── README.md",
            ]
        )

    def test_nested_directories_indented(self):
        lines = preview("clean").splitlines()
        assert lines[0] == "project_clean/"
        assert "├── domain/" in lines
        assert "├── delivery/" in lines
        assert "│   └── http/" in lines
        assert "│       └── user_handler.go" in lines

    def test_registry_order_kept(self):
        lines = preview("clean").splitlines()
        top = [line for line in lines if line.startswith(("├── ", "└── "))]
        assert top[:4] == ["├── domain/", "├── usecase/", "├── repository/", "├── delivery/"]

    @pytest.mark.parametrize("name", ["", "Clean", "cleann"])
    def test_unknown_architecture(self, name):
        with pytest.raises(UnknownArchitecture):
            preview(name)
        with pytest.raises(UnknownArchitecture):
            preview_paths(name)

    @pytest.mark.parametrize("name", SUPPORTED_ARCHITECTURES)
    def test_repeatable(self, name):
        assert preview(name) == preview(name)

    @pytest.mark.parametrize("name", SUPPORTED_ARCHITECTURES)
    def test_every_entry_listed(self, name):
        listed = set(preview_paths(name))
        for entry in lookup(name).entries:
            expected = f"{entry.path}/" if entry.is_dir else entry.path
            assert expected in listed

    @pytest.mark.parametrize("name", SUPPORTED_ARCHITECTURES)
    def test_line_count_matches_paths(self, name):
        assert len(preview(name).splitlines()) == len(preview_paths(name)) + 1


class TestPreviewHasNoSideEffects:
    def test_no_filesystem_writes(self, work_dir: Path, monkeypatch: pytest.MonkeyPatch):
        def _forbidden(*args, **kwargs):
            raise AssertionError("preview touched the filesystem")

        monkeypatch.setattr(Path, "mkdir", _forbidden)
        monkeypatch.setattr(Path, "write_text", _forbidden)
        monkeypatch.setattr(Path, "touch", _forbidden)
        monkeypatch.setattr(os, "mkdir", _forbidden)
        monkeypatch.setattr(os, "makedirs", _forbidden)

        for name in SUPPORTED_ARCHITECTURES:
            preview(name)
            preview_paths(name)

        assert list(work_dir.iterdir()) == []

    def test_read_only_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o555)
        monkeypatch.chdir(locked)
        try:
            for name in SUPPORTED_ARCHITECTURES:
                assert preview(name).startswith(f"project_{name}/")
            assert list(locked.iterdir()) == []
        finally:
            locked.chmod(0o755)
