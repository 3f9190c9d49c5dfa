"""Shared pytest fixtures for the archgen test suite.

Provides reusable fixtures for:
- A temporary working directory (project roots are created relative to cwd)
- A valid module identifier
- A snapshot helper that lists every path under a directory
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from archgen.config import Config


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory that is also the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config writing into ``tmp_path`` with fuzzy selection disabled."""
    return Config(output_dir=tmp_path, use_fuzzy=False)


@pytest.fixture(autouse=True)
def clean_archgen_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``ARCHGEN_*`` variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("ARCHGEN_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------


@pytest.fixture
def module_name() -> str:
    return "github.com/user/project"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def snapshot(root: Path) -> dict[str, str | None]:
    """Map every relative path under *root* to its text (``None`` for dirs)."""
    result: dict[str, str | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return result


@pytest.fixture
def tree_snapshot():
    """Expose :func:`snapshot` to tests."""
    return snapshot
