"""Pydantic models describing architecture templates.

A template is an ordered tuple of ``TemplateEntry`` nodes.  Both models are
frozen so catalog instances can be shared process-wide without copying.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


class TemplateEntry(BaseModel):
    """A single directory or file node, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Slash-separated path relative to the project root")
    kind: EntryKind
    content: str | None = Field(default=None, description="Content template (files only)")

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value:
            raise ValueError("path must not be empty")
        if "\\" in value:
            raise ValueError(f"path must use '/' separators: {value!r}")
        if value.startswith("/"):
            raise ValueError(f"path must be relative: {value!r}")
        for segment in value.split("/"):
            if segment in ("", ".", ".."):
                raise ValueError(f"path escapes or is not normalised: {value!r}")
        return value

    @model_validator(mode="after")
    def _check_content(self) -> "TemplateEntry":
        if self.kind is EntryKind.FILE and self.content is None:
            raise ValueError(f"file entry {self.path!r} needs a content template")
        if self.kind is EntryKind.DIRECTORY and self.content is not None:
            raise ValueError(f"directory entry {self.path!r} cannot carry content")
        return self

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def parents(self) -> list[str]:
        """Ancestor directories of this entry, outermost first."""
        parts = PurePosixPath(self.path).parts
        return ["/".join(parts[:i]) for i in range(1, len(parts))]


class ArchitectureTemplate(BaseModel):
    """The ordered tree definition for one architecture."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    run_hint: str = Field(default=".", description="Target passed to `go run`")
    setup_command: str = Field(default="go mod tidy", description="Command run before the first build")
    entries: tuple[TemplateEntry, ...]

    @model_validator(mode="after")
    def _check_tree(self) -> "ArchitectureTemplate":
        seen: set[str] = set()
        files: set[str] = set()
        for entry in self.entries:
            if entry.path in seen:
                raise ValueError(f"{self.name}: duplicate entry {entry.path!r}")
            seen.add(entry.path)
            if not entry.is_dir:
                files.add(entry.path)
        for entry in self.entries:
            for parent in entry.parents:
                if parent in files:
                    raise ValueError(
                        f"{self.name}: {entry.path!r} is nested under file {parent!r}"
                    )
        return self

    def files(self) -> list[TemplateEntry]:
        return [e for e in self.entries if not e.is_dir]

    def directories(self) -> list[TemplateEntry]:
        return [e for e in self.entries if e.is_dir]

    def all_paths(self) -> list[tuple[str, bool]]:
        """Every path the tree implies, as ``(path, is_dir)`` in registry order.

        Parent directories that are only implied by a deeper entry are emitted
        just before their first descendant.
        """
        emitted: set[str] = set()
        result: list[tuple[str, bool]] = []
        for entry in self.entries:
            for parent in entry.parents:
                if parent not in emitted:
                    emitted.add(parent)
                    result.append((parent, True))
            if entry.path not in emitted:
                emitted.add(entry.path)
                result.append((entry.path, entry.is_dir))
        return result

