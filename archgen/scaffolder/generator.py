"""Filesystem materialization of architecture templates.

Turns a registry template into real directories and files under
``<base_dir>/project_<architecture>``.  Every filesystem step is performed in
template order; the first ``OSError`` aborts the run and surfaces as
``MaterializationFailed``.  By default entries already written are left on
disk.  With ``staged=True`` the tree is built in a hidden sibling directory
and renamed into place only once complete.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..config import PROJECT_PREFIX, Config
from .errors import DestinationConflict, MaterializationFailed
from .models import ArchitectureTemplate
from .registry import lookup
from .templates import TemplateRenderer, default_renderer
from .validation import validate_architecture, validate_module_name

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Destination helpers
# ---------------------------------------------------------------------------


def project_dir_name(name: str) -> str:
    """Return the project root directory name for architecture *name*."""
    return f"{PROJECT_PREFIX}{validate_architecture(name)}"


def project_root(name: str, base_dir: str | Path | None = None) -> Path:
    """Return the project root path, relative to the cwd unless *base_dir* is given."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return base / project_dir_name(name)


def destination_exists(name: str, base_dir: str | Path | None = None) -> bool:
    """Return ``True`` if anything (even a dangling symlink) occupies the project root."""
    root = project_root(name, base_dir)
    return root.exists() or root.is_symlink()


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------


def materialize(
    name: str,
    module: str,
    *,
    destination_exists: bool | None = None,
    overwrite: bool = False,
    base_dir: str | Path | None = None,
    staged: bool = False,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Create the project tree for *name* with *module* rendered into its files.

    Args:
        name: Supported architecture name.
        module: Go module identifier injected into file contents.
        destination_exists: Whether the project root already exists.  When
            ``None`` the filesystem is probed.  A stale ``False`` is still
            caught as ``DestinationConflict`` unless *overwrite* is set.
        overwrite: Whether the user authorized writing into an existing root.
        base_dir: Directory that receives the project root.  Defaults to the
            current working directory.
        staged: Build in a temporary sibling and rename on success.  Ignored
            when writing into an existing root.
        renderer: Renderer to use instead of the shared default.

    Returns:
        Path to the project root.

    Raises:
        UnknownArchitecture: *name* is not supported.  Nothing is written.
        InvalidModuleIdentifier: *module* is malformed.  Nothing is written.
        DestinationConflict: The root exists and *overwrite* is false.
            Nothing is written.
        MaterializationFailed: A filesystem operation failed.  The reported
            path is always under the project root, even when staged.
    """
    template = lookup(name)
    validate_module_name(module)
    root = project_root(name, base_dir)

    exists = _occupied(root) if destination_exists is None else destination_exists
    if exists and not overwrite:
        raise DestinationConflict(root)
    if overwrite and not exists:
        # Authorized overwrite: a stale "does not exist" flag must not block it.
        exists = _occupied(root)

    renderer = renderer or default_renderer
    if staged and not exists:
        _materialize_staged(template, module, root, renderer)
    else:
        _create_root(root, exist_ok=exists)
        _write_entries(template, module, root, renderer)

    logger.info("Generated %s project at %s", name, root)
    return root


def _materialize_staged(
    template: ArchitectureTemplate,
    module: str,
    root: Path,
    renderer: TemplateRenderer,
) -> None:
    staging = root.parent / f".{root.name}.{uuid.uuid4().hex[:8]}.tmp"
    _create_root(staging, exist_ok=False)
    try:
        try:
            _write_entries(template, module, staging, renderer)
        except MaterializationFailed as exc:
            # Report the path the user asked for, not the staging copy.
            raise MaterializationFailed(
                root / exc.path.relative_to(staging), exc.cause
            ) from exc.cause
        if _occupied(root):
            raise DestinationConflict(root)
        with _fs_step(root):
            staging.rename(root)
    except BaseException:
        logger.debug("Removing staging directory %s", staging)
        shutil.rmtree(staging, ignore_errors=True)
        raise


def _create_root(root: Path, *, exist_ok: bool) -> None:
    try:
        root.mkdir(parents=True, exist_ok=exist_ok)
    except FileExistsError as exc:
        if not exist_ok:
            raise DestinationConflict(root) from exc
        raise MaterializationFailed(root, exc) from exc
    except OSError as exc:
        raise MaterializationFailed(root, exc) from exc
    logger.debug("Created project root %s", root)


def _write_entries(
    template: ArchitectureTemplate,
    module: str,
    root: Path,
    renderer: TemplateRenderer,
) -> None:
    for entry in template.entries:
        target = root.joinpath(*entry.path.split("/"))
        if entry.is_dir:
            with _fs_step(target):
                target.mkdir(parents=True, exist_ok=True)
            logger.debug("Created directory %s", entry.path)
            continue

        content = renderer.render(entry.content or "", module)
        with _fs_step(target.parent):
            target.parent.mkdir(parents=True, exist_ok=True)
        with _fs_step(target):
            target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", entry.path, len(content))


@contextmanager
def _fs_step(path: Path) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        logger.debug("Filesystem error at %s: %s", path, exc)
        raise MaterializationFailed(path, exc) from exc


def _occupied(path: Path) -> bool:
    return path.exists() or path.is_symlink()


# ---------------------------------------------------------------------------
# Config-bound front end
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializer bound to a ``Config``.

    Resolves the output directory and staging policy from the configuration
    so callers only pass the architecture, the module and the overwrite
    decision.
    """

    def __init__(self, config: Config | None = None, renderer: TemplateRenderer | None = None) -> None:
        self.config = config or Config()
        self.renderer = renderer or default_renderer

    def project_root(self, name: str) -> Path:
        return project_root(name, self.config.output_dir)

    def destination_exists(self, name: str) -> bool:
        return destination_exists(name, self.config.output_dir)

    def generate(
        self,
        name: str,
        module: str,
        *,
        overwrite: bool = False,
        destination_exists: bool | None = None,
    ) -> Path:
        """Materialize *name* for *module* under the configured output directory."""
        return materialize(
            name,
            module,
            destination_exists=destination_exists,
            overwrite=overwrite,
            base_dir=self.config.output_dir,
            staged=self.config.staged,
            renderer=self.renderer,
        )
