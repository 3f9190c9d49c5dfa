"""Error taxonomy for the scaffolding core.

Every failure raised by the registry, renderer, previewer or materializer is a
``ScaffoldError`` subclass carrying a machine-readable ``kind``, a message and,
where it makes sense, the filesystem ``path`` involved.  The core never exits
the process; translating these into exit codes is the caller's job.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    kind: str = "scaffold_error"

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)


class UnknownArchitecture(ScaffoldError):
    """Raised when an architecture name is not in the supported set."""

    kind = "unknown_architecture"

    def __init__(self, name: object, supported: tuple[str, ...]) -> None:
        self.name = name
        self.supported = supported
        super().__init__(
            f"unsupported architecture: {name}. Supported: {', '.join(supported)}"
        )


class InvalidModuleIdentifier(ScaffoldError):
    """Raised when a module identifier does not match the allowed grammar."""

    kind = "invalid_module_identifier"

    def __init__(self, module: object, reason: str) -> None:
        self.module = module
        super().__init__(reason)


class DestinationConflict(ScaffoldError):
    """Raised when the project root exists and overwrite was not authorized."""

    kind = "destination_conflict"

    def __init__(self, path: Path) -> None:
        super().__init__(f"project directory '{path}' already exists", path=path)


class MaterializationFailed(ScaffoldError):
    """Raised when a filesystem operation fails mid-generation.

    The underlying ``OSError`` is available both as ``cause`` and as
    ``__cause__``.  Entries written before the failure are left on disk unless
    staged materialization was requested.
    """

    kind = "materialization_failed"

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.cause = cause
        detail = getattr(cause, "strerror", None) or str(cause) or type(cause).__name__
        super().__init__(f"failed to materialize '{path}': {detail}", path=path)


class TemplateRenderError(ScaffoldError):
    """Raised when a content template contains malformed marker syntax."""

    kind = "template_render_error"
