"""archgen scaffolder -- template registry and materialization engine.

Maps each supported architecture name to a Go project layout, previews it as
a text tree and writes it to disk with the module identifier rendered into
every file.

Quick usage::

    from archgen.scaffolder import materialize, preview

    print(preview("clean"))
    root = materialize("clean", "github.com/user/project")
"""

from archgen.scaffolder.errors import (
    DestinationConflict,
    InvalidModuleIdentifier,
    MaterializationFailed,
    ScaffoldError,
    TemplateRenderError,
    UnknownArchitecture,
)
from archgen.scaffolder.generator import (
    ProjectGenerator,
    destination_exists,
    materialize,
    project_dir_name,
    project_root,
)
from archgen.scaffolder.models import ArchitectureTemplate, EntryKind, TemplateEntry
from archgen.scaffolder.preview import preview, preview_paths
from archgen.scaffolder.registry import (
    SUPPORTED_ARCHITECTURES,
    is_supported,
    lookup,
    supported_architectures,
)
from archgen.scaffolder.templates import TemplateRenderer, render
from archgen.scaffolder.validation import validate_architecture, validate_module_name

__all__ = [
    "ArchitectureTemplate",
    "DestinationConflict",
    "EntryKind",
    "InvalidModuleIdentifier",
    "MaterializationFailed",
    "ProjectGenerator",
    "SUPPORTED_ARCHITECTURES",
    "ScaffoldError",
    "TemplateEntry",
    "TemplateRenderError",
    "TemplateRenderer",
    "UnknownArchitecture",
    "destination_exists",
    "is_supported",
    "lookup",
    "materialize",
    "preview",
    "preview_paths",
    "project_dir_name",
    "project_root",
    "render",
    "supported_architectures",
    "validate_architecture",
    "validate_module_name",
]
