"""archgen configuration.

Typed settings for the CLI and the materializer.  Settings use a Pydantic v2
model so they are validated at construction time; ``Config.from_env`` layers
``ARCHGEN_*`` environment variables on top of the defaults.  Nothing is ever
persisted to disk.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

# Fixed prefix of every generated project root, e.g. ``project_clean``.
PROJECT_PREFIX = "project_"

DEFAULT_MODULE = "github.com/user/project"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global archgen configuration.

    Created once by the CLI entry point and handed to ``ProjectGenerator``.
    """

    output_dir: Path = Field(default=Path("."), description="Directory receiving project roots")
    default_module: str = Field(
        default=DEFAULT_MODULE, description="Module offered when the prompt is left empty"
    )
    use_fuzzy: bool = Field(default=True, description="Try fzf before the numeric menu")
    fzf_command: str = Field(default="fzf", description="Executable used for fuzzy selection")
    staged: bool = Field(
        default=False, description="Build into a temporary directory and rename on success"
    )
    verbose: bool = Field(default=False)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ARCHGEN_OUTPUT_DIR, ARCHGEN_DEFAULT_MODULE, ARCHGEN_NO_FUZZY,
            ARCHGEN_FZF_COMMAND, ARCHGEN_STAGED, ARCHGEN_VERBOSE.
        """
        return cls(
            output_dir=Path(os.environ.get("ARCHGEN_OUTPUT_DIR", ".")),
            default_module=os.environ.get("ARCHGEN_DEFAULT_MODULE") or DEFAULT_MODULE,
            use_fuzzy=not _env_flag("ARCHGEN_NO_FUZZY"),
            fzf_command=os.environ.get("ARCHGEN_FZF_COMMAND") or "fzf",
            staged=_env_flag("ARCHGEN_STAGED"),
            verbose=_env_flag("ARCHGEN_VERBOSE"),
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY
