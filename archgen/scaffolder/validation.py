"""Input validation shared by the materializer and the CLI."""

from __future__ import annotations

import re

from .errors import InvalidModuleIdentifier, UnknownArchitecture
from .registry import SUPPORTED_ARCHITECTURES, is_supported

# First character a letter, last a letter or digit, at least two characters.
MODULE_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9._/\-]*[a-zA-Z0-9]$")


def validate_module_name(module: object) -> str:
    """Return *module* unchanged if it is a valid Go module identifier.

    Raises:
        InvalidModuleIdentifier: If *module* is empty or malformed.
    """
    if not isinstance(module, str) or module == "":
        raise InvalidModuleIdentifier(module, "module name cannot be empty")
    if not MODULE_NAME_RE.fullmatch(module):
        raise InvalidModuleIdentifier(module, f"invalid module name format: {module}")
    return module


def validate_architecture(name: object) -> str:
    """Return *name* unchanged if it is a supported architecture.

    Raises:
        UnknownArchitecture: If *name* is not in the supported set.
    """
    if not is_supported(name):
        raise UnknownArchitecture(name, SUPPORTED_ARCHITECTURES)
    return name  # type: ignore[return-value]
