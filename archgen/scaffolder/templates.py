"""Jinja2 placeholder rendering for generated file contents.

Content templates in the registry reference the module identifier through a
small, closed set of markers:

* ``{{ module }}`` -- the module identifier, verbatim.
* ``{{ app_name }}`` -- the last ``/``-separated segment of the identifier.

Any other marker is left in the output untouched, so the renderer never fails
on an unknown name.  Text that contains no Jinja2 syntax at all is returned as
is without going through the template engine.
"""

from __future__ import annotations

import re
from typing import Any

from jinja2 import DebugUndefined, Environment, TemplateSyntaxError

from .errors import TemplateRenderError


MARKERS: tuple[str, ...] = ("module", "app_name")

# Anything Jinja2 would treat as the start of a tag.
_SYNTAX_RE = re.compile(r"\{[{%#]")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders registry content templates for a given module identifier.

    The underlying ``Environment`` is configured once and never mutated, so a
    single renderer can be shared freely.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=DebugUndefined,
        )

    def context_for(self, module: str) -> dict[str, Any]:
        """Return the marker values for *module*."""
        return {
            "module": module,
            "app_name": module.rstrip("/").rsplit("/", 1)[-1],
        }

    def render(self, template: str, module: str) -> str:
        """Substitute every marker in *template* with values derived from *module*.

        Raises:
            TemplateRenderError: If *template* contains malformed Jinja2 syntax.
        """
        if not _SYNTAX_RE.search(template):
            return template
        try:
            compiled = self.env.from_string(template)
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(
                f"malformed template at line {exc.lineno}: {exc.message}"
            ) from exc
        return compiled.render(**self.context_for(module))


default_renderer = TemplateRenderer()


def render(template: str, module: str) -> str:
    """Render *template* for *module* with the shared default renderer."""
    return default_renderer.render(template, module)
