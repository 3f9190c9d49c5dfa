"""Dry-run tree rendering of architecture templates.

Only reads from the immutable registry; never touches the filesystem.
"""

from __future__ import annotations

from .generator import project_dir_name
from .registry import lookup

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def preview_paths(name: str) -> list[str]:
    """Return every relative path of *name*'s tree in preview order.

    Directories carry a trailing ``/``.  Parents that are only implied by a
    deeper entry are included, so the list matches what
    :func:`~archgen.scaffolder.generator.materialize` creates on disk.
    """
    return [_node_label(path, is_dir) for path, is_dir in _flatten(_build_tree(name))]


def preview(name: str) -> str:
    """Render the template for *name* as an indented tree.

    Raises:
        UnknownArchitecture: If *name* is not a supported architecture.
    """
    tree = _build_tree(name)
    lines = [f"{project_dir_name(name)}/"]
    _render_children(tree, "", lines)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

# Each node maps a segment name to (is_dir, children); dicts keep insertion
# order, which is registry order.
_Node = dict[str, tuple[bool, "_Node"]]


def _build_tree(name: str) -> _Node:
    root: _Node = {}
    for path, is_dir in lookup(name).all_paths():
        node = root
        segments = path.split("/")
        for segment in segments[:-1]:
            node = node.setdefault(segment, (True, {}))[1]
        node.setdefault(segments[-1], (is_dir, {}))
    return root


def _render_children(node: _Node, prefix: str, lines: list[str]) -> None:
    items = list(node.items())
    for index, (segment, (is_dir, children)) in enumerate(items):
        last = index == len(items) - 1
        lines.append(prefix + (LAST_BRANCH if last else BRANCH) + _node_label(segment, is_dir))
        if children:
            _render_children(children, prefix + (SPACE if last else PIPE), lines)


def _flatten(node: _Node, parent: str = "") -> list[tuple[str, bool]]:
    result: list[tuple[str, bool]] = []
    for segment, (is_dir, children) in node.items():
        path = f"{parent}/{segment}" if parent else segment
        result.append((path, is_dir))
        result.extend(_flatten(children, path))
    return result


def _node_label(path: str, is_dir: bool) -> str:
    return f"{path}/" if is_dir else path
