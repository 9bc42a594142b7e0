"""Deterministic ASCII tree rendering of a scanned hierarchy.

Subdirectories come first in stored order, followed by the node's own files
collapsed into extension groups. Large groups show a few members and a
one-line summary of the rest, so hundreds of same-type files cost a handful
of lines.
"""

from __future__ import annotations

from ossmap.structure.config import StructureConfig
from ossmap.structure.grouping import FileGroup, group_by_extension
from ossmap.structure.sizes import format_size
from ossmap.structure.types import DirectoryNode, FileEntry

_BRANCH = "├── "
_LAST = "└── "
_PIPE = "│   "
_BLANK = "    "


def render_tree(root: DirectoryNode, config: StructureConfig | None = None) -> str:
    """Render a directory tree as text.

    Parameters
    ----------
    root
        Root node returned by the scanner.
    config
        Display limits; defaults to ``StructureConfig()``.

    Returns
    -------
    str
        Root path (``/`` when empty) followed by one line per rendered item.
    """
    cfg = config or StructureConfig()
    lines: list[str] = [root.path or "/"]
    _render_node(root, lines, "", cfg)
    return "\n".join(lines)


def _render_node(node: DirectoryNode, lines: list[str], indent: str, cfg: StructureConfig) -> None:
    items: list[tuple[str, DirectoryNode] | FileGroup] = list(node.subdirectories.items())
    items.extend(group_by_extension(node.files))

    shown = items[: cfg.max_display_items]
    overflow = len(items) - len(shown)

    for index, item in enumerate(shown):
        is_last = index == len(shown) - 1 and overflow == 0
        connector = _LAST if is_last else _BRANCH
        child_indent = indent + (_BLANK if is_last else _PIPE)

        if isinstance(item, FileGroup):
            _render_group(item, lines, indent + connector, child_indent, cfg)
            continue

        name, child = item
        if child.placeholder:
            lines.append(f"{indent}{connector}{name}")
            continue
        count = f" ({child.total_files} files)" if child.total_files > 0 else ""
        lines.append(f"{indent}{connector}{name}/{count}")
        if child.files or child.subdirectories:
            _render_node(child, lines, child_indent, cfg)

    if overflow > 0:
        lines.append(f"{indent}{_LAST}... ({overflow} more items)")


def _render_group(group: FileGroup, lines: list[str], lead: str, child_indent: str, cfg: StructureConfig) -> None:
    if len(group.files) == 1:
        lines.append(f"{lead}{_describe_file(group.files[0])}")
        return

    preview = group.files[: cfg.group_preview_count]
    remaining = len(group.files) - len(preview)
    for index, entry in enumerate(preview):
        connector = _LAST if index == len(preview) - 1 and remaining == 0 else _BRANCH
        lines.append(f"{child_indent}{connector}{_describe_file(entry)}")
    if remaining > 0:
        average = format_size(group.total_size / len(group.files))
        lines.append(f"{child_indent}{_LAST}... ({remaining} more {group.extension} files, avg {average} each)")


def _describe_file(entry: FileEntry) -> str:
    if entry.size > 0:
        return f"{entry.name} ({format_size(entry.size)})"
    return entry.name
