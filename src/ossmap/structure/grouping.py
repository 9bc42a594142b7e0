"""Extension grouping for compact file listings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ossmap.structure.types import FileEntry

NO_EXTENSION = "no-ext"


@dataclass(frozen=True)
class FileGroup:
    """Files of one directory sharing an extension.

    Attributes
    ----------
    extension
        Lower-cased extension including the dot, or ``no-ext``.
    files
        Member files sorted ascending by name.
    total_size
        Sum of member sizes in bytes.
    """

    extension: str
    files: tuple[FileEntry, ...]
    total_size: int


def file_extension(name: str) -> str:
    """Return the lower-cased extension of a file name.

    Names without a dot, or whose only dot leads the name, map to ``no-ext``.
    """
    dot = name.rfind(".")
    if dot <= 0:
        return NO_EXTENSION
    return name[dot:].lower()


def group_by_extension(files: Iterable[FileEntry]) -> list[FileGroup]:
    """Group files by extension, largest groups first.

    Parameters
    ----------
    files
        Files of a single directory.

    Returns
    -------
    list[FileGroup]
        Groups ordered by descending member count; equal counts keep the
        order in which their extension was first seen.
    """
    buckets: dict[str, list[FileEntry]] = {}
    for entry in files:
        buckets.setdefault(file_extension(entry.name), []).append(entry)

    groups = [
        FileGroup(
            extension=ext,
            files=tuple(sorted(members, key=lambda f: f.name)),
            total_size=sum(f.size for f in members),
        )
        for ext, members in buckets.items()
    ]
    groups.sort(key=lambda g: len(g.files), reverse=True)
    return groups
