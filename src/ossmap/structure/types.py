"""Tree types produced by the structure scanner."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True)
class FileEntry:
    """A file recorded directly under a directory node.

    Attributes
    ----------
    name
        File name relative to its directory (no delimiter).
    size
        Size in bytes.
    last_modified
        Last modification time reported by the store.
    is_directory
        Always False; kept for parity with listing metadata.
    synthetic
        True for the marker entry noting that more files exist.
    """

    name: str
    size: int
    last_modified: datetime
    is_directory: bool = False
    synthetic: bool = False


@dataclass(frozen=True)
class DirectoryNode:
    """A scanned directory and its bounded subtree.

    Aggregates count real files only; synthetic markers and placeholder
    children contribute nothing.

    Attributes
    ----------
    path
        Prefix scoping this directory.
    files
        Files directly under the prefix, in discovery order.
    subdirectories
        Child nodes by name, in discovery order.
    total_files
        Number of real files in this node and all descendants.
    total_size
        Bytes in this node and all descendants.
    placeholder
        True for the synthetic child summarizing unlisted subdirectories.
    """

    path: str
    files: tuple[FileEntry, ...] = ()
    subdirectories: Mapping[str, DirectoryNode] = field(default_factory=dict)
    total_files: int = 0
    total_size: int = 0
    placeholder: bool = False

    # Children live in a read-only mapping, which cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "subdirectories", MappingProxyType(dict(self.subdirectories)))

    def iter_nodes(self) -> Iterator[DirectoryNode]:
        """Yield this node and all descendants, depth-first in stored order."""
        yield self
        for child in self.subdirectories.values():
            yield from child.iter_nodes()
