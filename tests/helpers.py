"""Test doubles and tree builders shared across unit tests."""

from __future__ import annotations

from datetime import datetime, timezone

from ossmap.structure.listing import ListedObject, ListingPage
from ossmap.structure.types import DirectoryNode, FileEntry

STAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeListingClient:
    """In-memory listing client emulating prefix + delimiter pagination.

    Objects and common prefixes share one key-ordered stream; ``max_keys``
    counts both and the continuation token is the last key returned, like a
    marker-based object store.
    """

    def __init__(
        self,
        objects: dict[str, int],
        *,
        fail_on: tuple[str, ...] = (),
        fail_on_call: int | None = None,
        group_common_prefixes: bool = True,
    ) -> None:
        self.objects = dict(sorted(objects.items()))
        self.fail_on = set(fail_on)
        self.fail_on_call = fail_on_call
        self.group_common_prefixes = group_common_prefixes
        self.calls: list[tuple[str, int, str | None]] = []

    def list_objects(
        self,
        prefix: str,
        delimiter: str,
        max_keys: int,
        continuation_token: str | None = None,
    ) -> ListingPage:
        self.calls.append((prefix, max_keys, continuation_token))
        if prefix in self.fail_on or len(self.calls) == self.fail_on_call:
            raise ConnectionError(f"listing failed for {prefix!r}")

        entries: list[tuple[str, bool]] = []
        seen: set[str] = set()
        for key in self.objects:
            if not key.startswith(prefix):
                continue
            rest = key[len(prefix) :]
            if delimiter in rest:
                common = prefix + rest.split(delimiter, 1)[0] + delimiter
                if common not in seen:
                    seen.add(common)
                    entries.append((common, True))
                if self.group_common_prefixes:
                    continue
            entries.append((key, False))
        entries.sort()

        if continuation_token:
            entries = [e for e in entries if e[0] > continuation_token]
        page = entries[:max_keys]
        truncated = len(entries) > max_keys
        return ListingPage(
            objects=[ListedObject(key=k, size=self.objects[k], last_modified=STAMP) for k, is_dir in page if not is_dir],
            common_prefixes=[k for k, is_dir in page if is_dir],
            next_continuation_token=page[-1][0] if truncated else None,
            is_truncated=truncated,
        )


def make_file(name: str, size: int = 0) -> FileEntry:
    """Create a FileEntry with a fixed timestamp."""
    return FileEntry(name=name, size=size, last_modified=STAMP)


def make_node(
    path: str,
    files: list[FileEntry] | None = None,
    subdirectories: dict[str, DirectoryNode] | None = None,
) -> DirectoryNode:
    """Create a DirectoryNode with aggregates derived from its contents."""
    files = files or []
    subdirectories = subdirectories or {}
    real = [f for f in files if not f.synthetic]
    return DirectoryNode(
        path=path,
        files=tuple(files),
        subdirectories=subdirectories,
        total_files=len(real) + sum(c.total_files for c in subdirectories.values()),
        total_size=sum(f.size for f in real) + sum(c.total_size for c in subdirectories.values()),
    )
