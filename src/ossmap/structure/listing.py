"""Listing primitive consumed by the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class ListedObject:
    """A single object returned by a listing call.

    Attributes
    ----------
    key
        Full object key.
    size
        Object size in bytes.
    last_modified
        Last modification time reported by the store.
    """

    key: str
    size: int
    last_modified: datetime


@dataclass(frozen=True)
class ListingPage:
    """One page of a prefix + delimiter listing.

    Attributes
    ----------
    objects
        Objects directly under the prefix, ascending by key.
    common_prefixes
        Virtual subdirectories, each ending with the delimiter.
    next_continuation_token
        Cursor for the next page, or None when exhausted.
    is_truncated
        True if more results exist beyond this page.
    """

    objects: list[ListedObject] = field(default_factory=list)
    common_prefixes: list[str] = field(default_factory=list)
    next_continuation_token: str | None = None
    is_truncated: bool = False


class ListingClient(Protocol):
    """Paginated prefix listing over an object namespace."""

    def list_objects(
        self,
        prefix: str,
        delimiter: str,
        max_keys: int,
        continuation_token: str | None = None,
    ) -> ListingPage: ...
