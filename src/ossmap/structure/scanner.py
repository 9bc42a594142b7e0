"""Bounded scanning of a remote object hierarchy.

The namespace behind a listing client can be arbitrarily large. The scanner
caps recursion depth, files recorded per directory and subdirectories
recursed per directory, so the number of listing calls and the size of the
resulting tree stay bounded. Output is representative, not exhaustive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ossmap.structure.config import StructureConfig
from ossmap.structure.listing import ListingClient
from ossmap.structure.types import DirectoryNode, FileEntry

logger = logging.getLogger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass
class ScanStats:
    """Statistics collected during a single scan.

    Attributes
    ----------
    listing_calls
        Number of listing requests issued.
    nodes_scanned
        Number of directory nodes visited (depth-limited nodes included).
    failed_prefixes
        Prefixes whose listing raised; their nodes hold partial data.
    """

    listing_calls: int = 0
    nodes_scanned: int = 0
    failed_prefixes: list[str] = field(default_factory=list)


class DirectoryTreeScanner:
    """Build a size-, depth- and fan-out-bounded tree from listing calls."""

    def __init__(self, client: ListingClient, config: StructureConfig | None = None) -> None:
        self._client = client
        self._config = config or StructureConfig()
        self.stats = ScanStats()

    def scan(self, prefix: str, max_depth: int | None = None) -> DirectoryNode:
        """Scan the hierarchy below ``prefix``.

        Listing failures never propagate; the affected node keeps whatever
        was gathered before the failure and the prefix is recorded in
        ``stats.failed_prefixes``.

        Parameters
        ----------
        prefix
            Root prefix, normally ending with the delimiter (or empty).
        max_depth
            Recursion depth; defaults to ``config.max_depth``.

        Returns
        -------
        DirectoryNode
            Root of the bounded tree.
        """
        if max_depth is None:
            max_depth = self._config.max_depth
        self.stats = ScanStats()
        return self._scan_node(prefix, 0, max_depth)

    def _scan_node(self, prefix: str, depth: int, max_depth: int) -> DirectoryNode:
        self.stats.nodes_scanned += 1
        if depth >= max_depth:
            return DirectoryNode(path=prefix)

        files: list[FileEntry] = []
        subdirectories: dict[str, DirectoryNode] = {}
        try:
            self._collect_files(prefix, files)
            self._collect_subdirectories(prefix, depth, max_depth, subdirectories)
        except Exception as e:
            self.stats.failed_prefixes.append(prefix)
            logger.warning("Could not list %r; keeping partial results", prefix or "/")
            logger.debug("Listing failure for %r", prefix, exc_info=e)

        real = [f for f in files if not f.synthetic]
        logger.debug("Scanned %r: %d files, %d subdirectories", prefix, len(real), len(subdirectories))
        return DirectoryNode(
            path=prefix,
            files=tuple(files),
            subdirectories=subdirectories,
            total_files=len(real) + sum(c.total_files for c in subdirectories.values()),
            total_size=sum(f.size for f in real) + sum(c.total_size for c in subdirectories.values()),
        )

    def _collect_files(self, prefix: str, files: list[FileEntry]) -> None:
        cfg = self._config
        cap = cfg.max_objects_per_directory
        recorded = 0
        token: str | None = None

        while True:
            self.stats.listing_calls += 1
            page = self._client.list_objects(prefix, cfg.delimiter, min(cfg.list_page_size, cap - recorded), token)
            for obj in page.objects:
                if obj.key == prefix or recorded >= cap:
                    continue
                name = obj.key[len(prefix) :]
                # Keys below a nested prefix are reached through recursion.
                if cfg.delimiter in name:
                    continue
                files.append(FileEntry(name=name, size=obj.size, last_modified=obj.last_modified))
                recorded += 1

            token = page.next_continuation_token
            if recorded >= cap:
                if page.is_truncated:
                    files.append(
                        FileEntry(
                            name=f"... (more files exist, listing capped at {cap})",
                            size=0,
                            last_modified=_EPOCH,
                            synthetic=True,
                        )
                    )
                return
            if not token:
                return

    def _collect_subdirectories(
        self, prefix: str, depth: int, max_depth: int, subdirectories: dict[str, DirectoryNode]
    ) -> None:
        cfg = self._config
        self.stats.listing_calls += 1
        page = self._client.list_objects(prefix, cfg.delimiter, cfg.subdirectory_page_size, None)
        prefixes = page.common_prefixes

        for sub_prefix in prefixes[: cfg.max_subdirectories]:
            name = sub_prefix[len(prefix) :].removesuffix(cfg.delimiter)
            if not name:
                # A prefix without a trailing delimiter lists itself as a common prefix.
                name = sub_prefix.rstrip(cfg.delimiter)
            subdirectories[name] = self._scan_node(sub_prefix, depth + 1, max_depth)

        remaining = len(prefixes) - cfg.max_subdirectories
        if remaining > 0:
            subdirectories[f"... ({remaining} more subdirectories not shown)"] = DirectoryNode(
                path="", placeholder=True
            )
