"""Entry point producing the hierarchy description used in prompts."""

from __future__ import annotations

import logging

from ossmap.structure.config import StructureConfig
from ossmap.structure.listing import ListingClient
from ossmap.structure.rendering import render_tree
from ossmap.structure.scanner import DirectoryTreeScanner

logger = logging.getLogger(__name__)


def build_hierarchy_description(
    client: ListingClient,
    root_prefix: str,
    max_depth: int | None = None,
    *,
    config: StructureConfig | None = None,
) -> str:
    """Scan a remote hierarchy and render it as a compact text tree.

    Parameters
    ----------
    client
        Listing client for the object namespace.
    root_prefix
        Prefix to describe; empty for the namespace root.
    max_depth
        Maximum recursion depth; defaults to ``config.max_depth``.
    config
        Scan and display limits.

    Returns
    -------
    str
        Rendered tree, or an empty string if the root listing failed without
        yielding any data.
    """
    cfg = config or StructureConfig()
    if max_depth is None:
        max_depth = cfg.max_depth
    scanner = DirectoryTreeScanner(client, cfg)

    logger.info("Scanning %r (max depth %d)", root_prefix or "/", max_depth)
    root = scanner.scan(root_prefix, max_depth)

    if root_prefix in scanner.stats.failed_prefixes and not root.files and not root.subdirectories:
        logger.warning("Remote structure unavailable for %r; continuing without it", root_prefix or "/")
        return ""

    text = render_tree(root, cfg)
    logger.info(
        "Described %r: %d files, %d listing calls",
        root_prefix or "/",
        root.total_files,
        scanner.stats.listing_calls,
    )
    return text
