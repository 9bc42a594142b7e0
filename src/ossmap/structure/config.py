"""Tuning limits for structure scanning and rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomli
import yaml
from pydantic import BaseModel, Field


class StructureConfig(BaseModel):
    """Configuration for scan and render limits.

    Attributes
    ----------
    delimiter
        Separator used by the listing API to emulate directories.
    max_depth
        Default recursion depth for a scan.
    max_objects_per_directory
        Maximum number of files recorded for a single directory.
    list_page_size
        Upper bound on keys requested per file-listing page.
    subdirectory_page_size
        Keys requested by the single common-prefix listing call.
    max_subdirectories
        Maximum number of subdirectories recursed into per directory.
    max_display_items
        Maximum number of items rendered at one tree level.
    group_preview_count
        Members of a multi-file extension group rendered individually.
    """

    delimiter: str = Field(default="/", min_length=1)
    max_depth: int = Field(default=3, ge=0)
    max_objects_per_directory: int = Field(default=20, ge=1)
    list_page_size: int = Field(default=50, ge=1)
    subdirectory_page_size: int = Field(default=50, ge=1)
    max_subdirectories: int = Field(default=15, ge=0)
    max_display_items: int = Field(default=20, ge=1)
    group_preview_count: int = Field(default=3, ge=1)

    model_config = {"frozen": True, "extra": "forbid"}


def load_structure_config(path: Path) -> StructureConfig:
    """Load a StructureConfig from a TOML or YAML file.

    TOML files may keep the values under a ``[structure]`` table; YAML files
    may nest them under a ``structure`` key.

    Parameters
    ----------
    path
        Path to a ``.toml``, ``.yaml`` or ``.yml`` file.

    Returns
    -------
    StructureConfig
        Validated configuration.

    Raises
    ------
    ValueError
        If the file cannot be read or parsed, has an unsupported suffix, or
        holds invalid values.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Failed to read structure config: {path}") from e

    suffix = path.suffix.lower()
    if suffix == ".toml":
        try:
            data: Any = tomli.loads(text)
        except Exception as e:
            raise ValueError(f"Failed to parse TOML structure config: {path}") from e
    elif suffix in (".yml", ".yaml"):
        try:
            data = yaml.safe_load(text)
        except Exception as e:
            raise ValueError(f"Failed to parse YAML structure config: {path}") from e
    else:
        raise ValueError(f"Unsupported structure config type: {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Structure config must be a mapping: {path}")
    if isinstance(data.get("structure"), dict):
        data = data["structure"]
    return StructureConfig.model_validate(data)
