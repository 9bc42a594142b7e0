"""Shared test fixtures for ossmap tests."""

from __future__ import annotations

import pytest

from tests.helpers import FakeListingClient


@pytest.fixture
def dataset_client() -> FakeListingClient:
    """A small bucket with nested prefixes and a directory marker."""
    return FakeListingClient(
        {
            "data/": 0,
            "data/readme.md": 120,
            "data/labels.json": 2048,
            "data/images/": 0,
            "data/images/0001.jpg": 1000,
            "data/images/0002.jpg": 1100,
            "data/images/0003.jpg": 1200,
            "data/images/0004.jpg": 1300,
            "data/images/0005.jpg": 1400,
            "data/images/thumbs/t1.png": 50,
            "data/pointcloud/frame.pcd": 4096,
        }
    )
