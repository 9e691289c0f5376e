"""Shared pytest fixtures for adjgraph tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from adjgraph.graph import Graph
from adjgraph.logs import ExitStreamHandler


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging so later tests cannot exit."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, ExitStreamHandler):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clique() -> Graph:
    """A fully connected graph on 20 vertices."""
    return Graph("clique").add_vertices(20).fully_connect()

