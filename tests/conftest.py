"""Pytest fixtures for rich-tree tests."""

import asyncio

import pytest

from rich_tree.config import TreeOptions
from rich_tree.engine import TreeEngine


@pytest.fixture
def fruit_tree():
    return [{"name": "fruit", "children": ["apple", "banana"]}]


@pytest.fixture
def make_engine():
    """Factory building a started engine."""

    def _make(tree, **options):
        engine = TreeEngine(tree, TreeOptions(**options))
        asyncio.run(engine.start())
        return engine

    return _make


@pytest.fixture
def press():
    """Send key events to an engine in order."""

    def _press(engine, *events):
        async def _go():
            for event in events:
                await engine.handle(event)

        asyncio.run(_go())

    return _press


@pytest.fixture
def call_log():
    """Records calls made by producers and validators."""
    return []
