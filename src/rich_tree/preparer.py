"""Lazy materialization, validation and pruning of tree nodes.

``TreePreparer.prepare`` is the only place where user callables (children
producers and the validator) are invoked. Both may be plain functions or
coroutine functions; a tree without awaitables is prepared without ever
suspending.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

from .config import TreeOptions
from .nodes import build_children, normalize_children, value_for
from .types import Deferred, Node, Validity

logger = logging.getLogger(__name__)


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class TreePreparer:
    """Prepares nodes according to the configured options."""

    def __init__(self, options: TreeOptions):
        self.options = options

    async def prepare(self, node: Node) -> None:
        """Materialize, validate and filter the children of ``node``.

        Idempotent: a node is prepared at most once. Failures of a children
        producer degrade the node to a leaf and are never propagated.
        """
        if node.prepared:
            return
        node.prepared = True

        if isinstance(node.children, Deferred):
            await self._run_producer(node)
        if node.children is None:
            return

        normalize_children(node)
        await self._validate_and_filter(node)

    async def _run_producer(self, node: Node) -> None:
        producer = node.children.producer
        try:
            result = await _resolve(producer())
        except Exception as e:
            logger.warning(f"Children producer for {value_for(node)!r} failed: {e}")
            node.children = None
            return

        if isinstance(result, dict):
            for prop in ("name", "value", "short"):
                if prop in result:
                    setattr(node, prop, result[prop])
            node.is_valid = Validity.UNKNOWN
            await self.add_validity(node)
            raw_children = result.get("children")
        elif isinstance(result, (list, tuple)) or result:
            raw_children = result
        else:
            raw_children = None

        # An empty list still makes a branch; only a missing result makes a leaf.
        try:
            node.children = build_children(raw_children) if raw_children is not None else None
        except Exception as e:
            logger.warning(f"Children produced for {value_for(node)!r} are malformed: {e}")
            node.children = None
            return
        logger.debug(f"Produced {len(node.children or [])} children for {value_for(node)!r}")

    async def add_validity(self, node: Node) -> None:
        """Compute ``node.is_valid`` unless it is already known."""
        if node.is_valid is not Validity.UNKNOWN:
            return
        validate = self.options.validate
        if validate is None:
            node.is_valid = Validity.VALID
            return
        try:
            result = await _resolve(validate(value_for(node)))
        except Exception as e:
            logger.warning(f"Validator failed for {value_for(node)!r}: {e}")
            node.is_valid = Validity.INVALID
            return
        node.is_valid = Validity.from_bool(result)

    async def _validate_and_filter(self, node: Node) -> None:
        children = node.children
        # Walk backwards so removals do not shift unvisited indices.
        for index in range(len(children) - 1, -1, -1):
            child = children[index]
            child.parent = node
            await self.add_validity(child)

            if self.options.hide_children_of_valid and child.is_valid is Validity.VALID:
                child.children = None

            if (
                self.options.only_show_valid
                and child.is_valid is not Validity.VALID
                and child.children is None
            ):
                del children[index]
                logger.debug(f"Pruned invalid option {value_for(child)!r}")
                continue

            if child.open:
                await self.prepare(child)
