"""Node construction and accessors.

Raw tree specs come from Python callers or from YAML/JSON files:

- a dict is a structured node record,
- a callable ``children`` entry is produced on demand,
- anything else is wrapped as a leaf whose value is the raw entry.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Iterable

from .errors import TreeSpecError
from .types import Deferred, Node, Validity

logger = logging.getLogger(__name__)

Transformer = Callable[[Any], Any]

NODE_KEYS = frozenset({"name", "value", "short", "children", "open", "multiple", "valid"})


def _children_from_spec(raw: Any) -> list[Node] | Deferred | None:
    if raw is None:
        return None
    if isinstance(raw, Deferred):
        return raw
    if callable(raw):
        return Deferred(raw)
    if isinstance(raw, (list, tuple)):
        return [node_from_spec(item) for item in raw]
    raise TreeSpecError(f"children must be a list or a callable, got {type(raw).__name__}")


def node_from_spec(raw: Any) -> Node:
    """Normalize one raw entry into a Node."""
    if isinstance(raw, Node):
        return raw
    if not isinstance(raw, dict):
        return Node(value=copy.deepcopy(raw))

    unknown = set(raw) - NODE_KEYS
    if unknown:
        logger.debug(f"Ignoring node keys: {', '.join(sorted(map(str, unknown)))}")

    node = Node(
        name=copy.deepcopy(raw.get("name")),
        value=copy.deepcopy(raw.get("value")),
        short=copy.deepcopy(raw.get("short")),
        children=_children_from_spec(raw.get("children")),
        open=bool(raw.get("open", False)),
        multiple=raw.get("multiple"),
    )
    if "valid" in raw:
        node.is_valid = Validity.from_bool(raw["valid"])
    return node


def build_children(raw: Iterable[Any]) -> list[Node]:
    """Normalize a raw child sequence into freshly built nodes.

    Payloads are deep-copied so the caller's structures are never shared
    with the engine. Producers are kept by reference.
    """
    return [node_from_spec(item) for item in raw]


def normalize_children(node: Node) -> list[Node]:
    """Wrap any raw entries left in a static children list."""
    children = node.children
    if not isinstance(children, list):
        return []
    for index, item in enumerate(children):
        if not isinstance(item, Node):
            children[index] = node_from_spec(item)
    return children


def has_children(node: Node) -> bool:
    return node.children is not None


def value_for(node: Node) -> Any:
    return node.value if node.value is not None else node.name


def name_for(node: Node, transformer: Transformer | None = None) -> Any:
    if node.name is not None:
        return node.name
    if transformer is not None:
        return transformer(value_for(node))
    return value_for(node)


def short_for(node: Node, transformer: Transformer | None = None) -> Any:
    if node.short is not None:
        return node.short
    return name_for(node, transformer)
