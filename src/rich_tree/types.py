"""Type definitions for rich_tree.

Shared enums and dataclasses used by the engine, the renderer and the
key adapter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Union

# A producer returns a list of child specs, a {"children", "name", "value",
# "short"} mapping, or something falsy. It may be a coroutine function.
ChildrenProducer = Callable[[], Union[Any, Awaitable[Any]]]


class Validity(str, Enum):
    """Tri-state eligibility of a node as an answer."""

    UNKNOWN = "unknown"
    VALID = "valid"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_bool(cls, flag: Any) -> "Validity":
        """Only ``True`` itself is valid; messages and other truthy values are not."""
        return cls.VALID if flag is True else cls.INVALID


class Expansion(str, Enum):
    """Expand glyph shown in front of a row."""

    LEAF = "leaf"
    OPEN = "open"
    CLOSED = "closed"

    def __str__(self) -> str:
        return self.value


class KeyEvent(str, Enum):
    """Normalized key events understood by the engine."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE = "toggle"
    TAB = "tab"
    CONFIRM = "confirm"

    def __str__(self) -> str:
        return self.value


class Status(str, Enum):
    """Prompt lifecycle."""

    PENDING = "pending"
    ANSWERED = "answered"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Deferred:
    """Children that are produced on first expansion."""

    producer: ChildrenProducer


@dataclass(eq=False)
class Node:
    """One entry in the tree, leaf or internal.

    Attributes:
        name: Optional display label.
        value: Selectable payload (falls back to name).
        short: Optional compact form used on the answer line.
        children: None for a leaf, a list of nodes, or a Deferred producer.
        parent: Enclosing node (the synthetic root for top-level nodes).
        open: Whether the children are shown.
        is_valid: Tri-state validity, computed during preparation.
        prepared: Set once the node has been prepared.
        multiple: When truthy, children of this node are not exclusive.
    """

    name: Any = None
    value: Any = None
    short: Any = None
    children: list[Node] | Deferred | None = None
    parent: Node | None = field(default=None, repr=False)
    open: bool = False
    is_valid: Validity = Validity.UNKNOWN
    prepared: bool = False
    multiple: bool | None = None


@dataclass(frozen=True)
class VisibleNode:
    """A node in the flattened visible list with its display depth."""

    node: Node
    depth: int


@dataclass(frozen=True)
class DisplayRow:
    """Render record handed to the renderer for one visible node."""

    depth: int
    label: str
    expand: Expansion
    is_active: bool
    is_selected: bool
    is_valid: bool
