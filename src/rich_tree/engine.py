"""Tree state engine: cursor navigation and selection.

``TreeEngine`` owns the synthetic root, the active cursor and the selection
set. Every key event is handled to completion (including any awaited
preparation) before the next one starts; overlapping ``handle`` calls wait
on a lock and run in arrival order.

Example:
    engine = TreeEngine([{"name": "fruit", "children": ["apple", "banana"]}])
    await engine.start()
    await engine.handle(KeyEvent.RIGHT)
    await engine.handle(KeyEvent.DOWN)
    await engine.handle(KeyEvent.CONFIRM)
    engine.answer  # "apple"
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from .config import TreeOptions
from .flatten import flatten
from .nodes import build_children, has_children, name_for, short_for, value_for
from .preparer import TreePreparer
from .types import (
    ChildrenProducer,
    Deferred,
    DisplayRow,
    Expansion,
    KeyEvent,
    Node,
    Status,
    Validity,
)

logger = logging.getLogger(__name__)

INVALID_ANSWER_MESSAGE = "Please choose a valid option"


class TreeEngine:
    """Navigation and selection state for one prompt session.

    Args:
        tree: Sequence of node specs, or a producer returning one.
        options: Behavior switches (defaults to ``TreeOptions()``).
    """

    def __init__(
        self,
        tree: Iterable[Any] | ChildrenProducer,
        options: TreeOptions | None = None,
    ):
        self.options = options or TreeOptions()
        self.preparer = TreePreparer(self.options)

        children = Deferred(tree) if callable(tree) else build_children(tree)
        self.root = Node(children=children, open=True)

        self.active: Node | None = None
        self.selection: list[Node] = []
        self.status = Status.PENDING
        self.answer: Any = None
        self.error: str | None = None
        self.hint_pending = True
        self._lock = asyncio.Lock()

    # ── lifecycle ────────────────────────────────────────────────────────

    async def start(self) -> None:
        """Prepare the top level and place the cursor on the first row."""
        async with self._lock:
            await self.preparer.prepare(self.root)
            self._sync_active()

    async def handle(self, event: KeyEvent) -> None:
        """Apply one key event. Ignored once the prompt is answered."""
        async with self._lock:
            if self.status is Status.ANSWERED:
                return
            self.error = None
            self._sync_active()

            if event is KeyEvent.UP:
                self.move_active(-1)
            elif event is KeyEvent.DOWN:
                self.move_active(1)
            elif event is KeyEvent.LEFT:
                self.on_left()
            elif event is KeyEvent.RIGHT:
                await self.on_right()
            elif event is KeyEvent.TAB:
                await self.toggle_open()
            elif event is KeyEvent.TOGGLE:
                if self.options.multiple:
                    self.toggle_selection()
                else:
                    await self.toggle_open()
            elif event is KeyEvent.CONFIRM:
                self.confirm()

            self._sync_active()

    @property
    def answered(self) -> bool:
        return self.status is Status.ANSWERED

    # ── visible list ─────────────────────────────────────────────────────

    def visible(self) -> list[Node]:
        return [entry.node for entry in flatten(self.root)]

    def _sync_active(self) -> None:
        visible = self.visible()
        if self.active is None or self.active not in visible:
            self.active = visible[0] if visible else None

    # ── navigation ───────────────────────────────────────────────────────

    def move_active(self, distance: int) -> None:
        """Move the cursor ``distance`` rows, wrapping when looping is on."""
        visible = self.visible()
        if not visible or self.active is None:
            return
        index = visible.index(self.active) + distance

        if not 0 <= index < len(visible):
            if not self.options.loop:
                return
            index %= len(visible)

        self.active = visible[index]

    def on_left(self) -> None:
        """Collapse the active node, or move up to its parent."""
        node = self.active
        if node is None:
            return
        if has_children(node) and node.open:
            node.open = False
        elif node.parent is not None and node.parent is not self.root:
            self.active = node.parent

    async def on_right(self) -> None:
        """Expand the active node, or descend into its first child."""
        node = self.active
        if node is None:
            return
        if not has_children(node):
            if self.options.multiple:
                self.toggle_selection(node)
            return

        if not node.open:
            node.open = True
            await self.preparer.prepare(node)
        elif node.children:
            self.move_active(1)

    async def toggle_open(self) -> None:
        """Flip the open state of the active node, preparing it on open."""
        node = self.active
        if node is None or not has_children(node):
            return
        node.open = not node.open
        if node.open:
            await self.preparer.prepare(node)

    # ── selection ────────────────────────────────────────────────────────

    def toggle_selection(self, node: Node | None = None) -> None:
        """Add or remove a valid leaf from the selection set.

        Siblings under a parent without ``multiple`` are exclusive: selecting
        one drops any other selected child of the same parent.
        """
        node = node or self.active
        if node is None or node.is_valid is not Validity.VALID or has_children(node):
            return

        if node in self.selection:
            self.selection.remove(node)
            return

        parent = node.parent
        if parent is not None and not parent.multiple and parent.children:
            self.selection = [n for n in self.selection if n.parent is not parent]
        self.selection.append(node)

    def is_selected(self, node: Node) -> bool:
        return node in self.selection

    def confirm(self) -> None:
        """Resolve the answer, or set ``error`` if the active node is invalid."""
        if self.options.multiple:
            self.answer = [value_for(n) for n in self.selection]
        elif self.active is None:
            self.answer = None
        elif self.active.is_valid is not Validity.VALID:
            self.error = INVALID_ANSWER_MESSAGE
            return
        else:
            self.answer = value_for(self.active)

        self.status = Status.ANSWERED
        logger.debug(f"Answered with {self.answer!r}")

    # ── render boundary ──────────────────────────────────────────────────

    def rows(self) -> list[DisplayRow]:
        """Display records for every visible node."""
        transformer = self.options.transformer
        rows = []
        for entry in flatten(self.root):
            node = entry.node
            if not has_children(node):
                expand = Expansion.LEAF
            elif node.open:
                expand = Expansion.OPEN
            else:
                expand = Expansion.CLOSED
            rows.append(
                DisplayRow(
                    depth=entry.depth,
                    label=str(name_for(node, transformer)),
                    expand=expand,
                    is_active=node is self.active,
                    is_selected=node in self.selection,
                    is_valid=node.is_valid is Validity.VALID,
                )
            )
        return rows

    def active_index(self) -> int:
        """Row index of the cursor, or -1 for an empty tree."""
        if self.active is None:
            return -1
        return self.visible().index(self.active)

    def answer_label(self) -> str:
        """Short form of the answer for the final line."""
        transformer = self.options.transformer
        if self.options.multiple:
            return ", ".join(str(short_for(n, transformer)) for n in self.selection)
        if self.active is None:
            return ""
        return str(short_for(self.active, transformer))

    def consume_hint(self) -> bool:
        """Return True exactly once per session, for the first render."""
        pending = self.hint_pending
        self.hint_pending = False
        return pending
