"""Interactive tree prompt using Rich.Live.

Example:
    from rich_tree import TreePrompt

    prompt = TreePrompt(
        message="Order your meal:",
        tree=[
            {"name": "fish", "children": ["whiting", "flathead"]},
            {"name": "snacks", "multiple": True, "children": ["chips", "calamari"]},
        ],
        multiple=True,
    )
    answer = prompt.show()  # ["flathead", "chips"]
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from .config import TreeOptions
from .engine import TreeEngine
from .keys import key_to_event
from .themes import DEFAULT_THEME, Theme
from .types import ChildrenProducer, DisplayRow, Expansion


def _calculate_window(cursor: int, total: int, page_size: int, offset: int) -> tuple[int, int]:
    """Return the (start, end) row window that keeps the cursor visible."""
    if total <= page_size:
        return 0, total
    cursor = max(0, min(cursor, total - 1))
    if cursor < offset:
        offset = cursor
    elif cursor >= offset + page_size:
        offset = cursor - page_size + 1
    offset = max(0, min(offset, total - page_size))
    return offset, offset + page_size


class TreePrompt:
    """Tree selection prompt with keyboard navigation and live updates.

    Keyboard controls:
        - Up/Down or j/k: Navigate
        - Right/l: Expand a node, or step into its first child
        - Left/h: Collapse a node, or jump to its parent
        - Tab: Expand/collapse
        - Space: Select (multi-select) or expand/collapse (single-select)
        - Enter: Confirm

    Args:
        message: Question shown above the tree.
        tree: Sequence of node specs, or a producer returning one.
        options: Behavior switches; keyword arguments override its fields.
        console: Optional Rich Console for output.
        theme: Optional Theme for customizing appearance.
    """

    def __init__(
        self,
        message: str,
        tree: Iterable[Any] | ChildrenProducer,
        options: TreeOptions | None = None,
        console: Console | None = None,
        theme: Theme | None = None,
        **overrides: Any,
    ):
        self.message = message
        self.options = (options or TreeOptions()).merged(**overrides)
        self.engine = TreeEngine(tree, self.options)
        self.console = console or Console(highlight=False)
        self.theme = theme or DEFAULT_THEME
        self.window_offset = 0

    def _hint(self) -> str:
        select = " space to select," if self.options.multiple else ""
        return f"(Use arrow keys,{select} enter to confirm.)"

    def _render_row(self, row: DisplayRow) -> str:
        theme = self.theme
        if row.expand is Expansion.OPEN:
            prefix = f"{theme.open_icon} "
        elif row.expand is Expansion.CLOSED:
            prefix = f"{theme.closed_icon} "
        elif row.is_active:
            prefix = f"{theme.pointer_icon} "
        else:
            prefix = "  "

        if self.options.multiple:
            prefix += f"{theme.selected_icon if row.is_selected else theme.unselected_icon} "

        indent = " " * (theme.indent_width * (row.depth + 1))
        line = f"{indent}{escape(prefix + row.label)}"
        if row.is_active:
            color = theme.active_color if row.is_valid else theme.invalid_color
            return f"[{color}]{line}[/{color}]"
        return line

    def render(self) -> str:
        """Render the prompt as a Rich markup string."""
        theme = self.theme
        engine = self.engine
        header = f"[bold]{escape(self.message)}[/bold] "

        if engine.consume_hint():
            header += f"[{theme.dim_color}]{escape(self._hint())}[/{theme.dim_color}]"

        if engine.answered:
            return f"{header}[{theme.answer_color}]{escape(engine.answer_label())}[/{theme.answer_color}]"

        rows = engine.rows()
        start, end = _calculate_window(
            engine.active_index(), len(rows), self.options.page_size, self.window_offset
        )
        self.window_offset = start

        lines = [header]
        if start > 0:
            lines.append(f"[{theme.dim_color}]  {theme.scroll_up_icon} {start} more[/{theme.dim_color}]")
        lines.extend(self._render_row(row) for row in rows[start:end])
        if end < len(rows):
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_down_icon} {len(rows) - end} more[/{theme.dim_color}]"
            )
        if self.options.loop:
            lines.append(f"[{theme.dim_color}]{theme.loop_separator}[/{theme.dim_color}]")
        if engine.error:
            lines.append(f"[{theme.error_color}]>> [/{theme.error_color}]{escape(engine.error)}")
        return "\n".join(lines)

    async def run(self) -> Any:
        """Run the prompt on the current event loop and return the answer.

        Returns None if the user cancels with Ctrl-C.
        """
        loop = asyncio.get_running_loop()
        await self.engine.start()

        with Live("", console=self.console, refresh_per_second=15, transient=True) as live:
            live.update(Text.from_markup(self.render()))
            while not self.engine.answered:
                try:
                    key = await loop.run_in_executor(None, readchar.readkey)
                except (KeyboardInterrupt, EOFError):
                    return None

                event = key_to_event(key)
                if event is None:
                    continue
                await self.engine.handle(event)
                live.update(Text.from_markup(self.render()))

        self.console.print(Text.from_markup(self.render()))
        return self.engine.answer

    def show(self) -> Any:
        """Display the prompt and block until the user confirms or cancels."""
        return asyncio.run(self.run())
