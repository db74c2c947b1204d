"""Configurable themes for the tree prompt.

The Theme dataclass holds all configurable visual elements (colors, icons,
layout).
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for the tree prompt.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        active_color: Color for the row under the cursor when it is valid.
        invalid_color: Color for the row under the cursor when it is invalid.
        answer_color: Color for the final answer line.
        dim_color: Color for hints, separators and scroll markers.
        error_color: Color for the inline error line.

        pointer_icon: Marker in front of the active leaf.
        open_icon: Marker for an expanded node.
        closed_icon: Marker for a collapsed node.
        selected_icon: Marker for a selected option (multi-select).
        unselected_icon: Marker for an unselected option (multi-select).
        scroll_up_icon: Character indicating more rows above.
        scroll_down_icon: Character indicating more rows below.

        indent_width: Spaces per depth level.
        loop_separator: Line drawn under the list when navigation wraps.
    """

    # Colors
    active_color: str = "cyan"
    invalid_color: str = "red"
    answer_color: str = "cyan"
    dim_color: str = "dim"
    error_color: str = "red"

    # Icons
    pointer_icon: str = "❯"
    open_icon: str = "▼"
    closed_icon: str = "▶"
    selected_icon: str = "◉"
    unselected_icon: str = "◯"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    # Layout
    indent_width: int = 2
    loop_separator: str = "-" * 16


# Default theme used when none is specified
DEFAULT_THEME = Theme()
