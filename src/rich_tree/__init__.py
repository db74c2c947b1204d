"""Rich.Live-based tree selection prompt.

Navigate a hierarchical list of options in the terminal, with children
produced on demand and options validated by (optionally async) callables.

Example:
    from rich_tree import TreePrompt

    answer = TreePrompt(
        message="Pick a fruit",
        tree=[{"name": "fruit", "children": ["apple", "banana"]}],
    ).show()  # "apple"
"""

__version__ = "0.1.0"

from .config import TreeFile, TreeOptions, load_tree_file
from .engine import TreeEngine
from .errors import RichTreeError, TreeSpecError
from .flatten import flatten
from .keys import key_to_event
from .nodes import name_for, node_from_spec, short_for, value_for
from .preparer import TreePreparer
from .prompt import TreePrompt
from .themes import DEFAULT_THEME, Theme
from .types import (
    Deferred,
    DisplayRow,
    Expansion,
    KeyEvent,
    Node,
    Status,
    Validity,
    VisibleNode,
)

__all__ = [
    # Main classes
    "TreePrompt",
    "TreeEngine",
    "TreePreparer",
    "TreeOptions",
    # Tree model
    "Node",
    "Deferred",
    "Validity",
    "VisibleNode",
    "DisplayRow",
    "Expansion",
    "KeyEvent",
    "Status",
    "flatten",
    "node_from_spec",
    "value_for",
    "name_for",
    "short_for",
    # Files
    "TreeFile",
    "load_tree_file",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Errors
    "RichTreeError",
    "TreeSpecError",
    # Key helpers
    "key_to_event",
]
