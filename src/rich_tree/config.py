"""Prompt options and tree-file loading.

Tree files are YAML (``.yaml``/``.yml``) or JSON. A file is either a list
(the tree itself) or a mapping with a ``tree`` key plus option keys:

    message: Order your meal
    multiple: true
    loop: false
    tree:
      - name: fish
        children: [whiting, flathead]
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Awaitable, Callable, Union

import yaml

from .errors import TreeSpecError

Validator = Callable[[Any], Union[bool, Awaitable[bool]]]

# camelCase spellings accepted alongside the field names
OPTION_ALIASES: dict[str, str] = {
    "pageSize": "page_size",
    "hideChildrenOfValid": "hide_children_of_valid",
    "onlyShowValid": "only_show_valid",
}

DEFAULT_PAGE_SIZE = 10


@dataclass
class TreeOptions:
    """Behavior switches for a tree prompt.

    Attributes:
        multiple: Answer with a list of selected values instead of one value.
        page_size: Rows shown at once by the renderer.
        loop: Wrap the cursor around at either end of the list.
        hide_children_of_valid: Turn valid nodes into leaves.
        only_show_valid: Remove leaves that fail validation.
        validate: Optional ``value -> bool`` (may return an awaitable).
        transformer: Optional ``value -> label`` for nodes without a name.
    """

    multiple: bool = False
    page_size: int = DEFAULT_PAGE_SIZE
    loop: bool = True
    hide_children_of_valid: bool = False
    only_show_valid: bool = False
    validate: Validator | None = None
    transformer: Callable[[Any], Any] | None = None

    def __post_init__(self):
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size < 1:
            raise TreeSpecError(f"page_size must be a positive integer, got {self.page_size!r}")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "TreeOptions":
        """Build options from a mapping, accepting camelCase aliases."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise TreeSpecError(f"Unknown option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> "TreeOptions":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


@dataclass
class TreeFile:
    """Contents of a tree file."""

    tree: list[Any]
    options: TreeOptions
    message: str | None = None


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


def load_tree_file(path: Path) -> TreeFile:
    """Load a tree and its options from a YAML or JSON file.

    Raises:
        TreeSpecError: If the file cannot be read or is malformed.
    """
    try:
        text = path.read_text()
    except OSError as e:
        raise TreeSpecError(f"Cannot read {path}: {e}") from e

    try:
        data = _parse(path, text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise TreeSpecError(f"Cannot parse {path}: {e}") from e

    if isinstance(data, list):
        return TreeFile(tree=data, options=TreeOptions())
    if not isinstance(data, dict) or not isinstance(data.get("tree"), list):
        raise TreeSpecError(f"{path} must contain a list or a mapping with a 'tree' list")

    data = dict(data)
    tree = data.pop("tree")
    message = data.pop("message", None)
    return TreeFile(tree=tree, options=TreeOptions.from_mapping(data), message=message)
