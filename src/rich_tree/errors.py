"""Exceptions raised by rich_tree."""

from __future__ import annotations


class RichTreeError(Exception):
    """Base class for rich_tree errors."""


class TreeSpecError(RichTreeError, ValueError):
    """Raised when a tree, its options or a tree file is malformed."""
