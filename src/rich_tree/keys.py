"""Keyboard input helpers for rich_tree.

Maps raw ``readchar`` keys to the normalized ``KeyEvent`` values the engine
understands.
"""

from __future__ import annotations

import readchar

from .types import KeyEvent


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key.lower() == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key.lower() == "j" or key == readchar.key.DOWN


def is_left(key: str) -> bool:
    """Check if key is left arrow or vim 'h'."""
    return key.lower() == "h" or key == readchar.key.LEFT


def is_right(key: str) -> bool:
    """Check if key is right arrow or vim 'l'."""
    return key.lower() == "l" or key == readchar.key.RIGHT


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def is_tab(key: str) -> bool:
    return key in (readchar.key.TAB, "\t")


def key_to_event(key: str) -> KeyEvent | None:
    """Translate a raw key into a KeyEvent, or None if it is not bound."""
    if is_up(key):
        return KeyEvent.UP
    if is_down(key):
        return KeyEvent.DOWN
    if is_left(key):
        return KeyEvent.LEFT
    if is_right(key):
        return KeyEvent.RIGHT
    if is_space(key):
        return KeyEvent.TOGGLE
    if is_tab(key):
        return KeyEvent.TAB
    if is_enter(key):
        return KeyEvent.CONFIRM
    return None
