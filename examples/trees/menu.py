#!/usr/bin/env python3
"""Example: multi-select menu with a lazily loaded subtree and async validation."""

import asyncio

from rich_tree import TreePrompt


async def load_specials():
    await asyncio.sleep(0.3)
    return {
        "name": "specials (today)",
        "children": ["scallops", {"name": "MYSTERY", "value": "", "short": "?"}],
    }


async def validate(value):
    await asyncio.sleep(0.01)
    return bool(value)


def main():
    prompt = TreePrompt(
        message="Order your meal:",
        tree=[
            {"name": "fish", "value": "", "children": ["whiting", "flathead"]},
            {"name": "snacks", "value": "", "multiple": True, "children": ["chips", "dim sims", "calamari"]},
            {"name": "specials", "value": "", "children": load_specials},
        ],
        multiple=True,
        validate=validate,
        transformer=lambda value: str(value).upper(),
    )
    print(prompt.show())


if __name__ == "__main__":
    main()
