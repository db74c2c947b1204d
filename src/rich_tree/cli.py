"""CLI interface for rich-tree.

Shows a tree prompt for a YAML or JSON tree file and prints the answer as
JSON on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .config import load_tree_file
from .errors import TreeSpecError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rich-tree",
        description="Pick options from a tree in the terminal.",
    )
    parser.add_argument("--version", action="version", version=f"rich-tree {__version__}")
    parser.add_argument("file", help="YAML or JSON tree file")
    parser.add_argument("--message", "-m", help="Question shown above the tree")
    parser.add_argument("--multiple", action="store_true", default=None, help="Select several options")
    parser.add_argument("--no-loop", dest="loop", action="store_false", default=None,
                        help="Stop at the ends of the list instead of wrapping")
    parser.add_argument("--page-size", type=int, help="Rows shown at once")
    parser.add_argument("--hide-children-of-valid", action="store_true", default=None,
                        help="Treat valid nodes as leaves")
    parser.add_argument("--only-show-valid", action="store_true", default=None,
                        help="Hide options that are not valid")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from .prompt import TreePrompt

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        tree_file = load_tree_file(Path(args.file))
        options = tree_file.options.merged(
            multiple=args.multiple,
            loop=args.loop,
            page_size=args.page_size,
            hide_children_of_valid=args.hide_children_of_valid,
            only_show_valid=args.only_show_valid,
        )
        message = args.message or tree_file.message or "Choose an option:"
        prompt = TreePrompt(message, tree_file.tree, options=options)
    except TreeSpecError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        answer = prompt.show()
    except KeyboardInterrupt:
        answer = None

    if not prompt.engine.answered:
        print()
        sys.exit(130)
    print(json.dumps(answer))


if __name__ == "__main__":
    main()
