#!/usr/bin/env python3
"""
Codemod example showing enter/leave visitors with treevisit.

This example demonstrates:
- Renaming identifiers in place
- Removing statements while the walk is running
- Stopping early with EXIT
"""

import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treevisit import EXIT, SKIP, VisitConfig, find_first, visit
from treevisit.testing import SAMPLE_SOURCE, sample_program


def is_console_call(node):
    """Check for an ``ExpressionStatement`` calling ``console.*``."""
    expression = node.get("expression") or {}
    callee = expression.get("callee") or {}
    target = callee.get("object") or {}
    return (
        node["type"] == "ExpressionStatement"
        and expression.get("type") == "CallExpression"
        and target.get("name") == "console"
    )


def strip_console(node, key, index, ancestors):
    """Drop ``console.*(...)`` statements from their block."""
    if index is not None and is_console_call(node):
        del ancestors[-1][key][index]
        # The next sibling now sits at `index`
        return SKIP, index


def main():
    """Run a small codemod over the sample program."""
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = sample_program()
    print(f"Source: {SAMPLE_SOURCE}")
    print("-" * 50)

    renamed = []

    def rename(node, key, index, ancestors):
        if node["type"] == "Identifier" and node["name"] == "x":
            node["name"] = "main"
            renamed.append(node)

    config = VisitConfig.tracing(use_color=sys.stdout.isatty())
    visit(tree, strip_console, config)
    visit(tree, {"leave": rename}, config)

    block = tree["body"][0]["declaration"]["body"]
    print(f"Renamed {len(renamed)} identifier(s)")
    print(f"Statements left in block: {len(block['body'])}")

    exit_call = find_first(tree, lambda n: n["type"] == "CallExpression")
    if exit_call is not None:
        print(f"First call now starts at offset {exit_call['start']}")

    # Stop as soon as the first literal is found
    visit(tree, lambda node, *_: EXIT if node["type"] == "Literal" else None)

    print(json.dumps(block, indent=2)[:400])


if __name__ == "__main__":
    main()
