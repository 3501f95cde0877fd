"""Draw a binary tree as text, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    for position, char in enumerate(text, start):
        if position >= 0:
            row[position] = char


def _place(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw the subtree at the given offset and return its total width."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _place(node.left, offset, depth + 1, rows)
    right = _place(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        joint = offset + left + width // 2
        if is_left:
            _write(rows[depth - 1], joint, "-" * (width + right))
        else:
            _write(rows[depth - 1], offset - width // 2, "-" * (left + width))
        _write(rows[depth - 1], joint, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, lines joined by newlines; empty for None."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _place(tree, 0, 0, rows)
    return "\n".join("".join(row).rstrip(" ") for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a file, standard output by default."""
    if tree is None:
        return
    out = sys.stdout if file is None else file
    out.write(render(tree) + "\n")