"""Binary trees and binary search trees: building, deleting, traversing and measuring."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding ``data`` and optional left and right children."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def bst_insert(root: Node | None, value: Any, *, ties_left: bool = True) -> Node:
    """Insert ``value`` into a binary search tree and return its root.

    Larger values go right and smaller ones left; a value equal to a node's
    goes left when ``ties_left`` is true and right otherwise.
    """
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        go_right = value > node.data if ties_left else not node.data > value
        if go_right:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def fill_level_order(root: Node | None, value: Any) -> Node:
    """Attach ``value`` at the first free child slot in level order and return the root."""
    new = Node(value)
    if root is None:
        return new
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = new
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = new
            return root
        queue.append(node.right)
    return root


def build_level_order(values: Iterable[int]) -> Node | None:
    """Build a tree from values given in level order.

    The first value is the root; then each node in turn takes a left and a
    right child value, where a negative value means no child. Building stops
    when the values run out.
    """
    source = iter(values)
    first = next(source, None)
    if first is None:
        return None
    root = Node(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(source, None)
            if value is None:
                return root
            if value > -1:
                child = Node(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def min_node(root: Node | None) -> Node:
    """Return the leftmost node of the tree."""
    if root is None:
        raise ValueError("an empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node


def delete(root: Node | None, value: Any) -> Node | None:
    """Remove one node holding ``value`` from a binary search tree; return the new root.

    A node with two children takes the value of the smallest node in its right
    subtree, which is then removed instead. A missing value leaves the tree as is.
    """
    parent: Node | None = None
    node = root
    while node is not None:
        if node.data > value:
            parent, node = node, node.left
        elif node.data < value:
            parent, node = node, node.right
        else:
            break
    if node is None:
        return root
    if node.left is not None and node.right is not None:
        successor = min_node(node.right)
        node.data = successor.data
        node.right = delete(node.right, successor.data)
        return root
    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def level_order(root: Node | None) -> list[Any]:
    """Return the values breadth first, left to right."""
    result: list[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def inorder(root: Node | None) -> list[Any]:
    """Return the values in left, node, right order."""
    result: list[Any] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder(root: Node | None) -> list[Any]:
    """Return the values in node, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Node | None) -> list[Any]:
    """Return the values in left, right, node order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def height(root: Node | None) -> int:
    """Return the number of levels; 0 for an empty tree."""
    levels = 0
    current = [root] if root is not None else []
    while current:
        levels += 1
        current = [
            child for node in current for child in (node.left, node.right) if child is not None
        ]
    return levels


def count(root: Node | None) -> int:
    """Return the number of nodes."""
    return len(level_order(root))


def leaf_nodes(root: Node | None) -> int:
    """Return the number of nodes without children."""
    leaves = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        children = [child for child in (node.left, node.right) if child is not None]
        if not children:
            leaves += 1
        stack.extend(children)
    return leaves


def sample_tree() -> Node:
    """Return the small fixed tree 1 with children 2 and 3, where 2 has children 4 and 5."""
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


def _line(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def _demo() -> None:
    root: Node | None = None
    for value in (50, 30, 20, 40, 70, 60, 80):
        root = bst_insert(root, value, ties_left=False)
    print(_line(inorder(root)))
    root = fill_level_order(root, 12)
    print(_line(level_order(root)))
    root = delete(root, 20)
    print(_line(level_order(root)))
    root = delete(root, 30)
    print(_line(level_order(root)))


def main(argv: list[str] | None = None) -> int:
    """Build a tree from level-order integers on stdin and print its traversals and sizes."""
    parser = argparse.ArgumentParser(
        prog="binary-tree",
        description="Read level-order integers (negative means no child) and describe the tree.",
    )
    parser.add_argument(
        "--demo", action="store_true", help="run the built-in search tree demonstration instead"
    )
    args = parser.parse_args(argv)

    if args.demo:
        _demo()
        return 0

    try:
        values = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must consist of integers")
    root = build_level_order(values)
    print(_line(preorder(root)))
    print(_line(inorder(root)))
    print(_line(postorder(root)))
    print(_line(level_order(root)))
    print(f"Height = {height(root)}")
    print(f"Number of nodes = {count(root)}")
    print(f"Number of leaf nodes = {leaf_nodes(root)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())