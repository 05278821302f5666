import logging
from collections.abc import Callable
from typing import Any

from bst_codec.src.bin_tree import BinaryTree, Node
from bst_codec.src.errors import FormatError
from bst_codec.src.utils import (
    CLOSE_BRACE,
    LEFT_NODE_SYMBOL,
    OPEN_BRACE,
    RIGHT_NODE_SYMBOL,
    check_braces_balanced,
    first_positive_index,
    parse_int_key,
)


def encode(tree: BinaryTree[Any], key_to_text: Callable[[Any], str] = str) -> str:
    parts: list[str] = []
    # pending nodes and brace text, popped in output order
    stack: list[Node[Any] | str] = [tree.root] if tree.root is not None else []
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        parts.append(key_to_text(item.key))
        if item.right is not None:
            stack.extend([CLOSE_BRACE, item.right, OPEN_BRACE + RIGHT_NODE_SYMBOL])
        if item.left is not None:
            stack.extend([CLOSE_BRACE, item.left, OPEN_BRACE + LEFT_NODE_SYMBOL])

    return "".join(parts)


def decode(encoded_tree: str) -> BinaryTree[int]:
    """
    Rebuilds the tree written by encode. Keys must be decimal integers.

    Every child group is handled by two passes over the same text: one that
    reads the group itself (and recursively everything nested in it) and one
    that counts braces to jump past it and pick up a following right sibling.
    """
    if not encoded_tree:
        return BinaryTree()

    check_braces_balanced(encoded_tree)

    next_node = encoded_tree.find(OPEN_BRACE)
    has_children = next_node > 0
    key_end = next_node if has_children else len(encoded_tree)

    root = Node(parse_int_key(encoded_tree[:key_end]))
    logging.debug(f"decoded root {root.key = }")
    if has_children:
        encoded_sub_tree = encoded_tree[key_end + 1 :]
        _decode_sub_tree(root, encoded_sub_tree)
        _decode_right(root, encoded_sub_tree)

    return BinaryTree(root)


def _attach(parent: Node[int], symbol: str, child: Node[int]) -> None:
    if symbol == LEFT_NODE_SYMBOL:
        if parent.left is not None:
            raise FormatError(f"node {parent.key} has two left children")
        parent.left = child
    else:
        if parent.right is not None:
            raise FormatError(f"node {parent.key} has two right children")
        parent.right = child


def _decode_sub_tree(parent: Node[int], encoded_sub_tree: str) -> None:
    # callers slice right after an opening brace
    if encoded_sub_tree.startswith(CLOSE_BRACE):
        raise FormatError(f"empty group under {parent.key}")

    index = 0
    # slicing leaves braces of already handled groups in front
    while index < len(encoded_sub_tree) and encoded_sub_tree[index] in (
        OPEN_BRACE,
        CLOSE_BRACE,
    ):
        index += 1

    if index + 1 >= len(encoded_sub_tree):
        return

    symbol = encoded_sub_tree[index]
    if symbol not in (LEFT_NODE_SYMBOL, RIGHT_NODE_SYMBOL):
        raise FormatError(
            f"expected {LEFT_NODE_SYMBOL!r} or {RIGHT_NODE_SYMBOL!r}, got {symbol!r}"
        )

    to_parse = encoded_sub_tree[index + 1 :]
    next_open = to_parse.find(OPEN_BRACE)
    next_close = to_parse.find(CLOSE_BRACE)
    key_end = first_positive_index(next_open, next_close)
    if key_end is None:
        raise FormatError(f"unterminated key in {to_parse!r}")

    current = Node(parse_int_key(to_parse[:key_end]))
    logging.debug(f"decoded {current.key = } as {symbol} child of {parent.key = }")
    _attach(parent, symbol, current)

    if key_end == next_open:
        child = to_parse[key_end + 1 :]
        _decode_sub_tree(current, child)
        _decode_right(current, child)


def _skip_group(encoded_sub_tree: str, index: int) -> int:
    """
    Index just past the brace that closes the group whose opening brace sits
    right before index, or the end of the text if it never closes.
    """
    depth = 1
    while depth > 0 and index < len(encoded_sub_tree):
        match encoded_sub_tree[index]:
            case "(":
                depth += 1
            case ")":
                depth -= 1
        index += 1
    return index


def _is_group_end(encoded_sub_tree: str, index: int) -> bool:
    return index >= len(encoded_sub_tree) or encoded_sub_tree[index] == CLOSE_BRACE


def _decode_right(node: Node[int], encoded_sub_tree: str) -> None:
    # one open brace was already consumed by the caller
    index = _skip_group(encoded_sub_tree, 0)
    logging.debug(f"right of {node.key = } starts at {index = }")
    if _is_group_end(encoded_sub_tree, index):
        return

    if encoded_sub_tree[index] != OPEN_BRACE:
        raise FormatError(
            f"unexpected {encoded_sub_tree[index:]!r} after a child of {node.key}"
        )

    right_group = encoded_sub_tree[index + 1 :]
    _decode_sub_tree(node, right_group)

    index = _skip_group(right_group, 0)
    if not _is_group_end(right_group, index):
        raise FormatError(
            f"unexpected {right_group[index:]!r} after the children of {node.key}"
        )
