import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Self, TypeVar

from bst_codec.src.errors import InvalidArgumentError

K = TypeVar("K")


@dataclass
class Node(Generic[K]):
    key: K
    # children only get attached by insertion or decoding, never at construction
    left: "Node[K] | None" = field(default=None, init=False)
    right: "Node[K] | None" = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.key is None:
            raise InvalidArgumentError("key must not be None")

    def has_left(self) -> bool:
        return self.left is not None

    def has_right(self) -> bool:
        return self.right is not None

    def has_child(self) -> bool:
        return self.has_left() or self.has_right()


@dataclass
class BinaryTree(Generic[K]):
    root: Node[K] | None = None

    @classmethod
    def from_keys(cls, keys: Iterable[K]) -> Self:
        tree = cls()
        for key in keys:
            tree.insert(Node(key))
        return tree

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, node: Node[K]) -> None:
        """
        Walks down from the root and hangs node off the first free slot on its side.
        A node whose key is already in the tree is dropped without touching the tree.
        """
        if node is None or node.has_child():
            raise InvalidArgumentError("node must not be None and must not have children")

        if self.root is None:
            logging.debug(f"inserting {node.key = } as root")
            self.root = node
            return

        current = self.root
        while True:
            if node.key < current.key:
                if current.left is None:
                    logging.debug(f"attaching {node.key = } left of {current.key = }")
                    current.left = node
                    return
                current = current.left
            elif node.key > current.key:
                if current.right is None:
                    logging.debug(f"attaching {node.key = } right of {current.key = }")
                    current.right = node
                    return
                current = current.right
            else:
                logging.debug(f"dropping duplicate {node.key = }")
                return

    def in_order(self) -> Iterator[K]:
        stack: list[Node[K]] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.key
            current = current.right

    def __len__(self) -> int:
        return sum(1 for _ in self.in_order())

    def height(self) -> int:
        # level order so degenerate chains don't hit the recursion limit
        level = [self.root] if self.root is not None else []
        height = 0
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def is_search_tree(self) -> bool:
        keys = list(self.in_order())
        return all(lower < upper for lower, upper in zip(keys, keys[1:]))
