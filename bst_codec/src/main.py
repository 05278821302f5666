import logging
import random
import sys

from bst_codec.src.base.config_loader import get_round_trip_config_from_file
from bst_codec.src.bin_tree import BinaryTree, Node
from bst_codec.src.codec import decode, encode


def build_random_tree(
    number_nodes: int, node_key_range: int, rng: random.Random
) -> BinaryTree[int]:
    tree: BinaryTree[int] = BinaryTree()
    for _ in range(number_nodes):
        tree.insert(Node(rng.randrange(node_key_range)))
    return tree


def round_trip(tree: BinaryTree[int]) -> bool:
    encoded = encode(tree)
    re_encoded = encode(decode(encoded))
    logging.info(f"{encoded = }")
    if encoded != re_encoded:
        logging.info(f"{re_encoded = }")
    return encoded == re_encoded


def main(rng: random.Random | None = None) -> int:
    config = get_round_trip_config_from_file()
    tree = build_random_tree(
        config.number_nodes, config.node_key_range, rng or random.Random()
    )
    if round_trip(tree):
        print("Test runs completed successfully!")
        return 0

    print("Error encoding or decoding the tree!", file=sys.stderr)
    return 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
