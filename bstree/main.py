
import os
import random
import time
from typing import List, Optional

from bstree.render import pretty_print
from bstree.tree import BalancedBinarySearchTree

DEMO_SIZE = int(os.environ.get("BST_DEMO_SIZE", "15"))
DEMO_EXTRA = int(os.environ.get("BST_DEMO_EXTRA", "100"))
DEMO_SEED = os.environ.get("BST_DEMO_SEED")


def _keys(tree: BalancedBinarySearchTree, order: str) -> List[int]:
    keys: List[int] = []
    getattr(tree, f"each_{order}")(lambda n: keys.append(n.key))
    return keys


def run_demo(size: int = DEMO_SIZE, extra: int = DEMO_EXTRA, seed: Optional[int] = None) -> BalancedBinarySearchTree:
    print("--- Balanced BST demo ---")
    rng = random.Random(seed)

    t0 = time.time()
    tree = BalancedBinarySearchTree.build(rng.randint(1, 100) for _ in range(size))
    t1 = time.time()
    print(f"[demo] Built tree of {len(tree)} unique keys in {t1 - t0:.4f}s")
    if tree.is_empty():
        print("No keys generated.")
        return tree
    pretty_print(tree)
    print()
    print(f"Is the tree balanced? {'Yes' if tree.is_balanced() else 'No'}")

    # Clustered inserts usually leave the tree unbalanced.
    for _ in range(extra):
        tree.insert(rng.randint(50, 55))
    print(f"[demo] Inserted {extra} keys in 50..55, tree now holds {len(tree)}")
    pretty_print(tree)
    print()
    print(f"Is the tree balanced? {'Yes' if tree.is_balanced() else 'No'}")

    for title, order in (("Level Order", "level_order"), ("Pre Order", "pre_order"),
                         ("In Order", "in_order"), ("Post Order", "post_order")):
        print()
        print(f"{title}:")
        print(_keys(tree, order))

    print()
    print(f"[demo] Rebalancing (height {tree.height()})...")
    tree.rebalance()
    print(f"[demo] Rebalanced to height {tree.height()}")
    pretty_print(tree)
    print()
    print(f"Is the tree balanced? {'Yes' if tree.is_balanced() else 'No'}")
    return tree


if __name__ == "__main__":
    run_demo(seed=int(DEMO_SEED) if DEMO_SEED else None)
