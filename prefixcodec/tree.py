"""
tree.py  –  Huffman prefix tree: construction, code table, interchange form

The builder merges the two lightest nodes until one remains.  Nodes are
ordered by (weight, low) where ``low`` is the smallest symbol a node holds,
so equal weights always resolve the same way and the same input gives the
same tree on every run.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union

from .errors import EmptyInputError, TreeInvariantError
from .frequency import ALPHABET_SIZE

logger = logging.getLogger(__name__)

# one past the alphabet, so it never collides with a real symbol
PLACEHOLDER = ALPHABET_SIZE

# ----------------------------------------------------------------------
# 1. Nodes
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class Leaf:
    symbol: int
    weight: int = 0

    @property
    def low(self) -> int:
        return self.symbol

    @property
    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class Internal:
    weight: int
    left: "Node"
    right: "Node"
    low: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "low", min(self.left.low, self.right.low))

    @property
    def is_leaf(self) -> bool:
        return False


Node = Union[Leaf, Internal]


def leaves(node: Node) -> List[Leaf]:
    """Leaves in left-to-right order."""
    out, stack = [], [node]
    while stack:
        n = stack.pop()
        if n.is_leaf:
            out.append(n)
        else:
            stack.append(n.right)
            stack.append(n.left)
    return out

# ----------------------------------------------------------------------
# 2. Builder
# ----------------------------------------------------------------------


def build_tree(freq: Sequence[int]) -> Node:
    heap = [(f, s, Leaf(s, f)) for s, f in enumerate(freq) if f > 0]
    if not heap:
        raise EmptyInputError("frequency table is all zero, nothing to build a tree from")

    # special-case: 1 unique symbol
    if len(heap) == 1:
        heap.append((0, PLACEHOLDER, Leaf(PLACEHOLDER, 0)))

    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, n1 = heapq.heappop(heap)
        _, _, n2 = heapq.heappop(heap)
        merged = Internal(n1.weight + n2.weight, n1, n2)
        heapq.heappush(heap, (merged.weight, merged.low, merged))

    root = heap[0][2]
    logger.debug("built prefix tree: weight=%d", root.weight)
    return root

# ----------------------------------------------------------------------
# 3. Code table
# ----------------------------------------------------------------------


def build_code_table(root: Node) -> Dict[int, str]:
    if root.is_leaf:
        raise TreeInvariantError("tree root is a leaf; a prefix tree needs at least one edge")
    codes: Dict[int, str] = {}
    _walk(root, "", codes)
    return codes


def _walk(node: Node, prefix: str, codes: Dict[int, str]) -> None:
    if node.is_leaf:
        if node.symbol != PLACEHOLDER:
            codes[node.symbol] = prefix
    else:
        _walk(node.left,  prefix + "0", codes)
        _walk(node.right, prefix + "1", codes)

# ----------------------------------------------------------------------
# 4. Interchange form (JSON friendly)
# ----------------------------------------------------------------------


def tree_to_obj(node: Node):
    """Leaf -> its symbol, internal node -> [left, right]."""
    if node.is_leaf:
        return node.symbol
    return [tree_to_obj(node.left), tree_to_obj(node.right)]


def tree_from_obj(obj) -> Node:
    """Rebuild an isomorphic tree from :func:`tree_to_obj` output.

    Weights are not part of the interchange form and come back as 0.
    """
    if not isinstance(obj, (list, tuple)):
        raise TreeInvariantError("tree root is a leaf; a prefix tree needs at least one edge")
    seen: set = set()
    return _from_obj(obj, seen)


def _from_obj(obj, seen: set) -> Node:
    if isinstance(obj, bool):
        raise TreeInvariantError(f"not a symbol: {obj!r}")
    if isinstance(obj, int):
        if not 0 <= obj <= PLACEHOLDER:
            raise TreeInvariantError(f"leaf symbol {obj} is outside 0..{PLACEHOLDER}")
        if obj in seen:
            raise TreeInvariantError(f"leaf symbol {obj} appears twice")
        seen.add(obj)
        return Leaf(obj)
    if isinstance(obj, (list, tuple)):
        if len(obj) != 2:
            raise TreeInvariantError(f"internal node needs exactly two children, got {len(obj)}")
        return Internal(0, _from_obj(obj[0], seen), _from_obj(obj[1], seen))
    raise TreeInvariantError(f"unexpected tree element: {obj!r}")
