"""
codec.py  –  Huffman encode / decode and the compress / decompress pair

Bits travel as a str of '0' and '1' characters, so there is no byte padding
to account for.  The tree must always travel with the bits.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from .errors import (EmptyInputError, InvalidBitError, PlaceholderReachedError,
                     TreeInvariantError, TruncatedCodeError)
from .frequency import Data, build_frequency_table, to_symbols
from .tree import (PLACEHOLDER, Node, build_code_table, build_tree,
                   tree_from_obj, tree_to_obj)

logger = logging.getLogger(__name__)

# what decompress hands back, keyed by EncodedResult.kind
KINDS = ("bytes", "str", "list")


@dataclass(frozen=True)
class EncodedResult:
    bits: str
    tree: Optional[Node]
    kind: str = "bytes"

    def to_dict(self) -> dict:
        tree = None if self.tree is None else tree_to_obj(self.tree)
        return {"bits": self.bits, "tree": tree, "kind": self.kind}

    @classmethod
    def from_dict(cls, obj: dict) -> "EncodedResult":
        tree = None if obj.get("tree") is None else tree_from_obj(obj["tree"])
        kind = obj.get("kind", "bytes")
        if kind not in KINDS:
            raise ValueError(f"unknown result kind {kind!r}, expected one of {KINDS}")
        return cls(obj["bits"], tree, kind)


class _State(enum.Enum):
    AT_ROOT = "at_root"
    DESCENDING = "descending"

# ----------------------------------------------------------------------
# 1. Encoder / decoder
# ----------------------------------------------------------------------


def encode(symbols: Iterable[int], table: Dict[int, str]) -> str:
    return "".join(table[s] for s in symbols)


def decode(bits: str, root: Node) -> List[int]:
    if root.is_leaf:
        raise TreeInvariantError("tree root is a leaf; a prefix tree needs at least one edge")
    out: List[int] = []
    node, state = root, _State.AT_ROOT
    for i, bit in enumerate(bits):
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise InvalidBitError(bit, i)
        state = _State.DESCENDING
        if node.is_leaf:
            if node.symbol == PLACEHOLDER:
                raise PlaceholderReachedError(i)
            out.append(node.symbol)
            node, state = root, _State.AT_ROOT
    if state is not _State.AT_ROOT:
        raise TruncatedCodeError(f"bit-string of length {len(bits)} ends inside a code")
    return out

# ----------------------------------------------------------------------
# 2. Public pair
# ----------------------------------------------------------------------


def _kind(data: Data) -> str:
    if isinstance(data, str):
        return "str"
    if isinstance(data, (bytes, bytearray, memoryview)):
        return "bytes"
    return "list"


def compress(data: Data) -> EncodedResult:
    kind = _kind(data)
    symbols = to_symbols(data)
    if not symbols:
        return EncodedResult("", None, kind)

    root = build_tree(build_frequency_table(symbols))
    table = build_code_table(root)
    bits = encode(symbols, table)
    logger.debug("compressed %d symbols (%d distinct) into %d bits",
                 len(symbols), len(table), len(bits))
    return EncodedResult(bits, root, kind)


def decompress(result: EncodedResult) -> Union[bytes, str, List[int]]:
    if result.tree is None:
        if result.bits:
            raise EmptyInputError("encoded result has bits but no tree to decode them with")
        symbols: List[int] = []
    else:
        symbols = decode(result.bits, result.tree)
    logger.debug("decompressed %d bits into %d symbols", len(result.bits), len(symbols))
    if result.kind == "str":
        return "".join(map(chr, symbols))
    if result.kind == "list":
        return symbols
    return bytes(symbols)
