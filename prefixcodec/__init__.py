"""
prefixcodec  –  lossless Huffman prefix coding over single-byte symbols
"""

from .codec import EncodedResult, compress, decode, decompress, encode
from .errors import (CodecError, EmptyInputError, InvalidBitError,
                     PlaceholderReachedError, SymbolRangeError,
                     TreeInvariantError, TruncatedCodeError)
from .frequency import ALPHABET_SIZE, build_frequency_table
from .tree import (PLACEHOLDER, Internal, Leaf, build_code_table, build_tree,
                   tree_from_obj, tree_to_obj)

__version__ = "0.1.0"

__all__ = [
    "ALPHABET_SIZE", "PLACEHOLDER",
    "CodecError", "EmptyInputError", "InvalidBitError", "PlaceholderReachedError",
    "SymbolRangeError", "TreeInvariantError", "TruncatedCodeError",
    "EncodedResult", "Internal", "Leaf",
    "build_code_table", "build_frequency_table", "build_tree",
    "compress", "decode", "decompress", "encode",
    "tree_from_obj", "tree_to_obj",
]
