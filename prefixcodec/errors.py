"""
errors.py  –  exception hierarchy for the prefix codec
"""

from __future__ import annotations


class CodecError(Exception):
    """Base class for every error raised by prefixcodec"""


class InvalidBitError(CodecError, ValueError):
    """Encoded bit-string holds something other than '0' or '1'"""

    def __init__(self, bit: str, offset: int):
        super().__init__(f"invalid bit {bit!r} at offset {offset}")
        self.bit, self.offset = bit, offset


class PlaceholderReachedError(InvalidBitError):
    """Bits lead to the synthetic leaf, which no real code addresses"""

    def __init__(self, offset: int):
        CodecError.__init__(self, f"bits at offset {offset} address the placeholder leaf")
        self.bit, self.offset = None, offset


class TruncatedCodeError(CodecError, ValueError):
    """Bit-string ends part way through a code"""


class EmptyInputError(CodecError, ValueError):
    """No symbols to build a tree from"""


class SymbolRangeError(CodecError, ValueError):
    """Symbol outside the 256-value alphabet"""


class TreeInvariantError(CodecError):
    """A prefix tree breaks a structural invariant"""
