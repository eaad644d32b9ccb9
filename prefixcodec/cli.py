"""
cli.py : compress a piece of text and show what the Huffman coder made of it

Prints the input, the encoded bit-string with its length, and the decoded text.

Usage:
    prefixcodec                      #Runs on the built-in sample paragraph
    prefixcodec "some text"          #Runs on the given text
    prefixcodec --file notes.txt     #Runs on a file's bytes
    prefixcodec --verify --table     #Checks the round trip and prints code stats

Set PREFIXCODEC_LOG_LEVEL=DEBUG (or pass --verbose) to see library debug logs.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from .codec import compress, decompress
from .errors import CodecError
from .frequency import build_frequency_table
from .stats import average_code_length, code_table_frame, compression_ratio, entropy
from .tree import build_code_table

SAMPLE = (
    "Prefix codes give short bit patterns to common symbols and long ones to rare "
    "symbols. No code is the start of another, so the decoder never needs a "
    "separator: it walks the tree one bit at a time and stops at each leaf."
)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get("PREFIXCODEC_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"[warn] unknown PREFIXCODEC_LOG_LEVEL {level!r}, using WARNING")
        level = "WARNING"
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_table(data) -> None:
    freq = build_frequency_table(data)
    frame = code_table_frame(data)
    print(frame.to_string(index=False))
    if frame.empty:
        return
    table = build_code_table(compress(data).tree)
    print(f"  entropy        {entropy(freq):.4f} bits/symbol")
    print(f"  average length {average_code_length(freq, table):.4f} bits/symbol")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Huffman prefix coding demo.")
    parser.add_argument("text", nargs="?", help="text to compress (defaults to a sample paragraph)")
    parser.add_argument("--file", type=Path, help="read the input bytes from a file instead")
    parser.add_argument("--verify", action="store_true", help="decode again and confirm output = input")
    parser.add_argument("--table", action="store_true", help="print the per-symbol code table and stats")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.file is not None:
        data = args.file.read_bytes()
    else:
        data = args.text if args.text is not None else SAMPLE

    try:
        result = compress(data)
        decoded = decompress(result)
    except CodecError as exc:
        print(f"[warn] {exc}")
        raise SystemExit(1)

    print(f"data = {data}")
    print(f"encoded = {result.bits} len = {len(result.bits)}")
    print(f"decoded = {decoded}")

    if args.verify:
        # any mismatch means the round trip failed
        if decoded != data:
            print("[warn] round-trip failed (data corrupted)")
            raise SystemExit(1)
        print("[info] round-trip verified")

    if args.table:
        _print_table(data)
        print(f"  ratio          {compression_ratio(len(data) * 8, len(result.bits)):.3f}")


if __name__ == "__main__":
    main()
