"""Integer promotion in a record of mixed-width integer fields."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

NODE_COUNT = 3
A_INITIAL = 0xA6
B_INITIAL = 0x08
C_INITIAL = 0xFA1D

_MASK32 = 0xFFFFFFFF


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _fields(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Store values into an int8, a uint8 and an int16."""
    return _signed(a, 8), b & 0xFF, _signed(c, 16)


def node_sum(a: int, b: int, c: int) -> int:
    """a * b + c with the operands stored as int8, uint8, int16; result int32."""
    a, b, c = _fields(a, b, c)
    return _signed(a * b + c, 32)


def report_lines() -> list[str]:
    """One line per node: product, addend and sum printed as unsigned hex."""
    a, b, c = _fields(A_INITIAL, B_INITIAL, C_INITIAL)
    total = node_sum(A_INITIAL, B_INITIAL, C_INITIAL)
    line = f"{(a * b) & _MASK32:x} + {c & _MASK32:x} = {total & _MASK32:x}"
    return [line] * NODE_COUNT


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show how narrow integer fields promote in arithmetic."
    )
    parser.parse_args(argv)
    for line in report_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())