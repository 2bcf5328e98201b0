"""Conversion of 64-bit ca25 floating-point words to IEEE single precision.

A ca25 word holds a sign bit, a 32-bit exponent biased by 0x7FFFFFFF and a
31-bit fraction. Conversion rounds away from zero.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

CA25_BIAS = 0x7FFFFFFF
FP32_BIAS = 127

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_CA25_FRACTION_MASK = 0x7FFFFFFF
_FP32_FRACTION_MAX = 0x7FFFFF
_FP32_EXPONENT_MAX = 0xFF


class FloatClass(Enum):
    NORMAL = "normal"
    SUBNORMAL = "subnormal"
    ZERO = "zero"
    NAN = "nan"
    INF = "inf"


@dataclass(frozen=True)
class CA25:
    """A decoded ca25 value."""

    sign: int
    exponent: int
    mantissa: int
    kind: FloatClass

    @property
    def implicit(self) -> int:
        return 0 if self.exponent == 0 else 1

    def describe(self) -> str:
        return (
            f"ca25 S={self.sign} E={self.exponent:08x} "
            f"M={self.implicit}.{self.mantissa << 1:08x} {self.kind.value}"
        )


@dataclass(frozen=True)
class FP32:
    """An IEEE single-precision value split into its fields."""

    sign: int
    exponent: int
    mantissa: int
    kind: FloatClass

    @property
    def implicit(self) -> int:
        return 0 if self.kind in (FloatClass.ZERO, FloatClass.SUBNORMAL) else 1

    def describe(self) -> str:
        return (
            f"fp32 S={self.sign} E={self.exponent:02x} "
            f"M={self.implicit}.{self.mantissa << 1:06x} {self.kind.value}"
        )

    def encode(self) -> int:
        """The 32-bit pattern of this value."""
        return ((self.sign << 31) | (self.exponent << 23) | self.mantissa) & _MASK32


def decode_ca25(word: int) -> CA25:
    """Split a 64-bit word into ca25 fields and classify it."""
    if not 0 <= word <= _MASK64:
        raise ValueError(f"ca25 word must fit in 64 bits, got {word:#x}")
    sign = word >> 63
    exponent = (word >> 31) & _MASK32
    mantissa = word & _CA25_FRACTION_MASK
    if exponent == 0:
        kind = FloatClass.ZERO if mantissa == 0 else FloatClass.SUBNORMAL
    elif exponent == _MASK32:
        kind = FloatClass.INF if mantissa == 0 else FloatClass.NAN
    else:
        kind = FloatClass.NORMAL
    return CA25(sign, exponent, mantissa, kind)


def _round_away(value: FP32, inexact: bool) -> FP32:
    exponent, mantissa, kind = value.exponent, value.mantissa, value.kind
    if inexact:
        mantissa += 1
    if mantissa > _FP32_FRACTION_MAX:
        mantissa = 0
        exponent += 1
        if kind is FloatClass.SUBNORMAL:
            kind = FloatClass.NORMAL
        elif exponent == _FP32_EXPONENT_MAX:
            kind = FloatClass.INF
    return FP32(value.sign, exponent, mantissa, kind)


def convert(value: CA25) -> FP32:
    """Convert a ca25 value to single precision, rounding away from zero."""
    sign = value.sign
    exp = value.exponent - CA25_BIAS

    if value.kind is FloatClass.NAN:
        return FP32(sign, _FP32_EXPONENT_MAX, value.mantissa >> 8, FloatClass.NAN)
    if value.kind is FloatClass.INF or exp + FP32_BIAS >= _FP32_EXPONENT_MAX:
        return FP32(sign, _FP32_EXPONENT_MAX, 0, FloatClass.INF)
    if value.kind is FloatClass.ZERO:
        return FP32(sign, 0, 0, FloatClass.ZERO)
    if value.kind is FloatClass.SUBNORMAL or exp + 149 < 0:
        # Too small even for a subnormal: the smallest magnitude is kept.
        return FP32(sign, 0, 1, FloatClass.SUBNORMAL)

    if exp + 126 < 0:
        kept = exp + 149
        mantissa = (1 << kept) | (value.mantissa >> (31 - kept))
        dropped = value.mantissa & (_CA25_FRACTION_MASK >> kept)
        return _round_away(FP32(sign, 0, mantissa, FloatClass.SUBNORMAL), bool(dropped))

    normal = FP32(sign, exp + FP32_BIAS, value.mantissa >> 8, FloatClass.NORMAL)
    return _round_away(normal, bool(value.mantissa & 0xFF))


def describe(word: int) -> str:
    """The three report lines for one ca25 word."""
    source = decode_ca25(word)
    result = convert(source)
    return f"{source.describe()}\n{result.describe()}\n{result.encode():08x}\n"


def _parse_word(token: str) -> int:
    value = int(token, 16)
    magnitude = abs(value)
    if magnitude > _MASK64:
        return _MASK64
    return (-magnitude) & _MASK64 if value < 0 else value


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert hexadecimal ca25 words from standard input to fp32."
    )
    parser.parse_args(argv)
    for token in sys.stdin.read().split():
        try:
            word = _parse_word(token)
        except ValueError:
            print(f"invalid hexadecimal word: {token}", file=sys.stderr)
            return 1
        sys.stdout.write(describe(word))
    return 0


if __name__ == "__main__":
    sys.exit(main())