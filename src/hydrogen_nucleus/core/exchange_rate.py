"""
Exchange rate codec: a pair (x1, x2) of uint128 packed into one 256-bit word.

    rate = x1 << 128 | x2

The pool converts x2 units of token B into x1 units of token A. The reverse
direction is derived by the swap math, never by swapping x1/x2 in storage.
A rate is inactive when either component is zero.

Encoding returns the 32-byte big-endian word. Readers accept that word, the
equivalent int, or its 0x hex form (see `fmt.word_to_int`).
"""

from __future__ import annotations

from typing import Tuple

from .constants import MAX_UINT128
from .exc import EncodingRangeError
from .fmt import WordLike, to_bytes32, word_to_int

ExchangeRate = bytes


def _check_component(name: str, x: int) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise EncodingRangeError(f"{name} must be int, got {type(x).__name__}")
    if x < 0 or x > MAX_UINT128:
        raise EncodingRangeError(
            f"cannot encode exchange rate: {name}={x} out of range (max {MAX_UINT128})"
        )
    return x


def encode_exchange_rate(x1: int, x2: int) -> ExchangeRate:
    """Pack (x1, x2) into a 32-byte exchange rate; both must fit in 128 bits."""
    _check_component("x1", x1)
    _check_component("x2", x2)
    return to_bytes32((x1 << 128) | x2)


def exchange_rate_to_int(rate: WordLike) -> int:
    """Canonical 256-bit integer form of an exchange rate."""
    return word_to_int(rate)


def decode_exchange_rate(rate: WordLike) -> Tuple[int, int]:
    """Unpack an exchange rate into (x1, x2). Total over 256-bit words."""
    er = word_to_int(rate)
    return er >> 128, er & MAX_UINT128


def exchange_rate_is_nonzero(rate: WordLike) -> bool:
    """True if both components are positive, i.e. the rate can be swapped against."""
    x1, x2 = decode_exchange_rate(rate)
    return x1 > 0 and x2 > 0


__all__ = [
    "ExchangeRate",
    "encode_exchange_rate",
    "exchange_rate_to_int",
    "decode_exchange_rate",
    "exchange_rate_is_nonzero",
]
