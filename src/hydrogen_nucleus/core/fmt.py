"""
Formatting helpers and 32-byte word bridges (non-core arithmetic).

Core arithmetic works on Python ints. The helpers here convert between
ints, raw 32-byte words and their `0x` hex form at the I/O boundary, and
render token amounts as Decimal for display. Decimal is never used to move
funds.
"""

from __future__ import annotations

from decimal import Decimal, localcontext, ROUND_DOWN
from typing import Union

from .exc import AmountDomainError, EncodingRangeError
from .constants import MAX_UINT256, WORD_LENGTH

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(f"[fmt] {msg}")


# Anything that can stand for a 256-bit word at a boundary
WordLike = Union[bytes, bytearray, int, str]


# ---------------------------------------------------------------------------
# 32-byte word bridges
# ---------------------------------------------------------------------------

def to_bytes32(value: int) -> bytes:
    """Return `value` as a 32-byte big-endian word."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingRangeError(f"to_bytes32 expects int, got {type(value).__name__}")
    if value < 0 or value > MAX_UINT256:
        raise EncodingRangeError(f"value out of range for bytes32: {value}")
    return value.to_bytes(WORD_LENGTH, "big")


def to_hex32(value: WordLike) -> str:
    """Full 32-byte hex representation, e.g. '0x00..0a' (66 chars)."""
    return "0x" + to_bytes32(word_to_int(value)).hex()


def hex_to_bytes(s: str) -> bytes:
    """Decode a `0x`-prefixed hex string to bytes; raises ValueError on bad input."""
    if not s.startswith(("0x", "0X")):
        raise ValueError(f"hex string must start with 0x: {s!r}")
    body = s[2:]
    if not body:
        raise ValueError(f"hex string has no digits: {s!r}")
    if len(body) % 2:
        body = "0" + body
    return bytes.fromhex(body)


def word_to_int(value: WordLike) -> int:
    """Read a 256-bit word given as bytes (exactly 32), int, or 0x-hex string."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != WORD_LENGTH:
            raise EncodingRangeError(f"expected {WORD_LENGTH} bytes, got {len(value)}")
        return int.from_bytes(value, "big")
    if isinstance(value, bool):
        raise EncodingRangeError("bool is not a 256-bit word")
    if isinstance(value, int):
        if value < 0 or value > MAX_UINT256:
            raise EncodingRangeError(f"value out of range for uint256: {value}")
        return value
    if isinstance(value, str):
        try:
            raw = hex_to_bytes(value)
        except ValueError as e:
            raise EncodingRangeError(f"not a hex word: {value!r}") from e
        if len(raw) > WORD_LENGTH:
            raise EncodingRangeError(f"hex word longer than {WORD_LENGTH} bytes: {value!r}")
        _dbg(f"word_to_int: {value} -> {len(raw)} bytes")
        return int.from_bytes(raw, "big")
    raise EncodingRangeError(f"unsupported word type: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Display helpers (I/O only)
# ---------------------------------------------------------------------------

#: Floor for the display context precision (Decimal's default).
MIN_DECIMAL_PRECISION: int = 28


def _display_precision(amount: int, places: int = 0) -> int:
    # enough digits for every integer digit plus the fractional places
    return max(MIN_DECIMAL_PRECISION, len(str(amount)) + places + 1)


def amount_to_decimal(amount: int, decimals: int) -> Decimal:
    """Convert integer base units into whole tokens, for logging/printing only."""
    if amount < 0:
        raise AmountDomainError("amount_to_decimal(): amount must be >= 0")
    if decimals < 0:
        raise AmountDomainError("amount_to_decimal(): decimals must be >= 0")
    if amount == 0:
        return Decimal(0)
    with localcontext() as ctx:
        ctx.prec = _display_precision(amount)
        return Decimal(amount).scaleb(-decimals)


def fmt_amount(amount: int, decimals: int, places: int = 6) -> str:
    """Format base units as a fixed-point token string, truncated to `places`.

      fmt_amount(1_500_000, 6)      -> '1.500000'
      fmt_amount(10**18, 18, 2)     -> '1.00'

    Precision is set per call from the amount's width, so the result does
    not depend on the calling thread's Decimal context.
    """
    d = amount_to_decimal(amount, decimals)
    with localcontext() as ctx:
        ctx.prec = _display_precision(amount, places)
        q = Decimal(1).scaleb(-places)
        return format(d.quantize(q, rounding=ROUND_DOWN), "f")


__all__ = [
    "WordLike",
    "to_bytes32",
    "to_hex32",
    "hex_to_bytes",
    "word_to_int",
    "amount_to_decimal",
    "fmt_amount",
]
