"""
Swap fee resolution for an ordered token pair.

The fee table is owned by the ledger and is queried as
`fee_table[token_a][token_b]`. Resolution is pure precedence:

    1. the pair entry (token_a, token_b), if present
    2. the default entry (ZERO_ADDRESS, ZERO_ADDRESS), if present
    3. zero

The resolved value is then clamped: anything outside [0, MAX_PPM) is not a
legal fee and resolves to zero. Missing keys are expected and never raise.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple

from .core.constants import MAX_PPM, ZERO_ADDRESS

# --- Debug utilities (toggleable) ---
DEBUG_FEES = False

def _dbg(msg: str) -> None:
    if DEBUG_FEES:
        print(f"[fees] {msg}")


# token -> token -> entry; an entry is a fee value, a SwapFee, a mapping with
# 'feePPM'/'fee_ppm', or any object exposing one of those attributes. A fee
# value is an int or a base-10 / 0x-hex numeric string.
FeeTable = Mapping[str, Mapping[str, Any]]

_FEE_KEYS = ("feePPM", "fee_ppm")


def _parse_fee_value(value: Any) -> Optional[int]:
    """Read one fee value; None if it is not an integer or integer string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            if text.lstrip("+-")[:2].lower() == "0x":
                return int(text, 16)
            return int(text, 10)
        except ValueError:
            return None
    return None


def _entry_fee_ppm(entry: Any) -> Optional[int]:
    """Read the PPM value from one fee-table entry; None if it carries none."""
    if entry is None or isinstance(entry, (bool, int, str)):
        return _parse_fee_value(entry)
    if isinstance(entry, Mapping):
        for key in _FEE_KEYS:
            fee_ppm = _parse_fee_value(entry.get(key))
            if fee_ppm is not None:
                return fee_ppm
        return None
    for key in _FEE_KEYS:
        fee_ppm = _parse_fee_value(getattr(entry, key, None))
        if fee_ppm is not None:
            return fee_ppm
    return None


def lookup_fee_entry(fee_table: Optional[FeeTable], token_a: str, token_b: str) -> Optional[int]:
    """Return the raw PPM stored for (token_a, token_b), or None if absent."""
    if not fee_table:
        return None
    row = fee_table.get(token_a)
    if not isinstance(row, Mapping):
        return None
    return _entry_fee_ppm(row.get(token_b))


def _fee_precedence(token_a: str, token_b: str) -> Sequence[Tuple[str, str]]:
    return ((token_a, token_b), (ZERO_ADDRESS, ZERO_ADDRESS))


def normalize_fee_ppm(fee_ppm: int) -> int:
    """Clamp an illegal fee (>= 100% or negative) to zero."""
    if fee_ppm < 0 or fee_ppm >= MAX_PPM:
        return 0
    return fee_ppm


def get_swap_fee_for_pair(fee_table: Optional[FeeTable], token_a: str, token_b: str) -> int:
    """Resolve the swap fee in PPM for the ordered pair (token_a, token_b)."""
    for key_a, key_b in _fee_precedence(token_a, token_b):
        fee_ppm = lookup_fee_entry(fee_table, key_a, key_b)
        if fee_ppm is not None:
            _dbg(f"resolved ({token_a}, {token_b}) via ({key_a}, {key_b}) -> {fee_ppm}")
            return normalize_fee_ppm(fee_ppm)
    _dbg(f"no fee entry for ({token_a}, {token_b}); using 0")
    return 0


__all__ = [
    "FeeTable",
    "lookup_fee_entry",
    "normalize_fee_ppm",
    "get_swap_fee_for_pair",
]
