"""
Core datatypes returned by the swap calculators and consumed by fee lookup.

These are immutable so results can be compared and cached by callers.

Naming follows the ledger: MM = market maker side, MT = market taker side,
FR = fee receiver share.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional


# ---------------------------------------------------------------------------
# Market orders
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MarketOrderExactA:
    """Quote for a taker who fixes the exact amount of token A.

    Fields:
    - amount_a_mm: token A on the maker side (equal to the taker amount).
    - amount_b_mm: token B the maker side receives (ceil rule).
    - amount_b_mt: token B the taker pays, fee grossed up on top.
    - amount_b_fr: token B retained as fee.
    """

    amount_a_mm: int
    amount_b_mm: int
    amount_b_mt: int
    amount_b_fr: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "amountAMM": self.amount_a_mm,
            "amountBMM": self.amount_b_mm,
            "amountBMT": self.amount_b_mt,
            "amountBFR": self.amount_b_fr,
        }


@dataclass(frozen=True)
class MarketOrderExactB:
    """Quote for a taker who fixes the exact amount of token B they pay.

    Fields:
    - amount_a_mm: token A moved on the maker side (floor rule).
    - amount_a_mt: token A on the taker side (equal to amount_a_mm).
    - amount_b_mm: token B on the maker side, net of fee.
    - amount_b_fr: token B retained as fee.
    """

    amount_a_mm: int
    amount_a_mt: int
    amount_b_mm: int
    amount_b_fr: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "amountAMM": self.amount_a_mm,
            "amountAMT": self.amount_a_mt,
            "amountBMM": self.amount_b_mm,
            "amountBFR": self.amount_b_fr,
        }


# ---------------------------------------------------------------------------
# Fees
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SwapFee:
    """One fee-table entry: fee in PPM and (optionally) where it is paid."""

    fee_ppm: int
    receiver_location: Optional[bytes] = None


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

class RelativeAmounts(NamedTuple):
    amount_a_per_b: int
    amount_b_per_a: int


__all__ = [
    "MarketOrderExactA",
    "MarketOrderExactB",
    "SwapFee",
    "RelativeAmounts",
]
