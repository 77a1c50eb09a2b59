"""
Swap calculators: market maker (rate only) and market taker (rate + fee).

Market maker, from an exchange rate (x1, x2):
- calculate_amount_a: amount_a = floor(amount_b * x1 / x2)
- calculate_amount_b: amount_b = ceil(amount_a * x2 / x1)

Both round in favour of the pool: it never gives out more A, and never takes
less B, than the exact ratio implies. They are therefore not exact inverses
of each other.

Market taker, with a fee in PPM on the token B leg:
- exact A: fee is grossed up on top of the maker's B amount;
- exact B: fee is netted out of the taker's B amount.
The two directions are separate formulas and are not unified.
"""

from __future__ import annotations

from .core.constants import MAX_PPM
from .core.datatypes import MarketOrderExactA, MarketOrderExactB
from .core.exc import AmountDomainError, InactiveExchangeRateError
from .core.exchange_rate import decode_exchange_rate
from .core.fmt import WordLike

# --- Debug utilities (toggleable) ---
DEBUG_SWAP = False

def _dbg(msg: str) -> None:
    if DEBUG_SWAP:
        print(f"[swap] {msg}")


# ----------------------------
# Integer rounding helpers (centralised)
# ----------------------------

def _ceil_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise AmountDomainError("_ceil_div expects a>=0 and b>0")
    q, r = divmod(a, b)
    return q + 1 if r else q


def _floor_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise AmountDomainError("_floor_div expects a>=0 and b>0")
    return a // b


def _check_amount(name: str, amount: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise AmountDomainError(f"{name} must be int, got {type(amount).__name__}")
    if amount < 0:
        raise AmountDomainError(f"{name} must be >= 0, got {amount}")
    return amount


def _check_fee_ppm(fee_ppm: int) -> int:
    # 1_000_000 would divide by zero on the gross-up; resolve fees with fees.get_swap_fee_for_pair
    if isinstance(fee_ppm, bool) or not isinstance(fee_ppm, int):
        raise AmountDomainError(f"fee_ppm must be int, got {type(fee_ppm).__name__}")
    if fee_ppm < 0 or fee_ppm >= MAX_PPM:
        raise AmountDomainError(f"fee_ppm must satisfy 0 <= fee_ppm < {MAX_PPM}, got {fee_ppm}")
    return fee_ppm


def _active_components(exchange_rate: WordLike) -> tuple[int, int]:
    x1, x2 = decode_exchange_rate(exchange_rate)
    if x1 <= 0 or x2 <= 0:
        raise InactiveExchangeRateError(x1, x2)
    return x1, x2


# ----------------------------
# Market maker
# ----------------------------

def calculate_amount_a(amount_b: int, exchange_rate: WordLike) -> int:
    """Token A the pool gives for `amount_b` of token B (rounded down)."""
    _check_amount("amount_b", amount_b)
    x1, x2 = _active_components(exchange_rate)
    amount_a = _floor_div(amount_b * x1, x2)
    _dbg(f"amount_a: b={amount_b} x1={x1} x2={x2} -> a={amount_a}")
    return amount_a


def calculate_amount_b(amount_a: int, exchange_rate: WordLike) -> int:
    """Token B the pool requires for `amount_a` of token A (rounded up)."""
    _check_amount("amount_a", amount_a)
    x1, x2 = _active_components(exchange_rate)
    amount_b = _ceil_div(amount_a * x2, x1)
    _dbg(f"amount_b: a={amount_a} x1={x1} x2={x2} -> b={amount_b}")
    return amount_b


# ----------------------------
# Market taker
# ----------------------------

def calculate_market_order_exact_a_mt(amount_a_mt: int, exchange_rate: WordLike, fee_ppm: int) -> MarketOrderExactA:
    """Market order where the taker fixes the token A amount.

    amount_a_mm = amount_a_mt
    amount_b_mm = ceil(amount_a_mm * x2 / x1)
    amount_b_mt = ceil(amount_b_mm * MAX_PPM / (MAX_PPM - fee_ppm))
    amount_b_fr = floor(amount_b_mt * fee_ppm / MAX_PPM)
    """
    _check_amount("amount_a_mt", amount_a_mt)
    _check_fee_ppm(fee_ppm)
    amount_a_mm = amount_a_mt
    amount_b_mm = calculate_amount_b(amount_a_mm, exchange_rate)
    amount_b_mt = _ceil_div(amount_b_mm * MAX_PPM, MAX_PPM - fee_ppm)
    amount_b_fr = _floor_div(amount_b_mt * fee_ppm, MAX_PPM)
    _dbg(f"exact_a: a_mm={amount_a_mm} b_mm={amount_b_mm} b_mt={amount_b_mt} b_fr={amount_b_fr} fee={fee_ppm}")
    return MarketOrderExactA(
        amount_a_mm=amount_a_mm,
        amount_b_mm=amount_b_mm,
        amount_b_mt=amount_b_mt,
        amount_b_fr=amount_b_fr,
    )


def calculate_market_order_exact_b_mt(amount_b_mt: int, exchange_rate: WordLike, fee_ppm: int) -> MarketOrderExactB:
    """Market order where the taker fixes the token B amount they pay.

    amount_b_fr = floor(amount_b_mt * fee_ppm / MAX_PPM)
    amount_b_mm = amount_b_mt - amount_b_fr
    amount_a_mm = floor(amount_b_mm * x1 / x2)
    amount_a_mt = amount_a_mm
    """
    _check_amount("amount_b_mt", amount_b_mt)
    _check_fee_ppm(fee_ppm)
    amount_b_fr = _floor_div(amount_b_mt * fee_ppm, MAX_PPM)
    amount_b_mm = amount_b_mt - amount_b_fr
    amount_a_mm = calculate_amount_a(amount_b_mm, exchange_rate)
    amount_a_mt = amount_a_mm
    _dbg(f"exact_b: b_mt={amount_b_mt} b_fr={amount_b_fr} b_mm={amount_b_mm} a_mm={amount_a_mm} fee={fee_ppm}")
    return MarketOrderExactB(
        amount_a_mm=amount_a_mm,
        amount_a_mt=amount_a_mt,
        amount_b_mm=amount_b_mm,
        amount_b_fr=amount_b_fr,
    )


__all__ = [
    "calculate_amount_a",
    "calculate_amount_b",
    "calculate_market_order_exact_a_mt",
    "calculate_market_order_exact_b_mt",
]
