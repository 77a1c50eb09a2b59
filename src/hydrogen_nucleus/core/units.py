"""
Token decimal helpers.

`decimals_to_amount` gives one whole token in base units. Relative amounts
re-scale a pair of amounts with differing precisions into "A per one B" and
"B per one A"; they are informational (display/quoting) only.
"""

from __future__ import annotations

from .datatypes import RelativeAmounts
from .exc import AmountDomainError


def decimals_to_amount(decimals: int) -> int:
    """Return 10**decimals, i.e. one whole token in base units."""
    if decimals < 0:
        raise AmountDomainError(f"decimals must be >= 0, got {decimals}")
    return 10 ** decimals


def calculate_relative_amounts(amount_a: int, decimals_a: int, amount_b: int, decimals_b: int) -> RelativeAmounts:
    """Relative amounts of a two-token quote (floor division both ways).

    amount_a_per_b = floor(amount_a * 10**decimals_b / amount_b)
    amount_b_per_a = floor(amount_b * 10**decimals_a / amount_a)

    A zero amount raises ZeroDivisionError; it is a caller precondition.
    """
    if amount_a < 0 or amount_b < 0:
        raise AmountDomainError("relative amounts require non-negative amounts")
    if amount_a == 0 or amount_b == 0:
        raise ZeroDivisionError(
            f"relative amounts undefined for zero amount (amount_a={amount_a}, amount_b={amount_b})"
        )
    amount_a_per_b = (amount_a * decimals_to_amount(decimals_b)) // amount_b
    amount_b_per_a = (amount_b * decimals_to_amount(decimals_a)) // amount_a
    return RelativeAmounts(amount_a_per_b, amount_b_per_a)


__all__ = [
    "decimals_to_amount",
    "calculate_relative_amounts",
]
