# Top-level API for hydrogen_nucleus (integer-domain).
"""
Top-level API for hydrogen_nucleus (integer-domain).

This module exposes the stable interface consumed by the exchange ledger:
  - location and exchange-rate codecs (from `core`)
  - market maker / market taker swap calculators
  - swap fee resolution for a token pair

Everything here is pure and stateless; the ledger owns balances, orders and
the fee table.
"""

from __future__ import annotations

from .core import (
    MAX_PPM,
    ZERO_ADDRESS,
    external_address_to_location,
    internal_address_to_location,
    pool_id_to_location,
    location_to_string,
    decode_location,
    encode_exchange_rate,
    decode_exchange_rate,
    exchange_rate_is_nonzero,
    decimals_to_amount,
    calculate_relative_amounts,
    MarketOrderExactA,
    MarketOrderExactB,
    SwapFee,
    AmountDomainError,
    EncodingRangeError,
    InactiveExchangeRateError,
)
from .swap import (
    calculate_amount_a,
    calculate_amount_b,
    calculate_market_order_exact_a_mt,
    calculate_market_order_exact_b_mt,
)
from .fees import get_swap_fee_for_pair

__all__ = [
    # constants
    "MAX_PPM",
    "ZERO_ADDRESS",
    # locations
    "external_address_to_location",
    "internal_address_to_location",
    "pool_id_to_location",
    "location_to_string",
    "decode_location",
    # exchange rates
    "encode_exchange_rate",
    "decode_exchange_rate",
    "exchange_rate_is_nonzero",
    # decimals
    "decimals_to_amount",
    "calculate_relative_amounts",
    # swaps
    "calculate_amount_a",
    "calculate_amount_b",
    "calculate_market_order_exact_a_mt",
    "calculate_market_order_exact_b_mt",
    "MarketOrderExactA",
    "MarketOrderExactB",
    # fees
    "get_swap_fee_for_pair",
    "SwapFee",
    # exceptions
    "AmountDomainError",
    "EncodingRangeError",
    "InactiveExchangeRateError",
]
