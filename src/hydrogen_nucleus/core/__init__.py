"""
Hydrogen Nucleus Core
=====================

Unified exports for the integer-domain codecs used by the nucleus:
locations, exchange rates, token decimal helpers and their datatypes.
All arithmetic is on Python ints; Decimal appears only in `fmt` for display.
"""

# NOTE:
#   Locations and exchange rates are 32-byte big-endian words on the wire.
#   Encoders return raw bytes; readers also accept the 0x hex form.

# Integer-domain constants
from .constants import (
    MAX_UINT128,
    MAX_UINT248,
    MAX_UINT256,
    MAX_PPM,
    LOCATION_LENGTH,
    ADDRESS_LENGTH,
    LOCATION_TYPE_EXTERNAL_ADDRESS,
    LOCATION_TYPE_INTERNAL_ADDRESS,
    LOCATION_TYPE_POOL,
    ZERO_ADDRESS,
)

# Formatting and word bridges (I/O only)
from .fmt import (
    to_bytes32,
    to_hex32,
    amount_to_decimal,
    fmt_amount,
)

# Location codec
from .locations import (
    Location,
    LocationInfo,
    external_address_to_location,
    internal_address_to_location,
    pool_id_to_location,
    location_to_hex,
    decode_location,
    location_to_string,
    is_valid_location,
)

# Exchange rate codec
from .exchange_rate import (
    ExchangeRate,
    encode_exchange_rate,
    decode_exchange_rate,
    exchange_rate_to_int,
    exchange_rate_is_nonzero,
)

# Token decimals
from .units import (
    decimals_to_amount,
    calculate_relative_amounts,
)

# Datatypes
from .datatypes import (
    MarketOrderExactA,
    MarketOrderExactB,
    SwapFee,
    RelativeAmounts,
)

# Core exceptions
from .exc import (
    AmountDomainError,
    EncodingRangeError,
    InactiveExchangeRateError,
    AddressFormatError,
    InvalidLocationError,
)

__all__ = [
    # constants
    "MAX_UINT128",
    "MAX_UINT248",
    "MAX_UINT256",
    "MAX_PPM",
    "LOCATION_LENGTH",
    "ADDRESS_LENGTH",
    "LOCATION_TYPE_EXTERNAL_ADDRESS",
    "LOCATION_TYPE_INTERNAL_ADDRESS",
    "LOCATION_TYPE_POOL",
    "ZERO_ADDRESS",
    # fmt
    "to_bytes32",
    "to_hex32",
    "amount_to_decimal",
    "fmt_amount",
    # locations
    "Location",
    "LocationInfo",
    "external_address_to_location",
    "internal_address_to_location",
    "pool_id_to_location",
    "location_to_hex",
    "decode_location",
    "location_to_string",
    "is_valid_location",
    # exchange rate
    "ExchangeRate",
    "encode_exchange_rate",
    "decode_exchange_rate",
    "exchange_rate_to_int",
    "exchange_rate_is_nonzero",
    # units
    "decimals_to_amount",
    "calculate_relative_amounts",
    # datatypes
    "MarketOrderExactA",
    "MarketOrderExactB",
    "SwapFee",
    "RelativeAmounts",
    # exceptions
    "AmountDomainError",
    "EncodingRangeError",
    "InactiveExchangeRateError",
    "AddressFormatError",
    "InvalidLocationError",
]
