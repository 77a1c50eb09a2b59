"""
Hydrogen Nucleus Core Constants (integer domain)
================================================

Only fixed-width bounds and wire-format constants live here. Decimal
display helpers are in `fmt.py`.
"""

# NOTE: Location and ExchangeRate are both 32-byte big-endian words on the wire.

from typing import Final

# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------

MAX_UINT128: Final[int] = (1 << 128) - 1
MAX_UINT248: Final[int] = (1 << 248) - 1
MAX_UINT256: Final[int] = (1 << 256) - 1

#: Parts per million; 1_000_000 PPM == 100%.
MAX_PPM: Final[int] = 1_000_000


# ---------------------------------------------------------------------------
# Location layout
# ---------------------------------------------------------------------------

WORD_LENGTH: Final[int] = 32
LOCATION_LENGTH: Final[int] = WORD_LENGTH
ADDRESS_LENGTH: Final[int] = 20

#: Bytes 1..11 of an account location are reserved and must be zero.
RESERVED_SLICE: Final[slice] = slice(1, LOCATION_LENGTH - ADDRESS_LENGTH)
ADDRESS_SLICE: Final[slice] = slice(LOCATION_LENGTH - ADDRESS_LENGTH, LOCATION_LENGTH)

LOCATION_TYPE_EXTERNAL_ADDRESS: Final[int] = 0x01
LOCATION_TYPE_INTERNAL_ADDRESS: Final[int] = 0x02
LOCATION_TYPE_POOL: Final[int] = 0x03

#: Key of the default (global) entry in a swap fee table.
ZERO_ADDRESS: Final[str] = "0x" + "00" * ADDRESS_LENGTH


__all__ = [
    "MAX_UINT128",
    "MAX_UINT248",
    "MAX_UINT256",
    "MAX_PPM",
    "WORD_LENGTH",
    "LOCATION_LENGTH",
    "ADDRESS_LENGTH",
    "RESERVED_SLICE",
    "ADDRESS_SLICE",
    "LOCATION_TYPE_EXTERNAL_ADDRESS",
    "LOCATION_TYPE_INTERNAL_ADDRESS",
    "LOCATION_TYPE_POOL",
    "ZERO_ADDRESS",
]
