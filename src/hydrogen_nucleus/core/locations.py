"""
Location codec: tagged 32-byte identifiers of balance holders.

Layout (big-endian, byte 0 is the tag):
- 0x01 external address: bytes 1..11 zero, bytes 12..31 the 20-byte address.
- 0x02 internal address: same layout as 0x01.
- 0x03 pool:             bytes 1..31 the pool id (uint248).

Encoders return raw `bytes`. Readers also accept the 0x-prefixed 64-digit hex
string form that the ledger exchanges. Addresses are shown EIP-55 checksummed.

Two reading paths exist:
- `decode_location` is structured and raises `InvalidLocationError`;
- `location_to_string` never raises and reports malformed input as
  'invalid location ...' so batch callers are not interrupted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

from eth_utils import to_checksum_address

from .constants import (
    ADDRESS_LENGTH,
    ADDRESS_SLICE,
    LOCATION_LENGTH,
    LOCATION_TYPE_EXTERNAL_ADDRESS,
    LOCATION_TYPE_INTERNAL_ADDRESS,
    LOCATION_TYPE_POOL,
    MAX_UINT248,
    RESERVED_SLICE,
)
from .exc import AddressFormatError, EncodingRangeError, InvalidLocationError
from .fmt import hex_to_bytes

# Debug printing control
DEBUG_LOCATIONS = False

def _dbg(msg: str) -> None:
    if DEBUG_LOCATIONS:
        print(f"[locations] {msg}")


Location = bytes
LocationLike = Union[bytes, bytearray, str]
AddressLike = Union[str, bytes, bytearray]

LocationKind = Literal["external", "internal", "pool"]

_KIND_BY_TAG = {
    LOCATION_TYPE_EXTERNAL_ADDRESS: "external",
    LOCATION_TYPE_INTERNAL_ADDRESS: "internal",
    LOCATION_TYPE_POOL: "pool",
}


# ----------------------------
# Encoding
# ----------------------------

def _address_bytes(address: AddressLike) -> bytes:
    """Normalise an address to 20 raw bytes (hex strings are lowercased and left-padded)."""
    if isinstance(address, (bytes, bytearray)):
        if len(address) != ADDRESS_LENGTH:
            raise AddressFormatError(f"address must be {ADDRESS_LENGTH} bytes, got {len(address)}")
        return bytes(address)
    if not isinstance(address, str):
        raise AddressFormatError(f"unsupported address type: {type(address).__name__}")
    try:
        raw = hex_to_bytes(address.lower())
    except ValueError as e:
        raise AddressFormatError(f"address is not 0x-hex: {address!r}") from e
    if len(raw) > ADDRESS_LENGTH:
        raise AddressFormatError(f"address longer than {ADDRESS_LENGTH} bytes: {address!r}")
    return raw.rjust(ADDRESS_LENGTH, b"\x00")


def _account_location(tag: int, address: AddressLike) -> Location:
    addr = _address_bytes(address)
    loc = bytes([tag]) + addr.rjust(LOCATION_LENGTH - 1, b"\x00")
    _dbg(f"account tag=0x{tag:02x} -> 0x{loc.hex()}")
    return loc


def external_address_to_location(address: AddressLike) -> Location:
    """Encode an external (wallet-held) address as a location."""
    return _account_location(LOCATION_TYPE_EXTERNAL_ADDRESS, address)


def internal_address_to_location(address: AddressLike) -> Location:
    """Encode an internal (custodial) address as a location."""
    return _account_location(LOCATION_TYPE_INTERNAL_ADDRESS, address)


def pool_id_to_location(pool_id: int) -> Location:
    """Encode a pool id as a location; the id must fit in 248 bits."""
    if isinstance(pool_id, bool) or not isinstance(pool_id, int):
        raise EncodingRangeError(f"pool id must be int, got {type(pool_id).__name__}")
    if pool_id < 0 or pool_id > MAX_UINT248:
        raise EncodingRangeError(f"pool id out of range: {pool_id} (max {MAX_UINT248})")
    return bytes([LOCATION_TYPE_POOL]) + pool_id.to_bytes(LOCATION_LENGTH - 1, "big")


def location_to_hex(loc: LocationLike) -> str:
    """Return the 0x-prefixed 64-digit hex form of a well-formed location."""
    return "0x" + _as_location_bytes(loc).hex()


# ----------------------------
# Decoding
# ----------------------------

@dataclass(frozen=True)
class LocationInfo:
    """Decoded location: an account (checksummed address) or a pool id."""
    kind: LocationKind
    address: Optional[str] = None
    pool_id: Optional[int] = None

    def describe(self) -> str:
        if self.kind == "pool":
            return f"poolID {self.pool_id}"
        return f"{self.address} {self.kind} balance"


def _as_location_bytes(loc: LocationLike) -> bytes:
    """Return exactly 32 raw bytes or raise InvalidLocationError."""
    if isinstance(loc, (bytes, bytearray)):
        raw = bytes(loc)
    elif isinstance(loc, str):
        if not loc.startswith("0x") or len(loc) != 2 + 2 * LOCATION_LENGTH:
            raise InvalidLocationError(loc, "expected 0x followed by 64 hex digits")
        try:
            raw = bytes.fromhex(loc[2:])
        except ValueError:
            raise InvalidLocationError(loc, "non-hex characters") from None
    else:
        raise InvalidLocationError(loc, f"unsupported type {type(loc).__name__}")
    if len(raw) != LOCATION_LENGTH:
        raise InvalidLocationError(loc, f"expected {LOCATION_LENGTH} bytes, got {len(raw)}")
    return raw


def decode_location(loc: LocationLike) -> LocationInfo:
    """Decode a location into its kind and payload.

    Raises InvalidLocationError when the length, tag or reserved bytes are wrong.
    """
    raw = _as_location_bytes(loc)
    tag = raw[0]
    kind = _KIND_BY_TAG.get(tag)
    if kind is None:
        raise InvalidLocationError(loc, f"unknown tag 0x{tag:02x}")
    if kind == "pool":
        return LocationInfo(kind="pool", pool_id=int.from_bytes(raw[1:], "big"))
    if any(raw[RESERVED_SLICE]):
        raise InvalidLocationError(loc, "reserved bytes are not zero")
    address = to_checksum_address("0x" + raw[ADDRESS_SLICE].hex())
    return LocationInfo(kind=kind, address=address)


def _display(loc: object) -> str:
    if isinstance(loc, (bytes, bytearray)):
        return "0x" + bytes(loc).hex()
    if isinstance(loc, str):
        return loc
    return repr(loc)


def location_to_string(loc: object) -> str:
    """Human readable description of a location; never raises.

    Returns '<address> external balance', '<address> internal balance',
    'poolID <n>' or 'invalid location <input>'.
    """
    try:
        info = decode_location(loc)  # type: ignore[arg-type]
    except InvalidLocationError as e:
        _dbg(f"location_to_string: {e.reason}")
        return f"invalid location {_display(loc)}"
    return info.describe()


def is_valid_location(loc: object) -> bool:
    try:
        decode_location(loc)  # type: ignore[arg-type]
    except InvalidLocationError:
        return False
    return True


__all__ = [
    "Location",
    "LocationLike",
    "AddressLike",
    "LocationInfo",
    "external_address_to_location",
    "internal_address_to_location",
    "pool_id_to_location",
    "location_to_hex",
    "decode_location",
    "location_to_string",
    "is_valid_location",
]
