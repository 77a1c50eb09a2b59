"""
Core exception types for hydrogen_nucleus.core.

These are dependency-free and may be imported by all core modules.

Two classes of failure are kept apart:
- fatal, raised and scoped to one call (range, inactive rate, domain);
- non-fatal conditions (malformed location in `location_to_string`, missing
  fee-table entries) never raise and are not represented here.
"""

__all__ = [
    "AmountDomainError",
    "EncodingRangeError",
    "InactiveExchangeRateError",
    "AddressFormatError",
    "InvalidLocationError",
]


class AmountDomainError(Exception):
    """Raised when inputs violate the non-negative domain or basic preconditions."""
    pass


class EncodingRangeError(Exception):
    """Raised when a value does not fit its declared bit width during encoding."""
    pass


class InactiveExchangeRateError(Exception):
    """Raised when swap math is asked to use an exchange rate with a zero component.

    Attributes
    ----------
    x1 : int
        Decoded token A component.
    x2 : int
        Decoded token B component.
    """

    def __init__(self, x1: int, x2: int):
        super().__init__(
            f"pool cannot exchange these tokens (exchange rate x1={x1}, x2={x2})"
        )
        self.x1 = x1
        self.x2 = x2


class AddressFormatError(Exception):
    """Raised when an account address is not a 0x-hex string or 20-byte value."""
    pass


class InvalidLocationError(Exception):
    """Raised by the structured location decoder on a malformed location.

    Attributes
    ----------
    location : object
        The offending input, as received.
    reason : str
        Short description of the structural problem.
    """

    def __init__(self, location, reason: str):
        super().__init__(f"invalid location {location!r}: {reason}")
        self.location = location
        self.reason = reason
