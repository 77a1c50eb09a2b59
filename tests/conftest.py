from __future__ import annotations
from types import SimpleNamespace
from typing import Dict

import pytest

from hydrogen_nucleus.core import ZERO_ADDRESS, SwapFee, encode_exchange_rate


# -----------------------------
# Test constants
# -----------------------------

# EIP-55 reference vectors (checksummed form)
CHECKSUMMED_ADDRESSES = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]

TOKEN_A = "0x" + "aa" * 20
TOKEN_B = "0x" + "bb" * 20
TOKEN_C = "0x" + "cc" * 20


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(params=CHECKSUMMED_ADDRESSES)
def checksummed_address(request) -> str:
    return request.param


@pytest.fixture()
def tokens() -> SimpleNamespace:
    """Three distinct token addresses: tokens.a, tokens.b, tokens.c."""
    return SimpleNamespace(a=TOKEN_A, b=TOKEN_B, c=TOKEN_C)


@pytest.fixture()
def rate_3_1() -> bytes:
    # pool gives 3 A for every 1 B
    return encode_exchange_rate(3, 1)


@pytest.fixture()
def rate_1_1() -> bytes:
    return encode_exchange_rate(1, 1)


@pytest.fixture()
def fee_table() -> Dict[str, Dict[str, object]]:
    """Ledger-shaped fee table: pair entry for (A, B), global default 2000 PPM."""
    return {
        TOKEN_A: {TOKEN_B: {"feePPM": 500, "receiverLocation": "0x" + "00" * 32}},
        ZERO_ADDRESS: {ZERO_ADDRESS: SwapFee(fee_ppm=2000)},
    }
