import threading
from decimal import Decimal, localcontext

import pytest

from hydrogen_nucleus.core.constants import MAX_UINT256
from hydrogen_nucleus.core.exc import AmountDomainError, EncodingRangeError
from hydrogen_nucleus.core.fmt import (
    amount_to_decimal,
    fmt_amount,
    hex_to_bytes,
    to_bytes32,
    to_hex32,
    word_to_int,
)


# -----------------------------
# bytes32 bridges
# -----------------------------

def test_to_bytes32_and_hex32():
    print("[bytes32] 10 -> 31 zero bytes then 0x0a")
    assert to_bytes32(10) == b"\x00" * 31 + b"\x0a"
    h = to_hex32(10)
    print("to_hex32(10) ->", h)
    assert h == "0x" + "00" * 31 + "0a"
    assert to_hex32(MAX_UINT256) == "0x" + "ff" * 32


@pytest.mark.parametrize("bad", [-1, MAX_UINT256 + 1, True, "10"])
def test_to_bytes32_rejects_out_of_range(bad):
    with pytest.raises(EncodingRangeError):
        to_bytes32(bad)


def test_word_to_int_forms():
    assert word_to_int(b"\x00" * 31 + b"\x01") == 1
    assert word_to_int(bytearray(32)) == 0
    assert word_to_int("0x0A") == 10
    assert word_to_int(MAX_UINT256) == MAX_UINT256


def test_hex_to_bytes_odd_length_is_padded():
    assert hex_to_bytes("0xabc") == b"\x0a\xbc"
    with pytest.raises(ValueError):
        hex_to_bytes("abc")


@pytest.mark.parametrize("bad", ["0x", "0X"])
def test_empty_hex_body_rejected(bad):
    print(f"[hex-empty] {bad!r} -> expect ValueError / EncodingRangeError, never 0")
    with pytest.raises(ValueError):
        hex_to_bytes(bad)
    with pytest.raises(EncodingRangeError):
        word_to_int(bad)


# -----------------------------
# Display helpers
# -----------------------------

def test_amount_to_decimal_normal_and_zero():
    print("[amount_to_decimal] 1.5 USDC and zero")
    assert amount_to_decimal(1_500_000, 6) == Decimal("1.5")
    assert amount_to_decimal(0, 18) == Decimal("0")
    assert amount_to_decimal(123, 0) == Decimal("123")


def test_amount_to_decimal_negative_raises():
    with pytest.raises(AmountDomainError):
        amount_to_decimal(-1, 6)
    with pytest.raises(AmountDomainError):
        amount_to_decimal(1, -6)


def test_fmt_amount_truncates():
    s1 = fmt_amount(1_500_000, 6)
    s2 = fmt_amount(10 ** 18, 18, 2)
    s3 = fmt_amount(1_999_999, 6, 2)
    print("fmt_amount ->", s1, s2, s3)
    assert s1 == "1.500000"
    assert s2 == "1.00"
    assert s3 == "1.99"


def test_fmt_amount_wide_values_keep_all_digits():
    assert fmt_amount(MAX_UINT256, 18, 0) == str(MAX_UINT256 // 10 ** 18)


def test_fmt_amount_wider_than_80_digits():
    print("[fmt-wide] 10**80 base units, 0 decimals -> all 81 digits kept")
    assert fmt_amount(10 ** 80, 0) == "1" + "0" * 80 + ".000000"
    assert fmt_amount(10 ** 120 + 1, 18, 18) == "1" + "0" * 102 + "." + "0" * 17 + "1"


def test_fmt_amount_ignores_narrow_caller_context():
    with localcontext() as ctx:
        ctx.prec = 5
        assert fmt_amount(MAX_UINT256, 0, 0) == str(MAX_UINT256)
        assert amount_to_decimal(10 ** 40 + 1, 0) == Decimal(10 ** 40 + 1)


def test_fmt_amount_from_worker_thread():
    print("[fmt-thread] uint256-sized amount formatted off the main thread")
    results = {}

    def worker():
        results["wide"] = fmt_amount(10 ** 40, 18)
        results["max"] = fmt_amount(MAX_UINT256, 18, 0)

    t = threading.Thread(target=worker)
    t.start()
    t.join()
    print("worker ->", results)
    assert results["wide"] == "1" + "0" * 22 + ".000000"
    assert results["max"] == str(MAX_UINT256 // 10 ** 18)
