"""Tests for Bech32/Bech32m encoding."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from warp_route_id.codec.bech32 import (
    Bech32DecodeError,
    Encoding,
    bech32_decode,
    bech32_encode,
    convertbits,
    decode,
    encode,
)
from warp_route_id.protocol.constants import BECH32_CHARSET

# BIP-350 test vectors
VALID_BECH32M = [
    "A1LQFN3A",
    "a1lqfn3a",
    "abcdef1l7aum6echk45nj3s0wdvt2fg8x9yrzpqzd3ryx",
    "split1checkupstagehandshakeupstreamerranterredcaperredlc445v",
    "?1v759aa",
]

# BIP-173 test vectors
VALID_BECH32 = [
    "A12UEL5L",
    "a12uel5l",
    "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw",
    "?1ezyfcl",
]

INVALID = [
    "qyrz8wqd2c9m",  # no separator
    "1qyrz8wqd2c9m",  # empty HRP
    "y1b0jsk6g",  # invalid data character
    "lt1igcx5c0",  # invalid data character
    "in1muywd",  # checksum too short
    "mm1crxm3i",  # invalid character in checksum
    "au1s5cgom",  # invalid character in checksum
    "16plkw9",  # empty HRP
    "1p2gdwpf",  # empty HRP
    "A1lqfn3a",  # mixed case
    "a1lqfn3q",  # checksum mismatch
    "\x201xj0phk",  # HRP character out of range
]


class TestBech32Decode:
    @pytest.mark.parametrize("value", VALID_BECH32M)
    def test_valid_bech32m(self, value: str) -> None:
        hrp, _, variant = bech32_decode(value)
        assert variant is Encoding.BECH32M
        assert hrp == value[: value.rfind("1")].lower()

    @pytest.mark.parametrize("value", VALID_BECH32)
    def test_valid_bech32(self, value: str) -> None:
        _, _, variant = bech32_decode(value)
        assert variant is Encoding.BECH32

    @pytest.mark.parametrize("value", INVALID)
    def test_invalid(self, value: str) -> None:
        with pytest.raises(Bech32DecodeError):
            bech32_decode(value)

    def test_rejects_overlong_string(self) -> None:
        value = "a1" + "q" * 89
        with pytest.raises(Bech32DecodeError, match="longer than"):
            bech32_decode(value)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            bech32_decode("a1lqfn3b")

    def test_error_carries_reason(self) -> None:
        with pytest.raises(Bech32DecodeError) as exc_info:
            bech32_decode("A1lqfn3a")
        assert exc_info.value.reason == "mixed case"
        assert exc_info.value.value == "A1lqfn3a"


class TestBech32Encode:
    @pytest.mark.parametrize("value", VALID_BECH32M)
    def test_reencodes_bech32m_vectors(self, value: str) -> None:
        hrp, data, variant = bech32_decode(value)
        assert bech32_encode(hrp, data, variant) == value.lower()

    @pytest.mark.parametrize("value", VALID_BECH32)
    def test_reencodes_bech32_vectors(self, value: str) -> None:
        hrp, data, variant = bech32_decode(value)
        assert bech32_encode(hrp, data, variant) == value.lower()

    def test_lowercases_hrp(self) -> None:
        assert bech32_encode("A", [], Encoding.BECH32M) == "a1lqfn3a"

    def test_rejects_empty_hrp(self) -> None:
        with pytest.raises(ValueError, match="human-readable"):
            bech32_encode("", [0])

    def test_rejects_non_5_bit_data(self) -> None:
        with pytest.raises(ValueError, match="5-bit"):
            bech32_encode("a", [32])

    def test_rejects_result_over_90_characters(self) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            bech32_encode("a", [0] * 90)


class TestConvertbits:
    def test_bytes_to_5_bit_groups_pads(self) -> None:
        """One byte becomes two groups, the second zero-padded."""
        assert convertbits([0xFF], 8, 5) == [31, 28]

    def test_32_bytes_become_52_groups(self) -> None:
        result = convertbits(bytes(32), 8, 5)
        assert result is not None
        assert len(result) == 52

    def test_rejects_nonzero_padding_without_pad(self) -> None:
        assert convertbits([31, 29], 5, 8, pad=False) is None

    def test_rejects_out_of_range_value(self) -> None:
        assert convertbits([256], 8, 5) is None

    def test_back_to_bytes(self) -> None:
        assert convertbits([31, 28], 5, 8, pad=False) == [0xFF]


class TestPayloadCodec:
    def test_decode_requires_requested_variant(self) -> None:
        bech32_string = encode("tok", b"\x01\x02", Encoding.BECH32)
        with pytest.raises(Bech32DecodeError, match="expected BECH32M"):
            decode(bech32_string, Encoding.BECH32M)

    def test_decode_returns_hrp_and_payload(self) -> None:
        assert decode(encode("tok", b"\x01\x02")) == ("tok", b"\x01\x02")

    def test_encode_uses_bech32m_by_default(self) -> None:
        _, _, variant = bech32_decode(encode("tok", b"\x00"))
        assert variant is Encoding.BECH32M

    @given(payload=st.binary(min_size=1, max_size=40))
    @settings(max_examples=100)
    def test_decode_recovers_payload(self, payload: bytes) -> None:
        hrp, decoded = decode(encode("token_", payload))
        assert hrp == "token_"
        assert decoded == payload

    @given(
        payload=st.binary(min_size=32, max_size=32),
        position=st.integers(min_value=0, max_value=57),
        replacement=st.sampled_from(BECH32_CHARSET),
    )
    @settings(max_examples=200)
    def test_single_character_corruption_is_detected(
        self, payload: bytes, position: int, replacement: str
    ) -> None:
        """Substituting any one data or checksum character breaks the checksum."""
        encoded = encode("token_", payload)
        index = len("token_1") + position
        if encoded[index] == replacement:
            return
        corrupted = encoded[:index] + replacement + encoded[index + 1 :]

        with pytest.raises(Bech32DecodeError, match="checksum"):
            decode(corrupted)

    def test_encode_rejects_non_byte_values(self) -> None:
        with pytest.raises(ValueError, match="8-bit"):
            encode("tok", [256])  # type: ignore[arg-type]
