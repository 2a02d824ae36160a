"""Bech32 and Bech32m string encoding (BIP-173, BIP-350).

A Bech32 string is ``hrp || "1" || data || checksum`` where data and checksum
are 5-bit groups drawn from a 32-character alphabet. The six checksum
characters come from a BCH code over the expanded HRP and the data; any
single-character substitution is guaranteed to be detected. Bech32m differs
only in the constant the checksum polymod is xored with.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from warp_route_id.protocol.constants import (
    BECH32_CHARSET,
    BECH32_CONST,
    BECH32_GENERATOR,
    BECH32_MAX_LENGTH,
    BECH32_SEPARATOR,
    BECH32M_CONST,
    CHECKSUM_LENGTH,
)


class Encoding(Enum):
    BECH32 = BECH32_CONST
    BECH32M = BECH32M_CONST


class Bech32DecodeError(ValueError):
    """String is not valid Bech32/Bech32m."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid bech32 string {value!r}: {reason}")


def bech32_polymod(values: Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, generator in enumerate(BECH32_GENERATOR):
            if (top >> i) & 1:
                chk ^= generator
    return chk


def bech32_hrp_expand(hrp: str) -> list[int]:
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def bech32_create_checksum(hrp: str, data: Sequence[int], variant: Encoding) -> list[int]:
    values = bech32_hrp_expand(hrp) + list(data)
    polymod = bech32_polymod(values + [0] * CHECKSUM_LENGTH) ^ variant.value
    return [(polymod >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def bech32_verify_checksum(hrp: str, data: Sequence[int]) -> Encoding | None:
    """Return the variant whose checksum ``data`` carries, if any."""
    const = bech32_polymod(bech32_hrp_expand(hrp) + list(data))
    for variant in Encoding:
        if const == variant.value:
            return variant
    return None


def bech32_encode(hrp: str, data: Sequence[int], variant: Encoding = Encoding.BECH32M) -> str:
    """Encode 5-bit ``data`` under ``hrp``. The HRP is lowercased."""
    hrp = hrp.lower()
    if not hrp or any(ord(x) < 33 or ord(x) > 126 for x in hrp):
        raise ValueError(f"Invalid human-readable part: {hrp!r}")
    if any(d < 0 or d > 31 for d in data):
        raise ValueError("Data values must be 5-bit integers")

    combined = list(data) + bech32_create_checksum(hrp, data, variant)
    encoded = hrp + BECH32_SEPARATOR + "".join(BECH32_CHARSET[d] for d in combined)
    if len(encoded) > BECH32_MAX_LENGTH:
        raise ValueError(f"Encoded string exceeds {BECH32_MAX_LENGTH} characters")
    return encoded


def bech32_decode(value: str) -> tuple[str, list[int], Encoding]:
    """Split ``value`` into HRP, 5-bit data (checksum stripped) and variant."""
    if any(ord(x) < 33 or ord(x) > 126 for x in value):
        raise Bech32DecodeError(value, "character out of range")
    if value.lower() != value and value.upper() != value:
        raise Bech32DecodeError(value, "mixed case")
    if len(value) > BECH32_MAX_LENGTH:
        raise Bech32DecodeError(value, f"longer than {BECH32_MAX_LENGTH} characters")

    bech = value.lower()
    pos = bech.rfind(BECH32_SEPARATOR)
    if pos < 1:
        raise Bech32DecodeError(value, "missing human-readable part")
    if pos + CHECKSUM_LENGTH + 1 > len(bech):
        raise Bech32DecodeError(value, "checksum too short")

    hrp = bech[:pos]
    data_part = bech[pos + 1 :]
    if any(x not in BECH32_CHARSET for x in data_part):
        raise Bech32DecodeError(value, "invalid data character")
    data = [BECH32_CHARSET.find(x) for x in data_part]

    variant = bech32_verify_checksum(hrp, data)
    if variant is None:
        raise Bech32DecodeError(value, "checksum mismatch")
    return hrp, data[:-CHECKSUM_LENGTH], variant


def convertbits(
    data: Iterable[int], frombits: int, tobits: int, pad: bool = True
) -> list[int] | None:
    """General power-of-2 base conversion.

    Returns None when ``data`` holds an out-of-range value, or when ``pad`` is
    False and the leftover bits are too many or non-zero.
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            return None
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        return None
    return ret


def encode(hrp: str, payload: bytes, variant: Encoding = Encoding.BECH32M) -> str:
    """Encode a byte payload."""
    data = convertbits(payload, 8, 5)
    if data is None:
        raise ValueError("Payload values must be 8-bit integers")
    return bech32_encode(hrp, data, variant)


def decode(value: str, variant: Encoding = Encoding.BECH32M) -> tuple[str, bytes]:
    """Decode a byte payload, requiring a ``variant`` checksum."""
    hrp, data, found = bech32_decode(value)
    if found is not variant:
        raise Bech32DecodeError(value, f"expected {variant.name} checksum, got {found.name}")
    payload = convertbits(data, 5, 8, pad=False)
    if payload is None:
        raise Bech32DecodeError(value, "invalid padding")
    return hrp, bytes(payload)
