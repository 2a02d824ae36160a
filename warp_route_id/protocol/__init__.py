"""Protocol layer: fixed widths and encoding constants."""

from warp_route_id.protocol.constants import (
    ADDRESS_HEX_LENGTH,
    ADDRESS_LENGTH,
    BECH32_CHARSET,
    BECH32_MAX_LENGTH,
    BECH32M_CONST,
    HASH_LENGTH,
    WORD_LENGTH,
)

__all__ = [
    "ADDRESS_HEX_LENGTH",
    "ADDRESS_LENGTH",
    "BECH32M_CONST",
    "BECH32_CHARSET",
    "BECH32_MAX_LENGTH",
    "HASH_LENGTH",
    "WORD_LENGTH",
]
