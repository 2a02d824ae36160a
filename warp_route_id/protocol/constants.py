"""Protocol constants for warp route identifiers."""

# Byte widths
ADDRESS_LENGTH = 20  # EVM address
HASH_LENGTH = 32  # sha256 digest
WORD_LENGTH = 32  # remote token address is left-padded to a full word

# Hex rendering
ADDRESS_HEX_LENGTH = ADDRESS_LENGTH * 2

# Bech32 (BIP-173) and Bech32m (BIP-350)
BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_SEPARATOR = "1"
BECH32_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
BECH32_CONST = 1
BECH32M_CONST = 0x2BC830A3
BECH32_MAX_LENGTH = 90
CHECKSUM_LENGTH = 6  # 5-bit groups

# Longest HRP that still fits a 32-byte payload: 90 - separator - 52 data - checksum
TOKEN_ID_HRP_MAX_LENGTH = (
    BECH32_MAX_LENGTH - len(BECH32_SEPARATOR) - (HASH_LENGTH * 8 + 4) // 5 - CHECKSUM_LENGTH
)
