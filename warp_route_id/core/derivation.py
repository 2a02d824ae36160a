"""Warp route and synthetic token identifier derivation.

Mirrors the rollup's warp module so that identifiers can be predicted before
the route is registered:

    warp_route_id = sha256(pad32(token_address) || 0x00 || deployer)
    token_id      = sha256(warp_route_id || "Synthetic token for 0x<route>" || u8(decimals))

The Token ID is shown to users as Bech32m under the ``token_`` prefix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from hashlib import sha256

from eth_utils import encode_hex

from warp_route_id.codec import bech32
from warp_route_id.config import DEFAULT_CONFIG, DerivationConfig
from warp_route_id.core.address import parse_deployer_address, parse_evm_address
from warp_route_id.core.types import DeployerAddress, EvmAddress, TokenHash, WarpRouteHash
from warp_route_id.protocol.constants import ADDRESS_LENGTH, HASH_LENGTH, WORD_LENGTH

logger = logging.getLogger(__name__)


class InvalidTokenId(ValueError):
    """String is not a Token ID under the configured prefix."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid token ID {value!r}: {reason}")


@dataclass(frozen=True)
class WarpRouteIds:
    """Both identifiers for one (deployer, token) pair."""

    deployer: DeployerAddress
    token_address: EvmAddress
    warp_route_id: WarpRouteHash
    token_id: TokenHash
    local_decimals: int
    token_id_hrp: str = DEFAULT_CONFIG.token_id_hrp

    @property
    def warp_route_id_hex(self) -> str:
        return encode_hex(self.warp_route_id)

    @property
    def token_id_bech32(self) -> str:
        return bech32.encode(self.token_id_hrp, self.token_id)


def get_warp_route_id(
    token_address: EvmAddress,
    deployer: DeployerAddress,
    config: DerivationConfig = DEFAULT_CONFIG,
) -> WarpRouteHash:
    """Hash the left-padded remote token address, a separator, and the deployer."""
    if len(token_address) != ADDRESS_LENGTH:
        raise ValueError(f"Token address must be {ADDRESS_LENGTH} bytes, got {len(token_address)}")
    if len(deployer) != ADDRESS_LENGTH:
        raise ValueError(f"Deployer must be {ADDRESS_LENGTH} bytes, got {len(deployer)}")

    hasher = sha256()
    hasher.update(bytes(token_address).rjust(WORD_LENGTH, b"\x00"))
    hasher.update(config.route_separator)
    hasher.update(deployer)
    return WarpRouteHash(hasher.digest())


def get_token_id(
    warp_route_id: WarpRouteHash,
    decimals: int | None = None,
    config: DerivationConfig = DEFAULT_CONFIG,
) -> TokenHash:
    """Hash the route ID, the synthetic token's name, and its decimals byte.

    ``decimals`` defaults to ``config.local_decimals``.
    """
    if len(warp_route_id) != HASH_LENGTH:
        raise ValueError(f"Warp route ID must be {HASH_LENGTH} bytes, got {len(warp_route_id)}")
    if decimals is None:
        decimals = config.local_decimals
    if not 0 <= decimals <= 0xFF:
        raise ValueError(f"Decimals must fit in one byte, got {decimals}")

    token_name = config.synthetic_token_name(encode_hex(warp_route_id))
    hasher = sha256()
    hasher.update(warp_route_id)
    hasher.update(token_name.encode("utf-8"))
    hasher.update(bytes([decimals]))
    return TokenHash(hasher.digest())


def format_token_id(token_id: TokenHash, config: DerivationConfig = DEFAULT_CONFIG) -> str:
    return bech32.encode(config.token_id_hrp, token_id)


def parse_token_id(value: str, config: DerivationConfig = DEFAULT_CONFIG) -> TokenHash:
    """Decode a Bech32m Token ID back to its 32-byte hash."""
    try:
        hrp, payload = bech32.decode(value)
    except bech32.Bech32DecodeError as e:
        raise InvalidTokenId(value, e.reason) from e

    if hrp != config.token_id_hrp:
        raise InvalidTokenId(value, f"expected prefix {config.token_id_hrp!r}, got {hrp!r}")
    if len(payload) != HASH_LENGTH:
        raise InvalidTokenId(value, f"expected {HASH_LENGTH} byte payload, got {len(payload)}")
    return TokenHash(payload)


def derive_ids(
    deployer: str,
    token_address: str,
    config: DerivationConfig = DEFAULT_CONFIG,
) -> WarpRouteIds:
    """Parse both addresses and compute the Warp Route ID and Token ID.

    Raises InvalidDeployerAddress or InvalidAddressFormat before any hashing
    if either input is malformed.
    """
    deployer_bytes = parse_deployer_address(deployer)
    token_bytes = parse_evm_address(token_address)

    warp_route_id = get_warp_route_id(token_bytes, deployer_bytes, config)
    logger.debug(
        "Warp route %s for token %s deployed by %s",
        encode_hex(warp_route_id),
        encode_hex(token_bytes),
        encode_hex(deployer_bytes),
    )

    token_id = get_token_id(warp_route_id, config=config)
    logger.debug("Token hash %s (decimals=%d)", encode_hex(token_id), config.local_decimals)

    return WarpRouteIds(
        deployer=deployer_bytes,
        token_address=token_bytes,
        warp_route_id=warp_route_id,
        token_id=token_id,
        local_decimals=config.local_decimals,
        token_id_hrp=config.token_id_hrp,
    )
