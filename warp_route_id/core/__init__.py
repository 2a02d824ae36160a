"""Core: address parsing and identifier derivation."""

from warp_route_id.core.address import (
    AddressError,
    InvalidAddressFormat,
    InvalidDeployerAddress,
    parse_deployer_address,
    parse_evm_address,
)
from warp_route_id.core.derivation import (
    InvalidTokenId,
    WarpRouteIds,
    derive_ids,
    format_token_id,
    get_token_id,
    get_warp_route_id,
    parse_token_id,
)
from warp_route_id.core.types import DeployerAddress, EvmAddress, TokenHash, WarpRouteHash

__all__ = [
    "AddressError",
    "DeployerAddress",
    "EvmAddress",
    "InvalidAddressFormat",
    "InvalidDeployerAddress",
    "InvalidTokenId",
    "TokenHash",
    "WarpRouteHash",
    "WarpRouteIds",
    "derive_ids",
    "format_token_id",
    "get_token_id",
    "get_warp_route_id",
    "parse_deployer_address",
    "parse_evm_address",
    "parse_token_id",
]
