"""Predict warp route and synthetic token IDs for EVM-to-rollup bridges."""

from warp_route_id.config import DEFAULT_CONFIG, DerivationConfig
from warp_route_id.core import (
    InvalidAddressFormat,
    InvalidDeployerAddress,
    WarpRouteIds,
    derive_ids,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DerivationConfig",
    "InvalidAddressFormat",
    "InvalidDeployerAddress",
    "WarpRouteIds",
    "derive_ids",
]
