"""Core type aliases for warp route derivation."""

from typing import NewType

# EVM address on the origin chain - 20 raw bytes
EvmAddress = NewType("EvmAddress", bytes)

# Account deploying the warp route on the rollup - 20 raw bytes
DeployerAddress = NewType("DeployerAddress", bytes)

# sha256 digest identifying a warp route - 32 raw bytes
WarpRouteHash = NewType("WarpRouteHash", bytes)

# sha256 digest identifying the synthetic token - 32 raw bytes
TokenHash = NewType("TokenHash", bytes)
