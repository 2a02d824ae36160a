"""Derivation configuration."""

from __future__ import annotations

from dataclasses import dataclass

from warp_route_id.protocol.constants import TOKEN_ID_HRP_MAX_LENGTH


@dataclass(frozen=True)
class DerivationConfig:
    """Domain-separation values committed to by the on-chain warp module.

    Every byte that enters a hash besides the two addresses lives here so
    the derivation can be audited against the rollup's source in one place.
    """

    # Warp route ID: sha256(pad32(token) || route_separator || deployer)
    route_separator: bytes = b"\x00"

    # Token ID: sha256(route_id || name || u8(decimals))
    synthetic_token_name_prefix: str = "Synthetic token for "
    local_decimals: int = 18

    # Token ID text form
    token_id_hrp: str = "token_"

    def __post_init__(self) -> None:
        if not 0 <= self.local_decimals <= 0xFF:
            raise ValueError(f"local_decimals must fit in one byte, got {self.local_decimals}")

        hrp = self.token_id_hrp
        if not hrp or len(hrp) > TOKEN_ID_HRP_MAX_LENGTH:
            raise ValueError(
                f"token_id_hrp must be 1 to {TOKEN_ID_HRP_MAX_LENGTH} characters, got {len(hrp)}"
            )
        if any(ord(x) < 33 or ord(x) > 126 for x in hrp):
            raise ValueError(f"token_id_hrp must be printable ASCII, got {hrp!r}")
        # Bech32 renders the HRP in lowercase
        object.__setattr__(self, "token_id_hrp", hrp.lower())

    def synthetic_token_name(self, warp_route_id_hex: str) -> str:
        return f"{self.synthetic_token_name_prefix}{warp_route_id_hex}"


DEFAULT_CONFIG = DerivationConfig()
