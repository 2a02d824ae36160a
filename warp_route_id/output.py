"""Rendering of derived identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eth_utils import to_checksum_address
from pydantic import BaseModel

if TYPE_CHECKING:
    from warp_route_id.core.derivation import WarpRouteIds


class WarpRouteReport(BaseModel):
    deployer: str
    token_address: str
    warp_route_id: str
    token_id: str
    local_decimals: int

    @classmethod
    def from_ids(cls, ids: WarpRouteIds) -> WarpRouteReport:
        return cls(
            deployer=to_checksum_address(ids.deployer),
            token_address=to_checksum_address(ids.token_address),
            warp_route_id=ids.warp_route_id_hex,
            token_id=ids.token_id_bech32,
            local_decimals=ids.local_decimals,
        )


def format_lines(ids: WarpRouteIds) -> list[str]:
    return [
        f"Warp Route ID: {ids.warp_route_id_hex}",
        f"Token ID: {ids.token_id_bech32}",
    ]


def format_json(ids: WarpRouteIds, indent: int | None = 2) -> str:
    return WarpRouteReport.from_ids(ids).model_dump_json(indent=indent)
