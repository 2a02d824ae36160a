"""Shared pytest fixtures for warp route ID tests."""

from dataclasses import dataclass

import pytest

from warp_route_id.core.derivation import WarpRouteIds, derive_ids


@dataclass(frozen=True)
class ExampleRoute:
    deployer: str
    token_address: str
    warp_route_id: str
    token_id: str


# Published example: a route registered on a Sovereign SDK rollup for an EVM token.
EXAMPLE_ROUTE = ExampleRoute(
    deployer="0xD2C1bE33A0BcD2007136afD8Ed61CC7561aDa747",
    token_address="0x4ed7c70F96B99c776995fB64377f0d4aB3B0e1C1",
    warp_route_id="0x9c081539d40ef7b02d359c5d694e006f0c1130097466cd22d062e07065c6987a",
    token_id="token_195zght0wmhcx9j462jtj9lypdua4xw07r6jnjfjsddsmzeh2wswq8kfe5m",
)


@pytest.fixture
def example_route() -> ExampleRoute:
    """Inputs and expected outputs of the published example."""
    return EXAMPLE_ROUTE


@pytest.fixture
def example_ids(example_route: ExampleRoute) -> WarpRouteIds:
    """Identifiers derived for the published example."""
    return derive_ids(example_route.deployer, example_route.token_address)
