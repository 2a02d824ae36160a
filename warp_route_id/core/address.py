"""Parsing and validation of hex-encoded account addresses."""

from __future__ import annotations

from eth_utils import decode_hex, is_hex, remove_0x_prefix

from warp_route_id.core.types import DeployerAddress, EvmAddress
from warp_route_id.protocol.constants import ADDRESS_HEX_LENGTH


class AddressError(ValueError):
    """An address string could not be decoded into 20 bytes."""

    kind = "address"

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {self.kind} {value!r}: {reason}")


class InvalidAddressFormat(AddressError):
    """Malformed EVM hex address."""

    kind = "EVM address"


class InvalidDeployerAddress(AddressError):
    """Malformed deployer address on the rollup."""

    kind = "deployer address"


def _validation_error(value: object) -> str | None:
    """Return why ``value`` is not a 20-byte hex address, or None if it is."""
    if not isinstance(value, str):
        return f"expected a string, got {type(value).__name__}"

    digits = value[2:] if value.startswith("0x") else value
    if len(digits) != ADDRESS_HEX_LENGTH:
        return f"expected {ADDRESS_HEX_LENGTH} hex characters, got {len(digits)}"
    if not is_hex(digits) or remove_0x_prefix(digits) != digits:  # type: ignore[arg-type]
        return "contains non-hex characters"
    return None


def parse_evm_address(value: str) -> EvmAddress:
    """Decode an origin-chain token address.

    Accepts 40 hex digits with an optional lowercase ``0x`` prefix.
    Mixed-case input is not checked against EIP-55.
    """
    reason = _validation_error(value)
    if reason is not None:
        raise InvalidAddressFormat(value, reason)
    return EvmAddress(decode_hex(value))


def parse_deployer_address(value: str) -> DeployerAddress:
    """Decode the address that will deploy the warp route on the rollup."""
    reason = _validation_error(value)
    if reason is not None:
        raise InvalidDeployerAddress(value, reason)
    return DeployerAddress(decode_hex(value))
