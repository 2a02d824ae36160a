"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from warp_route_id.config import DEFAULT_CONFIG, DerivationConfig
from warp_route_id.core.address import AddressError
from warp_route_id.core.derivation import derive_ids
from warp_route_id.output import format_json, format_lines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warp-route-id",
        description=(
            "Computes the warp route ID and token ID for a warp route mapping a token "
            "from an EVM chain to a Sovereign SDK chain."
        ),
    )
    parser.add_argument(
        "-d",
        "--deployer",
        required=True,
        help="The address that will be used to deploy the warp route on the Sovereign SDK chain",
    )
    parser.add_argument(
        "-t",
        "--token-address",
        required=True,
        help="The ethereum address of the wrapped token on the EVM chain",
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=DEFAULT_CONFIG.local_decimals,
        help=f"Decimals of the synthetic token (default: {DEFAULT_CONFIG.local_decimals})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON document instead of two lines",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log derivation steps to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DerivationConfig(local_decimals=args.decimals)
    except ValueError as e:
        parser.error(str(e))

    try:
        ids = derive_ids(args.deployer, args.token_address, config)
    except AddressError as e:
        logger.debug("Rejected input: %s", e.reason)
        parser.error(str(e))

    if args.json:
        print(format_json(ids))
    else:
        for line in format_lines(ids):
            print(line)


if __name__ == "__main__":
    main()
