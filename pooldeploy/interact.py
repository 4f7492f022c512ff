#!/usr/bin/env python3
"""
Interaction script
Swaps through a deployed pool and adds liquidity to it as a user.
"""

import sys
import logging
import argparse
from typing import List, Optional

from .artifacts import load_artifact
from .chain import Signer, get_signer
from .config import configure_logging, load_settings
from .contracts import POOL_CONTRACT, TOKEN_CONTRACT, Pool, Token, log_pool_balances
from .deploy import load_deployment
from .errors import ConfigurationError
from .units import DEFAULT_DECIMALS, format_units, parse_units

logger = logging.getLogger(__name__)


def swap(token_in: Token, pool: Pool, amount_in: int, recipient: str, decimals: int = DEFAULT_DECIMALS):
    """Approve the pool to pull `amount_in`, then swap it for the other token"""
    token_in.approve(pool.address, amount_in)
    receipt = pool.swap(token_in.address, amount_in, recipient)
    logger.info(f"Swapped {format_units(amount_in, decimals)} of {token_in.address} for {recipient}")
    logger.info(f"Pool now holds {format_units(token_in.balance_of(pool.address), decimals)} of {token_in.address}")
    return receipt


def add_liquidity(token_a: Token, token_b: Token, pool: Pool, amount_a: int, amount_b: int, to: str,
                  decimals: int = DEFAULT_DECIMALS):
    """Transfer both tokens into the pool and mint LP shares to `to`"""
    token_a.transfer(pool.address, amount_a)
    token_b.transfer(pool.address, amount_b)
    receipt = pool.mint(to)
    logger.info(f"Added liquidity {format_units(amount_a, decimals)}/{format_units(amount_b, decimals)}, "
                f"LP shares minted to {to}")
    log_pool_balances(token_a, token_b, pool, decimals)
    return receipt


def attach_deployment(signer: Signer, deployment_file: str, artifacts_dir: str):
    """Return (token_a, token_b, pool) for the addresses in a deployment file"""
    contracts = load_deployment(deployment_file)['contracts']
    token_artifact = load_artifact(TOKEN_CONTRACT, artifacts_dir)
    pool_artifact = load_artifact(POOL_CONTRACT, artifacts_dir)
    return (
        Token.at(signer, token_artifact, contracts['tokenA']),
        Token.at(signer, token_artifact, contracts['tokenB']),
        Pool.at(signer, pool_artifact, contracts['pool']),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pool-interact",
        description="Swap through or add liquidity to a deployed pool",
    )
    parser.add_argument("--env-file", help="Path to a .env file (default: ./.env)")
    parser.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)
    subparsers = parser.add_subparsers(dest="command", required=True)

    swap_parser = subparsers.add_parser("swap", help="Swap one pool token for the other")
    swap_parser.add_argument("--amount", default="10", help="Amount in, in whole tokens")
    swap_parser.add_argument("--token-in", choices=["a", "b"], default="a")
    swap_parser.add_argument("--recipient", help="Receiver of the output tokens (default: signer)")

    liquidity_parser = subparsers.add_parser("add-liquidity", help="Deposit both tokens and mint LP shares")
    liquidity_parser.add_argument("--amount-a", default="5")
    liquidity_parser.add_argument("--amount-b", default="5")
    liquidity_parser.add_argument("--to", help="Receiver of the LP shares (default: signer)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit status"""
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.env_file)
    except ConfigurationError as e:
        configure_logging()
        logger.error(str(e))
        return 1
    configure_logging(settings.log_file)

    try:
        signer = get_signer(settings.rpc_url, settings.require_private_key(), settings.tx_timeout)
        token_a, token_b, pool = attach_deployment(signer, settings.deployment_file, settings.artifacts_dir)

        if args.command == "swap":
            token_in = token_a if args.token_in == "a" else token_b
            amount_in = parse_units(args.amount, args.decimals)
            recipient = signer.w3.to_checksum_address(args.recipient) if args.recipient else signer.address
            swap(token_in, pool, amount_in, recipient, decimals=args.decimals)
        else:
            to = signer.w3.to_checksum_address(args.to) if args.to else signer.address
            add_liquidity(
                token_a, token_b, pool,
                parse_units(args.amount_a, args.decimals),
                parse_units(args.amount_b, args.decimals),
                to,
                decimals=args.decimals,
            )
    except Exception as e:
        logger.exception(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
