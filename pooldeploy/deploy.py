#!/usr/bin/env python3
"""
Deployment script
Deploys two SimpleToken contracts and a SimplePool over them, then seeds the
pool with initial liquidity and records the addresses in a deployment file.
"""

import os
import sys
import json
import logging
import argparse
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .artifacts import ContractArtifact, load_artifact
from .chain import Signer, get_signer
from .config import configure_logging, load_settings
from .contracts import POOL_CONTRACT, TOKEN_CONTRACT, Pool, Token, deploy_pool, deploy_token, log_pool_balances
from .errors import ConfigurationError
from .notify import send_slack_message
from .units import DEFAULT_DECIMALS, format_units, parse_units

logger = logging.getLogger(__name__)


@dataclass
class DeploymentPlan:
    """Names, supply and seed liquidity for a deployment"""
    token_a_name: str = "TokenA"
    token_a_symbol: str = "TKA"
    token_b_name: str = "TokenB"
    token_b_symbol: str = "TKB"
    initial_supply: str = "1000000"
    lp_name: str = "LP Token"
    lp_symbol: str = "LPT"
    seed_amount_a: str = "1000"
    seed_amount_b: str = "1000"
    decimals: int = DEFAULT_DECIMALS


@dataclass
class DeploymentResult:
    """Addresses produced by a deployment"""
    chain_id: int
    deployer: str
    token_a: Token
    token_b: Token
    pool: Pool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'network': {'chainId': self.chain_id},
            'contracts': {
                'tokenA': self.token_a.address,
                'tokenB': self.token_b.address,
                'pool': self.pool.address,
            },
            'roles': {'deployer': self.deployer},
        }


def deploy_all(signer: Signer, token_artifact: ContractArtifact, pool_artifact: ContractArtifact,
               plan: Optional[DeploymentPlan] = None) -> DeploymentResult:
    """Run the full deployment sequence, one confirmed transaction at a time"""
    plan = plan or DeploymentPlan()
    deployer = signer.address
    logger.info(f"Deploying with {deployer}")

    supply = parse_units(plan.initial_supply, plan.decimals)
    token_a = deploy_token(signer, token_artifact, plan.token_a_name, plan.token_a_symbol, supply)
    token_b = deploy_token(signer, token_artifact, plan.token_b_name, plan.token_b_symbol, supply)
    logger.info(f"{plan.token_a_name}: {token_a.address}")
    logger.info(f"{plan.token_b_name}: {token_b.address}")

    pool = deploy_pool(signer, pool_artifact, token_a.address, token_b.address, plan.lp_name, plan.lp_symbol)
    logger.info(f"Pool deployed at: {pool.address}")

    amount_a = parse_units(plan.seed_amount_a, plan.decimals)
    amount_b = parse_units(plan.seed_amount_b, plan.decimals)

    # the whole supply is minted to the deployer by the token constructor
    token_a.approve(pool.address, amount_a)
    token_b.approve(pool.address, amount_b)

    token_a.transfer(pool.address, amount_a)
    token_b.transfer(pool.address, amount_b)

    pool.mint(deployer)
    logger.info(
        f"Initial liquidity added: {format_units(amount_a, plan.decimals)} {plan.token_a_symbol}, "
        f"{format_units(amount_b, plan.decimals)} {plan.token_b_symbol}"
    )
    log_pool_balances(token_a, token_b, pool, plan.decimals)

    return DeploymentResult(
        chain_id=signer.chain_id,
        deployer=deployer,
        token_a=token_a,
        token_b=token_b,
        pool=pool,
    )


def save_deployment(result: DeploymentResult, path: str):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(result.to_dict(), f, indent=2)
    logger.info(f"Deployment addresses written to {path}")


def load_deployment(path: str) -> Dict[str, Any]:
    """Read a deployment file written by save_deployment"""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
        contracts = data['contracts']
        for key in ('tokenA', 'tokenB', 'pool'):
            if not contracts.get(key):
                raise KeyError(key)
    except (FileNotFoundError, json.JSONDecodeError, KeyError, TypeError) as e:
        raise ConfigurationError(
            f"Could not read deployment data from {path}. Please deploy contracts first. Details: {e}"
        )
    return data


def build_parser() -> argparse.ArgumentParser:
    defaults = DeploymentPlan()
    parser = argparse.ArgumentParser(
        prog="pool-deploy",
        description="Deploy two tokens and a liquidity pool, then seed the pool",
    )
    parser.add_argument("--env-file", help="Path to a .env file (default: ./.env)")
    parser.add_argument("--token-a", nargs=2, metavar=("NAME", "SYMBOL"),
                        default=[defaults.token_a_name, defaults.token_a_symbol])
    parser.add_argument("--token-b", nargs=2, metavar=("NAME", "SYMBOL"),
                        default=[defaults.token_b_name, defaults.token_b_symbol])
    parser.add_argument("--supply", default=defaults.initial_supply,
                        help="Initial supply of each token, in whole tokens")
    parser.add_argument("--lp", nargs=2, metavar=("NAME", "SYMBOL"),
                        default=[defaults.lp_name, defaults.lp_symbol])
    parser.add_argument("--seed-a", default=defaults.seed_amount_a,
                        help="Token A liquidity added to the pool")
    parser.add_argument("--seed-b", default=defaults.seed_amount_b,
                        help="Token B liquidity added to the pool")
    parser.add_argument("--decimals", type=int, default=defaults.decimals)
    return parser


def plan_from_args(args: argparse.Namespace) -> DeploymentPlan:
    return DeploymentPlan(
        token_a_name=args.token_a[0],
        token_a_symbol=args.token_a[1],
        token_b_name=args.token_b[0],
        token_b_symbol=args.token_b[1],
        initial_supply=args.supply,
        lp_name=args.lp[0],
        lp_symbol=args.lp[1],
        seed_amount_a=args.seed_a,
        seed_amount_b=args.seed_b,
        decimals=args.decimals,
    )


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
        plan = plan_from_args(args)
        signer = get_signer(settings.rpc_url, settings.require_private_key(), settings.tx_timeout)
        token_artifact = load_artifact(TOKEN_CONTRACT, settings.artifacts_dir)
        pool_artifact = load_artifact(POOL_CONTRACT, settings.artifacts_dir)

        result = deploy_all(signer, token_artifact, pool_artifact, plan)
        save_deployment(result, settings.deployment_file)
    except Exception as e:
        logger.exception(f"Deployment failed: {e}")
        send_slack_message(settings.slack_webhook, f"Pool deployment failed: {e}")
        return 1

    send_slack_message(
        settings.slack_webhook,
        "Pool deployment succeeded",
        fields={
            "Token A": result.token_a.address,
            "Token B": result.token_b.address,
            "Pool": result.pool.address,
        },
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
