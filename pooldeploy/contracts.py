"""
Wrappers around the external SimpleToken and SimplePool contracts

Only the entry points the scripts rely on are exposed. Token accounting,
pool reserves and swap pricing all live inside the contracts.
"""

import logging
from typing import Any

from .artifacts import ContractArtifact
from .chain import Signer
from .errors import PoolDeployError
from .units import DEFAULT_DECIMALS, format_units

logger = logging.getLogger(__name__)

TOKEN_CONTRACT = "SimpleToken"
POOL_CONTRACT = "SimplePool"


class DeployedContract:
    """A contract instance bound to an address and a signer"""

    def __init__(self, signer: Signer, address: str, contract: Any):
        self.signer = signer
        self.address = address
        self.contract = contract

    @classmethod
    def at(cls, signer: Signer, artifact: ContractArtifact, address: str):
        """Attach to an already deployed contract"""
        checksum_address = signer.w3.to_checksum_address(address)
        contract = signer.w3.eth.contract(address=checksum_address, abi=artifact.abi)
        return cls(signer, checksum_address, contract)

    def __repr__(self):
        return f"{type(self).__name__}({self.address})"


class Token(DeployedContract):
    """Fungible token (SimpleToken)"""

    def approve(self, spender: str, amount: int):
        return self.signer.transact(
            self.contract.functions.approve(spender, amount),
            f"approve {spender} for {amount} on {self.address}",
        )

    def transfer(self, to: str, amount: int):
        return self.signer.transact(
            self.contract.functions.transfer(to, amount),
            f"transfer {amount} of {self.address} to {to}",
        )

    def balance_of(self, owner: str) -> int:
        return self.contract.functions.balanceOf(owner).call()


class Pool(DeployedContract):
    """Two-token liquidity pool (SimplePool)"""

    def mint(self, to: str):
        """Credit LP shares to `to` for tokens already transferred in"""
        return self.signer.transact(
            self.contract.functions.mint(to),
            f"mint LP shares to {to}",
        )

    def swap(self, token_in: str, amount_in: int, recipient: str):
        """Swap `amount_in` of `token_in` for the other pool token"""
        return self.signer.transact(
            self.contract.functions.swap(token_in, amount_in, recipient),
            f"swap {amount_in} of {token_in} for {recipient}",
        )


class ContractFactory:
    """Deploys new instances of a compiled contract"""

    def __init__(self, signer: Signer, artifact: ContractArtifact, wrapper: type = DeployedContract):
        self.signer = signer
        self.artifact = artifact
        self.wrapper = wrapper

    def deploy(self, *args):
        w3 = self.signer.w3
        factory = w3.eth.contract(abi=self.artifact.abi, bytecode=self.artifact.bytecode)
        receipt = self.signer.transact(factory.constructor(*args), f"deploy {self.artifact.name}")

        address = receipt['contractAddress']
        if not address:
            raise PoolDeployError(f"Deployment receipt for {self.artifact.name} has no contract address")

        contract = w3.eth.contract(address=address, abi=self.artifact.abi)
        return self.wrapper(self.signer, address, contract)


def deploy_token(signer: Signer, artifact: ContractArtifact, name: str, symbol: str, initial_supply: int) -> Token:
    """Deploy a token with its whole supply minted to the deployer"""
    return ContractFactory(signer, artifact, Token).deploy(name, symbol, initial_supply)


def deploy_pool(signer: Signer, artifact: ContractArtifact, token_a: str, token_b: str,
                lp_name: str, lp_symbol: str) -> Pool:
    """Deploy a pool for two token addresses and an LP token name/symbol"""
    return ContractFactory(signer, artifact, Pool).deploy(token_a, token_b, lp_name, lp_symbol)


def log_pool_balances(token_a: Token, token_b: Token, pool: Pool, decimals: int = DEFAULT_DECIMALS):
    """Log how much of each token the pool holds, in whole tokens"""
    balance_a = format_units(token_a.balance_of(pool.address), decimals)
    balance_b = format_units(token_b.balance_of(pool.address), decimals)
    logger.info(f"Pool balances: {balance_a} of {token_a.address}, {balance_b} of {token_b.address}")
