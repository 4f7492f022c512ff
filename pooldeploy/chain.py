"""
Node connection and transaction signing

All transactions are built, signed locally, sent and confirmed one at a time.
"""

import logging
from typing import Any, Dict, Optional
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from .errors import NodeConnectionError, TransactionFailed

logger = logging.getLogger(__name__)


def connect(rpc_url: str) -> Web3:
    """Connect to an RPC node, raising NodeConnectionError if unreachable"""
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    if not w3.is_connected():
        raise NodeConnectionError(f"Could not connect to the RPC URL at {rpc_url}")
    logger.info(f"Connected to blockchain at {rpc_url}")
    return w3


class Signer:
    """Local account that signs and sends transactions through a Web3 instance"""

    def __init__(self, w3: Web3, private_key: str, tx_timeout: int = 120):
        self.w3 = w3
        self.account = w3.eth.account.from_key(private_key)
        self._private_key = private_key
        self.tx_timeout = tx_timeout

    @property
    def address(self) -> str:
        return self.account.address

    @property
    def chain_id(self) -> int:
        return self.w3.eth.chain_id

    def transact(self, call: Any, description: str, overrides: Optional[Dict[str, Any]] = None):
        """
        Build, sign and send a contract call or constructor, then wait for it

        Args:
            call: A bound contract function or constructor exposing build_transaction
            description: Human readable label used in logs and errors
            overrides: Extra transaction fields

        Returns:
            The transaction receipt
        """
        params = {
            'from': self.address,
            'nonce': self.w3.eth.get_transaction_count(self.address, 'pending'),
        }
        if overrides:
            params.update(overrides)

        tx = call.build_transaction(params)
        signed_tx = self.w3.eth.account.sign_transaction(tx, self._private_key)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = self.w3.to_hex(tx_hash)
        logger.info(f"{description}: sent {tx_hash_hex}")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.tx_timeout)
        if receipt['status'] != 1:
            raise TransactionFailed(description, tx_hash_hex, receipt)

        logger.info(f"{description}: confirmed in block {receipt['blockNumber']}")
        return receipt


def get_signer(rpc_url: str, private_key: str, tx_timeout: int = 120) -> Signer:
    """Connect to the node and return the signer for the configured key"""
    return Signer(connect(rpc_url), private_key, tx_timeout=tx_timeout)
