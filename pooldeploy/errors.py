"""
Exceptions raised by the deployment and interaction tooling
"""

from typing import Any, Optional


class PoolDeployError(Exception):
    """Base class for all pooldeploy errors"""


class ConfigurationError(PoolDeployError):
    """Missing or invalid settings"""


class NodeConnectionError(PoolDeployError):
    """The RPC node could not be reached"""


class ArtifactError(PoolDeployError):
    """A compiled contract artifact is missing or unusable"""


class AmountError(PoolDeployError, ValueError):
    """A token amount could not be converted to base units"""


class TransactionFailed(PoolDeployError):
    """A transaction was mined but reverted"""

    def __init__(self, description: str, tx_hash: str, receipt: Optional[Any] = None):
        super().__init__(f"{description} reverted (tx {tx_hash})")
        self.description = description
        self.tx_hash = tx_hash
        self.receipt = receipt
