"""
Runtime settings and logging setup

Settings are read from the environment after loading a local .env file.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .errors import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Settings:
    """Connection and file locations used by the scripts"""
    rpc_url: str = "http://localhost:8545"
    private_key: Optional[str] = None
    artifacts_dir: str = "artifacts"
    deployment_file: str = "deployment.json"
    tx_timeout: int = 120
    slack_webhook: Optional[str] = None
    log_file: Optional[str] = None

    def require_private_key(self) -> str:
        if not self.private_key:
            raise ConfigurationError("PRIVATE_KEY not found in environment or .env file")
        return self.private_key


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from the environment, reading .env first if present"""
    load_dotenv(env_file)

    timeout = os.getenv("TX_TIMEOUT", "120")
    try:
        tx_timeout = int(timeout)
    except ValueError:
        raise ConfigurationError(f"TX_TIMEOUT must be an integer number of seconds, got {timeout!r}")
    if tx_timeout <= 0:
        raise ConfigurationError(f"TX_TIMEOUT must be positive, got {tx_timeout}")

    return Settings(
        rpc_url=os.getenv("RPC_URL", "http://localhost:8545"),
        private_key=os.getenv("PRIVATE_KEY") or None,
        artifacts_dir=os.getenv("ARTIFACTS_DIR", "artifacts"),
        deployment_file=os.getenv("DEPLOYMENT_FILE", "deployment.json"),
        tx_timeout=tx_timeout,
        slack_webhook=os.getenv("SLACK_WEBHOOK") or None,
        log_file=os.getenv("LOG_FILE") or None,
    )


def configure_logging(log_file: Optional[str] = None, level: int = logging.INFO):
    """Configure root logging with a console handler and an optional file handler"""
    handlers: list = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
