"""
Loading of Hardhat compilation artifacts (ABI + bytecode)
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from .errors import ArtifactError

logger = logging.getLogger(__name__)


@dataclass
class ContractArtifact:
    """Compiled contract ready to be deployed or attached"""
    name: str
    abi: List[Dict[str, Any]]
    bytecode: str


def artifact_path(name: str, artifacts_dir: str) -> str:
    """Hardhat stores artifacts as <dir>/contracts/<Name>.sol/<Name>.json"""
    return os.path.join(artifacts_dir, 'contracts', f'{name}.sol', f'{name}.json')


def load_artifact(name: str, artifacts_dir: str) -> ContractArtifact:
    """Loads a contract ABI and bytecode from its JSON artifact."""
    path = artifact_path(name, artifacts_dir)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ArtifactError(f"Artifact for {name} not found at {path}. Compile the contracts first.")
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Artifact for {name} at {path} is not valid JSON: {e}")

    abi = data.get('abi')
    if not isinstance(abi, list):
        raise ArtifactError(f"Artifact for {name} has no ABI")

    bytecode = data.get('bytecode') or ''
    if bytecode in ('', '0x'):
        raise ArtifactError(f"Artifact for {name} has no deployable bytecode")

    logger.debug(f"Loaded artifact {name} from {path}")
    return ContractArtifact(name=name, abi=abi, bytecode=bytecode)
