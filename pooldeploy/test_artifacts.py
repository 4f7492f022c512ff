#!/usr/bin/env python3
"""
Tests for Hardhat artifact loading
"""

import os
import json
import pytest
from pooldeploy.artifacts import artifact_path, load_artifact
from pooldeploy.errors import ArtifactError


def write_artifact(artifacts_dir, name, data):
    path = artifact_path(name, str(artifacts_dir))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as f:
        if isinstance(data, str):
            f.write(data)
        else:
            json.dump(data, f)
    return path


class TestLoadArtifact:
    """Test class for load_artifact"""

    def test_hardhat_layout(self, tmp_path):
        path = artifact_path("SimplePool", str(tmp_path))
        assert path == os.path.join(str(tmp_path), "contracts", "SimplePool.sol", "SimplePool.json")

    def test_load_success(self, tmp_path):
        abi = [{"type": "function", "name": "mint", "inputs": [{"name": "to", "type": "address"}]}]
        write_artifact(tmp_path, "SimplePool", {"contractName": "SimplePool", "abi": abi, "bytecode": "0x6080"})

        artifact = load_artifact("SimplePool", str(tmp_path))
        assert artifact.name == "SimplePool"
        assert artifact.abi == abi
        assert artifact.bytecode == "0x6080"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactError, match="Compile the contracts first"):
            load_artifact("SimpleToken", str(tmp_path))

    def test_invalid_json(self, tmp_path):
        write_artifact(tmp_path, "SimpleToken", "{not json")
        with pytest.raises(ArtifactError, match="not valid JSON"):
            load_artifact("SimpleToken", str(tmp_path))

    def test_missing_abi(self, tmp_path):
        write_artifact(tmp_path, "SimpleToken", {"bytecode": "0x6080"})
        with pytest.raises(ArtifactError, match="no ABI"):
            load_artifact("SimpleToken", str(tmp_path))

    def test_interface_without_bytecode(self, tmp_path):
        """Abstract contracts and interfaces compile to empty bytecode"""
        write_artifact(tmp_path, "SimpleToken", {"abi": [], "bytecode": "0x"})
        with pytest.raises(ArtifactError, match="no deployable bytecode"):
            load_artifact("SimpleToken", str(tmp_path))


if __name__ == "__main__":
    pytest.main([__file__])
