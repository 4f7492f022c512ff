import pytest

from pooldeploy.artifacts import ContractArtifact

SETTINGS_ENV = [
    "RPC_URL", "PRIVATE_KEY", "ARTIFACTS_DIR", "DEPLOYMENT_FILE",
    "TX_TIMEOUT", "SLACK_WEBHOOK", "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without settings in the environment"""
    for name in SETTINGS_ENV:
        # setenv first so the original state is restored afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def token_artifact():
    return ContractArtifact(name="SimpleToken", abi=[{"type": "constructor"}], bytecode="0x6080")


@pytest.fixture
def pool_artifact():
    return ContractArtifact(name="SimplePool", abi=[{"type": "constructor"}], bytecode="0x6081")
