import pytest

from ape_etherscan_config.utils import ETHERSCAN_API_KEY_NAME

from ._utils import GOERLI_CHAIN, ROPSTEN_CHAIN, SEPOLIA_CHAIN


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    monkeypatch.delenv(ETHERSCAN_API_KEY_NAME, raising=False)


@pytest.fixture
def goerli_user_config():
    return {
        "etherscan": {
            "apiKey": {"goerli": "<goerli-api-key>"},
            "customChains": [GOERLI_CHAIN],
        }
    }


@pytest.fixture
def ropsten_sepolia_user_config():
    return {
        "etherscan": {
            "apiKey": {
                "ropsten": "<ropsten-api-key>",
                "sepolia": "<sepolia-api-key>",
            },
            "customChains": [ROPSTEN_CHAIN, SEPOLIA_CHAIN],
        }
    }
