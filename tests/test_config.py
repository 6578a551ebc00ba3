import pytest
from ape.exceptions import ConfigError

from ape_etherscan_config.config import EtherscanConfig, validate_user_config
from ape_etherscan_config.exceptions import InvalidEtherscanConfigError, MissingApiKeyError
from ape_etherscan_config.utils import ETHERSCAN_API_KEY_NAME

from ._utils import GOERLI_CHAIN, ROPSTEN_CHAIN, SEPOLIA_CHAIN


@pytest.fixture
def make_config():
    def fn(**kwargs):
        return EtherscanConfig.model_validate(kwargs)

    return fn


def test_defaults(make_config):
    config = make_config()
    assert config.api_key == ""
    assert config.custom_chains == []
    assert not config.has_api_key


@pytest.mark.parametrize("network", ("mainnet", "sepolia", "sepolia-fork"))
def test_get_api_key_single(make_config, network):
    config = make_config(apiKey="<api-key>")
    assert config.has_api_key
    assert config.get_api_key(network) == "<api-key>"


def test_get_api_key_per_network(make_config):
    config = make_config(apiKey={"goerli": "A", "sepolia": "B"})
    assert config.get_api_key("goerli") == "A"
    assert config.get_api_key("sepolia") == "B"
    assert config.get_api_key("sepolia-fork") == "B"


def test_get_api_key_missing(make_config):
    config = make_config(apiKey={"goerli": "A"})
    with pytest.raises(MissingApiKeyError, match=f"network 'sepolia'.*{ETHERSCAN_API_KEY_NAME}"):
        config.get_api_key("sepolia")


@pytest.mark.parametrize("api_key", ("", {}, {"sepolia": ""}))
def test_get_api_key_from_environment(make_config, monkeypatch, api_key):
    monkeypatch.setenv(ETHERSCAN_API_KEY_NAME, "<env-api-key>")
    config = make_config(apiKey=api_key)
    assert not config.has_api_key
    assert config.get_api_key("sepolia") == "<env-api-key>"


def test_configured_api_key_wins_over_environment(make_config, monkeypatch):
    monkeypatch.setenv(ETHERSCAN_API_KEY_NAME, "<env-api-key>")
    config = make_config(apiKey={"sepolia": "B"})
    assert config.get_api_key("sepolia") == "B"


def test_get_custom_chain(make_config):
    duplicate = {**GOERLI_CHAIN, "chainId": 420}
    config = make_config(customChains=[GOERLI_CHAIN, SEPOLIA_CHAIN, duplicate])

    assert config.get_custom_chain("goerli").chain_id == 5
    assert config.get_custom_chain("sepolia").chain_id == 11155111
    assert config.get_custom_chain("ropsten") is None


def test_get_custom_chain_by_id(make_config):
    config = make_config(customChains=[ROPSTEN_CHAIN, SEPOLIA_CHAIN])

    assert config.get_custom_chain_by_id(3).network == "ropsten"
    assert config.get_custom_chain_by_id(11155111).network == "sepolia"
    assert config.get_custom_chain_by_id(5) is None


def test_snake_case_names(make_config):
    config = make_config(
        api_key="<api-key>",
        custom_chains=[
            {
                "network": "goerli",
                "chain_id": 5,
                "urls": {
                    "api_url": GOERLI_CHAIN["urls"]["apiURL"],
                    "browser_url": GOERLI_CHAIN["urls"]["browserURL"],
                },
            }
        ],
    )
    assert config.api_key == "<api-key>"
    assert config.custom_chains[0].model_dump(by_alias=True) == GOERLI_CHAIN


def test_validate_user_config():
    section = validate_user_config({"apiKey": "<api-key>"})
    assert section.api_key == "<api-key>"
    assert section.custom_chains is None


def test_validate_user_config_error_message():
    with pytest.raises(InvalidEtherscanConfigError) as err:
        validate_user_config({"customChains": [{**GOERLI_CHAIN, "chainId": -1}]})

    assert "customChains.0.chainId" in str(err.value)
    assert err.value.error.error_count() == 1


@pytest.mark.parametrize("env_name", ("APIKEY", "API_KEY", "APE_API_KEY", "CUSTOMCHAINS"))
def test_environment_does_not_supply_config(monkeypatch, env_name):
    monkeypatch.setenv(env_name, "from-env")
    for config in (EtherscanConfig(), EtherscanConfig.from_overrides({})):
        assert config.api_key == ""
        assert config.custom_chains == []


def test_from_overrides():
    config = EtherscanConfig.from_overrides(
        {"apiKey": {"ropsten": "B"}, "customChains": [SEPOLIA_CHAIN, ROPSTEN_CHAIN]}
    )
    assert config.api_key == {"ropsten": "B"}
    assert [c.network for c in config.custom_chains] == ["sepolia", "ropsten"]


def test_from_overrides_invalid():
    with pytest.raises(ConfigError, match="customChains.0.chainId"):
        EtherscanConfig.from_overrides({"customChains": [{**GOERLI_CHAIN, "chainId": 0}]})
