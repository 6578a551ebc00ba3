from ape import plugins


@plugins.register(plugins.Config)
def config_class():
    from ape_etherscan_config.config import EtherscanConfig

    return EtherscanConfig


def __getattr__(name: str):
    if name == "EtherscanConfig":
        from ape_etherscan_config.config import EtherscanConfig

        return EtherscanConfig

    elif name == "EtherscanUserConfig":
        from ape_etherscan_config.config import EtherscanUserConfig

        return EtherscanUserConfig

    elif name == "CustomChain":
        from ape_etherscan_config.types import CustomChain

        return CustomChain

    elif name == "etherscan_config_extender":
        from ape_etherscan_config.resolver import etherscan_config_extender

        return etherscan_config_extender

    elif name == "resolve_etherscan_config":
        from ape_etherscan_config.resolver import resolve_etherscan_config

        return resolve_etherscan_config

    else:
        raise AttributeError(name)
