ETHERSCAN_API_KEY_NAME = "ETHERSCAN_API_KEY"
FORK_SUFFIX = "-fork"


def normalize_network_name(network_name: str) -> str:
    """
    Forked networks share the API key and explorer of their upstream network.
    """
    if network_name.endswith(FORK_SUFFIX):
        return network_name[: -len(FORK_SUFFIX)]

    return network_name
