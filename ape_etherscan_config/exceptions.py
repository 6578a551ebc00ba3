from typing import Optional

from ape.exceptions import ApeException, ConfigError
from pydantic import ValidationError

from ape_etherscan_config.utils import ETHERSCAN_API_KEY_NAME


class ApeEtherscanConfigException(ApeException):
    """
    A base exception in the ape-etherscan-config plugin.
    """


class InvalidEtherscanConfigError(ApeEtherscanConfigException, ConfigError):
    """
    Raised when the user-supplied ``etherscan`` section does not match the schema.
    """

    def __init__(self, error: ValidationError):
        self.error = error
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in error.errors()
        )
        super().__init__(f"Invalid etherscan config: {problems}")


class MissingApiKeyError(ApeEtherscanConfigException):
    """
    Raised when no Etherscan API key is available for a network.
    """

    def __init__(self, network_name: Optional[str] = None):
        target = f" for network '{network_name}'" if network_name else ""
        super().__init__(
            f"No Etherscan API key configured{target}. "
            f"Set 'etherscan.apiKey' or try setting '{ETHERSCAN_API_KEY_NAME}'."
        )
