import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from ape.api.config import PluginConfig
from ape.logging import logger
from ethpm_types import BaseModel
from pydantic import ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ape_etherscan_config.exceptions import InvalidEtherscanConfigError, MissingApiKeyError
from ape_etherscan_config.types import ApiKeyValue, CustomChain
from ape_etherscan_config.utils import ETHERSCAN_API_KEY_NAME, normalize_network_name


class EtherscanUserConfig(BaseModel):
    """
    The ``etherscan`` section as the user wrote it. Every field is optional.
    """

    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[ApiKeyValue] = Field(None, alias="apiKey")
    custom_chains: Optional[list[CustomChain]] = Field(None, alias="customChains")


class EtherscanConfig(PluginConfig):
    """
    The resolved ``etherscan`` config.
    """

    model_config = SettingsConfigDict(populate_by_name=True)

    api_key: ApiKeyValue = Field("", alias="apiKey")
    """
    One key for every network, or a mapping of network name to key.
    An empty string means no key is configured.
    """

    custom_chains: list[CustomChain] = Field([], alias="customChains")
    """
    User-declared networks, in the order given.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # NOTE: Values only ever come from the config itself, never the environment.
        return (init_settings,)

    @classmethod
    def from_overrides(
        cls,
        overrides: dict,
        plugin_name: Optional[str] = None,
        project_path: Optional[Path] = None,
    ) -> "EtherscanConfig":
        """
        Ape's config manager hook. Resolves the section the same way
        :func:`~ape_etherscan_config.resolver.etherscan_config_extender` does
        instead of layering it over the dumped defaults.
        """
        from ape_etherscan_config.resolver import resolve_etherscan_config

        return resolve_etherscan_config(validate_user_config(overrides or {}))

    @property
    def has_api_key(self) -> bool:
        if isinstance(self.api_key, str):
            return bool(self.api_key)

        return any(self.api_key.values())

    def get_api_key(self, network_name: str) -> str:
        """
        Get the API key to use for the given network.

        Args:
            network_name (str): The network name, such as ``"sepolia"``.
              Forked networks use the key of their upstream network.

        Raises:
            :class:`~ape_etherscan_config.exceptions.MissingApiKeyError`: When
              neither the config nor the environment provides a key.

        Returns:
            str
        """
        if isinstance(self.api_key, str):
            api_key = self.api_key
        else:
            api_key = self.api_key.get(network_name) or self.api_key.get(
                normalize_network_name(network_name), ""
            )

        if api_key:
            return api_key

        env_api_key = os.environ.get(ETHERSCAN_API_KEY_NAME)
        if env_api_key:
            logger.debug(f"Using '{ETHERSCAN_API_KEY_NAME}' for network '{network_name}'.")
            return env_api_key

        raise MissingApiKeyError(network_name)

    def get_custom_chain(self, network_name: str) -> Optional[CustomChain]:
        # NOTE: Duplicates are kept as given, so the first match wins.
        for chain in self.custom_chains:
            if chain.network == network_name:
                return chain

        return None

    def get_custom_chain_by_id(self, chain_id: int) -> Optional[CustomChain]:
        for chain in self.custom_chains:
            if chain.chain_id == chain_id:
                return chain

        return None


class ToolConfig(BaseModel):
    """
    The shared, process-wide configuration handed to config extenders.
    Populated once while the configuration loads and only read afterwards.
    """

    model_config = ConfigDict(extra="allow")

    etherscan: Optional[EtherscanConfig] = None


def validate_user_config(raw: Mapping[str, Any]) -> EtherscanUserConfig:
    """
    Check a raw ``etherscan`` section against the schema.

    Raises:
        :class:`~ape_etherscan_config.exceptions.InvalidEtherscanConfigError`
    """
    try:
        return EtherscanUserConfig.model_validate(dict(raw))
    except ValidationError as err:
        raise InvalidEtherscanConfigError(err) from err
