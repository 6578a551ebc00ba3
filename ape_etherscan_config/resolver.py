from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

from pydantic import BaseModel

from ape_etherscan_config.config import (
    EtherscanConfig,
    EtherscanUserConfig,
    validate_user_config,
)

CONFIG_KEY = "etherscan"


def _get_user_section(user_config: Any) -> Optional[EtherscanUserConfig]:
    if user_config is None:
        return None

    if isinstance(user_config, Mapping):
        section = user_config.get(CONFIG_KEY)
    else:
        section = getattr(user_config, CONFIG_KEY, None)

    if section is None or isinstance(section, EtherscanUserConfig):
        return section

    elif isinstance(section, Mapping):
        raw = section
    elif isinstance(section, BaseModel):
        # An already-resolved config, or any other model shaped like one.
        raw = section.model_dump(by_alias=True)
    else:
        raw = vars(section)

    return validate_user_config(raw)


def resolve_etherscan_config(user_section: Optional[EtherscanUserConfig]) -> EtherscanConfig:
    """
    Build a fresh resolved config from the user's ``etherscan`` section.
    Each field given by the user replaces the default as a whole.
    Nothing is merged with any previously resolved value.
    """
    api_key = None if user_section is None else user_section.api_key
    custom_chains = None if user_section is None else user_section.custom_chains

    if api_key is None:
        api_key = ""
    elif not isinstance(api_key, str):
        api_key = dict(api_key)

    if custom_chains is None:
        custom_chains = []
    else:
        custom_chains = [chain.model_copy(deep=True) for chain in custom_chains]

    # NOTE: `model_validate` skips the settings sources, so the environment has no say.
    return EtherscanConfig.model_validate({"apiKey": api_key, "customChains": custom_chains})


def etherscan_config_extender(target: Any, user_config: Any = None):
    """
    Install the resolved ``etherscan`` config on ``target``, replacing any
    value already there.

    Args:
        target: The shared configuration. Either a mutable mapping or an
          object with a settable ``etherscan`` attribute.
        user_config: The whole user configuration, if any. Its ``etherscan``
          section may be missing, empty, or complete.
    """
    resolved = resolve_etherscan_config(_get_user_section(user_config))
    if isinstance(target, MutableMapping):
        target[CONFIG_KEY] = resolved
    else:
        setattr(target, CONFIG_KEY, resolved)
