from typing import Union

from ethpm_types import BaseModel
from pydantic import AnyHttpUrl, ConfigDict, Field, PositiveInt, TypeAdapter, field_validator
from yarl import URL

ApiKeyValue = Union[str, dict[str, str]]
"""
Either one key used for every network, or a mapping of network name to key.
"""

_HTTP_URL_ADAPTER: TypeAdapter = TypeAdapter(AnyHttpUrl)


class CustomChainUrls(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_url: str = Field(alias="apiURL")
    browser_url: str = Field(alias="browserURL")

    @field_validator("api_url", "browser_url")
    @classmethod
    def validate_http_url(cls, value: str) -> str:
        try:
            _HTTP_URL_ADAPTER.validate_python(value)
        except ValueError as err:
            raise ValueError(f"Not an http(s) URL: '{value}'.") from err

        # NOTE: Stored as given; `AnyHttpUrl` would add a trailing slash.
        return value


class CustomChain(BaseModel):
    """
    A network the verification service supports but that is not built in.
    """

    model_config = ConfigDict(populate_by_name=True)

    network: str
    chain_id: PositiveInt = Field(alias="chainId")
    urls: CustomChainUrls

    @property
    def _browser_uri(self) -> URL:
        return URL(self.urls.browser_url.rstrip("/"))

    def get_address_url(self, address: str) -> str:
        return str(self._browser_uri / "address" / address)

    def get_transaction_url(self, transaction_hash: str) -> str:
        return str(self._browser_uri / "tx" / transaction_hash)
