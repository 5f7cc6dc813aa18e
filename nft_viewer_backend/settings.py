import enum
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, enum.Enum):
    """Possible log levels."""

    NOTSET = "NOTSET"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"


class Settings(BaseSettings):
    """
    Application settings.

    These parameters can be configured
    with environment variables.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    # quantity of workers for uvicorn
    workers_count: int = 1
    # Enable uvicorn reloading
    reload: bool = False

    # Current environment
    environment: str = "dev"

    log_level: LogLevel = LogLevel.INFO

    # ========== Content addressing ==========
    # Gateway that ipfs:// locators are rewritten to
    ipfs_gateway_prefix: str = "https://ipfs.io/ipfs/"
    ipfs_scheme: str = "ipfs"
    https_scheme: str = "https"
    template_ipfs_scheme: str = "template-ipfs"
    template_ipfs_cid_token: str = "{ipfscid:"

    # ARC3 markers
    arc3_name: str = "arc3"
    arc3_name_suffix: str = "@arc3"
    arc3_url_suffix: str = "#arc3"

    # ARC69 note marker
    arc69_standard: str = "arc69"

    # ========== Ledger access ==========
    algod_mainnet_url: str = "https://mainnet-api.algonode.cloud"
    algod_testnet_url: str = "https://testnet-api.algonode.cloud"
    algod_token: str = ""

    indexer_mainnet_url: str = "https://mainnet-idx.algonode.cloud"
    indexer_testnet_url: str = "https://testnet-idx.algonode.cloud"

    # Request timeouts and retries
    external_api_timeout: int = 20
    external_api_max_retries: int = 3
    # Upper bound for a single extractor, in seconds
    extractor_timeout: float = 30.0

    # Proxy settings
    http_proxy: str = ""
    https_proxy: str = ""

    @property
    def ipfs_url_prefix(self) -> str:
        """Prefix of a content-addressed locator, e.g. ``ipfs://``."""
        return f"{self.ipfs_scheme}://"

    @property
    def https_url_prefix(self) -> str:
        """Prefix of a direct-web locator, e.g. ``https://``."""
        return f"{self.https_scheme}://"

    @property
    def template_ipfs_url_prefix(self) -> str:
        """Prefix that marks an ARC19 templated url."""
        return f"{self.template_ipfs_scheme}://{self.template_ipfs_cid_token.rstrip(':')}"

    def get_proxy_dict(self) -> Dict[str, str]:
        """Get proxy configuration as dictionary for requests."""
        proxy_dict = {}
        if self.http_proxy:
            proxy_dict["http"] = self.http_proxy
        if self.https_proxy:
            proxy_dict["https"] = self.https_proxy
        return proxy_dict

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NFT_VIEWER_BACKEND_",
        env_file_encoding="utf-8",
    )


settings = Settings()
