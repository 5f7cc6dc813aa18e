"""
Algod client wrapper for reading asset configuration.
"""

from typing import Dict, Optional

from algosdk.error import AlgodHTTPError
from algosdk.v2client.algod import AlgodClient
from loguru import logger

from ..exceptions import AssetNotFound, TransportFailure
from ..models.asset import Network, TokenConfig
from ..settings import Settings


class AlgodLedgerReader:
    """Reads asset configuration records from an algod node."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clients: Optional[Dict[Network, AlgodClient]] = None,
    ):
        """Initialize with one algod client per network."""
        self.settings = settings or Settings()
        self.clients = clients or {
            Network.MAINNET: AlgodClient(self.settings.algod_token, self.settings.algod_mainnet_url),
            Network.TESTNET: AlgodClient(self.settings.algod_token, self.settings.algod_testnet_url),
        }
        self.logger = logger.bind(service="algod")

    def get_asset_info(self, asset_id: int, network: Network = Network.MAINNET) -> Dict:
        """
        Fetch the raw asset object.

        Raises:
            AssetNotFound: algod answered 404
            TransportFailure: any other algod error
        """
        try:
            return self.clients[network].asset_info(asset_id)
        except AlgodHTTPError as e:
            if e.code == 404:
                raise AssetNotFound(f"Asset {asset_id} not found on {network.value}") from e
            self.logger.error(f"algod error for asset {asset_id} on {network.value}: {e}")
            raise TransportFailure(f"algod request failed: {e}") from e

    def get_token_config(self, asset_id: int, network: Network = Network.MAINNET) -> TokenConfig:
        """Return the configuration record of ``asset_id``."""
        asset_info = self.get_asset_info(asset_id, network)
        params = asset_info.get("params")
        if params is None:
            raise AssetNotFound(f"Asset {asset_id} has no params")
        return TokenConfig.from_params(params)
