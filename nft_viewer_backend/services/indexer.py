"""
Indexer client for asset configuration transactions.

ARC69 metadata lives in the note field of ``acfg`` transactions, which only
the indexer can list.
"""

from dataclasses import dataclass
from typing import List, Optional

from loguru import logger
from requests.exceptions import RequestException

from ..models.asset import Network
from ..settings import Settings
from .request_manager import ExternalRequestManager


@dataclass(frozen=True)
class ConfigTransaction:
    """An ``acfg`` transaction reduced to what ARC69 needs."""
    note: str  # base64
    round_time: int


class IndexerTransactionReader:
    """Lists asset configuration transactions through the indexer REST API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        request_manager: Optional[ExternalRequestManager] = None,
    ):
        self.settings = settings or Settings()
        self.request_manager = request_manager or ExternalRequestManager(self.settings)
        self.logger = logger.bind(service="indexer")

    def transactions_url(self, asset_id: int, network: Network) -> str:
        base_url = (
            self.settings.indexer_mainnet_url
            if network == Network.MAINNET
            else self.settings.indexer_testnet_url
        )
        return f"{base_url.rstrip('/')}/v2/assets/{asset_id}/transactions"

    def get_config_transactions(
        self,
        asset_id: int,
        network: Network = Network.MAINNET,
    ) -> List[ConfigTransaction]:
        """
        Return every ``acfg`` transaction of ``asset_id`` that carries a note.

        Transport or payload errors yield an empty list: a missing history
        only means ARC69 does not apply.
        """
        url = self.transactions_url(asset_id, network)
        try:
            response = self.request_manager.get(url, params={"tx-type": "acfg"})
            transactions = response.json().get("transactions", [])
        except (RequestException, ValueError, AttributeError) as e:
            self.logger.warning(f"Could not list acfg transactions for asset {asset_id}: {e}")
            return []

        if not isinstance(transactions, list):
            self.logger.warning(f"Unexpected transactions payload for asset {asset_id}")
            return []

        results = []
        for transaction in transactions:
            if not isinstance(transaction, dict):
                continue
            note = transaction.get("note")
            if not note:
                continue
            try:
                round_time = int(transaction.get("round-time") or 0)
            except (TypeError, ValueError):
                self.logger.debug(f"Asset {asset_id}: skipping transaction with bad round-time")
                continue
            results.append(ConfigTransaction(note=note, round_time=round_time))

        self.logger.debug(f"Asset {asset_id}: {len(results)} acfg transactions with notes")
        return results
