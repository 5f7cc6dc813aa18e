"""
External services package for the NFT viewer backend.

This package contains clients for the ledger (algod), the transaction
index (indexer), generic HTTP content and IPFS url resolution.
"""

from .algod import AlgodLedgerReader
from .content_fetcher import ContentFetcher, FetchResponse
from .indexer import ConfigTransaction, IndexerTransactionReader
from .ipfs import TemplateResolver
from .request_manager import ExternalRequestManager

__all__ = [
    "AlgodLedgerReader",
    "ConfigTransaction",
    "ContentFetcher",
    "ExternalRequestManager",
    "FetchResponse",
    "IndexerTransactionReader",
    "TemplateResolver",
]
