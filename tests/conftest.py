"""Shared fixtures for the NFT viewer tests."""

import base64
import json
from typing import Any, Dict, List

import pytest

from nft_viewer_backend.exceptions import TransportFailure
from nft_viewer_backend.models.asset import Network, TokenConfig
from nft_viewer_backend.services.content_fetcher import FetchResponse
from nft_viewer_backend.services.indexer import ConfigTransaction
from nft_viewer_backend.settings import Settings

# Algorand zero address: public key of 32 zero bytes
ZERO_ADDRESS = "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ"
ZERO_KEY = bytes(32)

ARC19_URL = "template-ipfs://{ipfscid:1:raw:reserve:sha2-256}"
GATEWAY = "https://ipfs.io/ipfs/"


def cidv1_raw(public_key: bytes) -> str:
    """CIDv1 (raw, sha2-256) of a 32-byte digest, rendered in base32."""
    prefix = bytes([0x01, 0x55, 0x12, 0x20])
    return "b" + base64.b32encode(prefix + public_key).decode().lower().rstrip("=")


def json_response(document: Any) -> FetchResponse:
    return FetchResponse(content_type="application/json; charset=utf-8", body=document)


def binary_response(body: bytes = b"\x89PNG", content_type: str = "image/png") -> FetchResponse:
    return FetchResponse(content_type=content_type, body=body)


def encode_note(note: Dict[str, Any]) -> str:
    return base64.b64encode(json.dumps(note).encode()).decode()


class FakeFetch:
    """In-memory fetch capability: url -> FetchResponse or exception."""

    def __init__(self, responses: Dict[str, Any] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    def __call__(self, url: str) -> FetchResponse:
        self.calls.append(url)
        outcome = self.responses.get(url, TransportFailure(f"404 Not Found: {url}"))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeTransactionReader:
    """In-memory transaction log."""

    def __init__(self, transactions: List[ConfigTransaction] = None, error: Exception = None):
        self.transactions = transactions or []
        self.error = error
        self.calls = []

    def get_config_transactions(self, asset_id: int, network: Network) -> List[ConfigTransaction]:
        self.calls.append((asset_id, network))
        if self.error is not None:
            raise self.error
        return list(self.transactions)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def arc19_config() -> TokenConfig:
    return TokenConfig(name="Template #1", url=ARC19_URL, reserve=ZERO_ADDRESS)


@pytest.fixture
def arc3_config() -> TokenConfig:
    return TokenConfig(name="arc3", url="https://x/meta.json#arc3")


@pytest.fixture
def plain_config() -> TokenConfig:
    return TokenConfig(name="Plain", url="ipfs://QmPlain")
