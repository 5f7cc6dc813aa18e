"""
Algorand NFT viewer.

Fetches an asset's configuration from the ledger and resolves its metadata
across ARC3, ARC19 and ARC69.
"""

import asyncio
from typing import Any, Optional

from loguru import logger

from .metadata.resolver import MetadataResolver
from .models.asset import Network, NFTAsset
from .models.metadata import ARCStandard, ResolvedMetadata
from .services.algod import AlgodLedgerReader
from .settings import Settings

DEFAULT_MIMETYPE = "image/png"

# Per-standard document keys holding a mime type
IMAGE_MIMETYPE_KEYS = {
    ARCStandard.ARC19: "image_mimetype",
    ARCStandard.ARC3: "image_mimetype",
    ARCStandard.ARC69: "mime_type",
    ARCStandard.CUSTOM: "image_mimetype",
}
ANIMATION_MIMETYPE_KEYS = {
    ARCStandard.ARC19: "animation_url_mimetype",
    ARCStandard.ARC3: "animation_url_mimetype",
    ARCStandard.ARC69: "mime_type",
    ARCStandard.CUSTOM: "animation_url_mimetype",
}


def _is_blank(value: Any) -> bool:
    return isinstance(value, (str, list, dict)) and len(value) == 0


class NFTViewer:
    """Fetches and parses NFT metadata given an asset id."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        ledger_reader: Optional[AlgodLedgerReader] = None,
        resolver: Optional[MetadataResolver] = None,
    ):
        self.settings = settings or Settings()
        self.ledger_reader = ledger_reader or AlgodLedgerReader(self.settings)
        self.resolver = resolver or MetadataResolver(self.settings)
        self.logger = logger.bind(service="nft_viewer")

    async def get_asset_metadata(self, asset_id: int, is_mainnet: bool = True) -> NFTAsset:
        """
        Get the configuration and resolved metadata of an asset.

        Raises:
            AssetNotFound: the ledger does not know the asset
            ResolutionFailed: every applicable standard failed
        """
        network = Network.from_flag(is_mainnet)
        loop = asyncio.get_running_loop()
        config = await loop.run_in_executor(
            None, self.ledger_reader.get_token_config, asset_id, network
        )
        self.logger.info(f"Resolving asset {asset_id} on {network.value}")

        arc_metadata = await self.resolver.resolve(config, asset_id, network)
        return NFTAsset(index=asset_id, params=config, arc_metadata=arc_metadata)

    async def get_nft_asset_data(self, asset_id: int, is_mainnet: bool = True) -> NFTAsset:
        return await self.get_asset_metadata(asset_id, is_mainnet)

    @staticmethod
    def get_property(asset: Optional[NFTAsset], name: Optional[str]) -> Any:
        """
        Get a property such as ``description`` from the asset's documents.

        Documents are searched in precedence order; the first one holding
        the key answers, and an empty value there counts as absent.
        """
        if asset is None or not name:
            return None

        for _, document in asset.arc_metadata.iter_documents():
            if name in document:
                value = document[name]
                return None if _is_blank(value) else value
        return None

    @staticmethod
    def get_image_mimetype(metadata: ResolvedMetadata) -> str:
        return _first_mimetype(metadata, IMAGE_MIMETYPE_KEYS)

    @staticmethod
    def get_animation_mimetype(metadata: ResolvedMetadata) -> str:
        return _first_mimetype(metadata, ANIMATION_MIMETYPE_KEYS)


def _first_mimetype(metadata: ResolvedMetadata, keys) -> str:
    for standard, document in metadata.iter_documents():
        mimetype = document.get(keys[standard])
        if isinstance(mimetype, str) and mimetype:
            return mimetype
    return DEFAULT_MIMETYPE
