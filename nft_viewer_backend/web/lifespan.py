"""Application lifespan management for the NFT viewer."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from loguru import logger

from nft_viewer_backend.metadata.resolver import MetadataResolver
from nft_viewer_backend.services import (
    ContentFetcher,
    ExternalRequestManager,
    IndexerTransactionReader,
)
from nft_viewer_backend.settings import settings
from nft_viewer_backend.viewer import NFTViewer


@asynccontextmanager
async def lifespan_setup(
    app: FastAPI,
) -> AsyncGenerator[None, None]:  # pragma: no cover
    """
    Actions to run on application startup.

    Builds one viewer whose fetcher and indexer client share a single
    HTTP session, and closes that session on shutdown.

    :param app: the fastAPI application.
    :return: function that actually performs actions.
    """
    logger.info("Initializing NFT viewer...")
    request_manager = ExternalRequestManager(settings)
    resolver = MetadataResolver(
        settings,
        fetch=ContentFetcher(settings, request_manager),
        transaction_reader=IndexerTransactionReader(settings, request_manager),
    )
    app.state.viewer = NFTViewer(settings, resolver=resolver)
    logger.info(f"NFT viewer ready (gateway {settings.ipfs_gateway_prefix})")

    yield

    logger.info("Closing HTTP session...")
    request_manager.close()
