"""
API endpoints for asset metadata retrieval.

Resolution runs on every request; nothing is cached.
"""

from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query, Request, status
from loguru import logger

from nft_viewer_backend.exceptions import AssetNotFound, ResolutionFailed, TransportFailure
from nft_viewer_backend.models.asset import Network, NFTAsset
from nft_viewer_backend.viewer import NFTViewer

router = APIRouter(prefix="/assets", tags=["assets"])


def get_viewer(request: Request) -> NFTViewer:
    return request.app.state.viewer


async def _load_asset(viewer: NFTViewer, asset_id: int, network: Network) -> NFTAsset:
    try:
        return await viewer.get_asset_metadata(asset_id, is_mainnet=network == Network.MAINNET)

    except AssetNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    except ResolutionFailed as e:
        logger.warning(f"Asset {asset_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": "Metadata could not be resolved",
                "errors": {standard: repr(error) for standard, error in e.errors.items()},
            },
        )

    except TransportFailure as e:
        logger.error(f"Asset {asset_id}: ledger unavailable, {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.get("/{asset_id}", summary="Get an asset with its resolved metadata")
async def get_asset(
    asset_id: int,
    request: Request,
    network: Network = Query(Network.MAINNET, description="Ledger to read from"),
) -> Dict[str, Any]:
    """
    Resolve an asset's metadata across ARC3, ARC19 and ARC69.

    Unresolved locators and absent documents are omitted from the response.
    """
    asset = await _load_asset(get_viewer(request), asset_id, network)
    return asset.to_dict()


@router.get("/{asset_id}/properties/{name}", summary="Get one metadata property")
async def get_asset_property(
    asset_id: int,
    name: str,
    request: Request,
    network: Network = Query(Network.MAINNET, description="Ledger to read from"),
) -> Dict[str, Any]:
    """Look up ``name`` in the asset's documents, in precedence order."""
    viewer = get_viewer(request)
    asset = await _load_asset(viewer, asset_id, network)

    value = viewer.get_property(asset, name)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Asset {asset_id} has no property '{name}'",
        )
    return {"asset_id": asset_id, "name": name, "value": value}
