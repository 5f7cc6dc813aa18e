"""API endpoint tests."""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from nft_viewer_backend.exceptions import (
    AssetNotFound,
    InvalidReserveAddress,
    ResolutionFailed,
)
from nft_viewer_backend.models.asset import NFTAsset, TokenConfig
from nft_viewer_backend.models.metadata import (
    ARCStandard,
    ContentLocator,
    LocatorScheme,
    ResolvedMetadata,
)
from nft_viewer_backend.viewer import NFTViewer
from nft_viewer_backend.web.application import get_app


@pytest.fixture
def asset():
    return NFTAsset(
        index=1234,
        params=TokenConfig(name="arc3", url="https://x/meta.json#arc3", unit_name="X"),
        arc_metadata=ResolvedMetadata(
            standards=[ARCStandard.ARC3],
            image_locator=ContentLocator(
                url="https://ipfs.io/ipfs/CID1",
                scheme=LocatorScheme.CONTENT_ADDRESSED,
            ),
            arc3_metadata={"image": "ipfs://CID1", "description": "An asset"},
        ),
    )


@pytest.fixture
def viewer():
    viewer = NFTViewer(ledger_reader=Mock(), resolver=Mock())
    viewer.get_asset_metadata = AsyncMock()
    return viewer


@pytest.fixture
def client(viewer):
    # Lifespan does not run outside a `with` block; inject the viewer directly
    app = get_app()
    app.state.viewer = viewer
    return TestClient(app)


class TestAssetsAPI:
    """Asset endpoints."""

    def test_health(self, client):
        assert client.get("/api/health").status_code == 200

    def test_get_asset(self, client, viewer, asset):
        viewer.get_asset_metadata.return_value = asset

        response = client.get("/api/assets/1234")

        assert response.status_code == 200
        data = response.json()
        assert data["index"] == 1234
        assert data["params"]["unit-name"] == "X"
        assert data["arc_metadata"]["standards"] == ["ARC3"]
        assert data["arc_metadata"]["image_locator"]["url"] == "https://ipfs.io/ipfs/CID1"
        # Unresolved fields are omitted
        assert "animation_locator" not in data["arc_metadata"]
        assert "arc19_metadata" not in data["arc_metadata"]
        viewer.get_asset_metadata.assert_awaited_once_with(1234, is_mainnet=True)

    def test_testnet(self, client, viewer, asset):
        viewer.get_asset_metadata.return_value = asset

        client.get("/api/assets/1234", params={"network": "testnet"})

        viewer.get_asset_metadata.assert_awaited_once_with(1234, is_mainnet=False)

    def test_unknown_network(self, client):
        assert client.get("/api/assets/1234", params={"network": "betanet"}).status_code == 422

    def test_asset_not_found(self, client, viewer):
        viewer.get_asset_metadata.side_effect = AssetNotFound("Asset 1234 not found on mainnet")

        response = client.get("/api/assets/1234")

        assert response.status_code == 404

    def test_resolution_failed(self, client, viewer):
        viewer.get_asset_metadata.side_effect = ResolutionFailed(
            {"ARC19": InvalidReserveAddress("bad checksum")},
        )

        response = client.get("/api/assets/1234")

        assert response.status_code == 502
        assert "ARC19" in response.json()["detail"]["errors"]

    def test_get_property(self, client, viewer, asset):
        viewer.get_asset_metadata.return_value = asset

        response = client.get("/api/assets/1234/properties/description")

        assert response.status_code == 200
        assert response.json() == {"asset_id": 1234, "name": "description", "value": "An asset"}

    def test_missing_property(self, client, viewer, asset):
        viewer.get_asset_metadata.return_value = asset

        response = client.get("/api/assets/1234/properties/attributes")

        assert response.status_code == 404
