"""Tests for precedence merging."""

import pytest

from nft_viewer_backend.exceptions import (
    InvalidReserveAddress,
    ResolutionFailed,
    TransportFailure,
)
from nft_viewer_backend.metadata.base import ExtractorResult, PartialMetadata
from nft_viewer_backend.metadata.merger import MetadataMerger
from nft_viewer_backend.models import ARCStandard, ContentLocator, LocatorScheme


def locator(url: str) -> ContentLocator:
    return ContentLocator(url=url, scheme=LocatorScheme.DIRECT_WEB)


class TestMetadataMerger:
    """Test suite for MetadataMerger."""

    def setup_method(self):
        self.merger = MetadataMerger()

    def test_arc19_beats_arc3(self):
        results = {
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3, PartialMetadata(image=locator("https://b/image.png")),
            ),
            ARCStandard.ARC19: ExtractorResult.succeeded(
                ARCStandard.ARC19, PartialMetadata(image=locator("https://a/image.png")),
            ),
        }

        merged = self.merger.merge({ARCStandard.ARC3, ARCStandard.ARC19}, results)

        assert merged.https_image_url == "https://a/image.png"
        assert merged.standards == [ARCStandard.ARC19, ARCStandard.ARC3]

    def test_fields_fill_independently(self):
        results = {
            ARCStandard.ARC19: ExtractorResult.succeeded(
                ARCStandard.ARC19, PartialMetadata(image=locator("https://a/image.png")),
            ),
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3,
                PartialMetadata(
                    image=locator("https://b/image.png"),
                    animation=locator("https://b/animation.mp4"),
                ),
            ),
        }

        merged = self.merger.merge([ARCStandard.ARC19, ARCStandard.ARC3], results)

        assert merged.https_image_url == "https://a/image.png"
        assert merged.https_animation_url == "https://b/animation.mp4"

    def test_failed_standard_is_skipped(self):
        results = {
            ARCStandard.ARC19: ExtractorResult.failed(
                ARCStandard.ARC19, InvalidReserveAddress("bad checksum"),
            ),
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3,
                PartialMetadata(image=locator("https://b/image.png"), document={"name": "b"}),
            ),
        }

        merged = self.merger.merge([ARCStandard.ARC19, ARCStandard.ARC3], results)

        assert merged.https_image_url == "https://b/image.png"
        assert merged.arc3_metadata == {"name": "b"}
        assert merged.arc19_metadata is None

    def test_documents_are_kept_per_standard(self):
        results = {
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3, PartialMetadata(document={"description": "from arc3"}),
            ),
            ARCStandard.ARC69: ExtractorResult.succeeded(
                ARCStandard.ARC69,
                PartialMetadata(document={"standard": "arc69", "description": "from note"}),
            ),
        }

        merged = self.merger.merge([ARCStandard.ARC3, ARCStandard.ARC69], results)

        assert merged.arc3_metadata == {"description": "from arc3"}
        assert merged.arc69_metadata == {"standard": "arc69", "description": "from note"}

    def test_documents_are_copied(self):
        document = {"properties": {"rarity": "rare"}}
        results = {
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3, PartialMetadata(document=document),
            ),
        }

        merged = self.merger.merge([ARCStandard.ARC3], results)
        document["properties"]["rarity"] = "common"

        assert merged.arc3_metadata == {"properties": {"rarity": "rare"}}

    def test_merge_is_idempotent(self):
        results = {
            ARCStandard.ARC19: ExtractorResult.succeeded(
                ARCStandard.ARC19,
                PartialMetadata(image=locator("https://a/image.png"), document={"name": "a"}),
            ),
            ARCStandard.ARC69: ExtractorResult.succeeded(
                ARCStandard.ARC69, PartialMetadata(document={"standard": "arc69"}),
            ),
        }
        standards = [ARCStandard.ARC69, ARCStandard.ARC19]

        first = self.merger.merge(standards, results)
        second = self.merger.merge(standards, results)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_all_failed_raises_with_every_error(self):
        arc19_error = InvalidReserveAddress("bad checksum")
        arc3_error = TransportFailure("503")
        results = {
            ARCStandard.ARC19: ExtractorResult.failed(ARCStandard.ARC19, arc19_error),
            ARCStandard.ARC3: ExtractorResult.failed(ARCStandard.ARC3, arc3_error),
        }

        with pytest.raises(ResolutionFailed) as exc_info:
            self.merger.merge([ARCStandard.ARC19, ARCStandard.ARC3], results)

        assert exc_info.value.errors == {"ARC19": arc19_error, "ARC3": arc3_error}

    def test_not_applicable_is_not_a_failure(self):
        results = {
            ARCStandard.ARC19: ExtractorResult.failed(
                ARCStandard.ARC19, InvalidReserveAddress("bad"),
            ),
            ARCStandard.ARC69: ExtractorResult.not_applicable(ARCStandard.ARC69, "no note"),
        }

        with pytest.raises(ResolutionFailed) as exc_info:
            self.merger.merge([ARCStandard.ARC19], results)

        assert list(exc_info.value.errors) == ["ARC19"]

    def test_only_not_applicable_results_merge_empty(self):
        results = {
            ARCStandard.ARC3: ExtractorResult.not_applicable(ARCStandard.ARC3, "timed out"),
        }

        merged = self.merger.merge([ARCStandard.ARC3], results)

        assert merged.standards == [ARCStandard.ARC3]
        assert merged.image_locator is None

    def test_results_outside_classification_are_ignored(self):
        results = {
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3, PartialMetadata(image=locator("https://b/image.png")),
            ),
        }

        merged = self.merger.merge([ARCStandard.ARC69], results)

        assert merged.image_locator is None

    def test_unresolved_fields_are_omitted_from_dict(self):
        results = {
            ARCStandard.ARC3: ExtractorResult.succeeded(
                ARCStandard.ARC3, PartialMetadata(image=locator("https://b/image.png")),
            ),
        }

        data = self.merger.merge([ARCStandard.ARC3], results).to_dict()

        assert data == {
            "standards": ["ARC3"],
            "image_locator": {"url": "https://b/image.png", "scheme": "direct-web"},
        }
