"""
ARC3 extractor.

The asset url points either at a JSON document (with ``image`` and
``animation_url`` links) or straight at the media file.
"""

import logging

from ...exceptions import MalformedDocument, TransportFailure
from ...models.metadata import ARCStandard
from ..base import (
    ExtractionContext,
    ExtractorResult,
    MetadataExtractor,
    PartialMetadata,
    parse_document,
)
from ..classifier import StandardClassifier

logger = logging.getLogger(__name__)


class ARC3Extractor(MetadataExtractor):
    """Direct JSON extractor."""

    @property
    def name(self) -> str:
        return "ARC3 JSON"

    @property
    def standard(self) -> ARCStandard:
        return ARCStandard.ARC3

    @property
    def priority(self) -> int:
        return 2

    def can_handle(self, context: ExtractionContext) -> bool:
        return StandardClassifier(self.settings).is_arc3(context.config)

    def extract(self, context: ExtractionContext) -> ExtractorResult:
        url = context.config.url
        locator = self.resolver.to_locator(self.resolver.strip_arc3_suffix(url or ""))
        if locator is None:
            raise TransportFailure(f"Cannot fetch ARC3 url, not ipfs or https: {url}")

        logger.info(f"[ARC3] Asset {context.asset_id}: fetching {locator.url}")
        try:
            response = context.fetch(locator.url)
        except MalformedDocument as e:
            logger.warning(f"[ARC3] Asset {context.asset_id}: {e}")
            return ExtractorResult.succeeded(self.standard, PartialMetadata())

        if not response.is_json:
            # Not a document: the url is the image itself
            return ExtractorResult.succeeded(self.standard, PartialMetadata(image=locator))

        document = parse_document(response)
        if document is None:
            logger.warning(f"[ARC3] Asset {context.asset_id}: JSON at {locator.url} is not an object")
            return ExtractorResult.succeeded(self.standard, PartialMetadata())

        image, animation = self.media_locators(document)
        return ExtractorResult.succeeded(
            self.standard,
            PartialMetadata(image=image, animation=animation, document=document),
        )


# Register extractor
from ..registry import register_extractor
register_extractor(ARC3Extractor)
