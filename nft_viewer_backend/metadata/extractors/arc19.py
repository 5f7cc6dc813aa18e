"""
ARC19 extractor.

The asset url is a ``template-ipfs://`` template whose CID is rebuilt from
the reserve address; the resolved url points at an ARC3-style JSON
document.
"""

import logging

from ...exceptions import MalformedDocument, MissingRequiredField, TransportFailure
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


class ARC19Extractor(MetadataExtractor):
    """
    Templated-url extractor.

    Missing url/reserve, an invalid reserve address, an unsupported
    template and transport errors are fatal for this extractor: there is no
    other way to reach the document.
    """

    @property
    def name(self) -> str:
        return "ARC19 Template"

    @property
    def standard(self) -> ARCStandard:
        return ARCStandard.ARC19

    @property
    def priority(self) -> int:
        return 1

    def can_handle(self, context: ExtractionContext) -> bool:
        return StandardClassifier(self.settings).is_arc19(context.config)

    def extract(self, context: ExtractionContext) -> ExtractorResult:
        config = context.config
        if not config.url or not config.reserve:
            raise MissingRequiredField("Missing url or reserve field.")

        locator = self.resolver.resolve_locator(config.url, config.reserve)
        if locator is None:
            raise TransportFailure(f"Cannot fetch unresolved template url: {config.url}")

        logger.info(f"[ARC19] Asset {context.asset_id}: fetching {locator.url}")
        try:
            response = context.fetch(locator.url)
        except MalformedDocument as e:
            logger.warning(f"[ARC19] Asset {context.asset_id}: {e}")
            return ExtractorResult.succeeded(self.standard, PartialMetadata())

        document = parse_document(response)
        if document is None:
            logger.warning(f"[ARC19] Asset {context.asset_id}: {locator.url} is not a JSON object")
            return ExtractorResult.succeeded(self.standard, PartialMetadata())

        image, animation = self.media_locators(document)
        return ExtractorResult.succeeded(
            self.standard,
            PartialMetadata(image=image, animation=animation, document=document),
        )


# Register extractor
from ..registry import register_extractor
register_extractor(ARC19Extractor)
