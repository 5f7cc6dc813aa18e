"""
Best-effort extractor for assets that match no standard.

Tries the ARC19 and ARC3 interpretations side by side and keeps whatever
they produce. Neither attempt is allowed to fail the asset.
"""

import asyncio
import logging
from typing import List, Optional

from ...models.metadata import ARCStandard
from ..base import (
    ExtractionContext,
    ExtractorResult,
    MetadataExtractor,
    PartialMetadata,
)
from .arc3 import ARC3Extractor
from .arc19 import ARC19Extractor

logger = logging.getLogger(__name__)


def first_present(values: List) -> Optional[object]:
    return next((value for value in values if value is not None), None)


class CustomExtractor(MetadataExtractor):
    """
    Opaque fallback.

    Attempts are folded in a fixed order (ARC19, then ARC3): the first
    attempt that produced a locator or document wins each field.
    """

    def __init__(self, settings=None):
        super().__init__(settings)
        self.attempts: List[MetadataExtractor] = [
            ARC19Extractor(self.settings),
            ARC3Extractor(self.settings),
        ]

    @property
    def name(self) -> str:
        return "Custom Fallback"

    @property
    def standard(self) -> ARCStandard:
        return ARCStandard.CUSTOM

    @property
    def priority(self) -> int:
        return 99

    def can_handle(self, context: ExtractionContext) -> bool:
        return True

    async def _attempt(self, extractor: MetadataExtractor, context: ExtractionContext) -> ExtractorResult:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, extractor.extract, context)
        except Exception as e:
            logger.info(f"[Custom] Asset {context.asset_id}: {extractor.name} attempt failed: {e!r}")
            return ExtractorResult.failed(extractor.standard, e)

    async def extract(self, context: ExtractionContext) -> ExtractorResult:
        outcomes = await asyncio.gather(
            *(self._attempt(extractor, context) for extractor in self.attempts)
        )
        partials = [outcome.metadata for outcome in outcomes if outcome.is_valid]

        image = first_present([partial.image for partial in partials])
        animation = first_present([partial.animation for partial in partials])
        document = first_present([partial.document for partial in partials])

        if animation is None:
            # Last resort: the url may be the media itself
            animation = self.resolver.to_locator(self.resolver.strip_arc3_suffix(context.config.url or ""))

        return ExtractorResult.succeeded(
            self.standard,
            PartialMetadata(image=image, animation=animation, document=document),
        )


# Register extractor
from ..registry import register_extractor
register_extractor(CustomExtractor)
