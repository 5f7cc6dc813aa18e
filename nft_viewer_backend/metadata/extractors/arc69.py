"""
ARC69 extractor.

ARC69 metadata is the JSON note of the asset's most recent ``acfg``
transaction that declares ``"standard": "arc69"``. The asset url itself
points at the media.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict, Optional

from ...exceptions import TransportFailure
from ...models.metadata import ARCStandard
from ..base import ExtractionContext, ExtractorResult, MetadataExtractor, PartialMetadata

logger = logging.getLogger(__name__)


def decode_note(note_base64: str) -> Optional[Dict[str, Any]]:
    """
    Decode a base64 transaction note into a JSON object.

    Non-printable characters are dropped before parsing. Returns None for
    anything that is not a JSON object.
    """
    try:
        raw = base64.b64decode(note_base64)
    except (binascii.Error, ValueError, TypeError):
        return None

    text = raw.decode("utf-8", errors="ignore").strip()
    text = "".join(ch for ch in text if ch.isprintable())
    try:
        note = json.loads(text)
    except ValueError:
        return None
    return note if isinstance(note, dict) else None


class ARC69Extractor(MetadataExtractor):
    """
    Transaction-history extractor.

    Always attempted: finding the note is what makes an asset ARC69.
    Unrelated notes and an unreachable indexer are expected and only mean
    "not applicable".
    """

    @property
    def name(self) -> str:
        return "ARC69 Note"

    @property
    def standard(self) -> ARCStandard:
        return ARCStandard.ARC69

    @property
    def priority(self) -> int:
        return 3

    def can_handle(self, context: ExtractionContext) -> bool:
        return context.transaction_reader is not None

    def _url_locator(self, context: ExtractionContext):
        # The asset url points at the media itself
        return self.resolver.to_locator(self.resolver.strip_arc3_suffix(context.config.url or ""))

    def extract(self, context: ExtractionContext) -> ExtractorResult:
        if context.transaction_reader is None:
            return ExtractorResult.not_applicable(self.standard, "no transaction reader")

        try:
            transactions = context.transaction_reader.get_config_transactions(
                context.asset_id, context.network
            )
        except TransportFailure as e:
            logger.info(f"[ARC69] Asset {context.asset_id}: history unavailable, {e}")
            return ExtractorResult.not_applicable(self.standard, str(e))

        # Most recent first
        for transaction in sorted(transactions, key=lambda t: t.round_time, reverse=True):
            note = decode_note(transaction.note)
            if note is None:
                continue
            if note.get("standard") != self.settings.arc69_standard:
                continue

            logger.info(f"[ARC69] Asset {context.asset_id}: note found (round time {transaction.round_time})")
            return ExtractorResult.succeeded(
                self.standard,
                PartialMetadata(image=self._url_locator(context), document=note),
            )

        return ExtractorResult.not_applicable(self.standard, "no arc69 note")


# Register extractor
from ..registry import register_extractor
register_extractor(ARC69Extractor)
