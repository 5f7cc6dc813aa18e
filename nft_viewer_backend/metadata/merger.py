"""
Merging of per-standard extractor results.

Image and animation locators follow STANDARD_PRECEDENCE, first applicable
wins. Documents are never merged into each other; each standard keeps its
own field.
"""

import copy
import logging
from typing import Any, Dict, Iterable, Mapping

from ..exceptions import ResolutionFailed
from ..models.metadata import (
    DOCUMENT_FIELDS,
    ARCStandard,
    ResolvedMetadata,
    order_standards,
)
from .base import ExtractorResult

logger = logging.getLogger(__name__)

LOCATOR_FIELDS = (
    ("image_locator", "image"),
    ("animation_locator", "animation"),
)


class MetadataMerger:
    """Folds extractor results into one ResolvedMetadata."""

    def merge(
        self,
        standards: Iterable[ARCStandard],
        results: Mapping[ARCStandard, ExtractorResult],
    ) -> ResolvedMetadata:
        """
        Merge the results of the classified standards.

        Args:
            standards: every standard the asset matched
            results: extractor outcome per standard; missing entries count as
                not applicable

        Raises:
            ResolutionFailed: every applicable standard failed
        """
        ordered = order_standards(standards)
        fields: Dict[str, Any] = {"standards": ordered}
        errors: Dict[str, Exception] = {}
        applicable = 0

        for standard in ordered:
            result = results.get(standard)
            if result is None or not result.is_applicable:
                continue
            applicable += 1

            if result.is_failure:
                errors[standard.value] = result.error
                logger.info(f"{standard.value} produced no result: {result.reason}")
                continue

            partial = result.metadata
            if partial is None:
                continue
            for field, attribute in LOCATOR_FIELDS:
                value = getattr(partial, attribute)
                if value is not None and field not in fields:
                    fields[field] = value
            if partial.document is not None:
                fields[DOCUMENT_FIELDS[standard]] = copy.deepcopy(partial.document)

        if applicable and len(errors) == applicable:
            raise ResolutionFailed(errors)

        return ResolvedMetadata(**fields)
