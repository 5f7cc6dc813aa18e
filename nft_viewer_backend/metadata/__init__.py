"""
Asset metadata resolution framework with one extractor per ARC standard.

This module classifies an asset's configuration, runs the extractor of
every candidate convention and merges their results by precedence.
"""

from .base import ExtractionContext, ExtractorResult, MetadataExtractor, PartialMetadata
from .classifier import StandardClassifier
from .merger import MetadataMerger
from .registry import ExtractorRegistry
from .resolver import MetadataResolver

__all__ = [
    "ExtractionContext",
    "ExtractorRegistry",
    "ExtractorResult",
    "MetadataExtractor",
    "MetadataMerger",
    "MetadataResolver",
    "PartialMetadata",
    "StandardClassifier",
]
