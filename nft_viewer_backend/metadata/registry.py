"""
Extractor registry for managing and discovering convention extractors.

Provides centralized registration and lookup of the extractor for each
ARC standard.
"""

import logging
from typing import Dict, Iterable, List, Optional, Type

from ..models.metadata import ARCStandard
from ..settings import Settings
from .base import ExtractionContext, MetadataExtractor

logger = logging.getLogger(__name__)


class ExtractorRegistry:
    """
    Central registry for all metadata extractors.

    Holds one extractor class per standard and hands out instances sorted
    by priority.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._extractors: Dict[ARCStandard, Type[MetadataExtractor]] = {}
        self._instances: Dict[ARCStandard, MetadataExtractor] = {}

    def register(self, extractor_class: Type[MetadataExtractor]) -> None:
        """
        Register an extractor class.

        Args:
            extractor_class: Class that implements MetadataExtractor
        """
        # Create a temporary instance to get the standard
        temp_instance = extractor_class()
        standard = temp_instance.standard

        if standard in self._extractors:
            logger.warning(f"Extractor for '{standard.value}' already registered, overwriting")

        self._extractors[standard] = extractor_class
        self._instances.pop(standard, None)
        logger.debug(f"Registered extractor: {temp_instance.name}")

    def get_extractor(self, standard: ARCStandard, settings: Optional[Settings] = None) -> MetadataExtractor:
        """
        Get extractor instance for a standard.

        Raises:
            KeyError: If no extractor is registered for the standard
        """
        if standard not in self._extractors:
            raise KeyError(f"No extractor registered for '{standard.value}'")

        # Cache instances with default settings
        if settings is None and standard in self._instances:
            return self._instances[standard]

        extractor = self._extractors[standard](settings)

        if settings is None:
            self._instances[standard] = extractor

        return extractor

    def get_available_extractors(
        self,
        context: ExtractionContext,
        standards: Iterable[ARCStandard],
        settings: Optional[Settings] = None,
    ) -> List[MetadataExtractor]:
        """
        Get the extractors for ``standards`` that can handle the asset.

        Returns:
            List of extractors sorted by priority (highest first)
        """
        available = []

        for standard in set(standards):
            try:
                extractor = self.get_extractor(standard, settings)
            except KeyError as e:
                logger.warning(f"Skipping standard: {e}")
                continue
            if extractor.can_handle(context):
                available.append(extractor)

        # Sort by priority (lower number = higher priority)
        available.sort(key=lambda e: e.priority)

        logger.debug(f"Found {len(available)} available extractors: {[e.name for e in available]}")

        return available

    def list_standards(self) -> List[ARCStandard]:
        """List all standards with a registered extractor."""
        return list(self._extractors.keys())


# Global registry instance
_global_registry = ExtractorRegistry()


def register_extractor(extractor_class: Type[MetadataExtractor]) -> Type[MetadataExtractor]:
    """
    Register an extractor in the global registry.

    Usable as a class decorator.
    """
    _global_registry.register(extractor_class)
    return extractor_class


def get_global_registry() -> ExtractorRegistry:
    """
    Get the global extractor registry.

    Returns:
        Global ExtractorRegistry instance
    """
    return _global_registry
