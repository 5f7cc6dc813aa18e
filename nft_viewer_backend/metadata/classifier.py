"""
Standard classification from an asset's configuration.

ARC3 and ARC19 are recognizable from the config alone. ARC69 is only known
once its note has been found in the transaction history, so the caller
passes that outcome in. CUSTOM is what remains when nothing matched.
"""

import logging
from typing import Optional, Set

from ..models.asset import TokenConfig
from ..models.metadata import ARCStandard
from ..settings import Settings

logger = logging.getLogger(__name__)


class StandardClassifier:
    """Decides which metadata conventions an asset is a candidate for."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def is_arc3(self, config: TokenConfig) -> bool:
        """ARC3 by name (``arc3`` / ``*@arc3``) or by url (``*#arc3``)."""
        name = config.name or ""
        url = config.url or ""
        by_name = name == self.settings.arc3_name or name.endswith(self.settings.arc3_name_suffix)
        by_url = url.endswith(self.settings.arc3_url_suffix)
        return by_name or by_url

    def is_arc19(self, config: TokenConfig) -> bool:
        """ARC19 needs both the ``template-ipfs://{ipfscid`` prefix and the word ``reserve``."""
        url = config.url or ""
        return url.startswith(self.settings.template_ipfs_url_prefix) and "reserve" in url

    def classify_config(self, config: TokenConfig) -> Set[ARCStandard]:
        """Standards decidable from the config alone, without the fallback."""
        standards = set()
        if self.is_arc19(config):
            standards.add(ARCStandard.ARC19)
        if self.is_arc3(config):
            standards.add(ARCStandard.ARC3)
        return standards

    def classify(self, config: TokenConfig, history_matched: bool = False) -> Set[ARCStandard]:
        """
        Full classification.

        Args:
            config: asset configuration
            history_matched: whether an ARC69 note was recovered

        Returns:
            Non-empty set of standards; ``{CUSTOM}`` when nothing else matched
        """
        standards = self.classify_config(config)
        if history_matched:
            standards.add(ARCStandard.ARC69)
        if not standards:
            standards.add(ARCStandard.CUSTOM)
        logger.debug(f"Classified '{config.name}' as {sorted(s.value for s in standards)}")
        return standards
