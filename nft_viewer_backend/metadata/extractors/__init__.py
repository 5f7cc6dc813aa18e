"""
Convention extractors.

Importing this package registers every extractor in the global registry.
"""

import logging

logger = logging.getLogger(__name__)

from . import arc19
from . import arc3
from . import arc69
from . import custom

logger.debug("All metadata extractors registered")

from ..registry import get_global_registry


def get_all_standards():
    """List the standards that have a registered extractor."""
    return get_global_registry().list_standards()


__all__ = [
    "get_all_standards",
]
