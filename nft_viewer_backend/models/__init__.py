"""
Models package for the NFT viewer backend.

This package contains all Pydantic models for:
- On-chain asset configuration
- Resolved metadata and content locators
"""

from .asset import Network, NFTAsset, TokenConfig
from .metadata import (
    DOCUMENT_FIELDS,
    STANDARD_PRECEDENCE,
    ARCStandard,
    ContentLocator,
    LocatorScheme,
    ResolvedMetadata,
    order_standards,
)

__all__ = [
    "ARCStandard",
    "ContentLocator",
    "DOCUMENT_FIELDS",
    "LocatorScheme",
    "Network",
    "NFTAsset",
    "ResolvedMetadata",
    "STANDARD_PRECEDENCE",
    "TokenConfig",
    "order_standards",
]
