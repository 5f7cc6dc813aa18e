"""
Metadata-related Pydantic models.

This module contains:
- ARCStandard: the metadata conventions an asset can follow
- ContentLocator: a dereferenceable media url
- ResolvedMetadata: the merged result of every applicable convention
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ARCStandard(str, Enum):
    """Metadata conventions, listed in merge precedence order."""

    ARC19 = "ARC19"    # templated ipfs url rebuilt from the reserve address
    ARC3 = "ARC3"      # url points at a JSON document (or the media itself)
    ARC69 = "ARC69"    # metadata lives in the latest acfg transaction note
    CUSTOM = "CUSTOM"  # nothing matched, best effort


# Image/animation precedence: first applicable standard wins.
STANDARD_PRECEDENCE: Tuple[ARCStandard, ...] = (
    ARCStandard.ARC19,
    ARCStandard.ARC3,
    ARCStandard.ARC69,
    ARCStandard.CUSTOM,
)

# Where each standard keeps its verbatim document on ResolvedMetadata.
DOCUMENT_FIELDS: Dict[ARCStandard, str] = {
    ARCStandard.ARC19: "arc19_metadata",
    ARCStandard.ARC3: "arc3_metadata",
    ARCStandard.ARC69: "arc69_metadata",
    ARCStandard.CUSTOM: "custom_metadata",
}


def order_standards(standards) -> List[ARCStandard]:
    """Return the given standards deduplicated and sorted by precedence."""
    present = set(standards)
    return [standard for standard in STANDARD_PRECEDENCE if standard in present]


class LocatorScheme(str, Enum):
    """Transport a locator originated from."""

    CONTENT_ADDRESSED = "content-addressed"
    DIRECT_WEB = "direct-web"


class ContentLocator(BaseModel):
    """A resolved https url plus the scheme it was resolved from."""

    url: str = Field(..., description="Dereferenceable https url")
    scheme: LocatorScheme = Field(..., description="Original transport scheme")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "url": "https://ipfs.io/ipfs/bafkreiexample",
                "scheme": "content-addressed",
            },
        },
    )


class ResolvedMetadata(BaseModel):
    """
    Metadata merged across every convention an asset follows.

    Documents are kept separately per standard; only the image and
    animation locators are merged.
    """

    standards: List[ARCStandard] = Field(
        default_factory=list,
        description="Standards the asset matched, in precedence order",
    )
    image_locator: Optional[ContentLocator] = Field(None, description="Image url")
    animation_locator: Optional[ContentLocator] = Field(
        None,
        description="Animation url",
    )
    arc19_metadata: Optional[Dict[str, Any]] = Field(None, description="ARC19 document")
    arc3_metadata: Optional[Dict[str, Any]] = Field(None, description="ARC3 document")
    arc69_metadata: Optional[Dict[str, Any]] = Field(None, description="ARC69 note")
    custom_metadata: Optional[Dict[str, Any]] = Field(
        None,
        description="Document recovered by the best-effort path",
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "standards": ["ARC3"],
                "image_locator": {
                    "url": "https://ipfs.io/ipfs/bafkreiexample",
                    "scheme": "content-addressed",
                },
                "arc3_metadata": {"name": "Example", "image": "ipfs://bafkreiexample"},
            },
        },
    )

    @property
    def https_image_url(self) -> Optional[str]:
        return self.image_locator.url if self.image_locator else None

    @property
    def https_animation_url(self) -> Optional[str]:
        return self.animation_locator.url if self.animation_locator else None

    def document_for(self, standard: ARCStandard) -> Optional[Dict[str, Any]]:
        """Return the verbatim document recorded for ``standard``."""
        return getattr(self, DOCUMENT_FIELDS[standard])

    def iter_documents(self):
        """Yield ``(standard, document)`` for every present document, in precedence order."""
        for standard in STANDARD_PRECEDENCE:
            document = self.document_for(standard)
            if document is not None:
                yield standard, document

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, dropping every unresolved field."""
        return self.model_dump(mode="json", exclude_none=True)
