"""
Base classes and interfaces for metadata extractors.

Defines the unified interface that every convention extractor implements,
plus the context it receives and the result it returns.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from ..models.asset import Network, TokenConfig
from ..models.metadata import ARCStandard, ContentLocator
from ..services.content_fetcher import FetchResponse
from ..services.indexer import ConfigTransaction
from ..services.ipfs import TemplateResolver
from ..settings import Settings

logger = logging.getLogger(__name__)


class TransactionLogReader(Protocol):
    """Anything that can list an asset's ``acfg`` transactions."""

    def get_config_transactions(self, asset_id: int, network: Network) -> List[ConfigTransaction]:
        ...


Fetch = Callable[[str], FetchResponse]


@dataclass(frozen=True)
class ExtractionContext:
    """Standardized input data for extractors."""
    asset_id: int
    config: TokenConfig
    fetch: Fetch
    transaction_reader: Optional[TransactionLogReader] = None
    network: Network = Network.MAINNET


@dataclass(frozen=True)
class PartialMetadata:
    """What one convention contributes to the merged record."""
    image: Optional[ContentLocator] = None
    animation: Optional[ContentLocator] = None
    document: Optional[Dict[str, Any]] = None

    @property
    def is_empty(self) -> bool:
        return self.image is None and self.animation is None and self.document is None


class ExtractorStatus(Enum):
    """Outcome of one extractor run."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class ExtractorResult:
    """Standardized output from extractors."""
    standard: ARCStandard
    status: ExtractorStatus
    metadata: Optional[PartialMetadata] = None
    error: Optional[Exception] = None
    reason: str = ""

    @classmethod
    def succeeded(cls, standard: ARCStandard, metadata: PartialMetadata) -> "ExtractorResult":
        return cls(standard=standard, status=ExtractorStatus.SUCCEEDED, metadata=metadata)

    @classmethod
    def failed(cls, standard: ARCStandard, error: Exception) -> "ExtractorResult":
        return cls(standard=standard, status=ExtractorStatus.FAILED, error=error, reason=repr(error))

    @classmethod
    def not_applicable(cls, standard: ARCStandard, reason: str = "") -> "ExtractorResult":
        return cls(standard=standard, status=ExtractorStatus.NOT_APPLICABLE, reason=reason)

    @property
    def is_valid(self) -> bool:
        """Check if the extractor produced a payload."""
        return self.status == ExtractorStatus.SUCCEEDED and self.metadata is not None

    @property
    def is_failure(self) -> bool:
        return self.status == ExtractorStatus.FAILED

    @property
    def is_applicable(self) -> bool:
        return self.status != ExtractorStatus.NOT_APPLICABLE


def parse_document(response: FetchResponse) -> Optional[Dict[str, Any]]:
    """
    Interpret a fetched body as a metadata document.

    JSON objects are returned as-is; byte bodies are given one chance to
    parse as JSON, since gateways do not always label documents correctly.
    Anything else is not a document.
    """
    body = response.body
    if isinstance(body, (bytes, bytearray, str)):
        try:
            body = json.loads(body)
        except (ValueError, UnicodeDecodeError):
            return None
    if isinstance(body, dict):
        return body
    return None


class MetadataExtractor(ABC):
    """
    Abstract base class for all convention extractors.

    One extractor exists per ARCStandard. ``extract`` may be a plain or an
    async method; the resolver runs plain ones in a worker thread. Errors
    are raised, not returned: the resolver turns them into failed results.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize extractor with optional settings."""
        self.settings = settings or Settings()
        self.resolver = TemplateResolver(self.settings)

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this extractor."""
        pass

    @property
    @abstractmethod
    def standard(self) -> ARCStandard:
        """Standard this extractor implements."""
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """
        Priority of this extractor (lower = higher priority).

        Matches the merge precedence: ARC19, ARC3, ARC69, then the
        best-effort fallback.
        """
        pass

    @abstractmethod
    def can_handle(self, context: ExtractionContext) -> bool:
        """Check if this extractor can attempt the given asset."""
        pass

    @abstractmethod
    def extract(self, context: ExtractionContext) -> ExtractorResult:
        """Extract this convention's contribution for the asset."""
        pass

    def media_locators(
        self, document: Dict[str, Any]
    ) -> Tuple[Optional[ContentLocator], Optional[ContentLocator]]:
        """Read ``image`` and ``animation_url`` from a document."""
        image = self.resolver.to_locator(document.get("image"))
        animation = self.resolver.to_locator(document.get("animation_url"))
        return image, animation

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"{self.name} (priority: {self.priority})"

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(name='{self.name}', priority={self.priority})"
