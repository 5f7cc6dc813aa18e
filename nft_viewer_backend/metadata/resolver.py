"""
Asset metadata resolver.

Classifies an asset, runs the extractor of every candidate standard and
merges their results:

1. ARC19/ARC3 candidates (from the config) and ARC69 (always) run
   concurrently.
2. If none of them matched, the CUSTOM fallback runs.
3. Results are merged by precedence.
"""

import asyncio
import inspect
import logging
from typing import Dict, List, Optional

from ..models.asset import Network, TokenConfig
from ..models.metadata import ARCStandard, ResolvedMetadata
from ..services.content_fetcher import ContentFetcher
from ..services.indexer import IndexerTransactionReader
from ..settings import Settings
from .base import ExtractionContext, ExtractorResult, Fetch, MetadataExtractor, TransactionLogReader
from .classifier import StandardClassifier
from .merger import MetadataMerger
from .registry import ExtractorRegistry, get_global_registry

# Import extractors to trigger registration
from . import extractors

logger = logging.getLogger(__name__)


class MetadataResolver:
    """
    Resolves the metadata of one asset at a time.

    The fetch capability and transaction reader are injected; by default
    they are the HTTP content fetcher and the indexer client.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetch: Optional[Fetch] = None,
        transaction_reader: Optional[TransactionLogReader] = None,
        registry: Optional[ExtractorRegistry] = None,
    ):
        """Initialize resolver with settings and collaborators."""
        self.settings = settings or Settings()
        self.fetch = fetch or ContentFetcher(self.settings)
        self.transaction_reader = transaction_reader or IndexerTransactionReader(self.settings)
        self.registry = registry or get_global_registry()
        self.classifier = StandardClassifier(self.settings)
        self.merger = MetadataMerger()

    async def resolve(
        self,
        config: TokenConfig,
        asset_id: int,
        network: Network = Network.MAINNET,
    ) -> ResolvedMetadata:
        """
        Resolve the metadata of an asset.

        Raises:
            ResolutionFailed: every applicable standard failed
        """
        context = ExtractionContext(
            asset_id=asset_id,
            config=config,
            fetch=self.fetch,
            transaction_reader=self.transaction_reader,
            network=network,
        )

        candidates = self.classifier.classify_config(config) | {ARCStandard.ARC69}
        available = self.registry.get_available_extractors(context, candidates, self.settings)
        logger.info(f"Asset {asset_id}: running {[e.name for e in available]}")

        results = await self._run_all(available, context)

        history = results.get(ARCStandard.ARC69)
        standards = self.classifier.classify(
            config, history_matched=bool(history and history.is_valid)
        )

        if ARCStandard.CUSTOM in standards:
            fallback = self.registry.get_extractor(ARCStandard.CUSTOM, self.settings)
            results[ARCStandard.CUSTOM] = await self._run_extractor(fallback, context)

        metadata = self.merger.merge(standards, results)
        logger.info(
            f"Asset {asset_id}: standards={[s.value for s in metadata.standards]}, "
            f"image={metadata.https_image_url}, animation={metadata.https_animation_url}"
        )
        return metadata

    async def _run_all(
        self,
        extractors: List[MetadataExtractor],
        context: ExtractionContext,
    ) -> Dict[ARCStandard, ExtractorResult]:
        outcomes = await asyncio.gather(
            *(self._run_extractor(extractor, context) for extractor in extractors)
        )
        return {outcome.standard: outcome for outcome in outcomes}

    async def _run_extractor(
        self,
        extractor: MetadataExtractor,
        context: ExtractionContext,
    ) -> ExtractorResult:
        """Run one extractor, converting errors and timeouts into results."""
        try:
            # Run synchronous extractors in a thread pool to avoid blocking the event loop
            if inspect.iscoroutinefunction(extractor.extract):
                pending = extractor.extract(context)
            else:
                loop = asyncio.get_running_loop()
                pending = loop.run_in_executor(None, extractor.extract, context)

            result = await asyncio.wait_for(pending, timeout=self.settings.extractor_timeout)

        except asyncio.TimeoutError:
            logger.warning(
                f"⏱️ {extractor.name} timed out after {self.settings.extractor_timeout}s"
            )
            return ExtractorResult.not_applicable(extractor.standard, "timed out")

        except Exception as e:
            logger.warning(f"❌ {extractor.name} exception: {e!r}")
            return ExtractorResult.failed(extractor.standard, e)

        if result.is_valid:
            logger.info(f"✅ {extractor.name} succeeded")
        elif result.is_applicable:
            logger.info(f"❌ {extractor.name} failed: {result.reason}")
        else:
            logger.debug(f"{extractor.name} not applicable: {result.reason}")
        return result
