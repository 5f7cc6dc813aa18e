"""Tests for standard classification."""

import pytest

from nft_viewer_backend.models.asset import TokenConfig
from nft_viewer_backend.models.metadata import ARCStandard
from nft_viewer_backend.metadata.classifier import StandardClassifier

from conftest import ARC19_URL, ZERO_ADDRESS


class TestStandardClassifier:
    """Test suite for config-level and final classification."""

    def setup_method(self):
        self.classifier = StandardClassifier()

    def test_templated_url_with_reserve_is_arc19(self):
        config = TokenConfig(url=ARC19_URL, reserve=ZERO_ADDRESS)
        assert self.classifier.classify(config) == {ARCStandard.ARC19}

    def test_templated_prefix_without_reserve_word_is_not_arc19(self):
        config = TokenConfig(url="template-ipfs://{ipfscid:1:raw:creator:sha2-256}")
        assert ARCStandard.ARC19 not in self.classifier.classify(config)

    def test_reserve_word_without_templated_prefix_is_not_arc19(self):
        config = TokenConfig(url="ipfs://{ipfscid:1:raw:reserve:sha2-256}")
        assert ARCStandard.ARC19 not in self.classifier.classify(config)

    @pytest.mark.parametrize(
        "name, url",
        [
            ("arc3", "https://example.com/meta.json"),
            ("Collection@arc3", "https://example.com/meta.json"),
            ("Anything", "ipfs://QmDoc#arc3"),
        ],
    )
    def test_arc3_markers(self, name, url):
        config = TokenConfig(name=name, url=url)
        assert ARCStandard.ARC3 in self.classifier.classify(config)

    def test_arc3_name_must_match_exactly(self):
        config = TokenConfig(name="arc3 collection", url="https://example.com/meta.json")
        assert ARCStandard.ARC3 not in self.classifier.classify(config)

    def test_templated_url_with_arc3_suffix_is_both(self):
        config = TokenConfig(url=f"{ARC19_URL}#arc3", reserve=ZERO_ADDRESS)
        assert self.classifier.classify(config) == {ARCStandard.ARC19, ARCStandard.ARC3}

    def test_history_match_adds_arc69(self):
        config = TokenConfig(name="Plain", url="ipfs://QmImage")
        assert self.classifier.classify(config, history_matched=True) == {ARCStandard.ARC69}

    def test_history_match_combines_with_arc3(self):
        config = TokenConfig(name="arc3", url="ipfs://QmDoc")
        standards = self.classifier.classify(config, history_matched=True)
        assert standards == {ARCStandard.ARC3, ARCStandard.ARC69}

    def test_nothing_matched_is_custom(self):
        config = TokenConfig(name="Plain", url="ipfs://QmImage")
        assert self.classifier.classify(config) == {ARCStandard.CUSTOM}

    def test_custom_is_never_combined(self):
        config = TokenConfig(name="arc3", url="ipfs://QmDoc")
        assert ARCStandard.CUSTOM not in self.classifier.classify(config)

    def test_missing_fields_are_custom(self):
        assert self.classifier.classify(TokenConfig()) == {ARCStandard.CUSTOM}

    def test_classify_config_never_returns_custom(self):
        assert self.classifier.classify_config(TokenConfig()) == set()
