"""Tests for filter chain assembly."""

import pytest

from speech_mastering.filter_chain.assembler import FilterChainAssembler, build_filter_spec
from speech_mastering.filter_chain.builders import FILTER_BUILDERS
from speech_mastering.filter_chain.models import (
    ANALYSIS_FILTER_ORDER,
    PROCESSING_FILTER_ORDER,
    FilterChainConfig,
    FilterID,
)
from speech_mastering.logging_utils import TRACE_LEVEL


@pytest.fixture
def assembler() -> FilterChainAssembler:
    """Assembler with every known stage registered."""
    return FilterChainAssembler()


@pytest.mark.unit
class TestFilterChainAssembler:
    """Test cases for FilterChainAssembler."""

    def test_default_chain_skips_disabled_and_empty_stages(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test disabled stages and a zero-intensity de-esser are left out."""
        ids = [descriptor.filter_id for descriptor in assembler.describe(chain)]
        assert ids == [
            FilterID.DOWNMIX,
            FilterID.HIGHPASS,
            FilterID.LOWPASS,
            FilterID.NOISE_REDUCTION,
            FilterID.GATE,
            FilterID.COMPRESSOR,
            FilterID.SPEECHNORM,
            FilterID.LIMITER,
            FilterID.ANALYSIS,
            FilterID.RESAMPLE,
        ]

    def test_analysis_order(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test the analysis pass is a downmix followed by measurement."""
        spec = assembler.build_filter_spec(chain, ANALYSIS_FILTER_ORDER)
        assert spec.startswith("aformat=channel_layouts=mono,astats=")
        assert spec.endswith("target=-16")

    def test_order_is_preserved(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test stages come out exactly in the requested order."""
        chain.deesser.intensity = 0.5
        order = [FilterID.LIMITER, FilterID.DEESSER, FilterID.DOWNMIX, FilterID.GATE]
        descriptors = assembler.describe(chain, order)
        assert [descriptor.filter_id for descriptor in descriptors] == order
        assert assembler.build_filter_spec(chain, order) == ",".join(
            descriptor.fragment for descriptor in descriptors
        )

    def test_configured_order_used_by_default(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test the configuration's own order drives assembly."""
        chain.filter_order = [FilterID.RESAMPLE, FilterID.DOWNMIX]
        assert assembler.build_filter_spec(chain) == (
            "aformat=sample_rates=44100:channel_layouts=mono:sample_fmts=s16,"
            "asetnsamples=n=4096,aformat=channel_layouts=mono"
        )

    def test_empty_order_falls_back_to_processing_order(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test an empty order assembles the default processing chain."""
        chain.filter_order = []
        expected = assembler.build_filter_spec(chain, PROCESSING_FILTER_ORDER)
        assert assembler.build_filter_spec(chain) == expected

    def test_unregistered_stage_skipped(self, chain: FilterChainConfig) -> None:
        """Test a stage without a builder is silently left out."""
        builders = {k: v for k, v in FILTER_BUILDERS.items() if k is not FilterID.GATE}
        assembler = FilterChainAssembler(builders)
        spec = assembler.build_filter_spec(chain, [FilterID.DOWNMIX, FilterID.GATE])
        assert spec == "aformat=channel_layouts=mono"

    def test_unknown_identifier_skipped(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test identifiers outside the known set do not raise."""
        spec = assembler.build_filter_spec(chain, ["tilt_eq", FilterID.DOWNMIX])  # type: ignore[list-item]
        assert spec == "aformat=channel_layouts=mono"

    def test_custom_identifier_with_empty_fragment(
        self, chain: FilterChainConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test an empty fragment from a string-keyed builder is skipped and logged."""
        assembler = FilterChainAssembler({"custom": lambda c: ""})  # type: ignore[dict-item]

        with caplog.at_level(TRACE_LEVEL, logger="speech_mastering.filter_chain.assembler"):
            spec = assembler.build_filter_spec(chain, ["custom"])  # type: ignore[list-item]

        assert spec == ""
        assert "Stage custom produced no fragment" in caplog.text

    def test_deterministic(self, assembler: FilterChainAssembler, chain: FilterChainConfig) -> None:
        """Test the same configuration always yields the same description."""
        assert assembler.build_filter_spec(chain) == assembler.build_filter_spec(chain)

    def test_module_level_helper_matches(
        self, assembler: FilterChainAssembler, chain: FilterChainConfig
    ) -> None:
        """Test build_filter_spec uses the default builders."""
        assert build_filter_spec(chain) == assembler.build_filter_spec(chain)
