"""Assembly of stage fragments into a complete filter-graph description."""

from collections.abc import Iterable, Mapping

from ..logging_utils import get_logger
from .builders import FILTER_BUILDERS, FilterBuilder
from .models import (
    PROCESSING_FILTER_ORDER,
    FilterChainConfig,
    FilterID,
    StageDescriptor,
)

logger = get_logger(__name__)

FILTER_SEPARATOR = ","


class FilterChainAssembler:
    """Serialises a configuration into an ordered filter chain."""

    def __init__(self, builders: Mapping[FilterID, FilterBuilder] | None = None) -> None:
        """
        Initialize the assembler.

        Args:
            builders: Serialiser per stage, defaults to every known stage
        """
        self._builders = dict(FILTER_BUILDERS if builders is None else builders)

    def describe(
        self, chain: FilterChainConfig, order: Iterable[FilterID] | None = None
    ) -> list[StageDescriptor]:
        """
        Serialise each stage in order, skipping unknown and empty stages.

        Args:
            chain: Tuned configuration
            order: Stage order, defaults to ``chain.filter_order``; an empty
                order means the default processing order

        Returns:
            One descriptor per stage that produced a fragment, in order
        """
        stage_order = chain.filter_order if order is None else list(order)
        if not stage_order:
            stage_order = PROCESSING_FILTER_ORDER

        descriptors = []
        for filter_id in stage_order:
            builder = self._builders.get(filter_id)
            if builder is None:
                logger.debug(f"No builder registered for stage {filter_id}, skipping")
                continue

            fragment = builder(chain)
            if not fragment:
                logger.trace(f"Stage {filter_id} produced no fragment, skipping")
                continue

            descriptors.append(StageDescriptor(filter_id=filter_id, fragment=fragment))

        return descriptors

    def build_filter_spec(
        self, chain: FilterChainConfig, order: Iterable[FilterID] | None = None
    ) -> str:
        """Flatten the stage descriptors into one filter-graph string."""
        return FILTER_SEPARATOR.join(
            descriptor.fragment for descriptor in self.describe(chain, order)
        )


def build_filter_spec(
    chain: FilterChainConfig, order: Iterable[FilterID] | None = None
) -> str:
    """Build the filter-graph string for ``chain`` with the default builders."""
    return FilterChainAssembler().build_filter_spec(chain, order)
