"""
Voting power aggregation across a space's voting strategies.
"""

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from .interfaces import IStrategyRegistry
from .types import StrategyKind, VotingPower

logger = logging.getLogger(__name__)


def parse_decimals(metadata: Optional[str]) -> int:
    """Token decimals stored as base-16 strategy metadata, 0 when missing"""
    if not metadata:
        return 0
    try:
        return int(metadata, 16)
    except ValueError:
        logger.warning(f"Ignoring malformed strategy metadata {metadata!r}, using 0 decimals")
        return 0


class VotingPowerAggregator:
    """
    Queries every strategy concurrently and merges the results.

    Results are index-aligned with the strategy addresses. A failing
    strategy fails the whole aggregation.
    """

    def __init__(self, registry: IStrategyRegistry, provider: Any):
        self.registry = registry
        self.provider = provider

    async def get_voting_power(
        self,
        addresses: Sequence[str],
        params: Sequence[Any],
        metadata: Sequence[Optional[str]],
        voter: str,
        timestamp: Optional[int]
    ) -> List[VotingPower]:
        return list(await asyncio.gather(*[
            self._get_strategy_power(
                address,
                params[i] if i < len(params) else None,
                metadata[i] if i < len(metadata) else None,
                voter,
                timestamp
            )
            for i, address in enumerate(addresses)
        ]))

    async def _get_strategy_power(self, address: str, params: Any, metadata: Optional[str],
                                  voter: str, timestamp: Optional[int]) -> VotingPower:
        strategy = self.registry.lookup(address)
        if strategy is None:
            logger.debug(f"No strategy module registered for {address}")
            return VotingPower(address=address, value=0, decimals=0)

        value = await strategy.get_voting_power(address, voter, timestamp, params, self.provider)

        return VotingPower(
            address=address,
            value=int(value),
            decimals=parse_decimals(metadata),
            token=params if strategy.kind == StrategyKind.COMP else None
        )
