"""
Vanilla voting strategy: one account, one vote.
"""

from typing import Any, Optional

from ..types import StrategyKind
from .base import VotingStrategyModule


class VanillaStrategy(VotingStrategyModule):
    """Every voter has a voting power of 1"""

    kind = StrategyKind.VANILLA

    async def get_voting_power(self, address: str, voter: str, timestamp: Optional[int],
                               params: Any, provider: Any) -> int:
        return 1
