"""
Base voting strategy module.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..types import StrategyKind


class VotingStrategyModule(ABC):
    """Abstract base class for voting strategy modules"""

    kind: StrategyKind

    @abstractmethod
    async def get_voting_power(
        self,
        address: str,
        voter: str,
        timestamp: Optional[int],
        params: Any,
        provider: Any
    ) -> int:
        """
        Calculate the voting power of a voter under this strategy.

        Args:
            address: Strategy contract address
            voter: Voter address
            timestamp: Snapshot timestamp, None for current power
            params: Strategy-specific parameters as configured on the space
            provider: Read-only chain accessor (AsyncWeb3)

        Returns:
            Voting power as an unsigned integer
        """
        pass
