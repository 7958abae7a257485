"""
Comp-style voting strategy backed by a delegated governance token.
"""

import logging
from typing import Any, Optional

from eth_utils import to_checksum_address

from ..types import StrategyKind
from .base import VotingStrategyModule

logger = logging.getLogger(__name__)

COMP_TOKEN_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "getVotes",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "account", "type": "address"},
            {"internalType": "uint256", "name": "timepoint", "type": "uint256"}
        ],
        "name": "getPastVotes",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]


class CompStrategy(VotingStrategyModule):
    """
    Voting power equals the votes delegated to the voter on a comp-style token.

    The strategy params hold the token address.
    """

    kind = StrategyKind.COMP

    async def get_voting_power(self, address: str, voter: str, timestamp: Optional[int],
                               params: Any, provider: Any) -> int:
        token = provider.eth.contract(address=to_checksum_address(params), abi=COMP_TOKEN_ABI)
        voter = to_checksum_address(voter)

        if timestamp is None:
            return await token.functions.getVotes(voter).call()

        logger.debug(f"Querying past votes of {voter} on {params} at {timestamp}")
        return await token.functions.getPastVotes(voter, timestamp).call()
