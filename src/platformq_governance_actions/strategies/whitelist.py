"""
Whitelist voting strategy with a fixed list of members and their power.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from eth_abi import decode, encode
from eth_utils import to_bytes, to_checksum_address

from ..types import StrategyKind
from .base import VotingStrategyModule

WHITELIST_PARAMS_TYPE = "(address,uint256)[]"


def encode_whitelist(members: Sequence[Tuple[str, int]]) -> str:
    """Encode whitelist members as strategy params"""
    entries = [(to_checksum_address(address), power) for address, power in members]
    return "0x" + encode([WHITELIST_PARAMS_TYPE], [entries]).hex()


def decode_whitelist(params: str) -> Dict[str, int]:
    """Decode strategy params into a lower-cased address to power mapping"""
    (entries,) = decode([WHITELIST_PARAMS_TYPE], to_bytes(hexstr=params))
    return {address.lower(): power for address, power in entries}


class WhitelistStrategy(VotingStrategyModule):
    """Voting power is looked up in the whitelist carried by the params"""

    kind = StrategyKind.WHITELIST

    async def get_voting_power(self, address: str, voter: str, timestamp: Optional[int],
                               params: Any, provider: Any) -> int:
        return decode_whitelist(params).get(voter.lower(), 0)
