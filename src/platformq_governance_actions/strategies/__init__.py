"""
Voting strategy modules
"""

from .base import VotingStrategyModule
from .vanilla import VanillaStrategy
from .comp import CompStrategy
from .whitelist import WhitelistStrategy, encode_whitelist, decode_whitelist
from .registry import StrategyRegistry

__all__ = [
    "VotingStrategyModule",
    "VanillaStrategy",
    "CompStrategy",
    "WhitelistStrategy",
    "encode_whitelist",
    "decode_whitelist",
    "StrategyRegistry"
]
