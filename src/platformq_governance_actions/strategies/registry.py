"""
Registry of voting strategy modules keyed by strategy address.
"""

import logging
from typing import Dict, List, Optional

from ..config import Settings
from .base import VotingStrategyModule
from .comp import CompStrategy
from .vanilla import VanillaStrategy
from .whitelist import WhitelistStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Registry for voting strategy module implementations"""

    def __init__(self):
        self._modules: Dict[str, VotingStrategyModule] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "StrategyRegistry":
        """Create a registry with the default modules at their configured addresses"""
        registry = cls()
        registry.register(settings.VANILLA_STRATEGY, VanillaStrategy())
        registry.register(settings.COMP_STRATEGY, CompStrategy())
        registry.register(settings.WHITELIST_STRATEGY, WhitelistStrategy())
        return registry

    def register(self, address: str, module: VotingStrategyModule):
        """Register a strategy module for a strategy address"""
        self._modules[address.lower()] = module
        logger.info(f"Registered {module.kind.value} strategy module at {address}")

    def lookup(self, address: str) -> Optional[VotingStrategyModule]:
        """Get the module for a strategy address, None if unknown"""
        return self._modules.get(address.lower())

    def get_registered_addresses(self) -> List[str]:
        return list(self._modules.keys())
