"""
Strategy configurations supplied by space creators.

Optional behaviors are expressed as capability mixins: a config is deployed
only if it is ``Deployable`` and generates params/metadata only if it is a
``ParamGenerator``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from eth_utils import to_checksum_address

from .interfaces import ISigner, ITransactionClient
from .strategies.whitelist import encode_whitelist


@dataclass
class StrategyConfig:
    """An authenticator, voting or execution strategy as configured"""
    address: str
    params: Any = None


class Deployable(ABC):
    """Capability of configs that need an on-chain deployment first"""

    @abstractmethod
    async def deploy(self, client: ITransactionClient, signer: ISigner, controller: str) -> str:
        """Deploy the strategy and return its address"""
        ...


class ParamGenerator(ABC):
    """Capability of configs that encode their own params and metadata"""

    @abstractmethod
    def generate_params(self) -> List[str]:
        ...

    def generate_metadata(self) -> str:
        return "0x00"


@dataclass
class VanillaVotingStrategyConfig(StrategyConfig):
    pass


@dataclass
class CompVotingStrategyConfig(StrategyConfig, ParamGenerator):
    """Comp-style token voting; params is the token address"""
    decimals: int = 18

    def generate_params(self) -> List[str]:
        return [to_checksum_address(self.params)]

    def generate_metadata(self) -> str:
        return "0x" + format(self.decimals, "02x")


@dataclass
class WhitelistVotingStrategyConfig(StrategyConfig, ParamGenerator):
    """Whitelist voting; params is a sequence of (address, power) pairs"""
    params: Sequence[Tuple[str, int]] = field(default_factory=list)

    def generate_params(self) -> List[str]:
        return [encode_whitelist(self.params)]


@dataclass
class VanillaExecutionStrategyConfig(StrategyConfig):
    pass


@dataclass
class AvatarExecutionStrategyConfig(StrategyConfig, Deployable, ParamGenerator):
    """Avatar execution strategy deployed for a Safe"""
    params: Dict[str, Any] = field(default_factory=dict)

    async def deploy(self, client: ITransactionClient, signer: ISigner, controller: str) -> str:
        return await client.deploy_avatar_execution(signer, controller, self.params)

    def generate_params(self) -> List[str]:
        return ["0x"]
