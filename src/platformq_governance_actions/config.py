"""
Governance Actions Configuration
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Iterable

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Adapter settings"""

    SERVICE_NAME: str = "governance-actions"

    # Network
    CHAIN_ID: int = 5
    RPC_URL: str = "http://localhost:8545"

    # Relay (gasless) endpoint
    MANA_URL: str = "http://localhost:3000"
    RELAY_RPC_PATH: str = "/eth_rpc"
    RELAY_TIMEOUT: float = 30.0

    # Execution strategies
    VANILLA_EXECUTOR: str = "0x6241b5c89350bb3c465179706cf26050ea32444f"

    # Authenticators
    ETH_SIG_AUTHENTICATOR: str = "0x328c6f186639f1981dc25eeb16a7d5ac0a6c2b8a"
    ETH_TX_AUTHENTICATOR: str = "0x37315ce75920b653f0f13734c709e199876455c9"

    # Voting strategies
    VANILLA_STRATEGY: str = "0xc1245c5dca7885c73e32294140f1e5d30688c202"
    COMP_STRATEGY: str = "0x0c2de612982efd102803161fc7c74cca15db932c"
    WHITELIST_STRATEGY: str = "0x2c8631584474e750cedf2fb6a904f2e84777aefe"

    class Config:
        env_prefix = "GOVERNANCE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def _lowered(addresses: Iterable[str]) -> FrozenSet[str]:
    return frozenset(address.lower() for address in addresses)


@dataclass(frozen=True)
class SupportedAddresses:
    """
    Immutable lookup of the addresses this adapter can interact with.

    All membership checks are case-insensitive.
    """
    authenticators: FrozenSet[str]
    relayer_authenticators: FrozenSet[str]
    strategies: FrozenSet[str]
    vanilla_executor: str

    @classmethod
    def create(cls, authenticators: Iterable[str], relayer_authenticators: Iterable[str],
               strategies: Iterable[str], vanilla_executor: str) -> "SupportedAddresses":
        authenticators = _lowered(authenticators)
        relayer_authenticators = _lowered(relayer_authenticators)
        if not relayer_authenticators <= authenticators:
            raise ValueError("Relayer authenticators must be a subset of supported authenticators")

        return cls(
            authenticators=authenticators,
            relayer_authenticators=relayer_authenticators,
            strategies=_lowered(strategies),
            vanilla_executor=vanilla_executor.lower()
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupportedAddresses":
        return cls.create(
            authenticators=[settings.ETH_SIG_AUTHENTICATOR, settings.ETH_TX_AUTHENTICATOR],
            relayer_authenticators=[settings.ETH_SIG_AUTHENTICATOR],
            strategies=[
                settings.VANILLA_STRATEGY,
                settings.COMP_STRATEGY,
                settings.WHITELIST_STRATEGY
            ],
            vanilla_executor=settings.VANILLA_EXECUTOR
        )

    def is_supported_authenticator(self, address: str) -> bool:
        return address.lower() in self.authenticators

    def is_relayer_authenticator(self, address: str) -> bool:
        return address.lower() in self.relayer_authenticators

    def is_supported_strategy(self, address: str) -> bool:
        return address.lower() in self.strategies

    def is_vanilla_executor(self, address: str) -> bool:
        return address.lower() == self.vanilla_executor


@lru_cache()
def get_supported_addresses() -> SupportedAddresses:
    """Process-wide supported address set, loaded once from settings"""
    return SupportedAddresses.from_settings(get_settings())
