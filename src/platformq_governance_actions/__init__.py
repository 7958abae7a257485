"""
PlatformQ Governance Actions Library

Builds and routes governance actions (create space, propose, vote, execute)
for on-chain DAO spaces and aggregates voting power across strategies.
"""

from .types import (
    Choice,
    ExecutorType,
    StrategyKind,
    TransactionOperation,
    MetaTransaction,
    ExecutionData,
    SelectedStrategy,
    Selection,
    VotingPower,
    SubmissionResult,
    GovernanceActionError,
    WrongNetworkError,
    UnsupportedSpaceError,
    NoSupportedExecutorError,
    InvalidChoiceError,
    RelayError
)

from .config import Settings, SupportedAddresses, get_settings, get_supported_addresses

from .models import (
    Space,
    Proposal,
    IndexedStrategy,
    ExecutorRef,
    StrategyParams,
    ProposeData,
    VoteData,
    SpaceParams,
    DeploySpaceRequest
)

from .interfaces import (
    ISigner,
    ITransactionClient,
    IRelayClient,
    IExecutionEncoder,
    IStrategyModule,
    IStrategyRegistry
)

from .choices import map_choice, validate_choice
from .selection import pick_authenticator_and_strategies
from .execution import AvatarExecutionEncoder, build_execution
from .voting_power import VotingPowerAggregator, parse_decimals
from .transactions import convert_to_meta_transactions
from .network import verify_network
from .relay import ManaRelayClient
from .signer import Web3Signer
from .strategies import StrategyRegistry, VanillaStrategy, CompStrategy, WhitelistStrategy
from .strategy_config import (
    StrategyConfig,
    Deployable,
    ParamGenerator,
    VanillaVotingStrategyConfig,
    CompVotingStrategyConfig,
    WhitelistVotingStrategyConfig,
    VanillaExecutionStrategyConfig,
    AvatarExecutionStrategyConfig
)
from .actions import EvmActionService, create_actions

__all__ = [
    # Types
    "Choice",
    "ExecutorType",
    "StrategyKind",
    "TransactionOperation",
    "MetaTransaction",
    "ExecutionData",
    "SelectedStrategy",
    "Selection",
    "VotingPower",
    "SubmissionResult",

    # Errors
    "GovernanceActionError",
    "WrongNetworkError",
    "UnsupportedSpaceError",
    "NoSupportedExecutorError",
    "InvalidChoiceError",
    "RelayError",

    # Config
    "Settings",
    "SupportedAddresses",
    "get_settings",
    "get_supported_addresses",

    # Models
    "Space",
    "Proposal",
    "IndexedStrategy",
    "ExecutorRef",
    "StrategyParams",
    "ProposeData",
    "VoteData",
    "SpaceParams",
    "DeploySpaceRequest",

    # Interfaces
    "ISigner",
    "ITransactionClient",
    "IRelayClient",
    "IExecutionEncoder",
    "IStrategyModule",
    "IStrategyRegistry",

    # Core
    "map_choice",
    "validate_choice",
    "pick_authenticator_and_strategies",
    "AvatarExecutionEncoder",
    "build_execution",
    "VotingPowerAggregator",
    "parse_decimals",
    "convert_to_meta_transactions",
    "verify_network",

    # Collaborators
    "ManaRelayClient",
    "Web3Signer",

    # Strategies
    "StrategyRegistry",
    "VanillaStrategy",
    "CompStrategy",
    "WhitelistStrategy",
    "StrategyConfig",
    "Deployable",
    "ParamGenerator",
    "VanillaVotingStrategyConfig",
    "CompVotingStrategyConfig",
    "WhitelistVotingStrategyConfig",
    "VanillaExecutionStrategyConfig",
    "AvatarExecutionStrategyConfig",

    # Actions
    "EvmActionService",
    "create_actions"
]

__version__ = "1.0.0"
