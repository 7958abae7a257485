"""
EVM governance actions.

Builds correctly-shaped requests for creating spaces, proposing, voting and
executing, and routes them either through the gasless relay or directly
through the transaction client.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from .choices import map_choice, validate_choice
from .config import SupportedAddresses, get_settings, get_supported_addresses
from .execution import AvatarExecutionEncoder, build_execution, find_executor_index
from .interfaces import (
    IExecutionEncoder,
    IRelayClient,
    ISigner,
    IStrategyRegistry,
    ITransactionClient
)
from .models import (
    DeploySpaceRequest,
    ExecutorRef,
    IndexedStrategy,
    Proposal,
    ProposeData,
    Space,
    SpaceParams,
    StrategyParams,
    VoteData
)
from .network import verify_network
from .relay import ManaRelayClient
from .selection import pick_authenticator_and_strategies
from .strategies import StrategyRegistry
from .strategy_config import Deployable, ParamGenerator, StrategyConfig
from .transactions import convert_to_meta_transactions
from .types import MetaTransaction, Selection, VotingPower
from .voting_power import VotingPowerAggregator

logger = logging.getLogger(__name__)


def _indexed(selection: Selection) -> List[IndexedStrategy]:
    return [
        IndexedStrategy(address=strategy.address, index=strategy.index)
        for strategy in selection.strategies
    ]


class EvmActionService:
    """Governance actions for spaces deployed on an EVM chain"""

    def __init__(
        self,
        provider: Any,
        chain_id: int,
        client: ITransactionClient,
        relay_client: IRelayClient,
        encoder: Optional[IExecutionEncoder] = None,
        registry: Optional[IStrategyRegistry] = None,
        supported: Optional[SupportedAddresses] = None
    ):
        self.provider = provider
        self.chain_id = chain_id
        self.client = client
        self.relay_client = relay_client
        self.encoder = encoder or AvatarExecutionEncoder()
        self.registry = registry or StrategyRegistry.from_settings(get_settings())
        self.supported = supported or get_supported_addresses()
        self.voting_power = VotingPowerAggregator(self.registry, provider)

    async def create_space(self, signer: ISigner, params: SpaceParams) -> Dict[str, str]:
        """Deploy pending execution strategies, then the space itself"""
        await verify_network(signer, self.chain_id)

        execution_addresses = await asyncio.gather(*[
            self._resolve_strategy_address(config, signer, params.controller)
            for config in params.execution_strategies
        ])

        request = DeploySpaceRequest(
            controller=params.controller,
            voting_delay=params.voting_delay,
            min_voting_duration=params.min_voting_duration,
            max_voting_duration=params.max_voting_duration,
            proposal_threshold=params.proposal_threshold,
            quorum=params.quorum,
            authenticators=[config.address for config in params.authenticators],
            voting_strategies=[
                StrategyParams(address=config.address, params=self._first_params(config, "0x"))
                for config in params.voting_strategies
            ],
            voting_strategies_metadata=[
                config.generate_metadata() if isinstance(config, ParamGenerator) else "0x00"
                for config in params.voting_strategies
            ],
            execution_strategies=[
                StrategyParams(address=address, params=self._first_params(config, "0x"))
                for address, config in zip(execution_addresses, params.execution_strategies)
            ],
            metadata_uri=params.metadata_uri
        )

        response = await self.client.deploy_space(signer, request)
        logger.info(f"Space deployment submitted: {response.tx_id}")

        return {"hash": response.tx_id}

    async def _resolve_strategy_address(self, config: StrategyConfig, signer: ISigner,
                                        controller: str) -> str:
        if isinstance(config, Deployable):
            address = await config.deploy(self.client, signer, controller)
            logger.info(f"Deployed {config.__class__.__name__} at {address}")
            return address
        return config.address

    @staticmethod
    def _first_params(config: StrategyConfig, default: str) -> str:
        if isinstance(config, ParamGenerator):
            return config.generate_params()[0]
        return default

    async def set_metadata_uri(self, signer: ISigner, space_id: str, metadata_uri: str):
        await verify_network(signer, self.chain_id)

        return await self.client.set_metadata_uri(signer, space_id, metadata_uri)

    async def propose(self, signer: ISigner, space: Space, cid: str,
                      transactions: Sequence[MetaTransaction]):
        """Submit a proposal carrying an execution batch"""
        await verify_network(signer, self.chain_id)

        selection = pick_authenticator_and_strategies(
            space.authenticators,
            space.strategies,
            self.supported
        )
        execution = build_execution(space, transactions, self.encoder, self.supported)

        data = ProposeData(
            space=space.id,
            authenticator=selection.authenticator,
            strategies=_indexed(selection),
            executor=ExecutorRef(
                index=find_executor_index(space, execution.executor),
                address=execution.executor
            ),
            execution_params=execution.execution_params[0],
            metadata_uri=f"ipfs://{cid}"
        )

        return await self._submit(signer, selection, data, self.relay_client.propose,
                                  self.client.propose)

    async def vote(self, signer: ISigner, proposal: Proposal, choice: int):
        """Cast a vote with a user-facing choice (1 against, 2 for, 3 abstain)"""
        await verify_network(signer, self.chain_id)

        validate_choice(choice)

        selection = pick_authenticator_and_strategies(
            proposal.space.authenticators,
            proposal.strategies,
            self.supported
        )

        data = VoteData(
            space=proposal.space.id,
            authenticator=selection.authenticator,
            strategies=_indexed(selection),
            proposal=proposal.proposal_id,
            choice=map_choice(choice),
            metadata_uri=""
        )

        return await self._submit(signer, selection, data, self.relay_client.vote,
                                  self.client.vote)

    async def _submit(self, signer: ISigner, selection: Selection, data, relayed, direct):
        if selection.use_relay:
            logger.info(f"Relaying {data.__class__.__name__} via {selection.authenticator}")
            return await relayed(signer, data)

        logger.info(f"Submitting {data.__class__.__name__} via {selection.authenticator}")
        return await direct(signer, data)

    def finalize_proposal(self, *args, **kwargs) -> None:
        return None

    def receive_proposal(self, *args, **kwargs) -> None:
        return None

    async def execute_transactions(self, signer: ISigner, proposal: Proposal):
        """Execute a passed proposal's transactions"""
        await verify_network(signer, self.chain_id)

        execution = build_execution(
            proposal.space,
            convert_to_meta_transactions(proposal.execution),
            self.encoder,
            self.supported
        )

        return await self.client.execute(
            signer,
            proposal.space.id,
            proposal.proposal_id,
            execution.execution_params[0]
        )

    async def send(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        return await self.relay_client.send(envelope)

    async def get_voting_power(
        self,
        strategies_addresses: Sequence[str],
        strategies_params: Sequence[Any],
        strategies_metadata: Sequence[Optional[str]],
        voter_address: str,
        timestamp: Optional[int]
    ) -> List[VotingPower]:
        return await self.voting_power.get_voting_power(
            strategies_addresses,
            strategies_params,
            strategies_metadata,
            voter_address,
            timestamp
        )

    async def get_space_voting_power(self, space: Space, voter_address: str,
                                     timestamp: Optional[int]) -> List[VotingPower]:
        """Voting power under every strategy of a space, using its indexed params and metadata"""
        return await self.get_voting_power(
            space.strategies,
            space.strategies_params,
            space.strategies_metadata,
            voter_address,
            timestamp
        )


def create_actions(provider: Any, chain_id: int, client: ITransactionClient,
                   relay_client: Optional[IRelayClient] = None) -> EvmActionService:
    """Create actions wired with the configured relay, registry and supported addresses"""
    settings = get_settings()

    if relay_client is None:
        relay_client = ManaRelayClient(
            mana_url=settings.MANA_URL,
            chain_id=chain_id,
            rpc_path=settings.RELAY_RPC_PATH,
            timeout=settings.RELAY_TIMEOUT
        )

    return EvmActionService(
        provider=provider,
        chain_id=chain_id,
        client=client,
        relay_client=relay_client,
        encoder=AvatarExecutionEncoder(),
        registry=StrategyRegistry.from_settings(settings),
        supported=get_supported_addresses()
    )
