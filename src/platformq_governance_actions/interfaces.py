"""
Interfaces (protocols) for the collaborators used by governance actions.
Using Python's Protocol for structural subtyping.
"""

from typing import Protocol, Dict, Any, Optional, Sequence
from abc import abstractmethod

from .types import ExecutionData, MetaTransaction, StrategyKind, SubmissionResult
from .models import DeploySpaceRequest, ProposeData, VoteData


class ISigner(Protocol):
    """Handle on the account that signs actions"""

    @property
    @abstractmethod
    def address(self) -> str:
        """Address of the signing account"""
        ...

    @abstractmethod
    async def get_chain_id(self) -> int:
        """Chain id the signer is currently connected to"""
        ...

    @abstractmethod
    def sign_typed_data(self, domain: Dict[str, Any], types: Dict[str, Any],
                        message: Dict[str, Any]) -> str:
        """Sign EIP-712 typed data and return the hex signature"""
        ...


class ITransactionClient(Protocol):
    """Client submitting signed transactions directly to the chain"""

    @abstractmethod
    async def deploy_space(self, signer: ISigner, request: DeploySpaceRequest) -> SubmissionResult:
        ...

    @abstractmethod
    async def deploy_avatar_execution(self, signer: ISigner, controller: str,
                                      params: Dict[str, Any]) -> str:
        """Deploy an avatar execution strategy and return its address"""
        ...

    @abstractmethod
    async def set_metadata_uri(self, signer: ISigner, space: str,
                               metadata_uri: str) -> SubmissionResult:
        ...

    @abstractmethod
    async def propose(self, signer: ISigner, data: ProposeData) -> SubmissionResult:
        ...

    @abstractmethod
    async def vote(self, signer: ISigner, data: VoteData) -> SubmissionResult:
        ...

    @abstractmethod
    async def execute(self, signer: ISigner, space: str, proposal: int,
                      execution_params: str) -> SubmissionResult:
        ...


class IRelayClient(Protocol):
    """Client submitting signed envelopes through a gasless relay"""

    @abstractmethod
    async def propose(self, signer: ISigner, data: ProposeData) -> Dict[str, Any]:
        ...

    @abstractmethod
    async def vote(self, signer: ISigner, data: VoteData) -> Dict[str, Any]:
        ...

    @abstractmethod
    async def send(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        ...


class IExecutionEncoder(Protocol):
    """Encodes a transaction batch for a specific executor family"""

    @abstractmethod
    def encode(self, executor: str, executor_type: str,
               transactions: Sequence[MetaTransaction]) -> ExecutionData:
        ...


class IStrategyModule(Protocol):
    """Voting strategy module computing a voter's power"""

    @property
    @abstractmethod
    def kind(self) -> StrategyKind:
        ...

    @abstractmethod
    async def get_voting_power(self, address: str, voter: str, timestamp: Optional[int],
                               params: Any, provider: Any) -> int:
        ...


class IStrategyRegistry(Protocol):
    """Lookup of voting strategy modules by strategy address"""

    @abstractmethod
    def lookup(self, address: str) -> Optional[IStrategyModule]:
        ...
