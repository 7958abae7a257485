"""
Data models for spaces, proposals and action envelopes.
"""

from typing import Optional, Dict, Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Space(BaseModel):
    """On-chain configuration of a governance space"""
    model_config = ConfigDict(frozen=True)

    id: str
    authenticators: List[str] = Field(default_factory=list)
    strategies: List[str] = Field(default_factory=list)
    strategies_params: List[Any] = Field(default_factory=list)
    strategies_metadata: List[Optional[str]] = Field(default_factory=list)
    executors: List[str] = Field(default_factory=list)
    executors_types: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_executors_aligned(self):
        if len(self.executors) != len(self.executors_types):
            raise ValueError(
                f"executors ({len(self.executors)}) and executors_types "
                f"({len(self.executors_types)}) must have the same length"
            )
        return self


class Proposal(BaseModel):
    """A proposal as indexed for a space"""
    model_config = ConfigDict(frozen=True)

    proposal_id: int
    space: Space
    strategies: List[str] = Field(default_factory=list)
    execution: List[Dict[str, Any]] = Field(default_factory=list)


class EnvelopeModel(BaseModel):
    """Base for payloads sent to clients, camelCase on the wire"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class IndexedStrategy(EnvelopeModel):
    address: str
    index: int


class ExecutorRef(EnvelopeModel):
    """Executor chosen for a proposal and its position in the space's list"""
    index: int
    address: str


class StrategyParams(EnvelopeModel):
    """Strategy address with its encoded parameters"""
    address: str
    params: str


class ProposeData(EnvelopeModel):
    space: str
    authenticator: str
    strategies: List[IndexedStrategy]
    executor: ExecutorRef
    execution_params: str
    metadata_uri: str


class VoteData(EnvelopeModel):
    space: str
    authenticator: str
    strategies: List[IndexedStrategy]
    proposal: int
    choice: int
    metadata_uri: str = ""


class SpaceParams(BaseModel):
    """Parameters for deploying a new space"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    controller: str
    voting_delay: int = 0
    min_voting_duration: int = 0
    max_voting_duration: int = 0
    proposal_threshold: int = 0
    quorum: int = 0
    authenticators: List[Any] = Field(default_factory=list)
    voting_strategies: List[Any] = Field(default_factory=list)
    execution_strategies: List[Any] = Field(default_factory=list)
    metadata_uri: str = ""


class DeploySpaceRequest(EnvelopeModel):
    """Normalized space deployment request handed to the transaction client"""
    controller: str
    voting_delay: int
    min_voting_duration: int
    max_voting_duration: int
    proposal_threshold: int
    quorum: int
    authenticators: List[str]
    voting_strategies: List[StrategyParams]
    voting_strategies_metadata: List[str]
    execution_strategies: List[StrategyParams]
    metadata_uri: str
