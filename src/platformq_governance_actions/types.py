"""
Core types, enums and errors for governance actions.
"""

from enum import Enum, IntEnum
from typing import Optional, Dict, Any, Tuple
from dataclasses import dataclass, field


class Choice(IntEnum):
    """User-facing vote choices (1-indexed)"""
    AGAINST = 1
    FOR = 2
    ABSTAIN = 3


class ExecutorType(str, Enum):
    """Execution strategy type tags declared by a space"""
    SIMPLE_QUORUM_AVATAR = "SimpleQuorumAvatar"
    SIMPLE_QUORUM_TIMELOCK = "SimpleQuorumTimelock"
    VANILLA = "Vanilla"


class StrategyKind(str, Enum):
    """Voting strategy module families"""
    VANILLA = "vanilla"
    COMP = "comp"
    WHITELIST = "whitelist"


class TransactionOperation(IntEnum):
    """Operation kind of a meta-transaction"""
    CALL = 0
    DELEGATE_CALL = 1


@dataclass(frozen=True)
class MetaTransaction:
    """One atomic call inside a proposal's execution batch"""
    to: str
    value: int = 0
    data: str = "0x"
    operation: int = TransactionOperation.CALL
    salt: int = 0

    def as_tuple(self) -> Tuple[str, int, str, int, int]:
        return (self.to, self.value, self.data, int(self.operation), self.salt)


@dataclass(frozen=True)
class ExecutionData:
    """Resolved executor and its encoded execution parameters"""
    executor: str
    execution_params: Tuple[str, ...]


@dataclass(frozen=True)
class SelectedStrategy:
    """A supported voting strategy and its index in the space's list"""
    address: str
    index: int

    def to_dict(self) -> Dict[str, Any]:
        return {"address": self.address, "index": self.index}


@dataclass(frozen=True)
class Selection:
    """Outcome of authenticator/strategy selection for a space"""
    authenticator: str
    use_relay: bool
    strategies: Tuple[SelectedStrategy, ...]


@dataclass(frozen=True)
class VotingPower:
    """Voting power of a voter under a single strategy"""
    address: str
    value: int
    decimals: int = 0
    token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting the token when unknown"""
        result = {
            "address": self.address,
            "value": self.value,
            "decimals": self.decimals,
        }
        if self.token is not None:
            result["token"] = self.token
        return result


@dataclass
class SubmissionResult:
    """Result of a signed submission or relayed envelope"""
    tx_id: str
    raw: Dict[str, Any] = field(default_factory=dict)


class GovernanceActionError(Exception):
    """Base exception for governance actions"""
    error_code = "GOVERNANCE_ACTION_ERROR"

    def __init__(self, message: str, chain_id: Optional[int] = None,
                 error_code: Optional[str] = None):
        self.chain_id = chain_id
        if error_code is not None:
            self.error_code = error_code
        super().__init__(message)


class WrongNetworkError(GovernanceActionError):
    """Signer is connected to a different chain than the adapter"""
    error_code = "WRONG_NETWORK"

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Wrong network: expected chain {expected}, got {actual}",
            chain_id=expected
        )


class UnsupportedSpaceError(GovernanceActionError):
    """Space has no supported authenticator or voting strategy"""
    error_code = "UNSUPPORTED_SPACE"

    def __init__(self, message: str = "Unsupported space"):
        super().__init__(message)


class NoSupportedExecutorError(GovernanceActionError):
    """No supported execution strategy configured for a space"""
    error_code = "NO_SUPPORTED_EXECUTOR"

    def __init__(self, message: str = "No supported executor configured for this space"):
        super().__init__(message)


class InvalidChoiceError(GovernanceActionError):
    """Vote choice is outside of the accepted range"""
    error_code = "INVALID_CHOICE"

    def __init__(self, choice: Any):
        self.choice = choice
        super().__init__(f"Invalid choice: {choice}")


class RelayError(GovernanceActionError):
    """Relay answered with an error"""
    error_code = "RELAY_ERROR"

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)
