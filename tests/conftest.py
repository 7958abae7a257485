"""
Pytest configuration for governance action tests
"""

import pytest
from unittest.mock import AsyncMock, Mock

from platformq_governance_actions import (
    SupportedAddresses,
    StrategyRegistry,
    VanillaStrategy,
    CompStrategy,
    WhitelistStrategy,
    Space,
    SubmissionResult
)

ETH_SIG_AUTHENTICATOR = "0x" + "a1" * 20
ETH_TX_AUTHENTICATOR = "0x" + "a2" * 20
UNSUPPORTED_AUTHENTICATOR = "0x" + "a3" * 20

VANILLA_STRATEGY = "0x" + "b1" * 20
COMP_STRATEGY = "0x" + "b2" * 20
WHITELIST_STRATEGY = "0x" + "b3" * 20
UNSUPPORTED_STRATEGY = "0x" + "b4" * 20

VANILLA_EXECUTOR = "0x6241b5c89350bb3c465179706cf26050ea32444f"
AVATAR_EXECUTOR = "0x" + "e1" * 20

SPACE_ADDRESS = "0x" + "5a" * 20
SIGNER_ADDRESS = "0x" + "d1" * 20
TARGET = "0x" + "c1" * 20


@pytest.fixture
def supported():
    """Supported addresses used across tests"""
    return SupportedAddresses.create(
        authenticators=[ETH_SIG_AUTHENTICATOR, ETH_TX_AUTHENTICATOR],
        relayer_authenticators=[ETH_SIG_AUTHENTICATOR],
        strategies=[VANILLA_STRATEGY, COMP_STRATEGY, WHITELIST_STRATEGY],
        vanilla_executor=VANILLA_EXECUTOR
    )


@pytest.fixture
def registry():
    """Strategy registry with the default modules at test addresses"""
    registry = StrategyRegistry()
    registry.register(VANILLA_STRATEGY, VanillaStrategy())
    registry.register(COMP_STRATEGY, CompStrategy())
    registry.register(WHITELIST_STRATEGY, WhitelistStrategy())
    return registry


@pytest.fixture
def avatar_space():
    """Space executing through an avatar"""
    return Space(
        id=SPACE_ADDRESS,
        authenticators=[UNSUPPORTED_AUTHENTICATOR, ETH_TX_AUTHENTICATOR],
        strategies=[VANILLA_STRATEGY],
        executors=[AVATAR_EXECUTOR],
        executors_types=["SimpleQuorumAvatar"]
    )


@pytest.fixture
def vanilla_space():
    """Space using the vanilla executor and the relay-capable authenticator"""
    return Space(
        id=SPACE_ADDRESS,
        authenticators=[ETH_SIG_AUTHENTICATOR],
        strategies=[UNSUPPORTED_STRATEGY, VANILLA_STRATEGY, WHITELIST_STRATEGY],
        executors=[VANILLA_EXECUTOR],
        executors_types=["Vanilla"]
    )


@pytest.fixture
def signer():
    """Signer connected to Goerli"""
    mock = Mock()
    mock.address = SIGNER_ADDRESS
    mock.get_chain_id = AsyncMock(return_value=5)
    mock.sign_typed_data = Mock(return_value="0x" + "ab" * 65)
    return mock


@pytest.fixture
def tx_client():
    """Direct transaction client"""
    client = Mock()
    client.deploy_space = AsyncMock(return_value=SubmissionResult(tx_id="0xdeploy"))
    client.deploy_avatar_execution = AsyncMock(return_value="0x" + "e2" * 20)
    client.set_metadata_uri = AsyncMock(return_value=SubmissionResult(tx_id="0xmetadata"))
    client.propose = AsyncMock(return_value=SubmissionResult(tx_id="0xpropose"))
    client.vote = AsyncMock(return_value=SubmissionResult(tx_id="0xvote"))
    client.execute = AsyncMock(return_value=SubmissionResult(tx_id="0xexecute"))
    return client


@pytest.fixture
def relay_client():
    """Gasless relay client"""
    client = Mock()
    client.propose = AsyncMock(return_value={"id": "relayed-propose"})
    client.vote = AsyncMock(return_value={"id": "relayed-vote"})
    client.send = AsyncMock(return_value={"id": "relayed"})
    return client
