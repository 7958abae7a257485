"""
Tests for settings, supported address lookup and data models
"""

import pytest
from pydantic import ValidationError

from platformq_governance_actions import (
    ExecutorRef,
    IndexedStrategy,
    ProposeData,
    Settings,
    Space,
    StrategyRegistry,
    SupportedAddresses,
    VotingPower
)
from platformq_governance_actions.strategies import VanillaStrategy

from conftest import ETH_SIG_AUTHENTICATOR, ETH_TX_AUTHENTICATOR, VANILLA_EXECUTOR


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.CHAIN_ID == 5
        assert settings.MANA_URL == "http://localhost:3000"
        assert settings.VANILLA_EXECUTOR == VANILLA_EXECUTOR

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("GOVERNANCE_MANA_URL", "https://mana.example.org")
        monkeypatch.setenv("GOVERNANCE_CHAIN_ID", "1")

        settings = Settings()

        assert settings.MANA_URL == "https://mana.example.org"
        assert settings.CHAIN_ID == 1

    def test_supported_addresses_from_settings(self):
        settings = Settings()
        supported = SupportedAddresses.from_settings(settings)

        assert supported.is_supported_authenticator(settings.ETH_TX_AUTHENTICATOR)
        assert supported.is_relayer_authenticator(settings.ETH_SIG_AUTHENTICATOR)
        assert not supported.is_relayer_authenticator(settings.ETH_TX_AUTHENTICATOR)
        assert supported.is_supported_strategy(settings.COMP_STRATEGY.upper().replace("0X", "0x"))
        assert supported.is_vanilla_executor(settings.VANILLA_EXECUTOR)

    def test_registry_from_settings(self):
        settings = Settings()
        registry = StrategyRegistry.from_settings(settings)

        assert isinstance(registry.lookup(settings.VANILLA_STRATEGY), VanillaStrategy)
        assert len(registry.get_registered_addresses()) == 3


class TestSupportedAddresses:

    def test_relayers_must_be_supported(self):
        with pytest.raises(ValueError):
            SupportedAddresses.create(
                authenticators=[ETH_TX_AUTHENTICATOR],
                relayer_authenticators=[ETH_SIG_AUTHENTICATOR],
                strategies=[],
                vanilla_executor=VANILLA_EXECUTOR
            )

    def test_immutable(self, supported):
        with pytest.raises(AttributeError):
            supported.vanilla_executor = "0x0"


class TestModels:

    def test_space_executors_must_align(self):
        with pytest.raises(ValidationError):
            Space(id="0x1", executors=[VANILLA_EXECUTOR], executors_types=[])

    def test_propose_data_wire_format(self):
        data = ProposeData(
            space="0x1",
            authenticator=ETH_TX_AUTHENTICATOR,
            strategies=[IndexedStrategy(address="0x2", index=3)],
            executor=ExecutorRef(index=0, address=VANILLA_EXECUTOR),
            execution_params="0x00",
            metadata_uri="ipfs://cid"
        )

        assert data.to_wire() == {
            "space": "0x1",
            "authenticator": ETH_TX_AUTHENTICATOR,
            "strategies": [{"address": "0x2", "index": 3}],
            "executor": {"index": 0, "address": VANILLA_EXECUTOR},
            "executionParams": "0x00",
            "metadataUri": "ipfs://cid"
        }

    def test_voting_power_dict(self):
        power = VotingPower(address="0x1", value=2 ** 200, decimals=18, token="0x2")

        assert power.to_dict() == {"address": "0x1", "value": 2 ** 200, "decimals": 18, "token": "0x2"}
