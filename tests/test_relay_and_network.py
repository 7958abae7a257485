"""
Tests for the relay client, network verification and signer
"""

import json

import httpx
import pytest
from unittest.mock import AsyncMock, Mock
from eth_account import Account
from eth_account.messages import encode_typed_data

from platformq_governance_actions import (
    ExecutorRef,
    IndexedStrategy,
    ManaRelayClient,
    ProposeData,
    RelayError,
    VoteData,
    Web3Signer,
    WrongNetworkError,
    verify_network
)

from conftest import ETH_SIG_AUTHENTICATOR, SPACE_ADDRESS, VANILLA_EXECUTOR, VANILLA_STRATEGY


def make_relay(handler, requests):
    def _record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    client = httpx.AsyncClient(
        base_url="http://mana.test",
        transport=httpx.MockTransport(_record)
    )
    return ManaRelayClient(mana_url="http://mana.test", chain_id=5, client=client)


def ok(request):
    return httpx.Response(200, json={"jsonrpc": "2.0", "result": {"id": "0xrelayed"}, "id": None})


@pytest.fixture
def vote_data():
    return VoteData(
        space=SPACE_ADDRESS,
        authenticator=ETH_SIG_AUTHENTICATOR,
        strategies=[IndexedStrategy(address=VANILLA_STRATEGY, index=1)],
        proposal=3,
        choice=0
    )


class TestManaRelayClient:
    """Test relayed submissions"""

    @pytest.mark.asyncio
    async def test_send_posts_json_rpc(self):
        requests = []
        relay = make_relay(ok, requests)

        result = await relay.send({"data": {"space": SPACE_ADDRESS}})

        assert result == {"id": "0xrelayed"}
        body = json.loads(requests[0].content)
        assert requests[0].url.path == "/eth_rpc"
        assert body["method"] == "send"
        assert body["params"]["envelope"] == {"data": {"space": SPACE_ADDRESS}}

    @pytest.mark.asyncio
    async def test_vote_signs_envelope(self, signer, vote_data):
        requests = []
        relay = make_relay(ok, requests)

        await relay.vote(signer, vote_data)

        envelope = json.loads(requests[0].content)["params"]["envelope"]
        signature_data = envelope["signatureData"]
        assert signature_data["signature"] == "0x" + "ab" * 65
        assert signature_data["domain"]["chainId"] == 5
        assert signature_data["domain"]["verifyingContract"].lower() == ETH_SIG_AUTHENTICATOR
        assert signature_data["message"]["choice"] == 0
        assert signature_data["message"]["userVotingStrategies"] == [{"index": 1, "params": "0x"}]
        assert envelope["data"]["proposal"] == 3
        assert envelope["data"]["metadataUri"] == ""

        domain, types, message = signer.sign_typed_data.call_args[0]
        assert "Vote" in types
        assert message["proposalId"] == 3

    @pytest.mark.asyncio
    async def test_propose_signs_envelope(self, signer):
        requests = []
        relay = make_relay(ok, requests)
        data = ProposeData(
            space=SPACE_ADDRESS,
            authenticator=ETH_SIG_AUTHENTICATOR,
            strategies=[IndexedStrategy(address=VANILLA_STRATEGY, index=0)],
            executor=ExecutorRef(index=0, address=VANILLA_EXECUTOR),
            execution_params="0x00",
            metadata_uri="ipfs://bafy"
        )

        await relay.propose(signer, data)

        envelope = json.loads(requests[0].content)["params"]["envelope"]
        assert envelope["data"]["executionParams"] == "0x00"
        assert envelope["data"]["executor"] == {"index": 0, "address": VANILLA_EXECUTOR}
        assert envelope["signatureData"]["message"]["metadataUri"] == "ipfs://bafy"
        assert envelope["signatureData"]["message"]["executionStrategy"]["params"] == "0x00"

    @pytest.mark.asyncio
    async def test_rpc_error(self):
        def rejected(request):
            return httpx.Response(200, json={
                "jsonrpc": "2.0",
                "error": {"code": -32000, "message": "Invalid signature"},
                "id": None
            })

        relay = make_relay(rejected, [])

        with pytest.raises(RelayError) as exc_info:
            await relay.send({})

        assert exc_info.value.code == -32000
        assert "Invalid signature" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_http_error_bubbles(self):
        relay = make_relay(lambda request: httpx.Response(502), [])

        with pytest.raises(httpx.HTTPStatusError):
            await relay.send({})


class TestVerifyNetwork:

    @pytest.mark.asyncio
    async def test_matching_chain(self, signer):
        await verify_network(signer, 5)

    @pytest.mark.asyncio
    async def test_wrong_chain(self, signer):
        signer.get_chain_id = AsyncMock(return_value=1)

        with pytest.raises(WrongNetworkError) as exc_info:
            await verify_network(signer, 5)

        assert exc_info.value.expected == 5
        assert exc_info.value.actual == 1


class FakeEth:
    @property
    def chain_id(self):
        async def _chain_id():
            return 5
        return _chain_id()


class TestWeb3Signer:

    @pytest.mark.asyncio
    async def test_chain_id_from_provider(self):
        w3 = Mock()
        w3.eth = FakeEth()
        signer = Web3Signer.from_key(w3, "0x" + "11" * 32)

        assert await signer.get_chain_id() == 5

    def test_signature_recovers_to_signer(self):
        signer = Web3Signer.from_key(Mock(), "0x" + "11" * 32)
        domain = {"name": "snapshot-x", "version": "1", "chainId": 5,
                  "verifyingContract": Account.from_key("0x" + "22" * 32).address}
        types = {"Ballot": [{"name": "voter", "type": "address"}, {"name": "choice", "type": "uint8"}]}
        message = {"voter": signer.address, "choice": 1}

        signature = signer.sign_typed_data(domain, types, message)

        signable = encode_typed_data(domain_data=domain, message_types=types, message_data=message)
        assert Account.recover_message(signable, signature=signature) == signer.address
