"""
Gasless relay client.

Envelopes are signed as EIP-712 typed data by the signer and forwarded to the
relay over JSON-RPC, the relay then submits them on the voter's behalf.
"""

import logging
import secrets
from typing import Any, Dict, List, Optional

import httpx
from eth_utils import to_checksum_address

from .interfaces import ISigner
from .models import IndexedStrategy, ProposeData, VoteData
from .types import RelayError

logger = logging.getLogger(__name__)

DOMAIN_NAME = "snapshot-x"
DOMAIN_VERSION = "1"

STRATEGY_TYPES = {
    "Strategy": [
        {"name": "addr", "type": "address"},
        {"name": "params", "type": "bytes"}
    ],
    "IndexedStrategy": [
        {"name": "index", "type": "uint8"},
        {"name": "params", "type": "bytes"}
    ]
}

PROPOSE_TYPES = {
    "Propose": [
        {"name": "space", "type": "address"},
        {"name": "author", "type": "address"},
        {"name": "metadataUri", "type": "string"},
        {"name": "executionStrategy", "type": "Strategy"},
        {"name": "userVotingStrategies", "type": "IndexedStrategy[]"},
        {"name": "salt", "type": "uint256"}
    ],
    **STRATEGY_TYPES
}

VOTE_TYPES = {
    "Vote": [
        {"name": "space", "type": "address"},
        {"name": "voter", "type": "address"},
        {"name": "proposalId", "type": "uint256"},
        {"name": "choice", "type": "uint8"},
        {"name": "userVotingStrategies", "type": "IndexedStrategy[]"},
        {"name": "voteMetadataUri", "type": "string"}
    ],
    "IndexedStrategy": STRATEGY_TYPES["IndexedStrategy"]
}


def _indexed_strategies(strategies: List[IndexedStrategy]) -> List[Dict[str, Any]]:
    return [{"index": strategy.index, "params": "0x"} for strategy in strategies]


class ManaRelayClient:
    """JSON-RPC client for the relay service"""

    def __init__(self, mana_url: str = "http://localhost:3000", chain_id: int = 5,
                 rpc_path: str = "/eth_rpc", timeout: float = 30.0,
                 client: Optional[httpx.AsyncClient] = None):
        self.mana_url = mana_url
        self.chain_id = chain_id
        self.rpc_path = rpc_path
        self.client = client or httpx.AsyncClient(base_url=mana_url, timeout=timeout)

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self) -> "ManaRelayClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _domain(self, verifying_contract: str) -> Dict[str, Any]:
        return {
            "name": DOMAIN_NAME,
            "version": DOMAIN_VERSION,
            "chainId": self.chain_id,
            "verifyingContract": to_checksum_address(verifying_contract)
        }

    def _sign(self, signer: ISigner, verifying_contract: str, types: Dict[str, Any],
              message: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
        domain = self._domain(verifying_contract)
        signature = signer.sign_typed_data(domain, types, message)

        return {
            "signatureData": {
                "address": signer.address,
                "signature": signature,
                "domain": domain,
                "types": types,
                "message": message
            },
            "data": data
        }

    async def propose(self, signer: ISigner, data: ProposeData) -> Dict[str, Any]:
        """Sign a proposal and relay it"""
        message = {
            "space": to_checksum_address(data.space),
            "author": signer.address,
            "metadataUri": data.metadata_uri,
            "executionStrategy": {
                "addr": to_checksum_address(data.executor.address),
                "params": data.execution_params
            },
            "userVotingStrategies": _indexed_strategies(data.strategies),
            "salt": secrets.randbits(256)
        }
        envelope = self._sign(signer, data.authenticator, PROPOSE_TYPES, message, data.to_wire())
        return await self.send(envelope)

    async def vote(self, signer: ISigner, data: VoteData) -> Dict[str, Any]:
        """Sign a vote and relay it"""
        message = {
            "space": to_checksum_address(data.space),
            "voter": signer.address,
            "proposalId": data.proposal,
            "choice": data.choice,
            "userVotingStrategies": _indexed_strategies(data.strategies),
            "voteMetadataUri": data.metadata_uri
        }
        envelope = self._sign(signer, data.authenticator, VOTE_TYPES, message, data.to_wire())
        return await self.send(envelope)

    async def send(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        """Forward a signed envelope to the relay"""
        response = await self.client.post(
            self.rpc_path,
            json={
                "jsonrpc": "2.0",
                "method": "send",
                "params": {"envelope": envelope},
                "id": None
            }
        )
        response.raise_for_status()

        body = response.json()
        if body.get("error"):
            error = body["error"]
            logger.error(f"Relay rejected envelope: {error}")
            raise RelayError(error.get("message", "Relay error"), code=error.get("code"))

        logger.info(f"Envelope relayed via {self.mana_url}")
        return body.get("result", {})
