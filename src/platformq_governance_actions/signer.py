"""
Signer backed by a web3 provider and a local eth-account key.
"""

from typing import Any, Dict

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3


class Web3Signer:
    """Signs with a local account, reads the chain id from the provider"""

    def __init__(self, w3: AsyncWeb3, account: LocalAccount):
        self.w3 = w3
        self.account = account

    @classmethod
    def from_key(cls, w3: AsyncWeb3, private_key: str) -> "Web3Signer":
        return cls(w3, Account.from_key(private_key))

    @property
    def address(self) -> str:
        return self.account.address

    async def get_chain_id(self) -> int:
        return await self.w3.eth.chain_id

    def sign_typed_data(self, domain: Dict[str, Any], types: Dict[str, Any],
                        message: Dict[str, Any]) -> str:
        signed = self.account.sign_typed_data(
            domain_data=domain,
            message_types=types,
            message_data=message
        )
        return "0x" + bytes(signed.signature).hex()
