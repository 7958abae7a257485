"""
Network verification for state-mutating actions.
"""

import logging

from .interfaces import ISigner
from .types import WrongNetworkError

logger = logging.getLogger(__name__)


async def verify_network(signer: ISigner, chain_id: int) -> None:
    """
    Ensure the signer is connected to the expected chain.

    Raises:
        WrongNetworkError: If the signer's chain id differs
    """
    actual = await signer.get_chain_id()
    if int(actual) != chain_id:
        logger.warning(f"Signer {signer.address} is on chain {actual}, expected {chain_id}")
        raise WrongNetworkError(expected=chain_id, actual=int(actual))
