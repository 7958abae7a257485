"""
Authenticator and voting strategy selection for a space.
"""

import logging
from typing import Sequence

from .config import SupportedAddresses
from .types import SelectedStrategy, Selection, UnsupportedSpaceError

logger = logging.getLogger(__name__)


def pick_authenticator_and_strategies(
    authenticators: Sequence[str],
    strategies: Sequence[str],
    supported: SupportedAddresses
) -> Selection:
    """
    Choose how to interact with a space.

    The first supported authenticator in the space's order is used, while
    every supported voting strategy is kept together with its original index.

    Args:
        authenticators: Authenticators registered on the space
        strategies: Voting strategies registered on the space (or proposal)
        supported: Addresses this adapter can work with

    Returns:
        Selected authenticator, relay eligibility and indexed strategies

    Raises:
        UnsupportedSpaceError: If no authenticator or no strategy is supported
    """
    authenticator = next(
        (address for address in authenticators if supported.is_supported_authenticator(address)),
        None
    )

    selected = tuple(
        SelectedStrategy(address=address, index=index)
        for index, address in enumerate(strategies)
        if supported.is_supported_strategy(address)
    )

    if authenticator is None or not selected:
        logger.debug(
            f"No usable configuration: authenticators={list(authenticators)} "
            f"strategies={list(strategies)}"
        )
        raise UnsupportedSpaceError()

    return Selection(
        authenticator=authenticator,
        use_relay=supported.is_relayer_authenticator(authenticator),
        strategies=selected
    )
