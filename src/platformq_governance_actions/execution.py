"""
Execution strategy resolution for proposals.

Resolution is driven by the executor type tags a space declares, never by
probing executor contracts on-chain.
"""

import logging
from typing import Sequence, Tuple

from eth_abi import encode
from eth_utils import to_bytes, to_checksum_address

from .config import SupportedAddresses
from .interfaces import IExecutionEncoder
from .models import Space
from .types import ExecutionData, ExecutorType, MetaTransaction, NoSupportedExecutorError

logger = logging.getLogger(__name__)

AVATAR_EXECUTION_PARAMS_TYPE = "(address,uint256,bytes,uint8,uint256)[]"

VANILLA_EXECUTION_PARAMS: Tuple[str, ...] = ("0x00",)


class AvatarExecutionEncoder:
    """Encodes transaction batches for avatar (Safe module) executors"""

    SUPPORTED_TYPES = frozenset({ExecutorType.SIMPLE_QUORUM_AVATAR.value})

    def encode(self, executor: str, executor_type: str,
               transactions: Sequence[MetaTransaction]) -> ExecutionData:
        if executor_type not in self.SUPPORTED_TYPES:
            raise NoSupportedExecutorError(
                f"Cannot encode execution for executor {executor} of type {executor_type}"
            )

        batch = [
            (
                to_checksum_address(tx.to),
                tx.value,
                to_bytes(hexstr=tx.data),
                int(tx.operation),
                tx.salt
            )
            for tx in transactions
        ]
        encoded = encode([AVATAR_EXECUTION_PARAMS_TYPE], [batch])

        return ExecutionData(executor=executor, execution_params=("0x" + encoded.hex(),))


def build_execution(
    space: Space,
    transactions: Sequence[MetaTransaction],
    encoder: IExecutionEncoder,
    supported: SupportedAddresses
) -> ExecutionData:
    """
    Resolve the executor a proposal targets and its execution parameters.

    An avatar executor declared by the space always wins. Otherwise the
    vanilla executor is used, which carries no transactions.

    Raises:
        NoSupportedExecutorError: If the space has neither executor
    """
    avatar_index = next(
        (
            i for i, executor_type in enumerate(space.executors_types)
            if executor_type == ExecutorType.SIMPLE_QUORUM_AVATAR.value
        ),
        None
    )

    if avatar_index is not None:
        return encoder.encode(
            space.executors[avatar_index],
            space.executors_types[avatar_index],
            transactions
        )

    vanilla = next(
        (executor for executor in space.executors if supported.is_vanilla_executor(executor)),
        None
    )
    if vanilla is not None:
        if transactions:
            logger.warning(
                f"{len(transactions)} transactions will be ignored as vanilla executor is used "
                f"for space {space.id}"
            )
        return ExecutionData(executor=vanilla, execution_params=VANILLA_EXECUTION_PARAMS)

    raise NoSupportedExecutorError()


def find_executor_index(space: Space, executor: str) -> int:
    """Position of an executor in the space's executor list, -1 if absent"""
    executor = executor.lower()
    return next(
        (i for i, address in enumerate(space.executors) if address.lower() == executor),
        -1
    )
