"""
Normalization of proposal execution batches into meta-transactions.
"""

from typing import Any, Dict, Sequence, Tuple, Union

from .types import MetaTransaction, TransactionOperation


def _to_int(value: Union[int, str, None]) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, str):
        return int(value, 0)
    return int(value)


def convert_to_meta_transaction(transaction: Dict[str, Any]) -> MetaTransaction:
    """Convert an indexed execution entry into a call meta-transaction"""
    return MetaTransaction(
        to=transaction["to"],
        value=_to_int(transaction.get("value")),
        data=transaction.get("data") or "0x",
        operation=TransactionOperation.CALL,
        salt=_to_int(transaction.get("salt"))
    )


def convert_to_meta_transactions(transactions: Sequence[Dict[str, Any]]) -> Tuple[MetaTransaction, ...]:
    """Convert a proposal's execution batch, keeping execution order"""
    return tuple(convert_to_meta_transaction(tx) for tx in transactions)
