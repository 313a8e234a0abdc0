"""
In-Memory Transactional Store

A Python implementation of an in-memory key-value store with a single
level of transactions: writes are staged and only become visible on commit.
"""

from .store import InMemoryDB, Store
from .threadsafe import ThreadSafeStore
from .transaction import TransactionState
from .exceptions import (
    StoreError,
    IllegalStateError,
    InvalidTransactionStateError,
    TRANSACTION_NOT_IN_PROGRESS,
    TRANSACTION_ALREADY_IN_PROGRESS,
    NO_TRANSACTION_IN_PROGRESS,
)

__version__ = "0.1.0"
__all__ = [
    "InMemoryDB",
    "Store",
    "ThreadSafeStore",
    "TransactionState",
    "StoreError",
    "IllegalStateError",
    "InvalidTransactionStateError",
    "TRANSACTION_NOT_IN_PROGRESS",
    "TRANSACTION_ALREADY_IN_PROGRESS",
    "NO_TRANSACTION_IN_PROGRESS",
]
