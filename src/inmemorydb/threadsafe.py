"""
Thread-safe variant of the in-memory transactional store.
"""

import threading
from typing import Any, Dict, Optional

from .store import Store
from .transaction import TransactionState


class ThreadSafeStore(Store):
    """
    A Store whose operations are serialised by a single lock.

    The transaction flag and the pending write-set are guarded together,
    so every operation sees and leaves them as a consistent pair. This adds
    no isolation: all threads share the one transaction.
    """

    def __init__(self, lock: Optional[Any] = None) -> None:
        """
        Initialize the store.

        Args:
            lock: Optional lock object to guard the store with.
                  If None, a new RLock is created.
        """
        super().__init__()
        self._lock = lock if lock is not None else threading.RLock()

    def get(self, key: str) -> Optional[int]:
        with self._lock:
            return super().get(key)

    def put(self, key: str, value: int) -> None:
        with self._lock:
            super().put(key, value)

    def begin_transaction(self) -> None:
        with self._lock:
            super().begin_transaction()

    def commit(self) -> None:
        with self._lock:
            super().commit()

    def rollback(self) -> None:
        with self._lock:
            super().rollback()

    @property
    def state(self) -> TransactionState:
        with self._lock:
            return self._state

    def has_active_transaction(self) -> bool:
        with self._lock:
            return super().has_active_transaction()

    def _get_committed_data(self) -> Dict[str, int]:
        with self._lock:
            return super()._get_committed_data()

    def _get_pending_data(self) -> Dict[str, int]:
        with self._lock:
            return super()._get_pending_data()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return super().__contains__(key)

    def __repr__(self) -> str:
        with self._lock:
            return super().__repr__()
