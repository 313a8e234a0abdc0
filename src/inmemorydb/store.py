"""
Main Store class implementation for the in-memory transactional store.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .exceptions import (
    IllegalStateError,
    InvalidTransactionStateError,
    NO_TRANSACTION_IN_PROGRESS,
    TRANSACTION_ALREADY_IN_PROGRESS,
    TRANSACTION_NOT_IN_PROGRESS,
)
from .transaction import TransactionState, WriteSet

logger = logging.getLogger(__name__)


class InMemoryDB(ABC):
    """Abstract interface of a single-level transactional key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[int]:
        """Return the committed value for key, or None if it was never committed."""
        pass

    @abstractmethod
    def put(self, key: str, value: int) -> None:
        """Stage a write in the open transaction."""
        pass

    @abstractmethod
    def begin_transaction(self) -> None:
        """Open a transaction."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Apply the staged writes and close the transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard the staged writes and close the transaction."""
        pass


class Store(InMemoryDB):
    """
    An in-memory key-value store with a single level of transactions.

    Reads only ever see committed data. Writes are staged while a
    transaction is open and become visible all at once on commit, or are
    thrown away on rollback. Only one transaction can be open at a time.

    Example usage:
        store = Store()

        store.get("A")            # None
        store.begin_transaction()
        store.put("A", 5)
        store.get("A")            # still None, not committed
        store.put("A", 6)
        store.commit()
        store.get("A")            # 6

        store.begin_transaction()
        store.put("B", 10)
        store.rollback()
        store.get("B")            # None
    """

    def __init__(self) -> None:
        self._committed_data: Dict[str, int] = {}
        self._pending = WriteSet()
        self._state = TransactionState.IDLE

    def get(self, key: str) -> Optional[int]:
        """
        Get the committed value for a key.

        Uncommitted writes are never returned, even from inside the
        transaction that made them.

        Args:
            key: The key to retrieve

        Returns:
            The committed value, or None if the key has never been committed
        """
        return self._committed_data.get(key)

    def put(self, key: str, value: int) -> None:
        """
        Stage a key-value pair in the current transaction.

        Args:
            key: The key to set
            value: The value to associate with the key

        Raises:
            IllegalStateError: If no transaction is in progress
        """
        if self._state is not TransactionState.OPEN:
            logger.debug("Rejected put of %r: %s", key, TRANSACTION_NOT_IN_PROGRESS)
            raise IllegalStateError(TRANSACTION_NOT_IN_PROGRESS)

        self._pending.put(key, value)

    def begin_transaction(self) -> None:
        """
        Begin a new transaction.

        Raises:
            IllegalStateError: If a transaction is already in progress
            InvalidTransactionStateError: If writes are staged while idle
        """
        if self._state is TransactionState.OPEN:
            logger.debug("Rejected begin: %s", TRANSACTION_ALREADY_IN_PROGRESS)
            raise IllegalStateError(TRANSACTION_ALREADY_IN_PROGRESS)

        # Pending writes must never outlive the transaction that staged them.
        if self._pending:
            raise InvalidTransactionStateError(
                f"{len(self._pending)} staged write(s) found with no open transaction"
            )

        self._state = TransactionState.OPEN
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Commit the current transaction.

        Every staged write is copied into the committed data, overwriting
        existing values, and the transaction is closed.

        Raises:
            IllegalStateError: If no transaction is in progress
        """
        if self._state is not TransactionState.OPEN:
            logger.debug("Rejected commit: %s", NO_TRANSACTION_IN_PROGRESS)
            raise IllegalStateError(NO_TRANSACTION_IN_PROGRESS)

        staged = len(self._pending)
        self._pending.apply_to(self._committed_data)
        self._pending.clear()
        self._state = TransactionState.IDLE
        logger.debug("Transaction committed with %d key(s)", staged)

    def rollback(self) -> None:
        """
        Rollback the current transaction.

        All staged writes are discarded; committed data is left untouched.

        Raises:
            IllegalStateError: If no transaction is in progress
        """
        if self._state is not TransactionState.OPEN:
            logger.debug("Rejected rollback: %s", NO_TRANSACTION_IN_PROGRESS)
            raise IllegalStateError(NO_TRANSACTION_IN_PROGRESS)

        discarded = len(self._pending)
        self._pending.clear()
        self._state = TransactionState.IDLE
        logger.debug("Transaction rolled back, discarded %d key(s)", discarded)

    # Additional utility methods

    @property
    def state(self) -> TransactionState:
        """The current transaction state."""
        return self._state

    def has_active_transaction(self) -> bool:
        """
        Check if there's an open transaction.

        Returns:
            True if a transaction is open, False otherwise
        """
        return self._state is TransactionState.OPEN

    def _get_committed_data(self) -> Dict[str, int]:
        """
        Get the committed data (for testing purposes).

        Returns:
            A copy of the committed data
        """
        return self._committed_data.copy()

    def _get_pending_data(self) -> Dict[str, int]:
        """
        Get the staged writes (for testing purposes).

        Returns:
            A copy of the pending write-set
        """
        return self._pending.copy()

    def __len__(self) -> int:
        return len(self._committed_data)

    def __contains__(self, key: object) -> bool:
        return key in self._committed_data

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._state.value}, "
            f"committed={len(self._committed_data)}, pending={len(self._pending)})"
        )
