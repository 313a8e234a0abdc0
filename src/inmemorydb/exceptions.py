"""
Custom exceptions for the in-memory transactional store.
"""

TRANSACTION_NOT_IN_PROGRESS = "Transaction not in progress"
TRANSACTION_ALREADY_IN_PROGRESS = "Transaction already in progress"
NO_TRANSACTION_IN_PROGRESS = "No transaction in progress"


class StoreError(Exception):
    """Base exception for all store-related errors."""
    pass


class IllegalStateError(StoreError):
    """Exception raised when an operation is called in the wrong transaction state."""
    pass


class InvalidTransactionStateError(StoreError):
    """Exception raised when the store's internal state breaks its invariants."""
    pass
