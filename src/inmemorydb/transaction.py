"""
Transaction state and pending write-set for the in-memory store.
"""

from enum import Enum
from typing import Dict


class TransactionState(Enum):
    """Transaction state enumeration."""
    IDLE = "idle"
    OPEN = "open"


class WriteSet:
    """Writes staged by the open transaction, keyed by the last value put."""

    def __init__(self) -> None:
        self.changes: Dict[str, int] = {}

    def put(self, key: str, value: int) -> None:
        """Stage a value for key, replacing any earlier staged value."""
        self.changes[key] = value

    def apply_to(self, target: Dict[str, int]) -> None:
        """Merge every staged change into target."""
        target.update(self.changes)

    def clear(self) -> None:
        self.changes.clear()

    def copy(self) -> Dict[str, int]:
        return self.changes.copy()

    def __len__(self) -> int:
        return len(self.changes)

    def __bool__(self) -> bool:
        return bool(self.changes)
