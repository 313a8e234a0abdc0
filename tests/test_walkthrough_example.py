"""
Test the reference walk-through (A committed, B rolled back).
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from inmemorydb import Store, ThreadSafeStore, IllegalStateError


@pytest.fixture(params=[Store, ThreadSafeStore])
def store(request):
    return request.param()


class TestWalkthroughExample:
    """Test the exact scenario the demo driver runs."""

    def test_walkthrough_step_by_step(self, store):
        """
        Test the exact sequence:
        get A, put A outside a transaction, begin, put A=5, get A,
        put A=6, commit, get A, commit, rollback, get B, begin,
        put B=10, rollback, get B
        """
        # Step 1: nothing committed yet
        assert store.get("A") is None

        # Step 2: put outside a transaction fails
        with pytest.raises(IllegalStateError) as exc_info:
            store.put("A", 5)
        assert str(exc_info.value) == "Transaction not in progress"

        # Step 3: staged writes are not visible
        store.begin_transaction()
        store.put("A", 5)
        assert store.get("A") is None

        # Step 4: last write wins on commit
        store.put("A", 6)
        store.commit()
        assert store.get("A") == 6

        # Step 5: commit and rollback with nothing open
        with pytest.raises(IllegalStateError) as exc_info:
            store.commit()
        assert str(exc_info.value) == "No transaction in progress"

        with pytest.raises(IllegalStateError) as exc_info:
            store.rollback()
        assert str(exc_info.value) == "No transaction in progress"

        # Step 6: rolled back write never appears
        assert store.get("B") is None
        store.begin_transaction()
        store.put("B", 10)
        store.rollback()
        assert store.get("B") is None

        assert store._get_committed_data() == {"A": 6}
        assert not store.has_active_transaction()

    def test_walkthrough_with_nested_begin(self, store):
        """Test the walk-through extended with a rejected nested begin."""
        store.begin_transaction()
        store.put("A", 5)

        with pytest.raises(IllegalStateError) as exc_info:
            store.begin_transaction()
        assert str(exc_info.value) == "Transaction already in progress"

        # The original transaction is still open and intact
        store.put("A", 6)
        store.commit()
        assert store.get("A") == 6
