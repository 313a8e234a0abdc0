#!/usr/bin/env python3
"""
Example usage of the in-memory transactional store.
"""

import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from inmemorydb import Store, IllegalStateError


def main():
    """Walk through every transition and failure path once."""
    print("=== In-Memory Transactional Store Demo ===\n")

    store = Store()
    print("1. Store initialized")

    print("\n2. Writes need a transaction:")
    print(f"   - Get A: {store.get('A')}")
    try:
        store.put("A", 5)
    except IllegalStateError as e:
        print(f"   - put A=5 rejected: {e}")

    print("\n3. Staged writes stay hidden until commit:")
    store.begin_transaction()
    print("   - Transaction started")
    store.put("A", 5)
    print(f"   - Put A=5, get A: {store.get('A')}")
    store.put("A", 6)
    store.commit()
    print(f"   - Put A=6 and committed, get A: {store.get('A')}")

    print("\n4. Commit and rollback need an open transaction:")
    try:
        store.commit()
    except IllegalStateError as e:
        print(f"   - commit rejected: {e}")
    try:
        store.rollback()
    except IllegalStateError as e:
        print(f"   - rollback rejected: {e}")

    print("\n5. Rollback demonstration:")
    print(f"   - Get B: {store.get('B')}")
    store.begin_transaction()
    store.put("B", 10)
    print("   - Put B=10")
    store.rollback()
    print(f"   - Rolled back, get B: {store.get('B')}")

    print("\n=== Demo completed successfully! ===")


if __name__ == "__main__":
    main()
