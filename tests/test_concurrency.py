"""
Concurrency and stress tests for the dictionary.
"""

import random
import threading

from helpers import assert_invariants
from olelo import Dictionary, Entry
from olelo.models.sortedcontainers import BalancedTree


class TestHighConcurrency:
    """Threaded stress tests against the locking facade."""

    def test_many_concurrent_writers(self):
        """Test many concurrent insert operations."""
        tree = BalancedTree()
        dictionary = Dictionary(container=tree)

        def writer(writer_id: int, count: int) -> None:
            for i in range(count):
                dictionary.insert(
                    Entry(key=f"writer{writer_id}_key{i:03d}", translation=f"value {i}")
                )

        threads = [threading.Thread(target=writer, args=(i, 200)) for i in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(dictionary) == 2000
        assert_invariants(tree)
        for writer_id in range(10):
            assert dictionary.member(f"writer{writer_id}_key199")

    def test_competing_duplicate_writers(self):
        """Test that exactly one of several writers of the same key wins."""
        dictionary = Dictionary()
        results: list[bool] = []
        results_lock = threading.Lock()

        def writer(writer_id: int) -> None:
            added = dictionary.insert(Entry(key="Aloha", translation=f"writer {writer_id}"))
            with results_lock:
                results.append(added)

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1
        assert len(dictionary.with_word("writer")) == 1

    def test_mixed_workload(self):
        """Test readers running alongside writers."""
        dictionary = Dictionary()
        for i in range(0, 1000, 2):
            dictionary.insert(Entry(key=f"key{i:04d}", translation=f"initial {i}"))

        errors: list[str] = []

        def writer() -> None:
            for i in range(1, 1000, 2):
                dictionary.insert(Entry(key=f"key{i:04d}", translation=f"later {i}"))

        def reader(seed: int) -> None:
            rng = random.Random(seed)
            for _ in range(500):
                key = f"key{rng.randrange(0, 1000, 2):04d}"
                if dictionary.search(key) is None:
                    errors.append(f"missing {key}")
                before = dictionary.predecessor(key)
                after = dictionary.successor(key)
                if before is not None and before.key >= key:
                    errors.append(f"bad predecessor for {key}")
                if after is not None and after.key <= key:
                    errors.append(f"bad successor for {key}")

        threads = [threading.Thread(target=writer)]
        threads += [threading.Thread(target=reader, args=(seed,)) for seed in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(dictionary) == 1000
        keys = [entry.key for entry in dictionary.entries()]
        assert keys == sorted(keys)
