import threading
import time
import unittest

import numpy as np

import cachematrix


class TestConcurrentCacheSolve(unittest.TestCase):
    def test_concurrent_callers_compute_once(self):
        calls = []
        calls_lock = threading.Lock()

        def slow_solver(a):
            with calls_lock:
                calls.append(a)
            time.sleep(0.05)
            return np.linalg.inv(a)

        cache_solve = cachematrix.make_cache_solve(slow_solver)
        cache = cachematrix.CacheMatrix(np.array([[4.0, 7.0], [2.0, 6.0]]), reuse_tolerance=None)
        results = []
        errors = []
        start = threading.Barrier(8)

        def worker():
            try:
                start.wait()
                results.append(cache_solve(cache))
            except Exception as exc:  # pragma: no cover - surfaced below
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertEqual(len(calls), 1)
        self.assertEqual(len(results), 8)
        for r in results:
            self.assertIs(r, results[0])

    def test_solver_may_reenter_cache(self):
        cache = cachematrix.CacheMatrix(np.eye(2), reuse_tolerance=None)

        def solver(a):
            # Runs while cache_solve holds the cache lock.
            self.assertIsNone(cache.get_cached_inverse())
            cache.set_cached_inverse(None)
            return np.linalg.inv(a)

        inv = cachematrix.make_cache_solve(solver)(cache)
        self.assertIs(cache.get_cached_inverse(), inv)


if __name__ == "__main__":
    unittest.main()
