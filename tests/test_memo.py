import math
import unittest

from aqthermo.memo import memoize


class TestMemoize(unittest.TestCase):
    def test_repeated_arguments_hit_the_cache(self):
        calls = []

        def compute(t, p, symbol):
            calls.append((t, p, symbol))
            return t * p

        cached = memoize(compute)
        self.assertEqual(cached(300.0, 2.0, "A"), 600.0)
        self.assertEqual(cached(300.0, 2.0, "A"), 600.0)
        self.assertEqual(cached(300.0, 2.0, "B"), 600.0)
        self.assertEqual(len(calls), 2)
        info = cached.cache_info()
        self.assertEqual((info.hits, info.misses), (1, 2))

        cached.cache_clear()
        cached(300.0, 2.0, "A")
        self.assertEqual(len(calls), 3)

    def test_signed_zero_keys_are_distinct(self):
        calls = []

        def compute(t, p, symbol):
            calls.append((t, p))
            return math.copysign(1.0, p)

        cached = memoize(compute)
        self.assertEqual(cached(300.0, 0.0, "A"), 1.0)
        self.assertEqual(cached(300.0, -0.0, "A"), -1.0)
        self.assertEqual(cached(300.0, 0.0, "A"), 1.0)
        self.assertEqual(len(calls), 2)
        info = cached.cache_info()
        self.assertEqual((info.hits, info.misses), (1, 2))

    def test_arguments_pass_through_unchanged(self):
        seen = []
        cached = memoize(lambda t, p, symbol: seen.append((t, p, symbol)))
        cached(298.15, 1.0e-300, "A")
        self.assertEqual(seen, [(298.15, 1.0e-300, "A")])
        self.assertIsInstance(seen[0][0], float)

    def test_errors_are_not_cached(self):
        calls = []

        def failing(t, p, symbol):
            calls.append(symbol)
            raise KeyError(symbol)

        cached = memoize(failing)
        for _ in range(2):
            with self.assertRaises(KeyError):
                cached(300.0, 1.0, "X")
        self.assertEqual(len(calls), 2)


if __name__ == '__main__':
    unittest.main()
