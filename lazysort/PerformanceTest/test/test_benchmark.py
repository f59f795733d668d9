# test/test_benchmark.py

import unittest
import warnings

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from lazysort.PerformanceTest.benchmark import (benchmark_first_k, count_first_k,
                                                growth_exponent, plot_comparisons)
from lazysort.PerformanceTest.distributions import DISTRIBUTIONS, clustered, generate


class TestDistributions(unittest.TestCase):

    def test_lengths_and_types(self):
        for name in DISTRIBUTIONS:
            values = generate(name, 50, seed=1)
            self.assertEqual(len(values), 50, msg=name)
            self.assertTrue(all(isinstance(v, int) for v in values), msg=name)
            self.assertEqual(generate(name, 0, seed=1), [], msg=name)

    def test_seeded_reproducible(self):
        self.assertEqual(generate("random", 100, seed=3), generate("random", 100, seed=3))
        self.assertEqual(sorted(generate("random", 100, seed=3)), list(range(100)))

    def test_shapes(self):
        self.assertEqual(generate("ascending", 4), [0, 1, 2, 3])
        self.assertEqual(generate("descending", 4), [3, 2, 1, 0])
        self.assertLessEqual(len(set(generate("few_unique", 200, seed=0))), 4)

    def test_clustered_in_range(self):
        values = clustered(500, k=3, value_range=(10, 60), std_dev=5.0, seed=11)
        self.assertTrue(all(10 <= v <= 60 for v in values))

    def test_unknown_distribution(self):
        with self.assertRaises(ValueError):
            generate("zipf", 10)
        with self.assertRaises(ValueError):
            generate("random", -1)


class TestBenchmark(unittest.TestCase):

    def test_count_first_k(self):
        items = generate("random", 500, seed=5)
        for method in ("lazy", "lazy_partition", "builtin"):
            prefix, comparisons, elapsed = count_first_k(items, 5, method)
            self.assertEqual(prefix, [0, 1, 2, 3, 4], msg=method)
            self.assertGreater(comparisons, 0)
            self.assertGreaterEqual(elapsed, 0.0)

    def test_count_first_k_unknown_method(self):
        with self.assertRaises(ValueError):
            count_first_k([1, 2], 1, "heap")

    def test_count_first_k_negative_k(self):
        for method in ("lazy", "lazy_partition", "builtin"):
            with self.assertRaises(ValueError, msg=method):
                count_first_k([3, 1, 2], -1, method)
        with self.assertRaises(ValueError):
            benchmark_first_k([10], ks=[-2], methods=("builtin",))

    def test_descending_worst_case_count(self):
        _, comparisons, _ = count_first_k(generate("descending", 40), 40, "lazy")
        self.assertEqual(comparisons, 40 * 39 // 2)

    def test_benchmark_frame(self):
        df = benchmark_first_k([200, 800], ks=[1, 10], seed=0)
        self.assertEqual(list(df.columns),
                         ["n", "k", "distribution", "method", "comparisons", "time_s"])
        self.assertEqual(len(df), 2 * 2 * 3)
        self.assertEqual(set(df["method"]), {"lazy", "lazy_partition", "builtin"})

        row = df[(df["n"] == 800) & (df["k"] == 1)].set_index("method")
        self.assertLess(row.loc["lazy", "comparisons"], row.loc["builtin", "comparisons"])

    def test_k_larger_than_n_clamped(self):
        with self.assertWarns(RuntimeWarning):
            df = benchmark_first_k([5], ks=[10], methods=("lazy",))
        self.assertEqual(df["k"].tolist(), [5])

    def test_growth_exponent(self):
        df = benchmark_first_k([250, 500, 1000, 2000], ks=[1], distribution="ascending",
                               methods=("lazy", "builtin"))
        fits = growth_exponent(df).set_index("method")
        self.assertEqual(set(fits.index), {"lazy", "builtin"})
        # sorted input: n - 1 comparisons for the first element, and a single
        # run for the builtin sort
        self.assertLess(fits.loc["lazy", "exponent"], 1.3)
        self.assertGreater(fits.loc["builtin", "exponent"], 0.9)

    def test_growth_exponent_needs_two_sizes(self):
        df = benchmark_first_k([100], ks=[1], methods=("lazy",))
        self.assertTrue(growth_exponent(df).empty)

    def test_plot(self):
        df = benchmark_first_k([50, 100], ks=[3], seed=4)
        fig, ax = plt.subplots()
        returned = plot_comparisons(df, ax=ax)
        self.assertIs(returned, ax)
        labels = {line.get_label() for line in ax.get_lines()}
        self.assertIn("lazy", labels)
        self.assertIn("builtin", labels)
        plt.close(fig)

    def test_plot_missing_k(self):
        df = benchmark_first_k([50, 100], ks=[3], methods=("lazy",), seed=4)
        fig, ax = plt.subplots()
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            returned = plot_comparisons(df, ax=ax, k=7)
        self.assertIs(returned, ax)
        self.assertEqual(len(ax.get_lines()), 0)
        self.assertIsNone(ax.get_legend())
        plt.close(fig)


if __name__ == "__main__":
    unittest.main()
