import operator
import time
import warnings

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy.stats import linregress

from lazysort.core.comparator import CountingComparator, as_key
from lazysort.core.lazy_quicksort import lazy_sort
from lazysort.core.validation import check_sorted_prefix
from lazysort.PerformanceTest.distributions import generate

METHODS = ("lazy", "lazy_partition", "builtin")


def count_first_k(items, k, method="lazy", less_than=operator.lt):
    """
    Obtain the k smallest elements of items with the given method.

    Returns (prefix, comparisons, seconds), where comparisons counts calls to
    less_than. "builtin" runs a full ``sorted`` through a cmp_to_key adapter,
    which may test a pair twice, then slices.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}, expected one of {METHODS}.")
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}.")
    counter = CountingComparator(less_than)

    start = time.perf_counter()
    if method == "builtin":
        prefix = sorted(items, key=as_key(counter))[:k]
    else:
        prefix = lazy_sort(items, counter, lazy_partition=(method == "lazy_partition")).take(k)
    elapsed = time.perf_counter() - start

    return prefix, counter.calls, elapsed


def benchmark_first_k(ns, ks, distribution="random", methods=METHODS, seed=42, verbose=False):
    """
    Count comparisons needed for the first k sorted elements over a grid of n and k.

    Every (n, k, method) combination becomes one row of the returned
    DataFrame. Each n uses one input shared by all ks and methods. Results
    are checked against a reference sort before being recorded.
    """
    rows = []
    for n in ns:
        items = generate(distribution, n, seed=seed)
        for k in ks:
            if k > n:
                warnings.warn(f"k={k} exceeds n={n}, using k={n}.", RuntimeWarning)
                k = n
            for method in methods:
                prefix, comparisons, elapsed = count_first_k(items, k, method)
                if not check_sorted_prefix(items, prefix):
                    raise AssertionError(f"{method} returned a wrong prefix for n={n}, k={k}")
                if verbose:
                    print(f"n={n} k={k} {method}: {comparisons} comparisons, {elapsed:.6f} seconds")
                rows.append({
                    "n": n,
                    "k": k,
                    "distribution": distribution,
                    "method": method,
                    "comparisons": comparisons,
                    "time_s": elapsed,
                })
    return pd.DataFrame(rows, columns=["n", "k", "distribution", "method", "comparisons", "time_s"])


def growth_exponent(df):
    """
    Fit comparisons ~ c * n**e per method and k.

    Returns a DataFrame with columns method, k, exponent, r_value. Rows with
    zero comparisons and groups with fewer than two distinct n are skipped.
    """
    fits = []
    for (method, k), group in df.groupby(["method", "k"], sort=True):
        group = group[group["comparisons"] > 0]
        if group["n"].nunique() < 2:
            continue
        fit = linregress(np.log(group["n"].to_numpy(dtype=float)),
                         np.log(group["comparisons"].to_numpy(dtype=float)))
        fits.append({"method": method, "k": k, "exponent": fit.slope, "r_value": fit.rvalue})
    return pd.DataFrame(fits, columns=["method", "k", "exponent", "r_value"])


def plot_comparisons(df, ax=None, k=None):
    """
    Plot comparisons against n, one line per method.

    If k is None the smallest k in df is used. Returns the Axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))
    if df.empty:
        return ax
    if k is None:
        k = df["k"].min()
    subset = df[df["k"] == k]
    if subset.empty:
        return ax
    for method, group in subset.groupby("method", sort=True):
        group = group.sort_values("n")
        ax.plot(group["n"], group["comparisons"], marker="o", label=method)
    ns = np.array(sorted(subset["n"].unique()), dtype=float)
    # reference curve for a full comparison sort
    ax.plot(ns, ns * np.log2(np.maximum(ns, 2)), linestyle="--", color="gray",
            label="n log2 n")
    ax.set_title(f"Comparisons for the first k={k} elements")
    ax.set_xlabel("n")
    ax.set_ylabel("comparisons")
    ax.legend()
    return ax


if __name__ == "__main__":
    ns = [100, 500, 1000, 2500, 5000, 10000]
    df = benchmark_first_k(ns, ks=[1, 10, 100], verbose=True)
    print(growth_exponent(df))
    plot_comparisons(df)
    plt.tight_layout()
    plt.show()
