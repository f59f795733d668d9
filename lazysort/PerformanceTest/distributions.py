import numpy as np
from scipy.stats import truncnorm


def random_permutation(n, seed=None):
    """Random permutation of 0..n-1."""
    rng = np.random.default_rng(seed)
    return rng.permutation(n).tolist()


def uniform_integers(n, high=None, seed=None):
    """
    n integers drawn uniformly from [0, high).

    high defaults to n, which gives a moderate number of duplicates.
    """
    rng = np.random.default_rng(seed)
    if high is None:
        high = max(n, 1)
    return rng.integers(0, high, size=n).tolist()


def ascending(n, seed=None):
    return list(range(n))


def descending(n, seed=None):
    return list(range(n - 1, -1, -1))


def few_unique(n, k=4, seed=None):
    """n values taken from only k distinct keys; many ties with each pivot."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, k, size=n).tolist()


def clustered(n, k=3, value_range=(0, 1000), std_dev=25.0, seed=None):
    """
    n integers grouped around k random centres.

    Each value is a truncated normal sample around its centre, so every
    value stays inside value_range.

    n           : number of values
    k           : number of clusters
    value_range : (low, high) bounds of the values
    std_dev     : spread of each cluster
    """
    if n == 0:
        return []
    rng = np.random.default_rng(seed)
    low, high = value_range
    centers = rng.uniform(low, high, size=k)
    labels = rng.integers(0, k, size=n)
    loc = centers[labels]
    a = (low - loc) / std_dev
    b = (high - loc) / std_dev
    values = truncnorm.rvs(a, b, loc=loc, scale=std_dev, size=n, random_state=rng)
    return np.floor(values).astype(int).tolist()


DISTRIBUTIONS = {
    "random": random_permutation,
    "uniform": uniform_integers,
    "ascending": ascending,
    "descending": descending,
    "few_unique": few_unique,
    "clustered": clustered,
}


def generate(name, n, seed=None):
    """Generate an input of length n from the named distribution."""
    if name not in DISTRIBUTIONS:
        raise ValueError(
            f"Unknown distribution {name!r}, expected one of {sorted(DISTRIBUTIONS)}.")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    return DISTRIBUTIONS[name](n, seed=seed)
