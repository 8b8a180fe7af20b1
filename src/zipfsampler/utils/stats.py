import numpy as np
from scipy.stats import chi2_contingency, chisquare


def observed_counts(samples: np.ndarray, n: int) -> np.ndarray:
    """Counts of outcomes ``1..n`` (entry ``i`` counts value ``i+1``)."""
    samples = np.asarray(samples, dtype=np.int64).ravel()
    if samples.size and (samples.min() < 1 or samples.max() > n):
        raise ValueError(f"samples must lie in [1, {n}]")
    return np.bincount(samples, minlength=n + 1)[1:]


def _pool_sparse(columns: np.ndarray, min_value: float) -> tuple[np.ndarray, int]:
    """Bin order (densest first) and the number of bins left after pooling.

    Bins are ranked by ``columns`` so that sparse bins end up in the tail
    wherever they sit in the support; the tail is then merged into one bin.
    """
    order = np.argsort(-columns, kind="stable")
    ranked = columns[order]
    # tail[i] is the mass of ranked bins i.. onwards
    tail = np.cumsum(ranked[::-1])[::-1]
    sparse = np.flatnonzero(ranked < min_value)
    keep = int(sparse[0]) + 1 if sparse.size else len(ranked)
    while keep > 1 and tail[keep - 1] < min_value:
        keep -= 1
    return order, keep


def _pooled(values: np.ndarray, order: np.ndarray, keep: int) -> np.ndarray:
    ranked = values[order]
    return np.append(ranked[: keep - 1], ranked[keep - 1 :].sum())


def pooled_chisquare(
    observed: np.ndarray, expected_probs: np.ndarray, min_expected: float = 5.0
) -> tuple[float, float]:
    """Chi-square goodness of fit with the sparse bins merged into one."""
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected_probs, dtype=np.float64)
    if observed.shape != expected.shape:
        raise ValueError("observed and expected_probs must have the same shape")

    expected = expected / expected.sum() * observed.sum()
    order, keep = _pool_sparse(expected, min_expected)
    obs = _pooled(observed, order, keep)
    exp = _pooled(expected, order, keep)
    if obs.size < 2:
        return 0.0, 1.0

    stat, p = chisquare(obs, exp)
    return float(stat), float(p)


def two_sample_chisquare(
    samples_a: np.ndarray, samples_b: np.ndarray, n: int, min_count: int = 5
) -> tuple[float, float]:
    """Test whether two samples over ``[1, n]`` come from the same law."""
    counts_a = observed_counts(samples_a, n)
    counts_b = observed_counts(samples_b, n)

    order, keep = _pool_sparse(np.minimum(counts_a, counts_b).astype(np.float64), min_count)
    table = np.vstack([_pooled(counts_a, order, keep), _pooled(counts_b, order, keep)])
    if table.shape[1] < 2:
        return 0.0, 1.0

    stat, p, _, _ = chi2_contingency(table)
    return float(stat), float(p)
