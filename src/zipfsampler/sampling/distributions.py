import numpy as np
from scipy.stats import rv_discrete


def zipf_weights(n: int, s: float = 1.0, q: float = 0.0) -> np.ndarray:
    """Unnormalized masses ``(q+i)^(-s)``; index 0 is padding and holds 0."""
    ks = np.arange(1, n + 1, dtype=np.float64)
    weights = np.empty(n + 1, dtype=np.float64)
    weights[0] = 0.0
    with np.errstate(over="ignore"):
        weights[1:] = np.power(ks + q, -s)
    return weights


def zipf_pmf(n: int, s: float = 1.0, q: float = 0.0) -> np.ndarray:
    """Normalized law for outcomes ``1..n`` (entry ``i`` is ``P(i+1)``)."""
    # normalize in log space; the raw masses overflow for large |s|
    log_w = -s * np.log(np.arange(1, n + 1, dtype=np.float64) + q)
    pmf = np.exp(log_w - log_w.max())
    return pmf / pmf.sum()


def make_zipf_law(n: int, s: float = 1.0, q: float = 0.0) -> rv_discrete:
    ks = np.arange(1, n + 1, dtype=np.int64)
    return rv_discrete(name="hurwitz_zipf", values=(ks, zipf_pmf(n, s, q)))
