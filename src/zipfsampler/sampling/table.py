import logging

import numpy as np

from .core import Size, ZipfSampler
from .distributions import make_zipf_law, zipf_weights

logger = logging.getLogger(__name__)


class TableZipf(ZipfSampler):
    """Zipf sampler backed by a precomputed table of masses.

    Construction is O(n) in time and memory; each draw is a search over the
    cumulative table. Faster per draw than :class:`RejectionInversionZipf`
    for small and moderate ``n`` sampled many times, slower to build, and a
    poor fit once the table no longer stays in cache.
    """

    def __init__(self, n: int, s: float = 1.0, q: float = 0.0) -> None:
        super().__init__(n, s, q)
        weights = zipf_weights(self.n, self.s, self.q)
        weights.flags.writeable = False
        self._weights = weights
        self._law = make_zipf_law(self.n, self.s, self.q)
        logger.debug(f"{self!r}: built table of {self.n} masses")

    @property
    def weights(self) -> np.ndarray:
        """Unnormalized masses indexed by outcome; ``weights[0]`` is padding.

        Entries overflow to ``inf`` for extreme ``s``; draws use the log-space law.
        """
        return self._weights

    def pmf(self, k: int | np.ndarray) -> float | np.ndarray:
        p = self._law.pmf(k)
        return float(p) if np.ndim(p) == 0 else p

    def draw(self, rng: np.random.Generator) -> int:
        return int(self._law.rvs(random_state=rng))

    def sample(self, rng: np.random.Generator, size: Size = None) -> int | np.ndarray:
        if size is None:
            return self.draw(rng)
        return np.asarray(self._law.rvs(size=size, random_state=rng), dtype=np.int64)
