import logging
import math

import numpy as np

from .core import Size, ZipfParameterError, ZipfSampler
from .numerics import PowerLawHat

logger = logging.getLogger(__name__)


class RejectionInversionZipf(ZipfSampler):
    """Zipf sampler using rejection-inversion (Hörmann & Derflinger, 1996).

    Draws are exact for the law ``P(k) ~ (k+q)^(-s)`` on ``[1, n]`` and take an
    expected constant number of iterations, independent of ``n``. Memory use
    is constant, so this is the sampler to use for large ``n`` or when the
    distribution is built only to take a few draws.

    Rejection-inversion needs a non-increasing hat. For ``s < 0`` the masses
    grow with ``k`` and draws fall back to rejection from a uniform proposal,
    whose acceptance rate is at least ``1 / (1 - s)`` for any ``n``.

    Example::

        rng = np.random.default_rng(42)
        zipf = RejectionInversionZipf(300)
        keys = [zipf.draw(rng) for _ in range(100)]
    """

    def __init__(self, n: int, s: float = 1.0, q: float = 0.0) -> None:
        super().__init__(n, s, q)
        # scaled so that h(1) == 1; keeps the hat finite for large s and q near -0.5
        self._hat = PowerLawHat(self.s, self.q, scale=1.0 + self.q)
        self._increasing = self.s < 0.0

        if self._increasing:
            # inversion constants are unused, and H(1.5) - h(1) may leave the domain of H^-1
            self._h_x1 = self._h_n = self._cut = None
            logger.debug(f"{self!r}: increasing law, uniform proposals")
            return

        hat = self._hat
        self._h_x1 = hat.H(1.5) - hat.h(1.0)
        self._h_n = hat.H(self.n + 0.5)
        self._cut = 1.0 - hat.H_inv(self._h_x1)
        if not all(math.isfinite(c) for c in (self._h_x1, self._h_n, self._cut)):
            raise ZipfParameterError(
                f"Parameters (n={self.n}, s={self.s}, q={self.q}) overflow the inversion bounds"
            )

        logger.debug(
            f"{self!r}: spole={hat.spole}, bounds=({self._h_x1:.6g}, {self._h_n:.6g}), "
            f"cut={self._cut:.6g}"
        )

    @property
    def is_pole(self) -> bool:
        """True when ``s`` is close enough to 1 to use the logarithmic regime."""
        return self._hat.spole

    @property
    def bounds(self) -> tuple[float, float] | None:
        """Interval ``[H(1.5) - h(1), H(n + 0.5)]`` of the uniform draws; None for ``s < 0``."""
        if self._increasing:
            return None
        return self._h_x1, self._h_n

    @property
    def cut(self) -> float | None:
        return self._cut

    def _accept_ratio(self, k):
        # h(k) / h(n), the largest mass, without overflowing for large -s
        return np.power((k + self.q) / (self.n + self.q), -self.s)

    def draw(self, rng: np.random.Generator) -> int:
        if self._increasing:
            while True:
                k = int(rng.integers(1, self.n, endpoint=True))
                if rng.random() <= self._accept_ratio(k):
                    return k

        hat = self._hat
        while True:
            u = float(rng.uniform(self._h_x1, self._h_n))
            x = hat.H_inv(u)
            # rounding at the interval ends can leave the support
            if not 0.5 <= x < self.n + 0.5:
                continue
            k = math.floor(x + 0.5)
            if k - x <= self._cut:
                return k
            if u >= hat.H(k + 0.5) - hat.h(k):
                return k

    def _sample_block(self, rng: np.random.Generator, size: int) -> tuple[np.ndarray, np.ndarray]:
        """One round of proposals; returns the candidates and their accept mask."""
        if self._increasing:
            k = rng.integers(1, self.n, size=size, endpoint=True)
            return k, rng.random(size) <= self._accept_ratio(k)

        hat = self._hat
        u = rng.uniform(self._h_x1, self._h_n, size=size)
        x = hat.H_inv(u)
        k = np.floor(x + 0.5)
        in_range = (k >= 1) & (k <= self.n)
        k = np.clip(k, 1, self.n)
        accept = in_range & ((k - x <= self._cut) | (u >= hat.H(k + 0.5) - hat.h(k)))
        return k.astype(np.int64), accept

    def sample(self, rng: np.random.Generator, size: Size = None) -> int | np.ndarray:
        if size is None:
            return self.draw(rng)

        shape = (size,) if isinstance(size, int | np.integer) else tuple(size)
        out = np.empty(shape, dtype=np.int64).ravel()
        missing = np.arange(out.size)

        while missing.size:
            k, accept = self._sample_block(rng, missing.size)
            out[missing[accept]] = k[accept]
            missing = missing[~accept]

        return out.reshape(shape)
