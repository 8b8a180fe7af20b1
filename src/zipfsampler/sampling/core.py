import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .distributions import zipf_pmf

Size = int | tuple[int, ...] | None


class ZipfParameterError(ValueError):
    """Raised when a Zipf distribution cannot be constructed."""


@dataclass(frozen=True, slots=True)
class ZipfParams:
    """Zipf law ``P(k) ~ (k+q)^(-s)`` over ``k = 1..n``."""

    n: int
    s: float = 1.0
    q: float = 0.0

    def validate(self) -> "ZipfParams":
        if isinstance(self.n, bool) or not isinstance(self.n, numbers.Integral):
            raise ZipfParameterError(f"n must be an integer (got {self.n!r})")
        if self.n < 1:
            raise ZipfParameterError(f"n must be >= 1 (got {self.n})")
        if not math.isfinite(self.s):
            raise ZipfParameterError(f"s must be finite (got {self.s})")
        # also rejects NaN
        if not self.q > -0.5:
            raise ZipfParameterError(
                f"Range error: parameter q must be greater than -0.5 (got {self.q})"
            )
        if not math.isfinite(self.q):
            raise ZipfParameterError(f"q must be finite (got {self.q})")
        return self


class ZipfSampler(ABC):
    """Base class for samplers of a finite Zipf law.

    Subclasses are immutable once constructed: the caller-owned generator
    passed to :meth:`draw` is the only state that changes.
    """

    def __init__(self, n: int, s: float = 1.0, q: float = 0.0) -> None:
        self._params = ZipfParams(n, float(s), float(q)).validate()

    @property
    def params(self) -> ZipfParams:
        return self._params

    @property
    def n(self) -> int:
        return int(self._params.n)

    @property
    def s(self) -> float:
        return self._params.s

    @property
    def q(self) -> float:
        return self._params.q

    @property
    def min(self) -> int:
        return 1

    @property
    def max(self) -> int:
        return self.n

    @abstractmethod
    def draw(self, rng: np.random.Generator) -> int:
        """Return one value in ``[1, n]``."""
        ...

    @abstractmethod
    def sample(self, rng: np.random.Generator, size: Size = None) -> int | np.ndarray:
        """Return ``size`` values in ``[1, n]`` (a scalar when ``size`` is None)."""
        ...

    def expected_pmf(self) -> np.ndarray:
        return zipf_pmf(self.n, self.s, self.q)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n}, s={self.s!r}, q={self.q!r})"
