"""Numerically stable pieces of the power-law hat function.

The rejection-inversion sampler needs the hat ``h(x) = (x+q)^(-s)``, its
antiderivative ``H`` and the inverse ``H^{-1}``. The closed forms have a
removable singularity at ``s = 1`` and lose all precision for large ``q``
when ``s`` is close to 1, so near the pole they are rewritten in terms of
``(e^x - 1)/x`` and ``log(1+x)/x``, which are evaluated with a short Taylor
series around ``x = 0``.

Reference
---------
W. Hörmann and G. Derflinger, "Rejection-inversion to generate variates
from monotone discrete distributions", *ACM TOMACS* 6(3), 1996, 169-184.
"""

from dataclasses import dataclass, field

import numpy as np

# Truncation error of the series below is about EPSILON^4 / 24, i.e. double precision.
EPSILON = 2e-5


def _as_output(value: np.ndarray, like) -> float | np.ndarray:
    if np.ndim(like) == 0:
        return float(value)
    return value


def expxm1bx(x: float | np.ndarray) -> float | np.ndarray:
    """Return ``(exp(x) - 1) / x``, continuous through ``x = 0``."""
    x_arr = np.asarray(x, dtype=np.float64)
    small = np.abs(x_arr) <= EPSILON
    # keep the direct branch away from 0/0
    safe = np.where(small, 1.0, x_arr)
    direct = np.expm1(safe) / safe
    series = 1.0 + x_arr / 2.0 * (1.0 + x_arr / 3.0 * (1.0 + x_arr / 4.0))
    return _as_output(np.where(small, series, direct), x)


def log1pxbx(x: float | np.ndarray) -> float | np.ndarray:
    """Return ``log(1 + x) / x``, continuous through ``x = 0``."""
    x_arr = np.asarray(x, dtype=np.float64)
    small = np.abs(x_arr) <= EPSILON
    safe = np.where(small, 1.0, x_arr)
    direct = np.log1p(safe) / safe
    series = 1.0 - x_arr * (0.5 - x_arr * (1.0 / 3.0 - x_arr / 4.0))
    return _as_output(np.where(small, series, direct), x)


@dataclass(frozen=True, slots=True)
class PowerLawHat:
    r"""Hat function :math:`h(x) = ((x+q)/r)^{-s}` with its integral and inverse.

    The scale :math:`r` multiplies the hat by the constant :math:`r^s`, which
    leaves the sampled law unchanged; ``r = 1 + q`` pins :math:`h(1) = 1` and
    keeps the hat finite for large ``s`` with ``q`` close to -0.5. With
    :math:`t = (x+q)/r`, two regimes are used for :math:`H` and :math:`H^{-1}`:

    * away from the pole (:math:`|1-s| \ge \epsilon`)

      .. math::
          H(x) = r\,\frac{t^{1-s}}{1-s}, \qquad
          H^{-1}(y) = r\,(y(1-s)/r)^{1/(1-s)} - q

    * near the pole, shifted by the constant :math:`r/(1-s)` so that the
      limit :math:`s \to 1` is finite

      .. math::
          H(x) = r\log t\,\frac{e^{(1-s)\log t} - 1}{(1-s)\log t},
          \qquad
          H^{-1}(y) = r\exp\!\left(\frac{y}{r}\,
              \frac{\log(1 + (1-s)y/r)}{(1-s)y/r}\right) - q

    The shift is harmless: the sampler only ever compares differences of
    :math:`H` computed in the same regime.
    """

    s: float
    q: float
    scale: float = 1.0
    oms: float = field(init=False)
    spole: bool = field(init=False)
    rvs: float = field(init=False)

    def __post_init__(self) -> None:
        oms = 1.0 - self.s
        spole = abs(oms) < EPSILON
        object.__setattr__(self, "oms", oms)
        object.__setattr__(self, "spole", spole)
        object.__setattr__(self, "rvs", 0.0 if spole else 1.0 / oms)

    def _t(self, x: float | np.ndarray) -> np.ndarray:
        return (np.asarray(x, dtype=np.float64) + self.q) / self.scale

    def h(self, x: float | np.ndarray) -> float | np.ndarray:
        return _as_output(np.power(self._t(x), -self.s), x)

    def H(self, x: float | np.ndarray) -> float | np.ndarray:
        t = self._t(x)
        if not self.spole:
            return _as_output(self.scale * np.power(t, self.oms) / self.oms, x)

        log_t = np.log(t)
        return _as_output(self.scale * log_t * expxm1bx(self.oms * log_t), x)

    def H_inv(self, y: float | np.ndarray) -> float | np.ndarray:
        z = np.asarray(y, dtype=np.float64) / self.scale
        if not self.spole:
            return _as_output(self.scale * np.power(z * self.oms, self.rvs) - self.q, y)

        return _as_output(self.scale * np.exp(z * log1pxbx(self.oms * z)) - self.q, y)
