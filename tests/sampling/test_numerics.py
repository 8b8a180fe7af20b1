import warnings

import numpy as np
import pytest

from zipfsampler.sampling import EPSILON, PowerLawHat, expxm1bx, log1pxbx


def test_elementary_functions_at_zero():
    assert expxm1bx(0.0) == 1.0
    assert log1pxbx(0.0) == 1.0


@pytest.mark.parametrize("x", [EPSILON, -EPSILON, 1e-9, -1e-9, 1e-300])
def test_expxm1bx_continuous_through_threshold(x):
    # series and direct formula must agree on both sides of the switch
    below = expxm1bx(x * (1 - 1e-9))
    above = expxm1bx(x * (1 + 1e-9))
    assert below == pytest.approx(above, rel=1e-13)
    assert below == pytest.approx(np.expm1(x) / x, rel=1e-13)


@pytest.mark.parametrize("x", [EPSILON, -EPSILON, 1e-9, -1e-9])
def test_log1pxbx_continuous_through_threshold(x):
    below = log1pxbx(x * (1 - 1e-9))
    above = log1pxbx(x * (1 + 1e-9))
    assert below == pytest.approx(above, rel=1e-13)
    assert below == pytest.approx(np.log1p(x) / x, rel=1e-13)


def test_elementary_functions_large_arguments():
    assert expxm1bx(1.0) == pytest.approx(np.e - 1.0)
    assert log1pxbx(1.0) == pytest.approx(np.log(2.0))


def test_elementary_functions_vectorized_without_warnings():
    x = np.array([-1.0, -EPSILON / 2, 0.0, EPSILON / 2, 0.5])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        e = expxm1bx(x)
        lg = log1pxbx(x)
    assert isinstance(e, np.ndarray) and e.shape == x.shape
    assert isinstance(lg, np.ndarray) and lg.shape == x.shape
    assert np.isfinite(e).all() and np.isfinite(lg).all()
    assert e[2] == 1.0 and lg[2] == 1.0


def test_scalar_input_returns_float():
    assert isinstance(expxm1bx(0.3), float)
    assert isinstance(PowerLawHat(2.0, 0.0).H(3.0), float)


@pytest.mark.parametrize(
    "s,spole",
    [(1.0, True), (1.0 + EPSILON / 2, True), (1.0 - EPSILON / 2, True), (1.0 + 2 * EPSILON, False)],
)
def test_pole_detection(s, spole):
    hat = PowerLawHat(s, 0.0)
    assert hat.spole is spole
    assert hat.oms == 1.0 - s
    assert hat.rvs == (0.0 if spole else 1.0 / (1.0 - s))


def test_hat_is_power_law():
    hat = PowerLawHat(2.0, 0.5)
    np.testing.assert_allclose(hat.h(np.array([1.0, 2.0, 3.0])), [1 / 2.25, 1 / 6.25, 1 / 12.25])


@pytest.mark.parametrize(
    "s",
    [-1.0, 0.0, 0.5, 0.99, 1.0 - 3 * EPSILON, 1.0 - EPSILON / 2, 1.0, 1.0 + EPSILON / 2,
     1.0 + 3 * EPSILON, 1.01, 1.5, 2.0, 4.0],
)
@pytest.mark.parametrize("q", [-0.49, 0.0, 0.3, 12.0, 50.0])
def test_H_inv_inverts_H(s, q):
    hat = PowerLawHat(s, q)
    x = np.array([0.5, 1.0, 1.5, 2.0, 10.5, 300.5, 1e5 + 0.5])
    back = hat.H_inv(hat.H(x))
    assert np.isfinite(back).all()
    np.testing.assert_allclose(back + q, x + q, rtol=1e-9)


@pytest.mark.parametrize("s", [0.5, 1.0, 1.0 + EPSILON / 2, 2.0])
def test_H_is_antiderivative_of_h(s):
    hat = PowerLawHat(s, 1.5)
    x = np.linspace(1.0, 50.0, 25)
    step = 1e-4
    derivative = (hat.H(x + step) - hat.H(x - step)) / (2 * step)
    np.testing.assert_allclose(derivative, hat.h(x), rtol=1e-6)


def test_H_continuous_across_pole_with_large_q():
    # the shifted integral is continuous in s; the unshifted one diverges
    x = np.array([1.5, 10.5, 1000.5])
    near = PowerLawHat(1.0 - EPSILON / 2, 25.0).H(x)
    at = PowerLawHat(1.0, 25.0).H(x)
    np.testing.assert_allclose(near, at, rtol=1e-4)
    np.testing.assert_allclose(at, np.log(x + 25.0))


@pytest.mark.parametrize("s", [0.5, 1.0, 1.0 + EPSILON / 2, 2.0, 40.0])
@pytest.mark.parametrize("q", [-0.49, 0.0, 12.0])
def test_scaled_hat_pins_h_at_one(s, q):
    hat = PowerLawHat(s, q, scale=1.0 + q)
    assert hat.h(1.0) == pytest.approx(1.0)
    x = np.array([1.0, 1.5, 2.0, 10.5])
    back = hat.H_inv(hat.H(x[:2]))
    np.testing.assert_allclose(back + q, x[:2] + q, rtol=1e-9)


@pytest.mark.parametrize("s", [0.5, 1.0, 2.0])
def test_scaled_hat_is_a_constant_multiple(s):
    q = 3.0
    plain = PowerLawHat(s, q)
    scaled = PowerLawHat(s, q, scale=1.0 + q)
    x = np.linspace(1.0, 40.0, 10)
    np.testing.assert_allclose(scaled.h(x), plain.h(x) * (1.0 + q) ** s)
    # differences of H scale the same way
    np.testing.assert_allclose(
        np.diff(scaled.H(x)), np.diff(plain.H(x)) * (1.0 + q) ** s, rtol=1e-9
    )


def test_scaled_hat_stays_finite_for_steep_laws():
    hat = PowerLawHat(1100.0, -0.49, scale=0.51)
    assert hat.h(1.0) == 1.0
    assert np.isfinite(hat.H(np.array([1.0, 1.5, 10.5]))).all()
    assert np.isinf(PowerLawHat(1100.0, -0.49).h(1.0))
