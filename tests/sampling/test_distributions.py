import numpy as np
import pytest

from zipfsampler.sampling import (
    ZipfParameterError,
    ZipfParams,
    make_zipf_law,
    zipf_pmf,
    zipf_weights,
)


def test_weights_padding_and_values():
    w = zipf_weights(3, 1.0, 1.0)
    np.testing.assert_allclose(w, [0.0, 1 / 2, 1 / 3, 1 / 4])


def test_pmf_harmonic():
    pmf = zipf_pmf(10, 1.0, 0.0)
    harmonic = sum(1.0 / k for k in range(1, 11))
    assert pmf[0] == pytest.approx(1.0 / harmonic)
    assert pmf.sum() == pytest.approx(1.0)


def test_uniform_when_exponent_zero():
    np.testing.assert_allclose(zipf_pmf(8, 0.0, 3.0), np.full(8, 1 / 8))


def test_law_matches_pmf():
    law = make_zipf_law(20, 1.2, 0.5)
    np.testing.assert_allclose(law.pmf(np.arange(1, 21)), zipf_pmf(20, 1.2, 0.5))
    assert law.support() == (1, 20)


def test_params_validate_returns_self():
    params = ZipfParams(10, 2.0, 0.0)
    assert params.validate() is params


@pytest.mark.parametrize(
    "n,s,q",
    [(0, 1.0, 0.0), (2.5, 1.0, 0.0), (True, 1.0, 0.0), (10, float("inf"), 0.0), (10, 1.0, -0.5)],
)
def test_params_validate_rejects(n, s, q):
    with pytest.raises(ZipfParameterError):
        ZipfParams(n, s, q).validate()


def test_params_are_frozen():
    params = ZipfParams(10)
    with pytest.raises(AttributeError):
        params.n = 11


@pytest.mark.parametrize("n,s,q", [(1000, -150.0, 0.0), (10, 1100.0, -0.49), (50, 400.0, 0.0)])
def test_pmf_stays_finite_when_masses_overflow(n, s, q):
    pmf = zipf_pmf(n, s, q)
    assert np.isfinite(pmf).all()
    assert pmf.sum() == pytest.approx(1.0)
    assert np.argmax(pmf) == (n - 1 if s < 0 else 0)


def test_pmf_log_space_matches_direct_normalization():
    w = zipf_weights(30, 1.7, 2.5)[1:]
    np.testing.assert_allclose(zipf_pmf(30, 1.7, 2.5), w / w.sum(), rtol=1e-12)
