import numpy as np
import pytest
from normr import rnorm, set_seed, InvalidParameterError
from normr.variates import polar_pairs

@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 11, 999])
def test_exact_count(n, rng):
    xs = rnorm(n, rng=rng)
    assert isinstance(xs, np.ndarray)
    assert xs.shape == (n,)
    assert np.all(np.isfinite(xs))

def test_moments(rng):
    xs = rnorm(100_000, mean=5.0, sd=2.0, rng=rng)
    assert abs(xs.mean() - 5.0) < 0.03
    assert abs(xs.std(ddof=1) - 2.0) < 0.03

def test_standard_moments(rng):
    xs = rnorm(10_000, rng=rng)
    assert abs(xs.mean()) < 0.05
    assert abs(xs.var(ddof=1) - 1.0) < 0.05

def test_matches_normal_quantiles(rng):
    xs = np.sort(rnorm(50_000, rng=rng))
    # tail fractions beyond +-1.96 should be close to 2.5% each
    assert abs(np.mean(xs < -1.959964) - 0.025) < 0.004
    assert abs(np.mean(xs > 1.959964) - 0.025) < 0.004

@pytest.mark.parametrize("sd", [0.0, -1.0, float("nan")])
def test_non_positive_sd_raises(sd):
    with pytest.raises(InvalidParameterError):
        rnorm(5, sd=sd)
    with pytest.raises(ValueError):
        rnorm(5, sd=sd)

def test_bad_count():
    with pytest.raises(ValueError):
        rnorm(-1)
    with pytest.raises(TypeError):
        rnorm(2.5)

def test_odd_count_drops_second_of_last_pair():
    even = rnorm(6, rng=np.random.default_rng(42))
    odd = rnorm(5, rng=np.random.default_rng(42))
    assert np.array_equal(odd, even[:5])

def test_seeded_generator_is_reproducible():
    a = rnorm(20, mean=1.0, sd=3.0, rng=2024)
    b = rnorm(20, mean=1.0, sd=3.0, rng=2024)
    assert np.array_equal(a, b)

def test_set_seed_controls_shared_generator():
    set_seed(99)
    a = rnorm(8)
    set_seed(99)
    b = rnorm(8)
    assert np.array_equal(a, b)
    c = rnorm(8)
    assert not np.array_equal(b, c)

def test_polar_pairs_layout():
    z = polar_pairs(np.random.default_rng(3), 50)
    assert z.shape == (100,)
    assert polar_pairs(np.random.default_rng(3), 0).shape == (0,)
