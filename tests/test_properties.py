import numpy as np
import pytest
# Make property tests optional if Hypothesis is not installed
pytest.importorskip("hypothesis")
import hypothesis as h
import hypothesis.strategies as st
from normr import dnorm, pnorm, qnorm

finite = st.floats(min_value=-30.0, max_value=30.0, allow_nan=False, allow_infinity=False)
means = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False, allow_infinity=False)
sds = st.floats(min_value=1e-3, max_value=100.0, allow_nan=False, allow_infinity=False)
probs = st.floats(min_value=1e-6, max_value=1.0 - 1e-6, allow_nan=False)

@h.given(st.floats(min_value=0.0, max_value=8.0), sds)
def test_density_symmetric_about_mean(d, sd):
    assert dnorm(d, sd=sd) == dnorm(-d, sd=sd)

@h.given(finite, finite)
def test_cdf_monotone(a, b):
    lo, hi = min(a, b), max(a, b)
    assert pnorm(lo) <= pnorm(hi) + 1e-15

@h.given(finite, means, sds)
def test_tails_complement(x, mean, sd):
    total = pnorm(x, mean=mean, sd=sd) + pnorm(x, mean=mean, sd=sd, lower_tail=False)
    assert abs(total - 1.0) < 1e-12

@h.given(probs)
def test_roundtrip(p):
    assert abs(pnorm(qnorm(p)) - p) < 1e-6
    assert abs(pnorm(qnorm(p, method="as111")) - p) < 1e-5

@h.given(means, sds)
def test_median_is_mean(mean, sd):
    assert qnorm(0.5, mean=mean, sd=sd) == mean
    assert qnorm(0.5, mean=mean, sd=sd, method="as111") == mean

@h.given(st.lists(st.one_of(finite, st.none()), max_size=20))
def test_elementwise_independence(xs):
    out = dnorm(xs)
    assert out.shape == (len(xs),)
    for x, y in zip(xs, out):
        if x is None:
            assert np.isnan(y)
        else:
            assert y == pytest.approx(dnorm(x), rel=1e-14, abs=0.0)

@h.given(st.lists(probs, min_size=1, max_size=20))
def test_quantile_monotone(ps):
    q = qnorm(sorted(ps))
    assert np.all(np.diff(q) >= -1e-8)
