from __future__ import annotations
import math
import operator
from typing import List, Optional, Union
import numpy as np

from .conventions import DEFAULT_MEAN, DEFAULT_SD
from .errors import InvalidParameterError

RngLike = Union[None, int, np.random.Generator]

# Process-wide uniform source, R's .Random.seed equivalent
_RNG = np.random.default_rng()

def set_seed(seed: Optional[int]) -> None:
    """Reseed the shared generator used when rnorm is called without rng."""
    global _RNG
    _RNG = np.random.default_rng(seed)

def _generator(rng: RngLike) -> np.random.Generator:
    return _RNG if rng is None else np.random.default_rng(rng)

def polar_pairs(rng: np.random.Generator, n_pairs: int) -> np.ndarray:
    """
    Marsaglia polar method. Returns 2*n_pairs standard normals laid out as
    u1*m1, v1*m1, u2*m2, v2*m2, ... in the order the pairs were accepted.
    """
    chunks: List[np.ndarray] = []
    need = n_pairs
    while need > 0:
        # acceptance rate is pi/4
        m = int(math.ceil(need * 4.0 / math.pi)) + 8
        u = 2.0 * rng.random(m) - 1.0
        v = 2.0 * rng.random(m) - 1.0
        s = u*u + v*v
        keep = (s > 0.0) & (s < 1.0)
        u, v, s = u[keep][:need], v[keep][:need], s[keep][:need]
        mul = np.sqrt(-2.0 * np.log(s) / s)
        chunks.append(np.column_stack((u * mul, v * mul)).ravel())
        need -= s.shape[0]
    if not chunks:
        return np.empty(0, dtype=float)
    return np.concatenate(chunks)

def rnorm(n: int, mean: float = DEFAULT_MEAN, sd: float = DEFAULT_SD, rng: RngLike = None) -> np.ndarray:
    """
    Draw n normal variates, R's rnorm.

    Each accepted pair yields two values; for odd n the second value of the
    last pair is dropped. Unlike dnorm/pnorm/qnorm a non-positive sd is an
    error for the whole call.
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    if not sd > 0:
        raise InvalidParameterError(f"sd must be positive, got {sd}.")
    gen = _generator(rng)
    z = polar_pairs(gen, (n + 1) // 2)[:n]
    return mean + sd * z
