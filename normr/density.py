from __future__ import annotations
import numpy as np

from .conventions import DEFAULT_MEAN, DEFAULT_SD, LOG_SQRT2PI
from .vectorize import Numeric, as_values, as_parameter, invalid_mask, restore

def dnorm(x: Numeric, mean: Numeric = DEFAULT_MEAN, sd: Numeric = DEFAULT_SD, log: bool = False):
    """
    Normal probability density, R's dnorm.

    Parameters
    ----------
    x : float or sequence of float
        Values at which to evaluate the density. None / NaN entries give NaN.
    mean, sd : float or sequence of float
        Location and scale. A non-positive sd gives NaN for the affected entries.
    log : bool
        Return the log-density instead. Stays finite for extreme x.

    Returns
    -------
    float or ndarray
        A float for scalar x, otherwise an array shaped like x.
    """
    values, is_scalar = as_values(x)
    mu = as_parameter("mean", mean, values.shape)
    sigma = as_parameter("sd", sd, values.shape)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        z = (values - mu) / sigma
        out = -0.5 * z * z - np.log(sigma) - LOG_SQRT2PI
        if not log:
            out = np.exp(out)
    out = np.where(invalid_mask(values, sigma), np.nan, out)
    return restore(out, is_scalar)
