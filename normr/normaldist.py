from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .conventions import DEFAULT_MEAN, DEFAULT_SD, DEFAULT_QUANTILE_METHOD
from .density import dnorm
from .cdf import pnorm
from .quantile import QuantileApproximation, qnorm, resolve_method
from .variates import RngLike, rnorm
from .vectorize import Numeric

@dataclass(frozen=True)
class Normal:
    """
    Normal distribution with fixed parameters. A value object: the four R
    functions with mean, sd and the quantile approximation bound once.
    """
    mean: float = DEFAULT_MEAN
    sd: float = DEFAULT_SD
    quantile_method: Union[str, QuantileApproximation] = DEFAULT_QUANTILE_METHOD

    def __post_init__(self):
        # fail early on a misspelt method name
        resolve_method(self.quantile_method)

    def pdf(self, x: Numeric, log: bool = False):
        return dnorm(x, mean=self.mean, sd=self.sd, log=log)

    def cdf(self, q: Numeric, lower_tail: bool = True, log_p: bool = False):
        return pnorm(q, mean=self.mean, sd=self.sd, lower_tail=lower_tail, log_p=log_p)

    def ppf(self, p: Numeric, lower_tail: bool = True, log_p: bool = False):
        return qnorm(p, mean=self.mean, sd=self.sd, lower_tail=lower_tail, log_p=log_p,
                     method=self.quantile_method)

    def sample(self, n: int, rng: RngLike = None):
        return rnorm(n, mean=self.mean, sd=self.sd, rng=rng)
