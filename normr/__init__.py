from .density import dnorm
from .cdf import pnorm
from .quantile import (
    qnorm, QuantileApproximation, AcklamQuantile, BeasleySpringerQuantile,
    ACKLAM, AS111, QUANTILE_METHODS,
)
from .variates import rnorm, set_seed
from .special import erf
from .normaldist import Normal
from .errors import InvalidParameterError, ParameterShapeError
from .conventions import DEFAULT_MEAN, DEFAULT_SD, DEFAULT_QUANTILE_METHOD, ERF_MAX_ABS_ERROR

__all__ = [
    "dnorm", "pnorm", "qnorm", "rnorm", "set_seed", "erf", "Normal",
    "QuantileApproximation", "AcklamQuantile", "BeasleySpringerQuantile",
    "ACKLAM", "AS111", "QUANTILE_METHODS",
    "InvalidParameterError", "ParameterShapeError",
    "DEFAULT_MEAN", "DEFAULT_SD", "DEFAULT_QUANTILE_METHOD", "ERF_MAX_ABS_ERROR",
]
