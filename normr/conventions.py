# Package-wide constants: fixed approximation coefficients plus the R defaults
import math

SQRT2   = math.sqrt(2.0)
SQRT2PI = math.sqrt(2.0*math.pi)
LOG_SQRT2PI = math.log(SQRT2PI)

# Distribution defaults (R: mean = 0, sd = 1)
DEFAULT_MEAN = 0.0
DEFAULT_SD   = 1.0

# Abramowitz & Stegun 7.1.26
ERF_P      = 0.3275911
ERF_COEFFS = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)
ERF_MAX_ABS_ERROR = 1.5e-7

# Quantile approximations
DEFAULT_QUANTILE_METHOD = "acklam"
ACKLAM_P_LOW  = 0.02425
ACKLAM_P_HIGH = 1.0 - ACKLAM_P_LOW
AS111_SPLIT   = 0.42
