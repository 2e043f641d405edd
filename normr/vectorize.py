from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np

from .errors import ParameterShapeError

Numeric = Union[float, Sequence[float], np.ndarray]

def as_values(x: Numeric) -> Tuple[np.ndarray, bool]:
    """
    Normalize a number or a sequence of numbers to a float array.
    Missing entries (None) become NaN. Returns (values, is_scalar) so the
    caller can hand back a plain float for scalar input.
    """
    arr = np.asarray(x, dtype=float)
    is_scalar = arr.ndim == 0
    return np.atleast_1d(arr), is_scalar

def as_parameter(name: str, value: Numeric, shape: Tuple[int, ...]) -> np.ndarray:
    """Scalar parameters broadcast; sequence parameters must match the input shape exactly."""
    arr = np.asarray(value, dtype=float)
    if arr.size == 1:
        return arr.reshape(())
    if arr.shape != shape:
        raise ParameterShapeError(f"{name} has shape {arr.shape}, incompatible with input shape {shape}.")
    return arr

def invalid_mask(values: np.ndarray, sd: np.ndarray) -> np.ndarray:
    # sd > 0 is False for NaN as well
    return np.isnan(values) | ~(sd > 0)

def restore(result: np.ndarray, is_scalar: bool):
    if is_scalar:
        return float(result[0])
    return result
