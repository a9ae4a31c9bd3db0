"""Series cleaning and close/adjusted-close selection."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np
import pandas as pd

from ..domain import CleanedSeries


def _to_float(value: Any) -> float:
    # Only real numbers count; bools, strings and None become NaN.
    if not isinstance(value, Real) or isinstance(value, (bool, np.bool_)):
        return np.nan
    try:
        return float(value)
    except OverflowError:
        return np.nan


def _as_float_series(values: Sequence[Any]) -> pd.Series:
    return pd.Series([_to_float(v) for v in values], dtype="float64")


def finite_mask(values: Sequence[Any]) -> np.ndarray:
    return np.isfinite(_as_float_series(values).to_numpy())


def has_finite(values: Sequence[Any]) -> bool:
    return bool(len(values)) and bool(finite_mask(values).any())


def clean_series(dates: Sequence[str], values: Sequence[Any]) -> CleanedSeries:
    """Keep only (date, value) pairs whose value is a finite number, in order."""
    if len(dates) != len(values):
        raise ValueError(f"dates and values differ in length ({len(dates)} != {len(values)})")
    if not len(dates):
        return CleanedSeries()

    numeric = _as_float_series(values)
    mask = np.isfinite(numeric.to_numpy())
    kept_dates = tuple(str(d) for d, keep in zip(dates, mask) if keep)
    kept_values = tuple(float(v) for v in numeric[mask])
    return CleanedSeries(dates=kept_dates, values=kept_values)


def select_series(primary: Sequence[Any], fallback: Sequence[Any]) -> Sequence[Any]:
    """Return ``primary`` unless only ``fallback`` has a finite value."""
    if has_finite(primary):
        return primary
    if has_finite(fallback):
        return fallback
    return primary
