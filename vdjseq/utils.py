"""Small numeric helpers: normalisation of probability arrays and list utilities."""

from __future__ import annotations

import sys
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_I64_MAX = 2**63 - 1
_U64_MOD = 2**64


@dataclass
class RecordModel:
    """Description of a stored model and the files that hold it."""

    species: list[str] = field(default_factory=list)
    chain: list[str] = field(default_factory=list)
    id: str = ""
    filename_params: str = ""
    filename_marginals: str = ""
    filename_v_gene_cdr3_anchors: str = ""
    filename_j_gene_cdr3_anchors: str = ""
    description: str = ""


def send_warning(message: str) -> None:
    """Print a warning on standard error."""
    print(f"Warning: {message}", file=sys.stderr)


def count_differences(vec1: Sequence, vec2: Sequence) -> int:
    """Count positions where the two sequences differ (up to the shorter length)."""
    return sum(1 for a, b in zip(vec1, vec2) if a != b)


def mod_euclid(a: int, b: int) -> int:
    """Euclidean modulo of a signed 64-bit value by an unsigned 64-bit value."""
    if 1 <= b <= _I64_MAX:
        return a % b
    # b is 0 or too large to be a signed divisor: reinterpret a as unsigned
    return (a % _U64_MOD) - (1 if a < 0 else 0)


def _as_float_array(arr) -> np.ndarray:
    return np.asarray(arr, dtype=float)


def _check_non_negative(arr: np.ndarray) -> None:
    if np.any(arr < 0.0):
        raise ValueError("Array contains non-positive values")


def _check_finite(arr: np.ndarray) -> None:
    if not np.all(np.isfinite(arr)):
        raise ValueError("Array contains non-positive or non-finite values")


def _normalize_over(arr: np.ndarray, axis) -> np.ndarray:
    """Divide by the sum over `axis`; slices summing to zero become zeros."""
    sums = arr.sum(axis=axis, keepdims=True)
    safe = np.where(sums == 0.0, 1.0, sums)
    return np.where(sums == 0.0, 0.0, arr / safe)


def _bad_dim(name: str, arr: np.ndarray) -> ValueError:
    return ValueError(f"{name} does not support arrays with {arr.ndim} dimensions")


def normalize_distribution(arr) -> np.ndarray:
    """Normalise along the first axis.

    A 1-D array must be non-negative; 2-D and 3-D arrays must be finite.
    Slices that sum to zero are returned as zeros.
    """
    a = _as_float_array(arr)
    if a.ndim == 1:
        _check_non_negative(a)
        total = a.sum()
        if total == 0.0:
            return np.zeros_like(a)
        return a / total
    if a.ndim in (2, 3):
        _check_finite(a)
        return _normalize_over(a, 0)
    raise _bad_dim("normalize_distribution", a)


def normalize_distribution_double(arr) -> np.ndarray:
    """Normalise over the first two axes.

    A 2-D array must be non-negative and is divided by its total; a 3-D
    array is normalised independently for each index of its last axis.
    """
    a = _as_float_array(arr)
    if a.ndim == 2:
        _check_non_negative(a)
        total = a.sum()
        if total == 0.0:
            return np.zeros_like(a)
        return a / total
    if a.ndim == 3:
        return _normalize_over(a, (0, 1))
    raise _bad_dim("normalize_distribution_double", a)


def normalize_distribution_3(arr) -> np.ndarray:
    """Divide a non-negative 3-D array by its total (zeros if the total is zero)."""
    a = _as_float_array(arr)
    if a.ndim != 3:
        raise _bad_dim("normalize_distribution_3", a)
    _check_non_negative(a)
    total = a.sum()
    if total == 0.0:
        return np.zeros_like(a)
    return a / total


def normalize_last(arr) -> np.ndarray:
    """Normalise a finite 2-D or 3-D array along its last axis."""
    a = _as_float_array(arr)
    if a.ndim not in (2, 3):
        raise _bad_dim("normalize_last", a)
    _check_finite(a)
    return _normalize_over(a, -1)


def normalize_last_2(arr) -> np.ndarray:
    """Normalise a 3-D array over its two last axes."""
    a = _as_float_array(arr)
    if a.ndim != 3:
        raise _bad_dim("normalize_last_2", a)
    return _normalize_over(a, (1, 2))


def normalize_transition_matrix(tm) -> np.ndarray:
    """Normalise each row of a transition matrix so that it sums to one."""
    a = _as_float_array(tm)
    if a.ndim != 2:
        raise _bad_dim("normalize_transition_matrix", a)
    return normalize_last(a)


def sorted_and_complete(arr: Sequence[int]) -> bool:
    """True if each element is exactly one more than the previous one."""
    return all(b == a + 1 for a, b in zip(arr, arr[1:]))


def sorted_and_complete_0start(arr: Sequence[int]) -> bool:
    """True if the sequence is exactly 0, 1, ..., len(arr) - 1."""
    return all(value == index for index, value in enumerate(arr))


def insert_in_order(v: Sequence[tuple[float, T]], elem: tuple[float, T]) -> list[tuple[float, T]]:
    """Return a copy of the decreasing list `v` with `elem` inserted, keeping it decreasing."""
    index = bisect_left(v, -elem[0], key=lambda pair: -pair[0])
    result = list(v)
    result.insert(index, elem)
    return result


def max_of_array(arr) -> float:
    """Largest element of the array, or -inf if it is empty."""
    a = _as_float_array(arr)
    if a.size == 0:
        return float("-inf")
    if np.any(np.isnan(a)):
        raise ValueError("Array contains NaN values")
    return float(a.max())


def max_f64(a: float, b: float) -> float:
    """Maximum of two floats, propagating NaN."""
    if a != a or b != b:
        return float("nan")
    if a == float("inf") or b == float("inf"):
        return float("inf")
    return max(a, b)


def difference_as_i64(a: int, b: int) -> int:
    """Signed difference a - b."""
    return a - b