# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import decrossover.common.typing as tp
from decrossover.common import errors


S = tp.TypeVar("S", bound="Solution")


def bound_to_array(x: tp.BoundValue, size: int) -> np.ndarray:
    """Broadcasts a bound to a float array with one value per variable"""
    out = np.array(x, dtype=float)
    if out.ndim == 0:
        return np.full(size, float(out))
    if out.shape != (size,):
        raise errors.InvalidConfigurationError(f"Bounds of shape {out.shape} do not match {size} variables")
    return out


class Solution:
    """Real-valued solution with box constraints.

    Parameters
    ----------
    values: array-like
        values of the variables
    lower: array or float
        lower bound of each variable (a float applies to all of them)
    upper: array or float
        upper bound of each variable (a float applies to all of them)

    Note
    ----
    - values are not checked against the bounds at initialization, use :code:`is_within_bounds`
    - objectives are left empty for an external evaluator to fill, attributes can hold any
      algorithm specific information
    - :code:`copy` yields a fully independent solution (no shared array or dict)
    """

    def __init__(self, values: tp.ArrayLike, lower: tp.BoundValue, upper: tp.BoundValue) -> None:
        self._values = np.array(values, dtype=float)
        if self._values.ndim != 1:
            raise errors.InvalidConfigurationError(
                f"Expected a 1d sequence of values but got shape {self._values.shape}"
            )
        size = self._values.size
        self._lower = bound_to_array(lower, size)
        self._upper = bound_to_array(upper, size)
        if (self._lower > self._upper).any():
            raise errors.InvalidConfigurationError(
                f"Lower bounds {self._lower} should be smaller than upper bounds {self._upper}"
            )
        self.objectives = np.array([], dtype=float)
        self.attributes: tp.Dict[str, tp.Any] = {}

    @property
    def number_of_variables(self) -> int:
        return self._values.size

    @property
    def value(self) -> np.ndarray:
        """Copy of the values of the variables"""
        return self._values.copy()

    @property
    def bounds(self) -> tp.Tuple[np.ndarray, np.ndarray]:
        """Copy of the lower and upper bounds arrays"""
        return self._lower.copy(), self._upper.copy()

    def lower_bound(self, index: int) -> float:
        return float(self._lower[index])

    def upper_bound(self, index: int) -> float:
        return float(self._upper[index])

    def is_within_bounds(self) -> bool:
        return bool(np.all(self._lower <= self._values) and np.all(self._values <= self._upper))

    def copy(self: S) -> S:
        child = self.__class__.__new__(self.__class__)
        child.__dict__.update(self.__dict__)
        child._values = self._values.copy()
        child._lower = self._lower.copy()
        child._upper = self._upper.copy()
        child.objectives = np.array(self.objectives, dtype=float, copy=True)
        child.attributes = dict(self.attributes)
        return child

    def __len__(self) -> int:
        return self._values.size

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._values[index] = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values.tolist()})"
