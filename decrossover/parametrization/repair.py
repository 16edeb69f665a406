# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
import decrossover.common.typing as tp
from decrossover.common import errors


class RepairStrategy:
    """Base class for strategies projecting an out-of-bounds variable value
    back into its [lower, upper] interval.
    Values which are already within the bounds are returned unchanged.
    """

    def repair(self, value: float, lower: float, upper: float) -> float:
        if lower > upper:
            raise errors.InvalidConfigurationError(
                f"Lower bound {lower} should be smaller than upper bound {upper}"
            )
        if lower <= value <= upper:
            return value
        return self._repair(value, lower, upper)

    def _repair(self, value: float, lower: float, upper: float) -> float:
        raise NotImplementedError

    def __call__(self, value: float, lower: float, upper: float) -> float:
        return self.repair(value, lower, upper)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class BoundValueRepair(RepairStrategy):
    """Clamps the value to the closest bound.
    Infinite values are clamped as well, but NaN has no closest bound
    and raises a NonFiniteValueError.
    """

    def _repair(self, value: float, lower: float, upper: float) -> float:
        if math.isnan(value):
            raise errors.NonFiniteValueError(f"Cannot clamp NaN into [{lower}, {upper}]")
        return lower if value < lower else upper


class OppositeBoundValueRepair(RepairStrategy):
    """Sets values below the lower bound to the upper bound, and conversely."""

    def _repair(self, value: float, lower: float, upper: float) -> float:
        if math.isnan(value):
            raise errors.NonFiniteValueError(f"Cannot repair NaN into [{lower}, {upper}]")
        return upper if value < lower else lower


class RandomValueRepair(RepairStrategy):
    """Replaces out-of-bounds values (NaN included) by a uniform draw within the bounds.

    Parameters
    ----------
    random_source: BoundedRandomSource
        source of the uniform draws
    """

    def __init__(self, random_source: tp.BoundedRandomSource) -> None:
        self.random_source = random_source

    def repair(self, value: float, lower: float, upper: float) -> float:
        if math.isnan(value):  # NaN fails all comparisons, so it is handled before the bounds check
            value = math.inf
        return super().repair(value, lower, upper)

    def _repair(self, value: float, lower: float, upper: float) -> float:
        return self.random_source.next_real(lower, upper)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.random_source!r})"
