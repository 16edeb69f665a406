# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from decrossover.common import errors
from decrossover.common import testing
from .solution import Solution


def test_solution_accessors() -> None:
    sol = Solution([0.5, 1.5, -2.0], lower=[0, 1, -3], upper=[1, 2, 0])
    assert sol.number_of_variables == 3
    assert len(sol) == 3
    assert sol[1] == 1.5
    assert sol.lower_bound(2) == -3.0
    assert sol.upper_bound(1) == 2.0
    sol[0] = 0.25
    np.testing.assert_array_equal(sol.value, [0.25, 1.5, -2.0])
    assert repr(sol) == "Solution([0.25, 1.5, -2.0])"


def test_scalar_bounds_are_broadcast() -> None:
    sol = Solution([0.1, 0.2], lower=0, upper=1)
    lower, upper = sol.bounds
    np.testing.assert_array_equal(lower, [0.0, 0.0])
    np.testing.assert_array_equal(upper, [1.0, 1.0])


def test_value_is_a_copy() -> None:
    sol = Solution([0.1, 0.2], lower=0, upper=1)
    value = sol.value
    value[0] = 12
    assert sol[0] == 0.1


def test_copy_has_no_aliasing() -> None:
    sol = Solution([0.1, 0.2], lower=0, upper=1)
    sol.objectives = np.array([3.0, 4.0])
    sol.attributes["index"] = 2
    child = sol.copy()
    child[0] = 0.9
    child.objectives[0] = 12.0
    child.attributes["index"] = 3
    np.testing.assert_array_equal(sol.value, [0.1, 0.2])
    np.testing.assert_array_equal(sol.objectives, [3.0, 4.0])
    assert sol.attributes == {"index": 2}
    np.testing.assert_array_equal(child.value, [0.9, 0.2])
    assert isinstance(child, Solution)


@testing.parametrized(
    inside=([0.0, 1.0], True),
    below=([-0.1, 1.0], False),
    above=([0.0, 1.1], False),
    nan=([np.nan, 0.5], False),
)
def test_is_within_bounds(values: tp.List[float], expected: bool) -> None:
    assert Solution(values, lower=0, upper=1).is_within_bounds() is expected


@testing.parametrized(
    inverted_bounds=([0.5], 1, 0),
    bad_bound_shape=([0.5, 0.5], [0, 0, 0], 1),
    bad_value_shape=([[0.5, 0.5]], 0, 1),
)
def test_solution_errors(values: tp.Any, lower: tp.Any, upper: tp.Any) -> None:
    with pytest.raises(errors.InvalidConfigurationError):
        Solution(values, lower=lower, upper=upper)
