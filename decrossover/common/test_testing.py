# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
from . import testing


@testing.parametrized(
    inside=([0.0, 0.5, 1.0], ""),
    below=([-0.1, 0.5, 1.0], ["  - variable 0: -0.1 not in [0.0, 1.0]"]),
    both=(
        [0.5, 2.0, -3.0],
        ["  - variable 1: 2.0 not in [0.0, 1.0]", "  - variable 2: -3.0 not in [0.0, 1.0]"],
    ),
)
def test_assert_within_bounds(values: tp.List[float], message: tp.Any) -> None:
    try:
        testing.assert_within_bounds(values, [0.0] * 3, [1.0] * 3)
    except AssertionError as error:
        if not message:
            raise AssertionError("An error has been raised while it should not.")
        np.testing.assert_equal(error.args[0].split("\n")[1:], message)
    else:
        if message:
            raise AssertionError("An error should have been raised.")


def test_printed_assert_equal() -> None:
    testing.printed_assert_equal(0, 0)
    np.testing.assert_raises(AssertionError, testing.printed_assert_equal, 0, 1)


@testing.parametrized(
    single=(3,),
    other=(4,),
)
def test_parametrized_single_argument(value: int) -> None:
    assert value in (3, 4)
