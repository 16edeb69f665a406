# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from decrossover.common import errors
from decrossover.common import testing
from . import randomness


def test_numpy_random_source_bounds() -> None:
    source = randomness.NumpyRandomSource(12)
    ints = [source.next_int(2, 4) for _ in range(200)]
    assert set(ints) == {2, 3, 4}
    reals = np.array([source.next_real(-1.0, 1.0) for _ in range(200)])
    assert reals.min() >= -1.0
    assert reals.max() < 1.0
    assert source.next_int(3, 3) == 3


def test_numpy_random_source_seeding() -> None:
    draws = []
    for seed in [12, 12]:
        source = randomness.NumpyRandomSource(np.random.RandomState(seed))
        draws.append([source.next_int(0, 10), source.next_real(0.0, 1.0)])
    assert draws[0] == draws[1]
    assert isinstance(draws[0][0], int)
    assert isinstance(draws[0][1], float)


def test_function_random_source() -> None:
    calls: tp.List[tp.Tuple[float, float]] = []

    def int_gen(low: int, high: int) -> int:
        calls.append((low, high))
        return high

    def real_gen(low: float, high: float) -> float:
        calls.append((low, high))
        return low

    source = randomness.FunctionRandomSource(int_gen, real_gen)
    assert source.next_int(0, 5) == 5
    assert source.next_real(0.25, 1.0) == 0.25
    assert calls == [(0, 5), (0.25, 1.0)]


@testing.parametrized(
    zero=(0.0, 2, 0.5),
    middle=(0.5, 4, 1.5),
    almost_one=(0.999, 5, 2.498),
    one=(1.0, 5, 2.5),  # generator out of its contract must not overflow
)
def test_unit_random_source(unit: float, expected_int: int, expected_real: float) -> None:
    source = randomness.UnitRandomSource(lambda: unit)
    assert source.next_int(2, 5) == expected_int
    np.testing.assert_almost_equal(source.next_real(0.5, 2.5), expected_real)


def test_sequence_random_source() -> None:
    source = randomness.SequenceRandomSource(ints=[1, 2], reals=[0.1, 0.2, 0.3])
    assert [source.next_int(0, 3) for _ in range(3)] == [1, 2, 1]
    assert [source.next_real(0, 1) for _ in range(4)] == [0.1, 0.2, 0.3, 0.1]
    assert (source.num_int_draws, source.num_real_draws) == (3, 4)
    source.reset()
    assert source.next_int(0, 3) == 1
    assert (source.num_int_draws, source.num_real_draws) == (1, 0)


def test_sequence_random_source_errors() -> None:
    with pytest.raises(errors.InvalidConfigurationError):
        randomness.SequenceRandomSource(ints=[])
    source = randomness.SequenceRandomSource(ints=[4], reals=[1.5])
    with pytest.raises(errors.PreconditionError):
        source.next_int(0, 3)
    with pytest.raises(errors.PreconditionError):
        source.next_real(0.0, 1.0)


@testing.parametrized(
    numpy=(randomness.NumpyRandomSource(0),),
    function=(randomness.FunctionRandomSource(lambda a, b: a, lambda a, b: a),),
    unit=(randomness.UnitRandomSource(lambda: 0.0),),
    sequence=(randomness.SequenceRandomSource(),),
)
def test_inverted_interval(source: tp.Any) -> None:
    with pytest.raises(errors.InvalidConfigurationError):
        source.next_int(3, 2)
    with pytest.raises(errors.InvalidConfigurationError):
        source.next_real(1.0, 0.0)
