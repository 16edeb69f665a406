# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Bounded random sources used by the operators.
Operators never draw from the global numpy state, they only call
:code:`next_int` and :code:`next_real` on the source they were provided,
so that any draw sequence can be injected.

None of these sources is synchronized: share one between threads only
if the draw order does not matter.
"""

import math
import itertools
import numpy as np
import decrossover.common.typing as tp
from decrossover.common import errors


BoundedRandomSource = tp.BoundedRandomSource


def _check_interval(low: float, high: float) -> None:
    if low > high:
        raise errors.InvalidConfigurationError(
            f"Lower value {low} should be smaller than higher value {high}"
        )


class NumpyRandomSource:
    """Random source based on a numpy RandomState.

    Parameters
    ----------
    random_state: int, RandomState or None
        seed or random state to draw from. A new unseeded random state is used if None.
    """

    def __init__(self, random_state: tp.Optional[tp.Union[int, np.random.RandomState]] = None) -> None:
        if not isinstance(random_state, np.random.RandomState):
            random_state = np.random.RandomState(random_state)
        self.random_state = random_state

    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high] (both included)"""
        _check_interval(low, high)
        return int(self.random_state.randint(low, high + 1))

    def next_real(self, low: float, high: float) -> float:
        """Uniform real in [low, high)"""
        _check_interval(low, high)
        return float(self.random_state.uniform(low, high))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class FunctionRandomSource:
    """Random source delegating to two bounded generator functions.

    Parameters
    ----------
    int_generator: callable
        function (low, high) -> int in [low, high]
    real_generator: callable
        function (low, high) -> float in [low, high)
    """

    def __init__(self, int_generator: tp.IntGenerator, real_generator: tp.RealGenerator) -> None:
        self._int_generator = int_generator
        self._real_generator = real_generator

    def next_int(self, low: int, high: int) -> int:
        _check_interval(low, high)
        return int(self._int_generator(low, high))

    def next_real(self, low: float, high: float) -> float:
        _check_interval(low, high)
        return float(self._real_generator(low, high))


class UnitRandomSource:
    """Random source deriving both bounded draws from a single
    generator of reals in [0, 1).

    Parameters
    ----------
    generator: callable
        function without argument returning a float in [0, 1)
    """

    def __init__(self, generator: tp.Callable[[], float]) -> None:
        self._generator = generator

    def next_int(self, low: int, high: int) -> int:
        _check_interval(low, high)
        value = low + int(math.floor(self._generator() * (high - low + 1)))
        return min(value, high)  # a generator returning exactly 1.0 would overflow

    def next_real(self, low: float, high: float) -> float:
        _check_interval(low, high)
        return low + (high - low) * self._generator()


class SequenceRandomSource:
    """Deterministic random source cycling over fixed sequences.
    Integers and reals are read from their own sequence, and must
    lie within the requested interval.

    Parameters
    ----------
    ints: sequence of int
        integers returned by successive calls to next_int
    reals: sequence of float
        reals returned by successive calls to next_real

    Example
    -------
    >>> source = SequenceRandomSource(ints=[0], reals=[0.0])
    >>> source.next_int(0, 3), source.next_real(0.0, 1.0)
    (0, 0.0)
    """

    def __init__(self, ints: tp.Sequence[int] = (0,), reals: tp.Sequence[float] = (0.0,)) -> None:
        if not ints or not reals:
            raise errors.InvalidConfigurationError("Sequences of a SequenceRandomSource cannot be empty")
        self._ints = list(ints)
        self._reals = list(reals)
        self._int_iter: tp.Iterator[int] = itertools.cycle(self._ints)
        self._real_iter: tp.Iterator[float] = itertools.cycle(self._reals)
        self.num_int_draws = 0
        self.num_real_draws = 0

    def reset(self) -> None:
        """Restarts both sequences from their first element"""
        self._int_iter = itertools.cycle(self._ints)
        self._real_iter = itertools.cycle(self._reals)
        self.num_int_draws = 0
        self.num_real_draws = 0

    def next_int(self, low: int, high: int) -> int:
        _check_interval(low, high)
        value = next(self._int_iter)
        self.num_int_draws += 1
        if not low <= value <= high:
            raise errors.PreconditionError(f"Sequence value {value} is not in [{low}, {high}]")
        return value

    def next_real(self, low: float, high: float) -> float:
        _check_interval(low, high)
        value = next(self._real_iter)
        self.num_real_draws += 1
        if not low <= value <= high:
            raise errors.PreconditionError(f"Sequence value {value} is not in [{low}, {high}]")
        return value
