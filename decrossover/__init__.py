# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .parametrization import Solution as Solution
from .parametrization import repair as repair
from .optimization import randomness as randomness
from .optimization import DEVariant as DEVariant
from .optimization import DifferentialEvolutionCrossover as DifferentialEvolutionCrossover
from .optimization import ConfiguredCrossover as ConfiguredCrossover
from .optimization import registry as registry


__all__ = [
    "Solution",
    "DEVariant",
    "DifferentialEvolutionCrossover",
    "ConfiguredCrossover",
    "registry",
    "randomness",
    "repair",
    "errors",
    "typing",
]


__version__ = "0.1.0"
