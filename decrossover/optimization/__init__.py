# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from . import randomness
from .variants import DEVariant
from .differentialevolution import DifferentialEvolutionCrossover
from .differentialevolution import ConfiguredCrossover
from .differentialevolution import registry
