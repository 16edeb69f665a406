# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import enum
import decrossover.common.typing as tp
from decrossover.common import errors


class DEVariant(enum.Enum):
    """Differential evolution variants, named after the
    base/number of difference vectors/crossover notation.
    """

    RAND_1_BIN = "rand/1/bin"
    RAND_1_EXP = "rand/1/exp"
    RAND_2_BIN = "rand/2/bin"
    RAND_2_EXP = "rand/2/exp"
    BEST_1_BIN = "best/1/bin"
    BEST_1_EXP = "best/1/exp"
    CURRENT_TO_RAND_1_BIN = "current-to-rand/1/bin"
    CURRENT_TO_RAND_1_EXP = "current-to-rand/1/exp"


class CrossoverTopology(enum.Enum):
    BIN = "bin"  # binomial: independent draw for each variable
    EXP = "exp"  # exponential: contiguous run of variables


class MutationBase(enum.Enum):
    RAND = "rand"
    BEST = "best"
    CURRENT_TO_RAND = "current-to-rand"


class VariantConfig(tp.NamedTuple):
    """Orthogonal axes of a differential evolution variant"""

    difference_vectors: int
    topology: CrossoverTopology
    mutation_base: MutationBase

    @property
    def required_parents(self) -> int:
        return 1 + 2 * self.difference_vectors


_VARIANTS: tp.Dict[DEVariant, VariantConfig] = {
    DEVariant.RAND_1_BIN: VariantConfig(1, CrossoverTopology.BIN, MutationBase.RAND),
    DEVariant.RAND_1_EXP: VariantConfig(1, CrossoverTopology.EXP, MutationBase.RAND),
    DEVariant.RAND_2_BIN: VariantConfig(2, CrossoverTopology.BIN, MutationBase.RAND),
    DEVariant.RAND_2_EXP: VariantConfig(2, CrossoverTopology.EXP, MutationBase.RAND),
    DEVariant.BEST_1_BIN: VariantConfig(1, CrossoverTopology.BIN, MutationBase.BEST),
    DEVariant.BEST_1_EXP: VariantConfig(1, CrossoverTopology.EXP, MutationBase.BEST),
    DEVariant.CURRENT_TO_RAND_1_BIN: VariantConfig(1, CrossoverTopology.BIN, MutationBase.CURRENT_TO_RAND),
    DEVariant.CURRENT_TO_RAND_1_EXP: VariantConfig(1, CrossoverTopology.EXP, MutationBase.CURRENT_TO_RAND),
}


VariantLike = tp.Union[DEVariant, str]


def parse_variant(variant: VariantLike) -> DEVariant:
    """Converts a variant, its name ("RAND_1_BIN") or its notation ("rand/1/bin")
    into a DEVariant
    """
    if isinstance(variant, DEVariant):
        return variant
    if isinstance(variant, str):
        if variant in DEVariant.__members__:
            return DEVariant[variant]
        try:
            return DEVariant(variant.lower())
        except ValueError:
            pass
    options = ", ".join(v.name for v in DEVariant)
    raise errors.InvalidConfigurationError(
        f"Unknown DE variant {variant!r}, available variants are: {options}"
    )


def resolve_variant(variant: VariantLike) -> VariantConfig:
    """Derives the number of difference vectors, the crossover topology and the
    mutation base of a variant
    """
    variant = parse_variant(variant)
    if variant not in _VARIANTS:
        raise errors.InvalidConfigurationError(f"DE variant {variant} has no known configuration")
    return _VARIANTS[variant]


def required_parents(variant: VariantLike) -> int:
    return resolve_variant(variant).required_parents
