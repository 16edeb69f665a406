# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
import inspect
import logging
import warnings
import numpy as np
import decrossover.common.typing as tp
from decrossover.common import errors
from decrossover.common.decorators import Registry
from decrossover.parametrization.solution import Solution
from decrossover.parametrization import repair as _repair
from . import randomness
from .variants import DEVariant, VariantLike, CrossoverTopology, MutationBase, resolve_variant, parse_variant


logger = logging.getLogger(__name__)


class DifferentialEvolutionCrossover:
    """Differential evolution crossover, producing one offspring from the current
    solution and a set of parents.

    The parents must be provided in the order
    :code:`[diff_1a, diff_1b, (diff_2a, diff_2b,) base]`, and the mutant value of each
    variable is computed as:

    - rand: :code:`base + F * (diff_1a - diff_1b) (+ F * (diff_2a - diff_2b))`
    - best: same as rand, with the best solution instead of the base parent
    - current-to-rand: :code:`current + F * (base - current) + F * (diff_1a - diff_1b)`

    Mutant values are then accepted variable-wise according to the crossover topology
    (binomial or exponential), with one randomly drawn variable always accepted,
    and are repaired into the bounds of the variable.

    Parameters
    ----------
    CR: float
        crossover rate, in [0, 1]
    F: float
        scale factor of the difference vectors, usually in (0, 2]
    variant: DEVariant or str
        variant of differential evolution, eg :code:`DEVariant.RAND_1_BIN` or :code:`"rand/1/bin"`
    random_source: BoundedRandomSource or None
        source of all random draws (a NumpyRandomSource is created if not provided)
    repair: RepairStrategy or None
        strategy for out-of-bounds mutant values (clamping to the closest bound by default)

    Note
    ----
    Parent selection (including the distinctness of the parents) is left to the caller.
    The operator holds no per-call state: current and best solutions are provided to
    :code:`execute` and the operator can be shared, as long as the random source can.
    """

    def __init__(
        self,
        CR: float = 0.5,
        F: float = 0.5,
        variant: VariantLike = DEVariant.RAND_1_BIN,
        *,
        random_source: tp.Optional[tp.BoundedRandomSource] = None,
        repair: tp.Optional[_repair.RepairStrategy] = None,
    ) -> None:
        self._variant = parse_variant(variant)
        self._config = resolve_variant(self._variant)
        self.CR = CR
        self.F = F
        self.random_source: tp.BoundedRandomSource = (
            randomness.NumpyRandomSource() if random_source is None else random_source
        )
        self.repair = _repair.BoundValueRepair() if repair is None else repair
        logger.debug("Created %r", self)

    @property
    def CR(self) -> float:
        return self._CR

    @CR.setter
    def CR(self, value: float) -> None:
        value = float(value)
        if not 0 <= value <= 1:  # also rejects NaN
            raise errors.InvalidConfigurationError(f"Crossover rate CR must be in [0, 1], got {value}")
        self._CR = value

    @property
    def F(self) -> float:
        return self._F

    @F.setter
    def F(self, value: float) -> None:
        value = float(value)
        if not math.isfinite(value):
            raise errors.InvalidConfigurationError(f"Scale factor F must be finite, got {value}")
        if not 0 < value <= 2:
            warnings.warn(
                f"Scale factor F={value} is outside of the conventional (0, 2] range",
                errors.InefficientSettingsWarning,
            )
        self._F = value

    @property
    def variant(self) -> DEVariant:
        return self._variant

    @property
    def difference_vectors(self) -> int:
        return self._config.difference_vectors

    @property
    def topology(self) -> CrossoverTopology:
        return self._config.topology

    @property
    def mutation_base(self) -> MutationBase:
        return self._config.mutation_base

    @property
    def number_of_required_parents(self) -> int:
        return self._config.required_parents

    @property
    def number_of_generated_children(self) -> int:
        return 1

    @property
    def crossover_probability(self) -> float:
        """The operator is always applied, CR only drives the variable-wise acceptance"""
        return 1.0

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(CR=self.CR, F=self.F, variant=self.variant)

    def execute(
        self, parents: tp.Sequence[Solution], current: Solution, best: tp.Optional[Solution] = None
    ) -> tp.List[Solution]:
        """Creates the offspring of the current solution

        Parameters
        ----------
        parents: sequence of Solution
            exactly :code:`number_of_required_parents` solutions, base parent last
        current: Solution
            solution which is copied into the offspring before mutation
        best: Solution or None
            best solution, required by the best/* variants only

        Returns
        -------
        list
            a list holding the only offspring
        """
        self._check_inputs(parents, current, best)
        child = current.copy()
        num_vars = current.number_of_variables
        jrand = self.random_source.next_int(0, num_vars - 1)
        donor = self._donor(parents, current, best)
        if self.topology == CrossoverTopology.BIN:
            mask = self._binomial_mask(num_vars, jrand)
        else:
            mask = self._exponential_mask(num_vars, jrand)
        for idx in np.flatnonzero(mask):
            child[idx] = self.repair(float(donor[idx]), child.lower_bound(idx), child.upper_bound(idx))
        logger.debug(
            "%s crossover mutated %s of %s variables (jrand=%s)",
            self.variant.value,
            int(mask.sum()),
            num_vars,
            jrand,
        )
        return [child]

    def __call__(
        self, parents: tp.Sequence[Solution], current: Solution, best: tp.Optional[Solution] = None
    ) -> tp.List[Solution]:
        return self.execute(parents, current, best)

    def _check_inputs(
        self, parents: tp.Sequence[Solution], current: tp.Optional[Solution], best: tp.Optional[Solution]
    ) -> None:
        if current is None:
            raise errors.PreconditionError("A current solution must be provided to the crossover")
        if self.mutation_base == MutationBase.BEST and best is None:
            raise errors.PreconditionError(f"Variant {self.variant.name} requires a best solution")
        if len(parents) != self.number_of_required_parents:
            raise errors.PreconditionError(
                f"Variant {self.variant.name} requires {self.number_of_required_parents} parents "
                f"but got {len(parents)}"
            )
        num_vars = current.number_of_variables
        if not num_vars:
            raise errors.PreconditionError("Cannot apply the crossover to a solution without variables")
        others = list(parents) + ([best] if best is not None else [])
        sizes = {s.number_of_variables for s in others}
        if sizes - {num_vars}:
            raise errors.PreconditionError(
                f"All solutions must have {num_vars} variables as the current one, got sizes {sorted(sizes)}"
            )

    def _donor(
        self, parents: tp.Sequence[Solution], current: Solution, best: tp.Optional[Solution]
    ) -> np.ndarray:
        """Mutant values for all the variables, before repair"""
        data = [p.value for p in parents]
        F = self.F
        base = self.mutation_base
        if base == MutationBase.RAND:
            donor = data[-1]
        elif base == MutationBase.BEST:
            assert best is not None
            donor = best.value
        else:  # current-to-rand
            cur = current.value
            donor = cur + F * (data[-1] - cur)
        for k in range(self.difference_vectors):
            donor = donor + F * (data[2 * k] - data[2 * k + 1])
        return donor

    def _binomial_mask(self, num_vars: int, jrand: int) -> np.ndarray:
        # one draw per variable, jrand included
        return np.array(
            [self.random_source.next_real(0.0, 1.0) < self.CR or idx == jrand for idx in range(num_vars)],
            dtype=bool,
        )

    def _exponential_mask(self, num_vars: int, jrand: int) -> np.ndarray:
        mask = np.zeros(num_vars, dtype=bool)
        k = jrand
        length = 0
        while True:
            mask[k] = True
            k = (k + 1) % num_vars
            length += 1
            if not (self.random_source.next_real(0.0, 1.0) < self.CR and length < num_vars):
                break
        return mask

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(CR={self.CR}, F={self.F}, variant={self.variant.name})"


class ConfiguredCrossover:
    """Creates differential evolution crossovers with a given configuration.

    Parameters
    ----------
    CR: float
        crossover rate, in [0, 1]
    F: float
        scale factor of the difference vectors
    variant: DEVariant or str
        variant of differential evolution

    Note
    ----
    This provides a default repr which can be bypassed through set_name
    """

    def __init__(
        self, *, CR: float = 0.5, F: float = 0.5, variant: VariantLike = DEVariant.RAND_1_BIN
    ) -> None:
        self._config = dict(CR=CR, F=F, variant=parse_variant(variant))
        # instantiate for checking the configuration
        self(random_source=randomness.SequenceRandomSource())
        defaults = {
            x: y.default
            for x, y in inspect.signature(self.__class__.__init__).parameters.items()
            if x != "self"
        }
        diff = {x: y for x, y in self._config.items() if y != defaults[x]}
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(
        self,
        random_source: tp.Optional[tp.BoundedRandomSource] = None,
        repair: tp.Optional[_repair.RepairStrategy] = None,
    ) -> DifferentialEvolutionCrossover:
        """Creates a crossover operator from the configuration

        Parameters
        ----------
        random_source: BoundedRandomSource or None
            source of all random draws of the operator
        repair: RepairStrategy or None
            strategy for out-of-bounds mutant values
        """
        return DifferentialEvolutionCrossover(**self._config, random_source=random_source, repair=repair)

    def __repr__(self) -> str:
        return self.name

    def set_name(self, name: str, register: bool = False) -> "ConfiguredCrossover":
        """Set a new representation for the instance"""
        self.name = name
        if register:
            variant = self._config["variant"]
            config = resolve_variant(variant)
            info = dict(
                variant=variant,
                difference_vectors=config.difference_vectors,
                topology=config.topology,
                mutation_base=config.mutation_base,
            )
            registry.register_name(name, self, info=info)
        return self

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            return self._config == other._config
        return False

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, tuple(sorted((x, repr(y)) for x, y in self._config.items()))))


registry: Registry[ConfiguredCrossover] = Registry()


DERand1Bin = ConfiguredCrossover(variant=DEVariant.RAND_1_BIN).set_name("DERand1Bin", register=True)
DERand1Exp = ConfiguredCrossover(variant=DEVariant.RAND_1_EXP).set_name("DERand1Exp", register=True)
DERand2Bin = ConfiguredCrossover(variant=DEVariant.RAND_2_BIN).set_name("DERand2Bin", register=True)
DERand2Exp = ConfiguredCrossover(variant=DEVariant.RAND_2_EXP).set_name("DERand2Exp", register=True)
DEBest1Bin = ConfiguredCrossover(variant=DEVariant.BEST_1_BIN).set_name("DEBest1Bin", register=True)
DEBest1Exp = ConfiguredCrossover(variant=DEVariant.BEST_1_EXP).set_name("DEBest1Exp", register=True)
DECurrentToRand1Bin = ConfiguredCrossover(variant=DEVariant.CURRENT_TO_RAND_1_BIN).set_name(
    "DECurrentToRand1Bin", register=True
)
DECurrentToRand1Exp = ConfiguredCrossover(variant=DEVariant.CURRENT_TO_RAND_1_EXP).set_name(
    "DECurrentToRand1Exp", register=True
)
