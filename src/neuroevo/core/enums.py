"""
Strategy selector enumerations.

Each operator family of the evolutionary engine is a closed set of variants,
chosen by the run configuration. Every member has exactly one handler in the
corresponding strategies module.
"""

from enum import IntEnum, auto
from typing import TypeVar, Union

from neuroevo.core.errors import ConfigurationError


class Initialisation(IntEnum):
	"""How the starting population is built."""
	RANDOM = auto()             # population_size random individuals
	AUGMENTED = auto()          # population_size + surplus, keep the fittest
	POSITIVE_NEGATIVE = auto()  # each slot keeps the better of x and -x


class Selection(IntEnum):
	"""How a parent is picked from the population."""
	RANDOM = auto()
	TOURNAMENT = auto()
	ROULETTE = auto()
	RANK_ROUTE = auto()         # positional ranks + alias sampling


class Crossover(IntEnum):
	"""How two parents are combined into children."""
	ARITHMETIC = auto()         # 1 child, gene-wise mean
	ONE_POINT = auto()
	TWO_POINT = auto()
	UNIFORM = auto()


class Mutation(IntEnum):
	"""How children are perturbed before evaluation."""
	STANDARD = auto()
	CONSTRAINED = auto()        # greedy per-gene, reverts worsening changes
	ANNEALING = auto()          # gene transposition with Metropolis acceptance


class Replacement(IntEnum):
	"""How children are put back into the population."""
	WORST = auto()
	TOURNAMENT = auto()


class OptimizerType(IntEnum):
	"""Top-level optimizer."""
	EVOLUTIONARY = auto()
	SIMULATED_ANNEALING = auto()
	HILL_CLIMB = auto()


E = TypeVar('E', bound=IntEnum)


def parse_enum(enum_cls: type[E], value: Union[E, str, int]) -> E:
	"""
	Resolve a selector from an enum member, its name or its integer value.

	Names are matched case-insensitively and may use '-' in place of '_'
	(so "one-point" resolves to Crossover.ONE_POINT).

	Raises:
		ConfigurationError: If the value names no member of enum_cls.
	"""
	if isinstance(value, enum_cls):
		return value
	if isinstance(value, str):
		key = value.strip().upper().replace('-', '_')
		try:
			return enum_cls[key]
		except KeyError:
			pass
	elif isinstance(value, int) and not isinstance(value, bool):
		try:
			return enum_cls(value)
		except ValueError:
			pass
	valid = ", ".join(m.name for m in enum_cls)
	raise ConfigurationError(f"Unknown {enum_cls.__name__} selector: {value!r} (expected one of: {valid})")
