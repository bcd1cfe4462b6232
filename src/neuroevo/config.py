"""
Run configuration.

One OptimizerConfig describes a whole run: population and gene parameters,
mutation, annealing schedule, evaluation budget and the five operator
selectors. It is read-only to the optimizers; a sweep driver reconfigures
between runs with replace():

	config = OptimizerConfig(num_genes=num_genes(8, 5, 3))
	config.validate()

	for rate in (0.01, 0.02, 0.04):
		run(config.replace(mutate_rate=rate))
"""

from dataclasses import asdict, dataclass, fields, replace as dc_replace
from typing import Any, Optional

from neuroevo.core import (
	ConfigurationError,
	Crossover,
	Initialisation,
	Mutation,
	Replacement,
	Selection,
	parse_enum,
)


def num_genes(num_input: int, num_hidden: int, num_output: int) -> int:
	"""
	Chromosome length for a network with one hidden layer.

	Weights input->hidden and hidden->output, then one bias per hidden and
	per output node.
	"""
	return (num_input * num_hidden) + (num_hidden * num_output) + num_hidden + num_output


# Selector fields and the enum each one is parsed into
_SELECTORS = {
	'initialisation': Initialisation,
	'selection': Selection,
	'crossover': Crossover,
	'mutation': Mutation,
	'replacement': Replacement,
}


@dataclass(frozen=True)
class OptimizerConfig:
	"""
	Configuration shared by the evolutionary engine, simulated annealing and
	hill climbing.

	Attributes:
		num_genes: Chromosome length (fixed for the run)
		population_size: Individuals kept by the evolutionary engine
		mutate_rate: Per-gene probability of a mutation
		mutate_change: +/- step applied to a mutated gene
		min_gene, max_gene: Bounds for randomly drawn genes
		tournament_size: Members sampled by tournament selection/replacement
		temperature: Initial temperature for simulated annealing
		cooling_rate: Geometric cooling factor for simulated annealing
		max_evaluations: Evaluation budget (engine) / iteration count (SA, HC)
		annealing_temperature_divisor: The engine's annealing mutation starts
			at temperature / divisor
		annealing_cooling: Per-generation cooling of the engine's annealing
			mutation temperature
		augment_extra: Surplus individuals drawn by augmented initialisation
		seed: Random seed (None = nondeterministic)
	"""
	num_genes: int = 5
	population_size: int = 40
	mutate_rate: float = 0.04
	mutate_change: float = 0.1
	min_gene: float = -3.0
	max_gene: float = 3.0
	tournament_size: int = 5
	temperature: float = 100000.0
	cooling_rate: float = 0.0011
	max_evaluations: int = 20000
	initialisation: Initialisation = Initialisation.AUGMENTED
	selection: Selection = Selection.RANDOM
	crossover: Crossover = Crossover.ONE_POINT
	mutation: Mutation = Mutation.ANNEALING
	replacement: Replacement = Replacement.TOURNAMENT
	annealing_temperature_divisor: float = 10.0
	annealing_cooling: float = 0.003
	augment_extra: int = 2500
	seed: Optional[int] = None

	def __post_init__(self):
		# Accept selector names ("tournament") as well as enum members
		for name, enum_cls in _SELECTORS.items():
			object.__setattr__(self, name, parse_enum(enum_cls, getattr(self, name)))

	def validate(self) -> 'OptimizerConfig':
		"""
		Check every parameter range.

		Returns:
			self, so construction and validation can be chained.

		Raises:
			ConfigurationError: Naming the first offending field.
		"""
		if self.num_genes <= 0:
			raise ConfigurationError(f"num_genes must be > 0, got {self.num_genes}")
		if self.population_size <= 0:
			raise ConfigurationError(f"population_size must be > 0, got {self.population_size}")
		if not 0.0 <= self.mutate_rate <= 1.0:
			raise ConfigurationError(f"mutate_rate must be in [0, 1], got {self.mutate_rate}")
		if self.mutate_change <= 0:
			raise ConfigurationError(f"mutate_change must be > 0, got {self.mutate_change}")
		if self.min_gene >= self.max_gene:
			raise ConfigurationError(
				f"min_gene must be < max_gene, got min_gene={self.min_gene}, max_gene={self.max_gene}"
			)
		# An empty tournament would make tournament replacement grow the population
		if not 1 <= self.tournament_size <= self.population_size:
			raise ConfigurationError(
				f"tournament_size must be in [1, population_size={self.population_size}], "
				f"got {self.tournament_size}"
			)
		if self.temperature <= 0:
			raise ConfigurationError(f"temperature must be > 0, got {self.temperature}")
		if not 0.0 <= self.cooling_rate < 1.0:
			raise ConfigurationError(f"cooling_rate must be in [0, 1), got {self.cooling_rate}")
		if self.max_evaluations <= 0:
			raise ConfigurationError(f"max_evaluations must be > 0, got {self.max_evaluations}")
		if self.annealing_temperature_divisor <= 0:
			raise ConfigurationError(
				f"annealing_temperature_divisor must be > 0, got {self.annealing_temperature_divisor}"
			)
		if not 0.0 <= self.annealing_cooling < 1.0:
			raise ConfigurationError(f"annealing_cooling must be in [0, 1), got {self.annealing_cooling}")
		if self.augment_extra < 0:
			raise ConfigurationError(f"augment_extra must be >= 0, got {self.augment_extra}")
		return self

	def replace(self, **changes: Any) -> 'OptimizerConfig':
		"""Return a copy with the given fields changed."""
		unknown = set(changes) - {f.name for f in fields(self)}
		if unknown:
			raise ConfigurationError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
		return dc_replace(self, **changes)

	def to_dict(self) -> dict[str, Any]:
		"""JSON-friendly dict (selectors by name)."""
		data = asdict(self)
		for name in _SELECTORS:
			data[name] = getattr(self, name).name
		return data

	@classmethod
	def from_dict(cls, data: dict[str, Any]) -> 'OptimizerConfig':
		"""Inverse of to_dict(); unknown keys are rejected."""
		unknown = set(data) - {f.name for f in fields(cls)}
		if unknown:
			raise ConfigurationError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
		return cls(**data)
