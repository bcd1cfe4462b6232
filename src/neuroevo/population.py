"""
Population store and per-run evaluation context.

EvaluationContext is the only run-scoped shared state besides the
population itself: the random stream every operator draws from, the
configuration, the fitness evaluator, and the evaluation counter the
engine compares against its budget. It is passed explicitly to every
operator so the order of random draws and evaluations stays auditable.
"""

import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from neuroevo.config import OptimizerConfig
from neuroevo.core import DegenerateInputError
from neuroevo.fitness import FitnessEvaluator
from neuroevo.individual import Individual


@dataclass
class EvaluationContext:
	"""
	Shared state for one optimization run.

	Attributes:
		config: Run configuration (read-only)
		evaluator: Fitness collaborator
		rng: The single random stream for the run
		evaluations: Number of fitness evaluations performed so far
	"""
	config: OptimizerConfig
	evaluator: FitnessEvaluator
	rng: random.Random = field(default_factory=random.Random)
	evaluations: int = 0

	@classmethod
	def create(
		cls,
		config: OptimizerConfig,
		evaluator: FitnessEvaluator,
		seed: Optional[int] = None,
	) -> 'EvaluationContext':
		"""Context seeded from `seed`, falling back to config.seed."""
		seed = config.seed if seed is None else seed
		return cls(config=config, evaluator=evaluator, rng=random.Random(seed))

	def evaluate(self, individual: Individual) -> float:
		"""
		Evaluate one individual, store its fitness and count the call.

		Evaluator errors propagate; a NaN or negative cost is rejected.
		"""
		fitness = float(self.evaluator.evaluate(individual, self))
		self.evaluations += 1
		if math.isnan(fitness) or fitness < 0:
			raise ValueError(f"Fitness evaluator returned invalid cost {fitness} (must be a non-negative number)")
		individual.fitness = fitness
		return fitness

	def evaluate_all(self, individuals: Iterable[Individual]) -> None:
		for individual in individuals:
			self.evaluate(individual)

	def ensure_evaluated(self, individual: Individual) -> float:
		"""Evaluate only if the individual has no fitness yet."""
		if individual.fitness is None:
			return self.evaluate(individual)
		return individual.fitness

	def random_individual(self) -> Individual:
		cfg = self.config
		return Individual.random(cfg.num_genes, cfg.min_gene, cfg.max_gene, self.rng)

	@property
	def budget_exhausted(self) -> bool:
		return self.evaluations >= self.config.max_evaluations


class Population:
	"""
	Ordered, mutable sequence of individuals.

	Position matters: tournament operators shuffle it in place and
	rank-route selection ranks by position. `size` is the nominal size the
	replacement operators are expected to preserve.
	"""

	def __init__(self, individuals: Iterable[Individual], size: Optional[int] = None):
		self._individuals = list(individuals)
		self.size = len(self._individuals) if size is None else size

	def __len__(self) -> int:
		return len(self._individuals)

	def __iter__(self) -> Iterator[Individual]:
		return iter(self._individuals)

	def __getitem__(self, index: int) -> Individual:
		return self._individuals[index]

	def __setitem__(self, index: int, individual: Individual) -> None:
		self._individuals[index] = individual

	def __delitem__(self, index: int) -> None:
		del self._individuals[index]

	def append(self, individual: Individual) -> None:
		self._individuals.append(individual)

	def shuffle(self, rng: random.Random) -> None:
		rng.shuffle(self._individuals)

	@property
	def individuals(self) -> list[Individual]:
		return self._individuals

	def fitness_values(self) -> list[float]:
		return [ind.fitness for ind in self._individuals]

	def _require_members(self) -> None:
		if not self._individuals:
			raise DegenerateInputError("Population is empty")

	def best_index(self) -> int:
		"""Index of the first lowest-fitness member."""
		self._require_members()
		best = 0
		for i in range(1, len(self._individuals)):
			if self._individuals[i].fitness < self._individuals[best].fitness:
				best = i
		return best

	def worst_index(self) -> int:
		"""Index of the first highest-fitness member."""
		self._require_members()
		worst = 0
		for i in range(1, len(self._individuals)):
			if self._individuals[i].fitness > self._individuals[worst].fitness:
				worst = i
		return worst

	def best(self) -> Individual:
		"""
		Copy of the lowest-fitness member of the current population.

		This is not an all-time best: if the population regresses, so does
		the value returned here.
		"""
		return self._individuals[self.best_index()].clone()

	def __repr__(self) -> str:
		return f"Population(len={len(self)}, size={self.size})"
