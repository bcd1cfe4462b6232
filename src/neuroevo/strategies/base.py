"""
Base classes for weight-vector optimization strategies.

Provides the shared result type, the Metropolis acceptance rule used by
simulated annealing and annealing mutation, and the strategy base class
handling seeding, logging, reporting and persistence hooks.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from neuroevo.config import OptimizerConfig
from neuroevo.fitness import FitnessEvaluator
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext


def acceptance(current_fitness: float, new_fitness: float, temperature: float) -> float:
	"""
	Probability of moving from a state with current_fitness to one with
	new_fitness at the given temperature.

	1.0 for a strict improvement, otherwise exp((current - new) / T).
	A temperature that has cooled to zero accepts no worse or equal move.
	"""
	if new_fitness < current_fitness:
		return 1.0
	if temperature <= 0:
		return 0.0
	return math.exp((current_fitness - new_fitness) / temperature)


class ProgressReporter(Protocol):
	"""Observability sink, called once per generation/iteration."""

	def report(self, evaluation_count: int, best_fitness: float) -> None:
		...


class WeightsSink(Protocol):
	"""Persistence collaborator, called once at the end of a run."""

	def save(self, individual: Individual) -> None:
		...


@dataclass
class OptimizerResult:
	"""Result of one optimization run."""

	best: Individual
	initial_fitness: float
	final_fitness: float
	improvement_percent: float
	iterations_run: int
	evaluations: int
	method_name: str
	history: list = field(default_factory=list)  # [(evaluation_count, best_fitness), ...]

	def __repr__(self) -> str:
		return (
			f"OptimizerResult("
			f"method={self.method_name}, "
			f"initial_fitness={self.initial_fitness:.4f}, "
			f"final_fitness={self.final_fitness:.4f}, "
			f"improvement={self.improvement_percent:.2f}%, "
			f"evaluations={self.evaluations})"
		)


def improvement_percent(initial: float, final: float) -> float:
	"""Relative reduction in cost, 0 if there was none."""
	if final < initial and initial != 0:
		return (initial - final) / initial * 100
	return 0.0


class OptimizerStrategyBase(ABC):
	"""
	Abstract base class for optimization strategies.

	Subclasses implement:
	- optimize(): The main loop
	- name property

	Usage:
		strategy = SimulatedAnnealingStrategy(config, verbose=True)
		result = strategy.optimize(evaluator)
		print(result.best, result.final_fitness)
	"""

	def __init__(
		self,
		config: Optional[OptimizerConfig] = None,
		verbose: bool = False,
		logger: Optional[Callable[[str], None]] = None,
		reporter: Optional[ProgressReporter] = None,
		persistence: Optional[WeightsSink] = None,
	):
		self._config = (config or OptimizerConfig()).validate()
		self._verbose = verbose
		self._logger = logger or print
		self._reporter = reporter
		self._persistence = persistence

	@property
	def config(self) -> OptimizerConfig:
		return self._config

	@property
	def verbose(self) -> bool:
		return self._verbose

	@property
	@abstractmethod
	def name(self) -> str:
		"""Return the strategy name."""
		...

	def _log(self, msg: str) -> None:
		"""Log a message using the configured logger."""
		if self._verbose:
			self._logger(msg)

	def create_context(self, evaluator: FitnessEvaluator, seed: Optional[int] = None) -> EvaluationContext:
		"""Fresh context for a run of this strategy (seed falls back to config.seed)."""
		return EvaluationContext.create(self._config, evaluator, seed=seed)

	def _report(self, context: EvaluationContext, best_fitness: float, history: list) -> None:
		history.append((context.evaluations, best_fitness))
		if self._reporter is not None:
			self._reporter.report(context.evaluations, best_fitness)

	def _finish(self, best: Individual) -> None:
		if self._persistence is not None:
			self._persistence.save(best)

	@abstractmethod
	def optimize(
		self,
		evaluator: FitnessEvaluator,
		context: Optional[EvaluationContext] = None,
	) -> OptimizerResult:
		"""
		Run the optimizer.

		Args:
			evaluator: Fitness collaborator (lower is better)
			context: Existing context to continue counting evaluations in;
				a fresh one is created from the config when omitted.

		Returns:
			OptimizerResult with the best individual and statistics
		"""
		...

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(config={self._config}, verbose={self._verbose})"
