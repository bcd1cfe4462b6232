"""
Steady-state evolutionary algorithm over weight vectors.

The algorithm:
1. Build and evaluate the starting population (initialisation strategy)
2. While the evaluation budget is not spent:
	a. Select two parents (selection strategy, owned copies)
	b. Cross them over into 1-2 children (crossover strategy)
	c. Mutate the children (mutation strategy)
	d. Evaluate every child
	e. Put the children back (replacement strategy)
	f. Recompute the best of the current population and report it
3. Hand the best individual to the persistence collaborator

The budget is only checked at the top of the loop, so the last generation
may overshoot max_evaluations by however many evaluations it performs.

The annealing-mutation temperature starts at temperature / divisor. When
ANNEALING is the configured mutation it cools by (1 - annealing_cooling)
once per generation, whether or not any candidate was accepted; with any
other mutation it stays at its starting value.
"""

from enum import Enum, auto
from typing import Optional

from neuroevo.core import Mutation
from neuroevo.fitness import FitnessEvaluator
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext, Population
from neuroevo.strategies.base import OptimizerResult, OptimizerStrategyBase, improvement_percent
from neuroevo.strategies.crossover import crossover
from neuroevo.strategies.initialisation import initialise
from neuroevo.strategies.mutation import mutate
from neuroevo.strategies.replacement import replace
from neuroevo.strategies.selection import select


class EngineState(Enum):
	INITIALIZING = auto()
	EVOLVING = auto()
	TERMINATED = auto()


class EvolutionaryAlgorithmStrategy(OptimizerStrategyBase):
	"""
	Evolutionary engine with pluggable initialisation, selection, crossover,
	mutation and replacement, all chosen by the config.

	Usage:
		config = OptimizerConfig(num_genes=51, selection="tournament", mutation="standard")
		engine = EvolutionaryAlgorithmStrategy(config, reporter=ProgressTracker(log_every=100))
		result = engine.optimize(NetworkFitness(train, num_hidden=5))
	"""

	def __init__(self, *args, **kwargs):
		super().__init__(*args, **kwargs)
		self._state = EngineState.INITIALIZING
		self._temperature = self._initial_mutation_temperature()
		self._population: Optional[Population] = None
		self._best: Optional[Individual] = None

	@property
	def name(self) -> str:
		return "EvolutionaryAlgorithm"

	@property
	def state(self) -> EngineState:
		return self._state

	@property
	def temperature(self) -> float:
		"""Current annealing-mutation temperature (only cools under Mutation.ANNEALING)."""
		return self._temperature

	@property
	def population(self) -> Optional[Population]:
		return self._population

	@property
	def best(self) -> Optional[Individual]:
		"""Best of the current population (not of all time)."""
		return self._best

	def _initial_mutation_temperature(self) -> float:
		return self._config.temperature / self._config.annealing_temperature_divisor

	def initialise(self, context: EvaluationContext) -> Population:
		"""Initializing state: build the population and compute the best."""
		self._state = EngineState.INITIALIZING
		self._temperature = self._initial_mutation_temperature()
		self._population = initialise(self._config.initialisation, context)
		self._best = self._population.best()
		self._log(
			f"[EA] Initialised {len(self._population)} individuals "
			f"({self._config.initialisation.name}), best={self._best.fitness:.6f}, "
			f"evaluations={context.evaluations}"
		)
		return self._population

	def step(self, population: Population, context: EvaluationContext) -> list[Individual]:
		"""
		Run one generation on `population` in place.

		Returns:
			The evaluated children that were inserted.
		"""
		cfg = self._config
		parent1 = select(cfg.selection, population, context)
		parent2 = select(cfg.selection, population, context)

		children = crossover(cfg.crossover, parent1, parent2, context)
		mutate(cfg.mutation, children, context, temperature=self._temperature)
		if cfg.mutation == Mutation.ANNEALING:
			self._temperature *= 1 - cfg.annealing_cooling

		context.evaluate_all(children)
		replace(cfg.replacement, population, children, context)

		self._best = population.best()
		return children

	def optimize(
		self,
		evaluator: FitnessEvaluator,
		context: Optional[EvaluationContext] = None,
	) -> OptimizerResult:
		context = context or self.create_context(evaluator)
		cfg = self._config

		population = self.initialise(context)
		initial_fitness = self._best.fitness
		history = []

		self._state = EngineState.EVOLVING
		generation = 0
		while context.evaluations < cfg.max_evaluations:
			self.step(population, context)
			generation += 1
			self._report(context, self._best.fitness, history)

			if self._verbose and generation % 100 == 0:
				fitness = population.fitness_values()
				self._log(
					f"[EA] Gen {generation}: best={self._best.fitness:.6f}, "
					f"avg={sum(fitness) / len(fitness):.6f}, evaluations={context.evaluations}"
				)

		self._state = EngineState.TERMINATED
		self._log(
			f"[EA] Finished after {generation} generations, {context.evaluations} evaluations, "
			f"best={self._best.fitness:.6f}"
		)
		self._finish(self._best)

		return OptimizerResult(
			best=self._best.clone(),
			initial_fitness=initial_fitness,
			final_fitness=self._best.fitness,
			improvement_percent=improvement_percent(initial_fitness, self._best.fitness),
			iterations_run=generation,
			evaluations=context.evaluations,
			method_name=self.name,
			history=history,
		)
