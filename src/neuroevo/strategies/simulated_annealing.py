"""
Simulated Annealing over a single weight vector.

- Exactly max_evaluations iterations (an iteration count, not a budget check)
- Neighbour: transpose two random genes of the current individual
- Metropolis acceptance: always take an improvement, otherwise accept
  with P = exp((current - candidate) / T)
- Geometric cooling every iteration: T = T * (1 - cooling_rate),
  so after k iterations T = T0 * (1 - cooling_rate)^k
"""

from typing import Optional

from neuroevo.core import DegenerateInputError
from neuroevo.fitness import FitnessEvaluator
from neuroevo.population import EvaluationContext
from neuroevo.strategies.base import OptimizerResult, OptimizerStrategyBase, acceptance, improvement_percent


class SimulatedAnnealingStrategy(OptimizerStrategyBase):
	"""
	Simulated Annealing with gene-transposition neighbours.

	Uses config.temperature as the initial temperature and config.cooling_rate
	as the per-iteration cooling factor. The final temperature is available
	as `temperature` after a run.
	"""

	def __init__(self, *args, **kwargs):
		super().__init__(*args, **kwargs)
		self._temperature = self._config.temperature

	@property
	def name(self) -> str:
		return "SimulatedAnnealing"

	@property
	def temperature(self) -> float:
		return self._temperature

	def optimize(
		self,
		evaluator: FitnessEvaluator,
		context: Optional[EvaluationContext] = None,
	) -> OptimizerResult:
		context = context or self.create_context(evaluator)
		cfg = self._config
		rng = context.rng

		current = context.random_individual()
		length = len(current)
		if length == 0:
			raise DegenerateInputError("Simulated annealing needs a non-empty chromosome")
		context.evaluate(current)
		best = current.clone()
		initial_fitness = current.fitness

		self._temperature = cfg.temperature
		history = []

		self._log(f"[SA] Initial fitness: {current.fitness:.6f}, T={self._temperature:.4f}")

		for iteration in range(cfg.max_evaluations):
			candidate = current.clone()
			pos1 = rng.randrange(length)
			pos2 = rng.randrange(length)
			candidate.swap(pos1, pos2)
			context.evaluate(candidate)

			if acceptance(current.fitness, candidate.fitness, self._temperature) > rng.random():
				current = candidate

			if current.fitness < best.fitness:
				best = current.clone()

			self._temperature *= 1 - cfg.cooling_rate
			self._report(context, best.fitness, history)

			if self._verbose and (iteration + 1) % 1000 == 0:
				self._log(
					f"[SA] Iter {iteration + 1}: current={current.fitness:.6f}, "
					f"best={best.fitness:.6f}, T={self._temperature:.6f}"
				)

		self._finish(best)

		return OptimizerResult(
			best=best,
			initial_fitness=initial_fitness,
			final_fitness=best.fitness,
			improvement_percent=improvement_percent(initial_fitness, best.fitness),
			iterations_run=cfg.max_evaluations,
			evaluations=context.evaluations,
			method_name=self.name,
			history=history,
		)
