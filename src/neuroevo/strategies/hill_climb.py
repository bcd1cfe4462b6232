"""
Greedy hill climbing over a single weight vector.

Each of the max_evaluations iterations clones the best individual, applies
standard per-gene mutation to the clone and keeps it only if its fitness
is strictly lower. No probabilistic acceptance, no cooling.
"""

from typing import Optional

from neuroevo.core import DegenerateInputError
from neuroevo.fitness import FitnessEvaluator
from neuroevo.population import EvaluationContext
from neuroevo.strategies.base import OptimizerResult, OptimizerStrategyBase, improvement_percent
from neuroevo.strategies.mutation import perturb_genes


class HillClimbStrategy(OptimizerStrategyBase):

	@property
	def name(self) -> str:
		return "HillClimb"

	def optimize(
		self,
		evaluator: FitnessEvaluator,
		context: Optional[EvaluationContext] = None,
	) -> OptimizerResult:
		context = context or self.create_context(evaluator)
		cfg = self._config

		best = context.random_individual()
		if len(best) == 0:
			raise DegenerateInputError("Hill climbing needs a non-empty chromosome")
		context.evaluate(best)
		initial_fitness = best.fitness
		history = []

		for iteration in range(cfg.max_evaluations):
			candidate = best.clone()
			perturb_genes(candidate, cfg.mutate_rate, cfg.mutate_change, context.rng)
			context.evaluate(candidate)
			if candidate.fitness < best.fitness:
				best = candidate
			self._report(context, best.fitness, history)

			if self._verbose and (iteration + 1) % 1000 == 0:
				self._log(f"[HC] Iter {iteration + 1}: best={best.fitness:.6f}")

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
