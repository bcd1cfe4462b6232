"""
Mutation strategies: perturb the children list in place before evaluation.

- STANDARD: per gene, with probability mutate_rate, add or subtract
  mutate_change (fair coin). No clamping to the gene bounds.
- CONSTRAINED: as STANDARD, but each change is evaluated and undone if the
  individual got worse. Each gene that passes the rate trial costs one
  evaluation, plus one more to re-score the individual when the change is
  undone.
- ANNEALING: per child, transpose two random genes in a clone and keep the
  clone with Metropolis probability at the engine's current temperature.

CONSTRAINED and ANNEALING compare against the child's current fitness; a
child fresh from crossover is evaluated once first. Every evaluation here
counts against the run's budget.
"""

import random
from typing import Callable

from neuroevo.core import ConfigurationError, DegenerateInputError, Mutation
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext
from neuroevo.strategies.base import acceptance


def perturb_genes(individual: Individual, rate: float, change: float, rng: random.Random) -> None:
	"""Add or subtract `change` to each gene with probability `rate`, in place."""
	genes = individual.chromosome
	for i in range(len(individual)):
		if rng.random() < rate:
			if rng.random() < 0.5:
				genes[i] += change
			else:
				genes[i] -= change


def standard_mutation(children: list[Individual], context: EvaluationContext, temperature: float) -> None:
	cfg = context.config
	for individual in children:
		perturb_genes(individual, cfg.mutate_rate, cfg.mutate_change, context.rng)


def constrained_mutation(children: list[Individual], context: EvaluationContext, temperature: float) -> None:
	cfg = context.config
	rng = context.rng
	for individual in children:
		genes = individual.chromosome
		for i in range(len(individual)):
			if rng.random() >= cfg.mutate_rate:
				continue
			prior = context.ensure_evaluated(individual)
			original = genes[i].item()
			if rng.random() < 0.5:
				genes[i] += cfg.mutate_change
			else:
				genes[i] -= cfg.mutate_change
			if context.evaluate(individual) > prior:
				genes[i] = original  # undo
				context.evaluate(individual)


def annealing_mutation(children: list[Individual], context: EvaluationContext, temperature: float) -> None:
	rng = context.rng
	for index, individual in enumerate(children):
		length = len(individual)
		if length == 0:
			raise DegenerateInputError("Cannot anneal a zero-length chromosome")
		current = context.ensure_evaluated(individual)

		candidate = individual.clone()
		pos1 = int(length * rng.random())
		pos2 = int(length * rng.random())
		candidate.swap(pos1, pos2)
		context.evaluate(candidate)

		if acceptance(current, candidate.fitness, temperature) >= rng.random():
			children[index] = candidate


_HANDLERS: dict[Mutation, Callable[[list[Individual], EvaluationContext, float], None]] = {
	Mutation.STANDARD: standard_mutation,
	Mutation.CONSTRAINED: constrained_mutation,
	Mutation.ANNEALING: annealing_mutation,
}


def mutate(
	method: Mutation,
	children: list[Individual],
	context: EvaluationContext,
	temperature: float = 0.0,
) -> None:
	"""
	Mutate children in place with the given strategy.

	Args:
		temperature: Current annealing temperature (only read by ANNEALING)

	Raises:
		ConfigurationError: If method is not a Mutation member.
	"""
	handler = _HANDLERS.get(method) if isinstance(method, Mutation) else None
	if handler is None:
		raise ConfigurationError(f"Unknown mutation strategy: {method!r}")
	handler(children, context, temperature)
