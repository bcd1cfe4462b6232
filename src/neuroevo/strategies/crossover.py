"""
Crossover strategies: combine two parents into new, unevaluated children.

- ARITHMETIC: one child, gene-wise mean of the parents
- ONE_POINT: two children, tails after a cut are swapped
- TWO_POINT: two children, the segment [cut1, cut2) is swapped
- UNIFORM: two children, a fair coin per gene picks the donor

Children never share chromosome storage with their parents.
"""

from typing import Callable

import torch

from neuroevo.core import ConfigurationError, Crossover, DegenerateInputError
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext


def _chromosome_length(parent1: Individual, parent2: Individual) -> int:
	length = len(parent1)
	if length != len(parent2):
		raise ValueError(f"Parents differ in chromosome length: {length} vs {len(parent2)}")
	if length == 0:
		raise DegenerateInputError("Cannot cross over zero-length chromosomes")
	return length


def arithmetic_crossover(parent1: Individual, parent2: Individual, context: EvaluationContext) -> list[Individual]:
	_chromosome_length(parent1, parent2)
	return [Individual((parent1.chromosome + parent2.chromosome) / 2)]


def one_point_crossover(parent1: Individual, parent2: Individual, context: EvaluationContext) -> list[Individual]:
	"""Cut uniform in [0, len): genes before it mirror the parents, genes at/after it are swapped."""
	length = _chromosome_length(parent1, parent2)
	cut = context.rng.randrange(length)
	p1, p2 = parent1.chromosome, parent2.chromosome
	child1 = torch.cat((p1[:cut], p2[cut:]))
	child2 = torch.cat((p2[:cut], p1[cut:]))
	return [Individual(child1), Individual(child2)]


def two_point_crossover(parent1: Individual, parent2: Individual, context: EvaluationContext) -> list[Individual]:
	"""cut1 uniform in [0, len), cut2 uniform in [cut1, len]; [cut1, cut2) is swapped."""
	length = _chromosome_length(parent1, parent2)
	cut1 = context.rng.randrange(length)
	cut2 = cut1 + context.rng.randrange(length - cut1 + 1)
	p1, p2 = parent1.chromosome, parent2.chromosome
	child1 = torch.cat((p1[:cut1], p2[cut1:cut2], p1[cut2:]))
	child2 = torch.cat((p2[:cut1], p1[cut1:cut2], p2[cut2:]))
	return [Individual(child1), Individual(child2)]


def uniform_crossover(parent1: Individual, parent2: Individual, context: EvaluationContext) -> list[Individual]:
	length = _chromosome_length(parent1, parent2)
	# True: child1 takes parent1's gene, child2 takes parent2's
	mask = torch.tensor([context.rng.random() < 0.5 for _ in range(length)], dtype=torch.bool)
	p1, p2 = parent1.chromosome, parent2.chromosome
	return [Individual(torch.where(mask, p1, p2)), Individual(torch.where(mask, p2, p1))]


_HANDLERS: dict[Crossover, Callable[[Individual, Individual, EvaluationContext], list[Individual]]] = {
	Crossover.ARITHMETIC: arithmetic_crossover,
	Crossover.ONE_POINT: one_point_crossover,
	Crossover.TWO_POINT: two_point_crossover,
	Crossover.UNIFORM: uniform_crossover,
}


def crossover(
	method: Crossover,
	parent1: Individual,
	parent2: Individual,
	context: EvaluationContext,
) -> list[Individual]:
	"""
	Produce 1-2 unevaluated children with the given strategy.

	Raises:
		ConfigurationError: If method is not a Crossover member.
	"""
	handler = _HANDLERS.get(method) if isinstance(method, Crossover) else None
	if handler is None:
		raise ConfigurationError(f"Unknown crossover strategy: {method!r}")
	return handler(parent1, parent2, context)
