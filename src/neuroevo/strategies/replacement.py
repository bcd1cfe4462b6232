"""
Replacement strategies: put evaluated children back into the population.

- WORST: each child overwrites the current worst slot. The worst is found
  again for every child, so a child can itself be overwritten by a later
  sibling if it is the worst member.
- TOURNAMENT: per child, shuffle, take tournament_size members, remove the
  least fit of them and append the child.

Both keep the population size constant. An empty tournament sample is
rejected instead of silently growing the population.
"""

from typing import Callable

from neuroevo.core import ConfigurationError, DegenerateInputError, Replacement
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext, Population


def worst_replacement(population: Population, children: list[Individual], context: EvaluationContext) -> None:
	for child in children:
		population[population.worst_index()] = child


def tournament_replacement(population: Population, children: list[Individual], context: EvaluationContext) -> None:
	size = context.config.tournament_size
	for child in children:
		population.shuffle(context.rng)
		sample = min(size, len(population))
		if sample < 1:
			raise DegenerateInputError(
				f"Tournament replacement sampled no members (tournament_size={size}, population={len(population)})"
			)
		# Least fit of the sample; first one wins ties
		loser = 0
		for i in range(1, sample):
			if population[i].fitness > population[loser].fitness:
				loser = i
		del population[loser]
		population.append(child)


_HANDLERS: dict[Replacement, Callable[[Population, list[Individual], EvaluationContext], None]] = {
	Replacement.WORST: worst_replacement,
	Replacement.TOURNAMENT: tournament_replacement,
}


def replace(
	method: Replacement,
	population: Population,
	children: list[Individual],
	context: EvaluationContext,
) -> None:
	"""
	Insert children into the population in place with the given strategy.

	Raises:
		ConfigurationError: If method is not a Replacement member.
	"""
	handler = _HANDLERS.get(method) if isinstance(method, Replacement) else None
	if handler is None:
		raise ConfigurationError(f"Unknown replacement strategy: {method!r}")
	handler(population, children, context)
