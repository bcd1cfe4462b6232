"""
Selection strategies: pick one parent from the population.

Every strategy returns an owned copy, so mutating a parent (or a child that
inherits its storage) never touches a live population slot.

Note that TOURNAMENT shuffles the population in place, which changes the
positions RANK_ROUTE ranks by.
"""

import logging
from typing import Callable

from neuroevo.core import ConfigurationError, DegenerateInputError, Selection, unitize, weighted_index
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext, Population


logger = logging.getLogger(__name__)


def _require_members(population: Population) -> None:
	if len(population) == 0:
		raise DegenerateInputError("Cannot select from an empty population")


def random_selection(population: Population, context: EvaluationContext) -> Individual:
	"""Uniformly random member."""
	_require_members(population)
	return population[context.rng.randrange(len(population))].clone()


def tournament_selection(population: Population, context: EvaluationContext) -> Individual:
	"""
	Shuffle the population, then return the fittest of the first
	tournament_size members (first one wins ties).
	"""
	_require_members(population)
	population.shuffle(context.rng)
	contestants = population.individuals[:context.config.tournament_size]
	if not contestants:
		raise DegenerateInputError("Tournament selection sampled no members (tournament_size must be >= 1)")
	return min(contestants).clone()


def roulette_selection(population: Population, context: EvaluationContext) -> Individual:
	"""
	Fitness-proportionate selection with weights 1 - fitness (lower fitness
	gets a larger slice).

	If rounding leaves the draw unconsumed after the whole walk, the last
	member by position is returned.
	"""
	_require_members(population)
	weight_sum = sum(1 - ind.fitness for ind in population)
	remaining = weight_sum * context.rng.random()
	for individual in population:
		remaining -= 1 - individual.fitness
		if remaining < 0:
			return individual.clone()
	logger.debug("Roulette walk ended without a pick (remaining=%r), using last member", remaining)
	return population[len(population) - 1].clone()


def rank_route_selection(population: Population, context: EvaluationContext) -> Individual:
	"""
	Rank members 1..N by their current position (not by fitness), normalise
	the ranks and draw an index with the alias method. Later positions are
	more likely; pressure only tracks fitness if the population happens to
	be sorted.
	"""
	_require_members(population)
	ranks = [float(i + 1) for i in range(len(population))]
	index = weighted_index(unitize(ranks), context.rng)
	return population[index].clone()


_HANDLERS: dict[Selection, Callable[[Population, EvaluationContext], Individual]] = {
	Selection.RANDOM: random_selection,
	Selection.TOURNAMENT: tournament_selection,
	Selection.ROULETTE: roulette_selection,
	Selection.RANK_ROUTE: rank_route_selection,
}


def select(method: Selection, population: Population, context: EvaluationContext) -> Individual:
	"""
	Select one parent (an owned copy) with the given strategy.

	Raises:
		ConfigurationError: If method is not a Selection member.
	"""
	handler = _HANDLERS.get(method) if isinstance(method, Selection) else None
	if handler is None:
		raise ConfigurationError(f"Unknown selection strategy: {method!r}")
	return handler(population, context)
