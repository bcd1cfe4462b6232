"""
Initialisation strategies: build and evaluate the starting population.

- RANDOM: population_size random individuals
- AUGMENTED: population_size + augment_extra random individuals, keep the
  population_size fittest (stable sort, so ties keep draw order)
- POSITIVE_NEGATIVE: per slot, a random individual and its negation; keep
  the strictly better one (ties keep the original)
"""

from typing import Callable

from neuroevo.core import ConfigurationError, Initialisation
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext, Population


def random_initialisation(context: EvaluationContext) -> Population:
	size = context.config.population_size
	individuals = [context.random_individual() for _ in range(size)]
	context.evaluate_all(individuals)
	return Population(individuals, size=size)


def augmented_initialisation(context: EvaluationContext) -> Population:
	size = context.config.population_size
	candidates = [context.random_individual() for _ in range(size + context.config.augment_extra)]
	context.evaluate_all(candidates)
	return Population(sorted(candidates)[:size], size=size)


def positive_negative_pair(individual: Individual, context: EvaluationContext) -> Individual:
	"""
	Evaluate an individual and its gene-wise negation (2 evaluations) and
	return whichever has strictly lower fitness; ties keep `individual`.
	"""
	negated = individual.negated()
	context.evaluate(individual)
	context.evaluate(negated)
	return negated if negated.fitness < individual.fitness else individual


def positive_negative_initialisation(context: EvaluationContext) -> Population:
	size = context.config.population_size
	individuals = [
		positive_negative_pair(context.random_individual(), context)
		for _ in range(size)
	]
	return Population(individuals, size=size)


_HANDLERS: dict[Initialisation, Callable[[EvaluationContext], Population]] = {
	Initialisation.RANDOM: random_initialisation,
	Initialisation.AUGMENTED: augmented_initialisation,
	Initialisation.POSITIVE_NEGATIVE: positive_negative_initialisation,
}


def initialise(method: Initialisation, context: EvaluationContext) -> Population:
	"""
	Build the starting population with the given strategy.

	Raises:
		ConfigurationError: If method is not an Initialisation member.
	"""
	handler = _HANDLERS.get(method) if isinstance(method, Initialisation) else None
	if handler is None:
		raise ConfigurationError(f"Unknown initialisation strategy: {method!r}")
	return handler(context)
