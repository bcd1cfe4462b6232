"""
Replacement strategy tests.

Run with: python tests/test_replacement.py
"""

import sys

import pytest

import support

from neuroevo.core import ConfigurationError, DegenerateInputError, Initialisation, Replacement
from neuroevo.individual import Individual
from neuroevo.strategies.replacement import replace


def test_worst_overwrites_the_worst_slot():
	context = support.make_context()
	population = support.with_fitness([0.4, 0.1, 0.9, 0.3])
	child = Individual([42.0], 0.05)

	replace(Replacement.WORST, population, [child], context)

	assert population[2] is child
	assert population.fitness_values() == [0.4, 0.1, 0.05, 0.3]


def test_worst_is_recomputed_per_child():
	context = support.make_context()
	population = support.with_fitness([0.4, 0.1, 0.9, 0.3])
	replace(Replacement.WORST, population, [Individual([7.0], 0.05), Individual([8.0], 0.06)], context)
	assert population.fitness_values() == [0.06, 0.1, 0.05, 0.3]


def test_worst_child_can_be_overwritten_by_sibling():
	context = support.make_context()
	population = support.with_fitness([0.1, 0.2])
	replace(Replacement.WORST, population, [Individual([7.0], 0.9), Individual([8.0], 0.5)], context)
	assert population.fitness_values() == [0.1, 0.5]


def test_tournament_keeps_size_and_appends_child():
	for seed in range(10):
		context = support.make_context(seed=seed, tournament_size=2)
		population = support.with_fitness([0.4, 0.1, 0.9, 0.3])
		children = [Individual([7.0], 0.2), Individual([8.0], 0.7)]

		replace(Replacement.TOURNAMENT, population, children, context)

		assert len(population) == 4
		assert population[3] is children[1]
		# The global best can only lose to a tournament of one
		assert 0.1 in population.fitness_values()


def test_full_tournament_removes_global_worst():
	context = support.make_context(tournament_size=4)
	population = support.with_fitness([0.4, 0.1, 0.9, 0.3])
	replace(Replacement.TOURNAMENT, population, [Individual([7.0], 0.5)], context)
	assert sorted(population.fitness_values()) == [0.1, 0.3, 0.4, 0.5]


def test_tournament_larger_than_population_uses_everyone():
	context = support.make_context(tournament_size=10)
	population = support.with_fitness([0.4, 0.9])
	replace(Replacement.TOURNAMENT, population, [Individual([7.0], 0.5)], context)
	assert sorted(population.fitness_values()) == [0.4, 0.5]


def test_empty_tournament_rejected():
	# Config not validated, so the operator has to refuse on its own
	context = support.make_context(tournament_size=0)
	population = support.with_fitness([0.4, 0.1])
	with pytest.raises(DegenerateInputError):
		replace(Replacement.TOURNAMENT, population, [Individual([7.0], 0.5)], context)
	assert len(population) == 2


def test_unknown_replacement_rejected():
	context = support.make_context()
	with pytest.raises(ConfigurationError):
		replace(Initialisation.RANDOM, support.with_fitness([0.4]), [], context)


if __name__ == "__main__":
	sys.exit(pytest.main([__file__, "-v"]))
