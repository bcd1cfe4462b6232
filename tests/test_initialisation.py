"""
Initialisation strategy tests.

Run with: python tests/test_initialisation.py
"""

import sys

import pytest

import support

from neuroevo.core import ConfigurationError, Initialisation, Selection
from neuroevo.individual import Individual
from neuroevo.strategies.initialisation import initialise, positive_negative_pair


def test_positive_negative_keeps_strictly_better_negation():
	evaluator = support.SumOfSquares()
	context = support.make_context(evaluator=support.WeightedSum([1.0, 1.0]))
	# 100 + 2 - 1 = 101 vs 100 - 2 + 1 = 99
	kept = positive_negative_pair(Individual([2.0, -1.0]), context)
	assert kept.genes() == [-2.0, 1.0]
	assert kept.fitness == 99.0
	assert context.evaluations == 2

	context = support.make_context(evaluator=evaluator)
	original = Individual([2.0, -1.0])
	kept = positive_negative_pair(original, context)
	# Both score 5.0; the tie keeps the original
	assert kept is original
	assert evaluator.calls == [[2.0, -1.0], [-2.0, 1.0]]


def test_positive_negative_keeps_original_when_better():
	context = support.make_context(evaluator=support.WeightedSum([-1.0, -1.0]))
	original = Individual([2.0, -1.0])
	assert positive_negative_pair(original, context) is original
	assert original.fitness == 99.0


@pytest.mark.parametrize("method, evaluations", [
	(Initialisation.RANDOM, 6),
	(Initialisation.AUGMENTED, 6 + 30),
	(Initialisation.POSITIVE_NEGATIVE, 12),
])
def test_population_size_and_cost(method, evaluations):
	context = support.make_context(population_size=6, augment_extra=30, num_genes=3)
	population = initialise(method, context)
	assert len(population) == population.size == 6
	assert context.evaluations == evaluations
	for ind in population:
		assert ind.evaluated
		assert len(ind) == 3


def test_random_genes_within_bounds():
	context = support.make_context(population_size=20, min_gene=-0.25, max_gene=0.75)
	for ind in initialise(Initialisation.RANDOM, context):
		assert all(-0.25 <= g <= 0.75 for g in ind.genes())


def test_augmented_keeps_the_fittest():
	evaluator = support.SumOfSquares()
	context = support.make_context(seed=8, evaluator=evaluator, population_size=5, augment_extra=45)
	population = initialise(Initialisation.AUGMENTED, context)

	scored = sorted(sum(g * g for g in genes) for genes in evaluator.calls)
	assert len(scored) == 50
	assert sorted(population.fitness_values()) == pytest.approx(scored[:5])


def test_same_seed_same_population():
	first = initialise(Initialisation.RANDOM, support.make_context(seed=21))
	second = initialise(Initialisation.RANDOM, support.make_context(seed=21))
	assert [a == b for a, b in zip(first, second)] == [True] * len(first)


def test_unknown_initialisation_rejected():
	with pytest.raises(ConfigurationError):
		initialise(Selection.RANDOM, support.make_context())


if __name__ == "__main__":
	sys.exit(pytest.main([__file__, "-v"]))
