"""
Crossover strategy tests.

Run with: python tests/test_crossover.py
"""

import sys

import pytest

import support

from neuroevo.core import ConfigurationError, Crossover, DegenerateInputError
from neuroevo.individual import Individual
from neuroevo.strategies.crossover import crossover, one_point_crossover, two_point_crossover


PARENT1 = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
PARENT2 = [10.0, 20.0, 30.0, 40.0, 50.0, 60.0]


def _parents():
	return Individual(PARENT1, fitness=0.3), Individual(PARENT2, fitness=0.6)


@pytest.mark.parametrize("method", [Crossover.ONE_POINT, Crossover.TWO_POINT, Crossover.UNIFORM])
def test_genes_at_each_position_come_from_the_parents(method):
	for seed in range(25):
		context = support.make_context(seed=seed)
		parent1, parent2 = _parents()
		child1, child2 = crossover(method, parent1, parent2, context)
		for i, (a, b) in enumerate(zip(child1.genes(), child2.genes())):
			assert sorted([a, b]) == sorted([PARENT1[i], PARENT2[i]])


def test_arithmetic_is_gene_wise_mean():
	context = support.make_context()
	parent1, parent2 = _parents()
	children = crossover(Crossover.ARITHMETIC, parent1, parent2, context)
	assert len(children) == 1
	assert children[0].genes() == [5.5, 11.0, 16.5, 22.0, 27.5, 33.0]


def test_one_point_swaps_a_tail():
	for seed in range(25):
		context = support.make_context(seed=seed)
		child1, child2 = one_point_crossover(*_parents(), context)
		cuts = [
			cut for cut in range(len(PARENT1))
			if child1.genes() == PARENT1[:cut] + PARENT2[cut:]
			and child2.genes() == PARENT2[:cut] + PARENT1[cut:]
		]
		assert cuts, f"seed {seed}: children are not a one-point split"


def test_two_point_swaps_a_segment():
	length = len(PARENT1)
	for seed in range(25):
		context = support.make_context(seed=seed)
		child1, child2 = two_point_crossover(*_parents(), context)
		found = False
		for cut1 in range(length):
			for cut2 in range(cut1, length + 1):
				expected1 = PARENT1[:cut1] + PARENT2[cut1:cut2] + PARENT1[cut2:]
				expected2 = PARENT2[:cut1] + PARENT1[cut1:cut2] + PARENT2[cut2:]
				if child1.genes() == expected1 and child2.genes() == expected2:
					found = True
		assert found, f"seed {seed}: children are not a two-point split"


@pytest.mark.parametrize("method", list(Crossover))
def test_children_are_unevaluated_and_independent(method):
	context = support.make_context(seed=1)
	parent1, parent2 = _parents()
	children = crossover(method, parent1, parent2, context)
	assert 1 <= len(children) <= 2
	for child in children:
		assert child.fitness is None
		assert len(child) == len(PARENT1)
		child.chromosome += 1000.0
	assert parent1.genes() == PARENT1
	assert parent2.genes() == PARENT2


def test_zero_length_chromosomes_rejected():
	context = support.make_context()
	for method in Crossover:
		with pytest.raises(DegenerateInputError):
			crossover(method, Individual([]), Individual([]), context)


def test_mismatched_lengths_rejected():
	context = support.make_context()
	with pytest.raises(ValueError):
		crossover(Crossover.UNIFORM, Individual([1.0, 2.0]), Individual([1.0]), context)


def test_unknown_crossover_rejected():
	context = support.make_context()
	with pytest.raises(ConfigurationError):
		crossover(None, *_parents(), context)


if __name__ == "__main__":
	sys.exit(pytest.main([__file__, "-v"]))
