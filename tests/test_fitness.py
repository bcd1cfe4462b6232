"""
Fitness evaluator tests.

Run with: python tests/test_fitness.py
"""

import sys

import pytest
import torch

import support

from neuroevo.config import OptimizerConfig, num_genes
from neuroevo.fitness import FitnessEvaluator, FunctionEvaluator, NetworkFitness, make_dataset, split_dataset
from neuroevo.individual import Individual
from neuroevo.strategies import HillClimbStrategy


def test_function_evaluator():
	evaluator = FunctionEvaluator(lambda genes: float(genes.abs().sum()))
	assert isinstance(evaluator, FitnessEvaluator)
	assert evaluator.evaluate(Individual([1.0, -2.0]), None) == 3.0


def test_dataset_is_reproducible():
	a = make_dataset(50, 4, 2, seed=3)
	b = make_dataset(50, 4, 2, seed=3)
	assert torch.equal(a.inputs, b.inputs) and torch.equal(a.targets, b.targets)
	assert (len(a), a.num_input, a.num_output) == (50, 4, 2)

	train, test = split_dataset(a, 0.8)
	assert len(train) == 40 and len(test) == 10


def test_decode_layout():
	fitness = NetworkFitness(make_dataset(10, 2, 1), num_hidden=3)
	assert fitness.num_genes == num_genes(2, 3, 1) == 13

	chromosome = torch.arange(13, dtype=torch.float64)
	w_hidden, w_output, b_hidden, b_output = fitness.decode(chromosome)
	assert w_hidden.shape == (2, 3) and w_hidden[1, 0] == 3.0
	assert w_output.shape == (3, 1) and w_output[0, 0] == 6.0
	assert b_hidden.tolist() == [9.0, 10.0, 11.0]
	assert b_output.tolist() == [12.0]

	with pytest.raises(ValueError):
		fitness.decode(torch.zeros(12, dtype=torch.float64))


def test_zero_network_scores_mean_squared_target():
	data = make_dataset(20, 3, 2, seed=1)
	fitness = NetworkFitness(data, num_hidden=4)
	zero = Individual(torch.zeros(fitness.num_genes, dtype=torch.float64))
	assert fitness.evaluate(zero) == pytest.approx(float((data.targets ** 2).mean()))


def test_training_reduces_network_error():
	train, test = split_dataset(make_dataset(100, 3, 1, seed=2))
	fitness = NetworkFitness(train, num_hidden=3)
	config = OptimizerConfig(num_genes=fitness.num_genes, mutate_rate=0.2, max_evaluations=400, seed=0)
	result = HillClimbStrategy(config).optimize(fitness)
	assert result.final_fitness < result.initial_fitness
	assert fitness.with_dataset(test).evaluate(result.best) >= 0.0


def test_evaluation_goes_through_context():
	context = support.make_context(evaluator=FunctionEvaluator(lambda genes: float(genes.sum() ** 2)))
	individual = Individual([1.0, 2.0])
	assert context.evaluate(individual) == 9.0
	assert individual.fitness == 9.0
	assert context.evaluations == 1


if __name__ == "__main__":
	sys.exit(pytest.main([__file__, "-v"]))
