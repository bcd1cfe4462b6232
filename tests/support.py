"""
Shared fixtures for the neuroevo tests: stub evaluators and small contexts.

Importing this module puts src/ on sys.path, so tests run both under
pytest and as plain scripts (python tests/test_selection.py).
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from neuroevo.config import OptimizerConfig
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext, Population


class SumOfSquares:
	"""fitness = sum(g^2); records every chromosome it is asked to score."""

	def __init__(self):
		self.calls = []

	def evaluate(self, individual, context):
		self.calls.append(individual.genes())
		return float((individual.chromosome ** 2).sum())


class WeightedSum:
	"""fitness = offset + sum(w_i * g_i); order-sensitive, so gene swaps change it."""

	def __init__(self, weights, offset=100.0):
		self.weights = list(weights)
		self.offset = offset
		self.calls = 0

	def evaluate(self, individual, context):
		self.calls += 1
		return self.offset + sum(w * g for w, g in zip(self.weights, individual.genes()))


class FixedRandom:
	"""Stand-in random stream returning a fixed value."""

	def __init__(self, value):
		self.value = value

	def random(self):
		return self.value


def make_context(seed=0, evaluator=None, **overrides) -> EvaluationContext:
	"""Small unvalidated config (2 genes, population 4) plus a seeded context."""
	settings = dict(num_genes=2, population_size=4, tournament_size=2, max_evaluations=100, seed=seed)
	settings.update(overrides)
	config = OptimizerConfig(**settings)
	return EvaluationContext.create(config, evaluator or SumOfSquares())


def make_population(rows, context=None) -> Population:
	"""Population from gene rows; evaluated through the context when given."""
	individuals = [Individual(row) for row in rows]
	if context is not None:
		context.evaluate_all(individuals)
	return Population(individuals)


def with_fitness(values) -> Population:
	"""Population of 1-gene individuals with explicit fitness values."""
	return Population([Individual([float(i)], fitness) for i, fitness in enumerate(values)])
