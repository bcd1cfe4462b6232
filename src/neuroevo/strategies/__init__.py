"""
Optimization strategies for neural network weight vectors.

Usage:
	from neuroevo.core import OptimizerType
	from neuroevo.strategies import OptimizerStrategyFactory

	strategy = OptimizerStrategyFactory.create(OptimizerType.EVOLUTIONARY, config=config)
	result = strategy.optimize(evaluator)

	print(f"Improved by {result.improvement_percent:.2f}%")

Operator families of the evolutionary engine are exposed as dispatch
functions (initialise, select, crossover, mutate, replace), each with
exactly one handler per enum member.
"""

from neuroevo.strategies.base import (
	OptimizerResult,
	OptimizerStrategyBase,
	ProgressReporter,
	WeightsSink,
	acceptance,
	improvement_percent,
)
from neuroevo.strategies.initialisation import (
	initialise,
	positive_negative_pair,
)
from neuroevo.strategies.selection import select
from neuroevo.strategies.crossover import crossover
from neuroevo.strategies.mutation import mutate, perturb_genes
from neuroevo.strategies.replacement import replace
from neuroevo.strategies.evolutionary import (
	EngineState,
	EvolutionaryAlgorithmStrategy,
)
from neuroevo.strategies.simulated_annealing import SimulatedAnnealingStrategy
from neuroevo.strategies.hill_climb import HillClimbStrategy
from neuroevo.strategies.factory import OptimizerStrategyFactory


__all__ = [
	# Base
	'OptimizerResult',
	'OptimizerStrategyBase',
	'ProgressReporter',
	'WeightsSink',
	'acceptance',
	'improvement_percent',
	# Operators
	'initialise',
	'positive_negative_pair',
	'select',
	'crossover',
	'mutate',
	'perturb_genes',
	'replace',
	# Optimizers
	'EngineState',
	'EvolutionaryAlgorithmStrategy',
	'SimulatedAnnealingStrategy',
	'HillClimbStrategy',
	# Factory
	'OptimizerStrategyFactory',
]
