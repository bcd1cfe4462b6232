"""neuroevo - metaheuristic optimizers for neural network weight vectors."""

__version__ = "0.1.0"

from neuroevo.logger import Logger, create_logger
from neuroevo.progress import ProgressTracker, ProgressStats
from neuroevo.config import OptimizerConfig, num_genes
from neuroevo.individual import Individual
from neuroevo.population import EvaluationContext, Population
from neuroevo.fitness import FitnessEvaluator, FunctionEvaluator, NetworkFitness

__all__ = [
	'Logger', 'create_logger',
	'ProgressTracker', 'ProgressStats',
	'OptimizerConfig', 'num_genes',
	'Individual',
	'EvaluationContext', 'Population',
	'FitnessEvaluator', 'FunctionEvaluator', 'NetworkFitness',
]
