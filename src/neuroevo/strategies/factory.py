"""
Factory for creating optimization strategies.
"""

from typing import Callable, Optional, Union

from neuroevo.config import OptimizerConfig
from neuroevo.core import ConfigurationError, OptimizerType, parse_enum
from neuroevo.strategies.base import OptimizerStrategyBase, ProgressReporter, WeightsSink
from neuroevo.strategies.evolutionary import EvolutionaryAlgorithmStrategy
from neuroevo.strategies.hill_climb import HillClimbStrategy
from neuroevo.strategies.simulated_annealing import SimulatedAnnealingStrategy


class OptimizerStrategyFactory:
	"""
	Factory for creating optimization strategies.

	Usage:
		strategy = OptimizerStrategyFactory.create(
			OptimizerType.SIMULATED_ANNEALING,
			config=OptimizerConfig(num_genes=51, cooling_rate=0.001),
			verbose=True,
		)
		result = strategy.optimize(evaluator)
	"""

	@staticmethod
	def create(
		optimizer_type: Union[OptimizerType, str],
		config: Optional[OptimizerConfig] = None,
		verbose: bool = False,
		logger: Optional[Callable[[str], None]] = None,
		reporter: Optional[ProgressReporter] = None,
		persistence: Optional[WeightsSink] = None,
	) -> OptimizerStrategyBase:
		"""
		Create an optimization strategy.

		Args:
			optimizer_type: Which optimizer to build (member or name)
			config: Run configuration (defaults when omitted)
			verbose: Log progress during optimization
			logger: Log sink (defaults to print)
			reporter: Per-generation/iteration observability sink
			persistence: Receives the best individual at the end of the run

		Raises:
			ConfigurationError: For an unknown optimizer type or invalid config.
		"""
		optimizer_type = parse_enum(OptimizerType, optimizer_type)
		kwargs = dict(config=config, verbose=verbose, logger=logger, reporter=reporter, persistence=persistence)

		if optimizer_type == OptimizerType.EVOLUTIONARY:
			return EvolutionaryAlgorithmStrategy(**kwargs)

		elif optimizer_type == OptimizerType.SIMULATED_ANNEALING:
			return SimulatedAnnealingStrategy(**kwargs)

		elif optimizer_type == OptimizerType.HILL_CLIMB:
			return HillClimbStrategy(**kwargs)

		else:
			raise ConfigurationError(f"Unknown optimizer type: {optimizer_type}")

	@staticmethod
	def create_default() -> OptimizerStrategyBase:
		"""Evolutionary engine with the default configuration."""
		return EvolutionaryAlgorithmStrategy()
