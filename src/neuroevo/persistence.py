"""
WeightsCheckpoint: save and load trained weight vectors.

Checkpoint format:
	checkpoint_dir/
	├── config.json    # Run configuration + fitness + metadata
	└── weights.pt     # Chromosome tensor (float64)

Usage:
	# Save
	WeightsCheckpoint.save("checkpoints/ea_best", result.best, config=config)

	# Load
	ckpt = WeightsCheckpoint.load("checkpoints/ea_best")
	print(ckpt.individual.fitness, ckpt.config)

	# As an optimizer's persistence collaborator
	strategy = EvolutionaryAlgorithmStrategy(config, persistence=CheckpointSaver("checkpoints/ea"))
"""

from __future__ import annotations

import json
import warnings
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import torch

from neuroevo.config import OptimizerConfig
from neuroevo.individual import GENE_DTYPE, Individual


# Bump when checkpoint format changes in incompatible ways
CHECKPOINT_VERSION = "1.0.0"


@dataclass
class WeightsCheckpoint:
	"""A loaded checkpoint."""

	individual: Individual
	config: Optional[OptimizerConfig] = None
	results: dict[str, Any] = field(default_factory=dict)
	metadata: dict[str, Any] = field(default_factory=dict)

	@staticmethod
	def save(
		path: str | Path,
		individual: Individual,
		config: Optional[OptimizerConfig] = None,
		results: Optional[dict[str, Any]] = None,
		extra_metadata: Optional[dict[str, Any]] = None,
	) -> Path:
		"""Save a weight vector.

		Args:
			path: Directory to save the checkpoint to (created if missing).
			individual: Weights and fitness to save.
			config: Configuration of the run that produced them.
			results: Extra results (e.g. {"test_fitness": 0.12}).
			extra_metadata: Additional metadata to store.

		Returns:
			Path to the checkpoint directory.
		"""
		path = Path(path)
		path.mkdir(parents=True, exist_ok=True)

		torch.save(individual.chromosome.detach().clone(), path / "weights.pt")

		data = {
			"checkpoint_version": CHECKPOINT_VERSION,
			"num_genes": len(individual),
			"fitness": individual.fitness,
			"config": config.to_dict() if config is not None else None,
			"results": results or {},
			"metadata": {
				"created_at": datetime.now(timezone.utc).isoformat(),
				"torch_version": torch.__version__,
				**(extra_metadata or {}),
			},
		}
		with open(path / "config.json", "w") as f:
			json.dump(data, f, indent=2)

		return path

	@classmethod
	def load(cls, path: str | Path) -> WeightsCheckpoint:
		"""Load a checkpoint from disk.

		Raises:
			FileNotFoundError: If the directory or either file is missing.
			ValueError: If the weights do not match the recorded gene count.
		"""
		path = Path(path)

		with open(path / "config.json") as f:
			data = json.load(f)

		version = data.get("checkpoint_version", "0.0.0")
		if version != CHECKPOINT_VERSION:
			warnings.warn(
				f"Checkpoint version mismatch: {version} (saved) vs "
				f"{CHECKPOINT_VERSION} (current). Loading anyway.",
				stacklevel=2,
			)

		weights = torch.load(path / "weights.pt", map_location="cpu", weights_only=True)
		weights = weights.to(GENE_DTYPE)
		expected = data.get("num_genes")
		if expected is not None and weights.numel() != expected:
			raise ValueError(f"Checkpoint {path} has {weights.numel()} weights, config.json says {expected}")

		config = None
		if data.get("config"):
			config = OptimizerConfig.from_dict(data["config"])

		return cls(
			individual=Individual(weights, data.get("fitness")),
			config=config,
			results=data.get("results", {}),
			metadata=data.get("metadata", {}),
		)


class CheckpointSaver:
	"""
	Persistence collaborator writing the final best individual of a run.

	Each save() goes to <root>/<timestamp>-<num_genes> so repeated runs do
	not overwrite each other; the last path written is kept in `last_path`.
	"""

	def __init__(self, root: str | Path, config: Optional[OptimizerConfig] = None):
		self._root = Path(root)
		self._config = config
		self.last_path: Optional[Path] = None

	def save(self, individual: Individual) -> None:
		stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
		self.last_path = WeightsCheckpoint.save(
			self._root / f"{stamp}-{len(individual)}",
			individual,
			config=self._config,
		)

	def load(self, identifier: str | Path) -> WeightsCheckpoint:
		"""Load by directory name under the root, or by full path."""
		path = Path(identifier)
		if not path.is_absolute() and not path.exists():
			path = self._root / path
		return WeightsCheckpoint.load(path)
