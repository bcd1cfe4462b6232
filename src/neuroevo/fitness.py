"""
Fitness evaluation collaborators.

The optimizers only need something with

	evaluate(individual, context) -> float

returning a non-negative cost (lower is better). Calls are routed through
EvaluationContext.evaluate(), which counts them against the evaluation
budget, so evaluators themselves stay pure.

Two evaluators are provided:
- FunctionEvaluator: wraps a plain Callable[[Tensor], float]
- NetworkFitness: decodes the chromosome into a one-hidden-layer tanh
  network and scores its mean squared error on a data set
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import torch
from torch import Tensor

from neuroevo.config import num_genes
from neuroevo.individual import GENE_DTYPE, Individual


@runtime_checkable
class FitnessEvaluator(Protocol):
	"""Deterministic cost function over individuals."""

	def evaluate(self, individual: Individual, context: Any) -> float:
		...


class FunctionEvaluator:
	"""
	Adapts a function of the chromosome tensor to the FitnessEvaluator protocol.

	Usage:
		evaluator = FunctionEvaluator(lambda genes: float((genes ** 2).sum()))
	"""

	def __init__(self, fn: Callable[[Tensor], float]):
		self._fn = fn

	def evaluate(self, individual: Individual, context: Any) -> float:
		return float(self._fn(individual.chromosome))

	def __repr__(self) -> str:
		return f"FunctionEvaluator(fn={getattr(self._fn, '__name__', self._fn)!r})"


@dataclass
class Dataset:
	"""Inputs [n, num_input] and targets [n, num_output]."""
	inputs: Tensor
	targets: Tensor

	@property
	def num_input(self) -> int:
		return self.inputs.shape[1]

	@property
	def num_output(self) -> int:
		return self.targets.shape[1]

	def __len__(self) -> int:
		return self.inputs.shape[0]


def make_dataset(
	num_samples: int,
	num_input: int,
	num_output: int,
	seed: int = 0,
	noise: float = 0.05,
) -> Dataset:
	"""
	Synthetic regression task: targets are tanh of a fixed random linear map
	of the inputs plus gaussian noise. The same seed always yields the same
	underlying map, so train/test splits can be drawn with different seeds
	via split_dataset().
	"""
	gen = torch.Generator().manual_seed(seed)
	weights = torch.randn(num_input, num_output, generator=gen, dtype=GENE_DTYPE)
	inputs = torch.rand(num_samples, num_input, generator=gen, dtype=GENE_DTYPE) * 2 - 1
	targets = torch.tanh(inputs @ weights)
	targets = targets + noise * torch.randn(targets.shape, generator=gen, dtype=GENE_DTYPE)
	return Dataset(inputs=inputs, targets=targets)


def split_dataset(dataset: Dataset, train_fraction: float = 0.8) -> tuple[Dataset, Dataset]:
	"""Split into (train, test) by position."""
	cut = int(len(dataset) * train_fraction)
	return (
		Dataset(dataset.inputs[:cut], dataset.targets[:cut]),
		Dataset(dataset.inputs[cut:], dataset.targets[cut:]),
	)


class NetworkFitness:
	"""
	Mean squared error of a one-hidden-layer network whose weights are the
	chromosome.

	Gene layout (matches config.num_genes):
		[input->hidden weights | hidden->output weights | hidden biases | output biases]
	"""

	def __init__(self, dataset: Dataset, num_hidden: int):
		self._dataset = dataset
		self._num_hidden = num_hidden

	@property
	def dataset(self) -> Dataset:
		return self._dataset

	@property
	def num_hidden(self) -> int:
		return self._num_hidden

	@property
	def num_genes(self) -> int:
		return num_genes(self._dataset.num_input, self._num_hidden, self._dataset.num_output)

	def with_dataset(self, dataset: Dataset) -> 'NetworkFitness':
		"""Same network shape scored on another data set (e.g. the test split)."""
		return NetworkFitness(dataset, self._num_hidden)

	def decode(self, chromosome: Tensor) -> tuple[Tensor, Tensor, Tensor, Tensor]:
		"""Split a chromosome into (w_hidden, w_output, b_hidden, b_output)."""
		n_in = self._dataset.num_input
		n_hid = self._num_hidden
		n_out = self._dataset.num_output
		if chromosome.numel() != self.num_genes:
			raise ValueError(f"Chromosome has {chromosome.numel()} genes, network needs {self.num_genes}")

		offset = 0
		w_hidden = chromosome[offset:offset + n_in * n_hid].view(n_in, n_hid)
		offset += n_in * n_hid
		w_output = chromosome[offset:offset + n_hid * n_out].view(n_hid, n_out)
		offset += n_hid * n_out
		b_hidden = chromosome[offset:offset + n_hid]
		offset += n_hid
		b_output = chromosome[offset:offset + n_out]
		return w_hidden, w_output, b_hidden, b_output

	def forward(self, chromosome: Tensor, inputs: Optional[Tensor] = None) -> Tensor:
		w_hidden, w_output, b_hidden, b_output = self.decode(chromosome)
		x = self._dataset.inputs if inputs is None else inputs
		hidden = torch.tanh(x @ w_hidden + b_hidden)
		return torch.tanh(hidden @ w_output + b_output)

	def evaluate(self, individual: Individual, context: Any = None) -> float:
		with torch.no_grad():
			outputs = self.forward(individual.chromosome)
			return float(((outputs - self._dataset.targets) ** 2).mean())

	def __repr__(self) -> str:
		return (
			f"NetworkFitness(samples={len(self._dataset)}, input={self._dataset.num_input}, "
			f"hidden={self._num_hidden}, output={self._dataset.num_output})"
		)
