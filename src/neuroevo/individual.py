"""
Individual: a candidate weight vector and its fitness.

The chromosome is a 1D float64 tensor so gene arithmetic (means, swaps,
+/- steps) is exact in double precision. Fitness is a cost: lower is
better, None until evaluated.

Usage:
	ind = Individual.random(num_genes=10, min_gene=-3, max_gene=3, rng=rng)
	child = ind.clone()          # independent chromosome storage
	child.chromosome[0] += 0.1   # ind is unaffected
"""

import random
from typing import Any, Optional, Sequence, Union

import torch
from torch import Tensor


GENE_DTYPE = torch.float64


class Individual:
	"""
	A fixed-length real-valued chromosome plus a fitness value.

	Natural order is ascending fitness, so sorted(population) puts the best
	individual first. Comparing unevaluated individuals raises ValueError.
	"""

	__slots__ = ('chromosome', 'fitness')

	def __init__(self, chromosome: Union[Tensor, Sequence[float]], fitness: Optional[float] = None):
		# Always an owned copy: no two individuals share chromosome storage
		self.chromosome = torch.as_tensor(chromosome, dtype=GENE_DTYPE).flatten().clone()
		self.fitness = fitness

	@classmethod
	def random(
		cls,
		num_genes: int,
		min_gene: float,
		max_gene: float,
		rng: random.Random,
	) -> 'Individual':
		"""Draw every gene uniformly from [min_gene, max_gene]."""
		genes = [rng.uniform(min_gene, max_gene) for _ in range(num_genes)]
		return cls(genes)

	@property
	def evaluated(self) -> bool:
		return self.fitness is not None

	def clone(self) -> 'Individual':
		"""Deep copy; the clone's chromosome shares no storage with this one."""
		return Individual(self.chromosome, self.fitness)

	copy = clone

	def negated(self) -> 'Individual':
		"""Gene-wise negation, unevaluated."""
		return Individual(-self.chromosome)

	def genes(self) -> list[float]:
		return self.chromosome.tolist()

	def swap(self, pos1: int, pos2: int) -> None:
		"""Transpose the genes at two positions in place."""
		self.chromosome[[pos1, pos2]] = self.chromosome[[pos2, pos1]]

	def __len__(self) -> int:
		return self.chromosome.numel()

	def _require_fitness(self, other: 'Individual') -> None:
		if self.fitness is None or other.fitness is None:
			raise ValueError("Cannot order individuals that have not been evaluated")

	def __lt__(self, other: 'Individual') -> bool:
		if not isinstance(other, Individual):
			return NotImplemented
		self._require_fitness(other)
		return self.fitness < other.fitness

	def __gt__(self, other: 'Individual') -> bool:
		if not isinstance(other, Individual):
			return NotImplemented
		self._require_fitness(other)
		return self.fitness > other.fitness

	def __eq__(self, other: Any) -> bool:
		"""Structural equality: same genes and same fitness."""
		if not isinstance(other, Individual):
			return False
		return self.fitness == other.fitness and torch.equal(self.chromosome, other.chromosome)

	__hash__ = None  # mutable

	def __repr__(self) -> str:
		fitness = "unevaluated" if self.fitness is None else f"{self.fitness:.6f}"
		return f"Individual(genes={len(self)}, fitness={fitness})"
