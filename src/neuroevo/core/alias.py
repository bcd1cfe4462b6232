"""
Walker alias method for O(1) weighted index sampling.

The table is built once in O(n) from a probability-mass sequence and then
supports constant-time draws:

	sampler = AliasSampler(unitize([1, 2, 3, 4]))
	index = sampler.draw(rng)

Used by rank-route selection, which rebuilds the table for every draw
(the table is cheap next to a fitness evaluation).
"""

import random
from typing import Sequence

from neuroevo.core.errors import DegenerateInputError


def l1_norm(values: Sequence[float]) -> float:
	"""Sum of absolute values."""
	return sum(abs(v) for v in values)


def unitize(values: Sequence[float]) -> list[float]:
	"""
	Scale values so their L1 norm is 1.

	Raises:
		DegenerateInputError: If values is empty or all zero.
	"""
	if len(values) == 0:
		raise DegenerateInputError("Cannot normalise an empty weight sequence")
	norm = l1_norm(values)
	if norm == 0:
		raise DegenerateInputError("Cannot normalise weights with zero L1 norm")
	return [v / norm for v in values]


class AliasSampler:
	"""
	Alias table over indices 0..n-1.

	Attributes:
		probability: Scaled probability table q (q[i] = p[i] * n after pairing)
		alias: Alias partner for each column
	"""

	def __init__(self, probabilities: Sequence[float]):
		"""
		Args:
			probabilities: Non-negative weights already normalised to sum to 1
				(see unitize()).

		Raises:
			DegenerateInputError: On an empty sequence or a negative weight.
		"""
		n = len(probabilities)
		if n == 0:
			raise DegenerateInputError("AliasSampler needs at least one weight")
		if any(p < 0 for p in probabilities):
			raise DegenerateInputError("AliasSampler weights must be non-negative")

		q = [p * n for p in probabilities]
		alias = list(range(n))

		# Stacks of column indices; the most recently pushed entry is paired first
		overfull = []
		underfull = []
		for i in range(n):
			if q[i] >= 1.0:
				overfull.append(i)
			else:
				underfull.append(i)

		while overfull and underfull:
			j = underfull.pop()
			k = overfull[-1]
			alias[j] = k
			q[k] += q[j] - 1
			if q[k] < 1.0:
				overfull.pop()
				underfull.append(k)

		self.probability = q
		self.alias = alias

	def __len__(self) -> int:
		return len(self.probability)

	def draw(self, rng: random.Random) -> int:
		"""Draw one index using a single uniform variate."""
		n = len(self.probability)
		u = rng.random() * n
		k = int(u)
		u -= k
		if u < self.probability[k]:
			return k
		return self.alias[k]

	def sample(self, rng: random.Random, count: int) -> list[int]:
		"""Draw count independent indices."""
		return [self.draw(rng) for _ in range(count)]

	def __repr__(self) -> str:
		return f"AliasSampler(n={len(self)})"


def weighted_index(probabilities: Sequence[float], rng: random.Random) -> int:
	"""Build a table for probabilities and draw a single index from it."""
	return AliasSampler(probabilities).draw(rng)
