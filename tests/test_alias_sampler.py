"""
Alias sampler tests.

Run with: python tests/test_alias_sampler.py
"""

import random
import sys

import pytest

import support  # noqa: F401  (puts src/ on sys.path)

from neuroevo.core import AliasSampler, DegenerateInputError, l1_norm, unitize, weighted_index


def _frequencies(probabilities, draws, seed=1234):
	sampler = AliasSampler(probabilities)
	rng = random.Random(seed)
	counts = [0] * len(probabilities)
	for index in sampler.sample(rng, draws):
		counts[index] += 1
	return [c / draws for c in counts]


def test_draws_match_distribution():
	freqs = _frequencies([0.1, 0.3, 0.6], 200_000)
	for observed, expected in zip(freqs, [0.1, 0.3, 0.6]):
		assert abs(observed - expected) < 0.01, f"{observed} vs {expected}"


def test_unnormalised_ranks_through_unitize():
	freqs = _frequencies(unitize([1, 2, 3, 4]), 100_000, seed=7)
	for observed, expected in zip(freqs, [0.1, 0.2, 0.3, 0.4]):
		assert abs(observed - expected) < 0.01


def test_zero_weight_is_never_drawn():
	freqs = _frequencies([0.5, 0.0, 0.5], 50_000)
	assert freqs[1] == 0.0


def test_single_weight_always_drawn():
	sampler = AliasSampler([1.0])
	rng = random.Random(0)
	assert set(sampler.sample(rng, 100)) == {0}
	assert weighted_index([1.0], rng) == 0


def test_table_pairs_underfull_with_overfull():
	sampler = AliasSampler([0.25, 0.75])
	# q = [0.5, 1.5]; column 0 donates to column 1, which ends exactly full
	assert sampler.probability[0] == pytest.approx(0.5)
	assert sampler.alias[0] == 1
	assert sampler.probability[1] == pytest.approx(1.0)


def test_draw_uses_fractional_part():
	sampler = AliasSampler([0.25, 0.75])
	# u = 0.1 * 2 = 0.2 -> column 0, remainder 0.2 < q[0]=0.5 -> 0
	assert sampler.draw(support.FixedRandom(0.1)) == 0
	# u = 0.4 * 2 = 0.8 -> column 0, remainder 0.8 >= 0.5 -> alias 1
	assert sampler.draw(support.FixedRandom(0.4)) == 1


def test_empty_weights_rejected():
	with pytest.raises(DegenerateInputError):
		AliasSampler([])
	with pytest.raises(DegenerateInputError):
		unitize([])


def test_negative_and_zero_sum_weights_rejected():
	with pytest.raises(DegenerateInputError):
		AliasSampler([0.5, -0.5, 1.0])
	with pytest.raises(DegenerateInputError):
		unitize([0.0, 0.0])


def test_unitize_uses_l1_norm():
	assert l1_norm([1, -2, 3]) == 6
	assert unitize([1, 2, 3, 4]) == pytest.approx([0.1, 0.2, 0.3, 0.4])
	assert sum(unitize([5.0, 1.0, 0.25])) == pytest.approx(1.0)


if __name__ == "__main__":
	sys.exit(pytest.main([__file__, "-v"]))
