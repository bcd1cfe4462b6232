"""
Core enums, errors and sampling utilities for neuroevo.

Usage:
	from neuroevo.core import Selection, AliasSampler, unitize

	selector = parse_enum(Selection, "tournament")
	index = AliasSampler(unitize([1, 2, 3])).draw(rng)
"""

from neuroevo.core.errors import (
	ConfigurationError,
	DegenerateInputError,
)
from neuroevo.core.enums import (
	Initialisation,
	Selection,
	Crossover,
	Mutation,
	Replacement,
	OptimizerType,
	parse_enum,
)
from neuroevo.core.alias import (
	AliasSampler,
	l1_norm,
	unitize,
	weighted_index,
)

__all__ = [
	# Errors
	'ConfigurationError',
	'DegenerateInputError',
	# Selectors
	'Initialisation',
	'Selection',
	'Crossover',
	'Mutation',
	'Replacement',
	'OptimizerType',
	'parse_enum',
	# Sampling
	'AliasSampler',
	'l1_norm',
	'unitize',
	'weighted_index',
]
