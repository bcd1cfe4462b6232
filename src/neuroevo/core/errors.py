"""Error types raised by the optimizers."""


class ConfigurationError(ValueError):
	"""Invalid run configuration: unknown selector or out-of-range parameter."""


class DegenerateInputError(ValueError):
	"""An operator was given input it cannot work on (empty weights, zero-length chromosome, empty population)."""
