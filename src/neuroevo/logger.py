"""
Run logs for sweeps and optimizer runs.

A Logger is a Callable[[str], None], the shape every strategy and
ProgressTracker accepts as `logger`:

	log = Logger("sweep_population_size")
	log.header("Sweep: population_size")
	log.values("  population_size=40", avg_train=0.1184, avg_test=0.1327)
"""

import logging
import os
from datetime import datetime
from typing import Optional


def default_log_dir(root: Optional[str] = None, when: Optional[datetime] = None) -> str:
	"""<root>/logs/YYYY/MM/DD, root defaulting to the checkout holding src/neuroevo."""
	if root is None:
		root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
	when = when or datetime.now()
	return os.path.join(root, "logs", when.strftime("%Y"), when.strftime("%m"), when.strftime("%d"))


class Logger:
	"""
	One run's log: a timestamped file (<name>_<YYYYmmdd_HHMMSS>.log) and,
	optionally, the console. Instances never share handlers, even when two
	runs use the same name within the same second.
	"""

	def __init__(
		self,
		name: str = "run",
		log_dir: Optional[str] = None,
		console: bool = True,
		to_file: bool = True,
		timestamp_format: str = '%H:%M:%S',
	):
		self.name = name
		self.log_file: Optional[str] = None

		started = datetime.now()
		self._logger = logging.getLogger(f'neuroevo.run.{name}.{id(self):x}')
		self._logger.setLevel(logging.INFO)
		self._logger.propagate = False
		self._logger.handlers.clear()

		handlers = []
		if to_file:
			directory = log_dir or default_log_dir(when=started)
			os.makedirs(directory, exist_ok=True)
			self.log_file = os.path.join(directory, f"{name}_{started:%Y%m%d_%H%M%S}.log")
			handlers.append(logging.FileHandler(self.log_file))
		if console:
			handlers.append(logging.StreamHandler())

		formatter = logging.Formatter('%(asctime)s | %(message)s', datefmt=timestamp_format)
		for handler in handlers:
			handler.setFormatter(formatter)
			self._logger.addHandler(handler)

	def __call__(self, message: str = "") -> None:
		self.log(message)

	def log(self, message: str = "") -> None:
		# Flushed per line so a killed sweep keeps everything logged so far
		self._logger.info(message)
		for handler in self._logger.handlers:
			handler.flush()

	def header(self, title: str, char: str = "=", width: int = 70) -> None:
		rule = char * width
		for line in ("", rule, f"  {title}", rule):
			self.log(line)

	def values(self, label: str, **fields: float) -> None:
		"""One line `label: k1=v1, k2=v2` with floats to 5 decimals."""
		parts = [f"{k}={v:.5f}" if isinstance(v, float) else f"{k}={v}" for k, v in fields.items()]
		self.log(f"{label}: {', '.join(parts)}")

	def close(self) -> None:
		"""Release the log file; messages logged afterwards are dropped."""
		for handler in list(self._logger.handlers):
			handler.close()
			self._logger.removeHandler(handler)

	def __repr__(self) -> str:
		return f"Logger(name='{self.name}', log_file='{self.log_file}')"


def create_logger(name: str = "run", log_dir: Optional[str] = None, console: bool = True) -> Logger:
	return Logger(name=name, log_dir=log_dir, console=console)
