"""
Progress tracking for optimization runs.

ProgressTracker is the observability sink the optimizers report to once
per generation (evolutionary engine) or iteration (SA, hill climbing):

	tracker = ProgressTracker(logger=log, prefix="[EA]", log_every=100)
	strategy = EvolutionaryAlgorithmStrategy(config, reporter=tracker)
	strategy.optimize(evaluator)
	tracker.log_summary()

It logs lines like:
	[EA] [evals 4012/20000] best=0.1843, best-ever=0.1801 *
"""

from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass
class ProgressStats:
	"""One report from an optimizer."""
	evaluation_count: int
	best_fitness: float
	best_ever: float
	improved: bool = False


class ProgressTracker:
	"""
	Records (evaluation_count, best_fitness) reports and logs them.

	The optimizers report the best of their *current* state, which may
	regress; best_ever is tracked here separately for display only.
	"""

	def __init__(
		self,
		logger: Optional[Callable[[str], None]] = None,
		prefix: str = "",
		log_every: int = 1,
		max_evaluations: Optional[int] = None,
	):
		"""
		Args:
			logger: Callable that logs messages (e.g., Logger instance, print)
			prefix: Prefix for log messages (e.g., "[SA]")
			log_every: Log one line per this many reports (0 = never log)
			max_evaluations: Budget, shown alongside the evaluation count
		"""
		self._log = logger or print
		self._prefix = prefix + " " if prefix else ""
		self._log_every = log_every
		self._max_evaluations = max_evaluations

		self._best_ever: Optional[float] = None
		self._history: List[ProgressStats] = []

	def report(self, evaluation_count: int, best_fitness: float) -> ProgressStats:
		improved = self._best_ever is None or best_fitness < self._best_ever
		if improved:
			self._best_ever = best_fitness

		stats = ProgressStats(
			evaluation_count=evaluation_count,
			best_fitness=best_fitness,
			best_ever=self._best_ever,
			improved=improved,
		)
		self._history.append(stats)

		if self._log_every and len(self._history) % self._log_every == 0:
			self._log_report(stats)
		return stats

	def _log_report(self, stats: ProgressStats) -> None:
		evals = f"evals {stats.evaluation_count}"
		if self._max_evaluations:
			evals = f"evals {stats.evaluation_count}/{self._max_evaluations}"
		improved_str = " *" if stats.improved else ""
		self._log(
			f"{self._prefix}[{evals}] "
			f"best={stats.best_fitness:.4f}, "
			f"best-ever={stats.best_ever:.4f}{improved_str}"
		)

	@property
	def best_ever(self) -> Optional[float]:
		return self._best_ever

	@property
	def history(self) -> List[ProgressStats]:
		return self._history.copy()

	@property
	def reports(self) -> int:
		return len(self._history)

	def reset(self) -> None:
		"""Forget all reports (reuse the tracker for another run)."""
		self._best_ever = None
		self._history = []

	def summary(self) -> dict:
		"""Summary statistics over all reports so far."""
		if not self._history:
			return {"reports": 0}

		first = self._history[0]
		last = self._history[-1]
		improvement = 0.0
		if first.best_fitness:
			improvement = (first.best_fitness - last.best_fitness) / first.best_fitness * 100

		return {
			"reports": len(self._history),
			"evaluations": last.evaluation_count,
			"initial_fitness": first.best_fitness,
			"final_fitness": last.best_fitness,
			"best_ever": self._best_ever,
			"improvement_pct": improvement,
			"improvements": sum(1 for s in self._history if s.improved),
		}

	def log_summary(self) -> None:
		s = self.summary()
		if s["reports"] == 0:
			self._log(f"{self._prefix}No progress reported")
			return

		self._log(f"{self._prefix}Summary:")
		self._log(f"  Reports: {s['reports']}")
		self._log(f"  Evaluations: {s['evaluations']}")
		self._log(f"  Initial: {s['initial_fitness']:.4f}")
		self._log(f"  Final: {s['final_fitness']:.4f}")
		self._log(f"  Best ever: {s['best_ever']:.4f}")
		self._log(f"  Improvement: {s['improvement_pct']:.2f}%")
