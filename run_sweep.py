#!/usr/bin/env python3
"""
Parameter Sweep

Reruns an optimizer over a range of values for one parameter, scores the
best weights of every run on the training and test splits, and appends
one CSV row per value:

	value,avg_train,avg_test

Usage:
	python run_sweep.py --param population_size --values 10 20 40 80
	python run_sweep.py --param selection --values random tournament roulette rank_route
	python run_sweep.py --param algorithm --runs 5
	python run_sweep.py --param cooling_rate --values 0.0007 0.0009 0.0011 --optimizer simulated_annealing
"""

import argparse
import csv
import sys
from pathlib import Path
from typing import Optional

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from neuroevo.config import OptimizerConfig, num_genes
from neuroevo.core import ConfigurationError, OptimizerType, parse_enum
from neuroevo.fitness import NetworkFitness, make_dataset, split_dataset
from neuroevo.logger import Logger
from neuroevo.persistence import CheckpointSaver
from neuroevo.progress import ProgressTracker
from neuroevo.strategies import OptimizerStrategyFactory


# Global logger instance
logger: Optional[Logger] = None


def log(msg: str):
	"""Log wrapper that uses the global logger."""
	if logger:
		logger(msg)
	else:
		print(msg)


INT_PARAMS = ("population_size", "tournament_size", "hidden")
FLOAT_PARAMS = ("mutate_rate", "mutate_change", "cooling_rate", "gene_bound")

DEFAULT_VALUES = {
	"population_size": [10, 20, 30, 40, 50, 70, 90, 110],
	"mutate_rate": [0.01, 0.02, 0.04, 0.08, 0.16],
	"mutate_change": [0.05, 0.1, 0.2, 0.4],
	"tournament_size": [5, 10, 20, 30],
	"cooling_rate": [0.0007, 0.0009, 0.0011, 0.0013],
	"gene_bound": [0.5, 1.0, 2.0, 3.0],
	"hidden": [3, 5, 8, 12],
	"initialisation": ["random", "augmented", "positive_negative"],
	"selection": ["random", "tournament", "roulette", "rank_route"],
	"crossover": ["arithmetic", "one_point", "two_point", "uniform"],
	"mutation": ["standard", "constrained", "annealing"],
	"replacement": ["worst", "tournament"],
	"algorithm": ["evolutionary", "simulated_annealing", "hill_climb"],
}


def parse_value(param: str, raw: str):
	if param in INT_PARAMS:
		return int(raw)
	if param in FLOAT_PARAMS:
		return float(raw)
	return raw


def configure(
	base: OptimizerConfig,
	optimizer: OptimizerType,
	param: str,
	value,
	num_hidden: int,
) -> tuple[OptimizerConfig, OptimizerType, int]:
	"""Apply one sweep value; returns (config, optimizer type, hidden nodes)."""
	if param == "algorithm":
		return base, parse_enum(OptimizerType, value), num_hidden
	if param == "hidden":
		return base, optimizer, value
	if param == "gene_bound":
		return base.replace(min_gene=-value, max_gene=value), optimizer, num_hidden
	return base.replace(**{param: value}), optimizer, num_hidden


def run_value(
	args: argparse.Namespace,
	base: OptimizerConfig,
	train,
	test,
	value,
) -> tuple[float, float]:
	"""Average train/test fitness of the best weights over args.runs runs."""
	config, optimizer, num_hidden = configure(base, args.optimizer, args.param, value, args.hidden)
	train_fitness = NetworkFitness(train, num_hidden)
	test_fitness = train_fitness.with_dataset(test)
	config = config.replace(num_genes=train_fitness.num_genes).validate()

	persistence = CheckpointSaver(args.checkpoint_dir, config=config) if args.checkpoint_dir else None

	total_train = 0.0
	total_test = 0.0
	for run in range(args.runs):
		seed = None if args.seed is None else args.seed + run
		tracker = ProgressTracker(
			logger=log,
			prefix=f"[{optimizer.name} {args.param}={value} run {run + 1}]",
			log_every=args.log_every,
			max_evaluations=config.max_evaluations,
		)
		strategy = OptimizerStrategyFactory.create(
			optimizer,
			config=config.replace(seed=seed),
			verbose=args.verbose,
			logger=log,
			reporter=tracker,
			persistence=persistence,
		)
		result = strategy.optimize(train_fitness)
		total_train += train_fitness.evaluate(result.best)
		total_test += test_fitness.evaluate(result.best)
		log(f"  run {run + 1}/{args.runs}: {result}")

	return total_train / args.runs, total_test / args.runs


def main():
	global logger

	parser = argparse.ArgumentParser(description="Sweep one optimizer parameter and record train/test fitness")
	parser.add_argument("--param", required=True, choices=sorted(DEFAULT_VALUES),
						help="Parameter to sweep ('algorithm' compares the optimizers)")
	parser.add_argument("--values", nargs="+", help="Values to try (default: a preset range)")
	parser.add_argument("--optimizer", default="evolutionary",
						help="Optimizer type: evolutionary, simulated_annealing, hill_climb")
	parser.add_argument("--runs", type=int, default=10, help="Runs averaged per value")
	parser.add_argument("--max-evaluations", type=int, default=20000)
	parser.add_argument("--hidden", type=int, default=5, help="Hidden nodes of the evaluated network")
	parser.add_argument("--samples", type=int, default=500, help="Synthetic data set size")
	parser.add_argument("--inputs", type=int, default=8)
	parser.add_argument("--outputs", type=int, default=3)
	parser.add_argument("--seed", type=int, default=None, help="Base seed (run r uses seed + r)")
	parser.add_argument("--output", default="results/results.csv", help="CSV file to append rows to")
	parser.add_argument("--checkpoint-dir", default=None, help="Save the best weights of every run here")
	parser.add_argument("--log-every", type=int, default=0, help="Log progress every N reports (0 = off)")
	parser.add_argument("--verbose", action="store_true")
	args = parser.parse_args()

	try:
		args.optimizer = parse_enum(OptimizerType, args.optimizer)
	except ConfigurationError as e:
		parser.error(str(e))

	logger = Logger(f"sweep_{args.param}")
	logger.header(f"Sweep: {args.param} ({args.optimizer.name})")

	raw_values = args.values or [str(v) for v in DEFAULT_VALUES[args.param]]
	values = [parse_value(args.param, raw) for raw in raw_values]

	data = make_dataset(args.samples, args.inputs, args.outputs, seed=0 if args.seed is None else args.seed)
	train, test = split_dataset(data)
	base = OptimizerConfig(
		num_genes=num_genes(args.inputs, args.hidden, args.outputs),
		max_evaluations=args.max_evaluations,
	)

	output = Path(args.output)
	output.parent.mkdir(parents=True, exist_ok=True)

	for value in values:
		log(f"\n{args.param} = {value}")
		try:
			avg_train, avg_test = run_value(args, base, train, test, value)
		except ConfigurationError as e:
			log(f"  skipped: {e}")
			continue

		row = [str(value), f"{avg_train:.5f}", f"{avg_test:.5f}"]
		with open(output, "a", newline="") as f:
			csv.writer(f).writerow(row)
		logger.values(f"  {args.param}={value} -> {output}", avg_train=avg_train, avg_test=avg_test)

	logger.close()


if __name__ == "__main__":
	main()
