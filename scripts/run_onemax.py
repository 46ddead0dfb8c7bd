"""
OneMax Evolution Script.

Purpose:
	Evolve bit strings towards all ones with elitist sigma-scaled selection,
	single-point crossover and point mutation.

Workflow:
	1. Load configuration (YAML file plus command line overrides)
	2. Draw a random start population from the seeded stream
	3. Continue the same stream into the EA and run it
	4. Print per-generation statistics and optionally write plotting data

Usage:
	python scripts/run_onemax.py --config configs/onemax.yaml --output onemax.dat
"""
import argparse
import itertools
import logging
import sys
from pathlib import Path
from typing import List, Optional

from simple_ea.config import EAConfig
from simple_ea.contracts import Population
from simple_ea.engine import run_ea
from simple_ea.fitness import SymbolCountFitness
from simple_ea.operators import PointMutation, SinglePointCrossover, random_genomes
from simple_ea.random_stream import make_random_stream
from simple_ea.selection import ElitistSelection
from simple_ea.stats import plotting_data, summarize

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str] = None, **overrides) -> EAConfig:
	"""
	Load and validate run configuration.

	Args:
		config_path: Path to YAML config; defaults are used when None
		**overrides: Settings replacing file values (None values are ignored)

	Returns:
		Validated EAConfig
	"""
	config = EAConfig.from_yaml(config_path) if config_path else EAConfig()
	values = config.to_dict()
	values.update({key: value for key, value in overrides.items() if value is not None})
	return EAConfig.from_dict(values).validate()


def run(config: EAConfig) -> List[Population]:
	"""
	Run the OneMax EA described by a configuration.

	Purpose:
		One random stream serves the whole run: it first draws the start
		population, then the EA continues from where it stopped.

	Args:
		config: Validated configuration

	Returns:
		Generations computed, generation 0 first; stops early when
		``target_fitness`` is reached
	"""
	rng = make_random_stream(config.seed)
	start_genomes = random_genomes(config.population_size, config.genome_length, "01", rng)

	sequence = run_ea(
		start_genomes,
		SymbolCountFitness("1"),
		ElitistSelection(config.elite_count),
		SinglePointCrossover(config.crossover_rate),
		PointMutation(config.mutation_rate),
		rng,
	)

	generations: List[Population] = []
	for index, population in enumerate(itertools.islice(sequence, config.generations + 1)):
		generations.append(population)
		summary = summarize(population)
		print(
			f"Generation {index}: Avg Fitness = {summary['average']:.2f}, "
			f"Max Fitness = {summary['maximum']:.2f}, Std Dev = {summary['stddev']:.2f}"
		)
		if config.target_fitness is not None and summary["maximum"] >= config.target_fitness:
			logger.info(f"Target fitness {config.target_fitness} reached at generation {index}")
			break
	return generations


def main(argv: Optional[List[str]] = None) -> int:
	"""
	Main entry point.

	Workflow:
		1. Parse arguments
		2. Load config and configure logging
		3. Run the EA
		4. Save plotting data
	"""
	parser = argparse.ArgumentParser(description='OneMax Evolutionary Algorithm')
	parser.add_argument('--config', type=str, default=None, help='Path to YAML config')
	parser.add_argument('--seed', type=int, default=None, help='Random seed')
	parser.add_argument('--generations', type=int, default=None, help='Generations after the start population')
	parser.add_argument('--output', type=str, default=None, help='File for plotting data')
	args = parser.parse_args(argv)

	config = load_config(args.config, seed=args.seed, generations=args.generations, output=args.output)
	logging.basicConfig(level=config.log_level)

	logger.info(f"Starting OneMax run: seed={config.seed}, population={config.population_size}, "
		f"genome_length={config.genome_length}, generations={config.generations}")
	generations = run(config)

	if config.output:
		output_path = Path(config.output)
		output_path.parent.mkdir(parents=True, exist_ok=True)
		output_path.write_text(plotting_data(generations))
		print(f"Plotting data written to {output_path}")
	return 0


if __name__ == '__main__':
	sys.exit(main())
