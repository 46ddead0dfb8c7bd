"""
Per-generation fitness statistics and plotting export.

Purpose:
	Summaries computed from an already produced list of generations. These
	helpers only read populations; they never drive the engine.
"""
from typing import Any, Dict, List, Sequence

import numpy as np

from simple_ea.contracts import Population

PLOT_HEADER = "# generation average maximum minimum stddev"


def _fitness_array(population: Population) -> np.ndarray:
	return np.asarray([fitness for _, fitness in population], dtype=float)


def average_fitnesses(generations: Sequence[Population]) -> List[float]:
	"""Mean fitness of each generation."""
	return [float(_fitness_array(population).mean()) for population in generations]


def max_fitnesses(generations: Sequence[Population]) -> List[float]:
	"""Best fitness of each generation."""
	return [float(_fitness_array(population).max()) for population in generations]


def min_fitnesses(generations: Sequence[Population]) -> List[float]:
	"""Worst fitness of each generation."""
	return [float(_fitness_array(population).min()) for population in generations]


def std_deviations(generations: Sequence[Population]) -> List[float]:
	"""Population standard deviation of fitness for each generation."""
	return [float(_fitness_array(population).std()) for population in generations]


def summarize(population: Population) -> Dict[str, Any]:
	"""
	Fitness summary of one generation.

	Args:
		population: Evaluated individuals (non-empty)

	Returns:
		Dict with size, average, maximum, minimum and stddev
	"""
	values = _fitness_array(population)
	return {
		"size": int(values.size),
		"average": float(values.mean()),
		"maximum": float(values.max()),
		"minimum": float(values.min()),
		"stddev": float(values.std()),
	}


def plotting_data(generations: Sequence[Population]) -> str:
	"""
	Render generation statistics as whitespace separated rows.

	Purpose:
		Output can be plotted directly, e.g. with gnuplot:
		``plot "data.txt" using 1:2 title "average", "" using 1:3 title "maximum"``

	Args:
		generations: Populations in generation order

	Returns:
		Header line followed by one row per generation
	"""
	rows = [PLOT_HEADER]
	for index, population in enumerate(generations):
		summary = summarize(population)
		rows.append(
			f"{index} {summary['average']} {summary['maximum']} "
			f"{summary['minimum']} {summary['stddev']}"
		)
	return "\n".join(rows) + "\n"
