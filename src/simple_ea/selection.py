"""
Selection strategies and fitness scaling transforms.

Purpose:
	Building blocks for selection functions: elitism, fitness-proportionate
	(roulette wheel) and tournament selection, and sigma/rank scaling.
	Every random draw goes through the stream passed in by the engine.
"""
import logging
from typing import Callable, List, Sequence

import numpy as np

from simple_ea.contracts import Individual

logger = logging.getLogger(__name__)


def elite(population: Sequence[Individual]) -> List[Sequence]:
	"""
	Genomes sorted by descending fitness.

	Args:
		population: Evaluated individuals

	Returns:
		Genomes, best first; ties keep population order
	"""
	ranked = sorted(population, key=lambda individual: individual[1], reverse=True)
	return [genome for genome, _ in ranked]


def sigma_scale(fitnesses: Sequence[float]) -> List[float]:
	"""
	Sigma scaling: ``1 + (f - mean) / (2 * std)``.

	Purpose:
		Keeps selection pressure steady as a population converges. A
		population with zero spread scales to all ones.

	Args:
		fitnesses: Raw fitness values

	Returns:
		Scaled values in input order
	"""
	values = np.asarray(fitnesses, dtype=float)
	if values.size == 0:
		return []
	sigma = values.std()
	if sigma == 0:
		return [1.0] * len(values)
	return (1.0 + (values - values.mean()) / (2.0 * sigma)).tolist()


def rank_scale(fitnesses: Sequence[float]) -> List[float]:
	"""
	Replace each fitness by its 1-based ascending rank (ties by position).

	Args:
		fitnesses: Raw fitness values

	Returns:
		Ranks as floats in input order; the worst gets 1.0, the best n
	"""
	values = np.asarray(fitnesses, dtype=float)
	ranks = np.empty(values.size, dtype=float)
	ranks[np.argsort(values, kind="stable")] = np.arange(1, values.size + 1)
	return ranks.tolist()


def fitness_proportionate_select(
	population: Sequence[Individual],
	rng: np.random.Generator,
) -> Sequence:
	"""
	Roulette-wheel selection of one genome.

	Purpose:
		Picks a genome with probability proportional to its fitness. Negative
		fitness counts as zero; if no individual has positive fitness the
		pick is uniform. Exactly one number is drawn from the stream.

	Args:
		population: Evaluated individuals
		rng: Random stream

	Returns:
		Selected genome

	Raises:
		ValueError: If the population is empty
	"""
	if not population:
		raise ValueError("Cannot select from an empty population")

	weights = np.clip(np.asarray([fitness for _, fitness in population], dtype=float), 0.0, None)
	total = weights.sum()
	draw = rng.random()

	if not np.isfinite(total) or total <= 0:
		index = int(draw * len(population))
	else:
		cumulative = np.cumsum(weights) / total
		index = int(np.searchsorted(cumulative, draw, side="right"))
	return population[min(index, len(population) - 1)][0]


def tournament_select(
	population: Sequence[Individual],
	size: int,
	count: int,
	rng: np.random.Generator,
) -> List[Sequence]:
	"""
	Run ``count`` tournaments and return their winners.

	Args:
		population: Evaluated individuals
		size: Entrants per tournament, drawn with replacement
		count: Number of tournaments (and of returned genomes)
		rng: Random stream

	Returns:
		Winning genomes in tournament order
	"""
	if size < 1:
		raise ValueError(f"Tournament size must be at least 1, got {size}")
	if not population:
		raise ValueError("Cannot select from an empty population")

	winners = []
	for _ in range(count):
		entrants = rng.integers(0, len(population), size=size)
		best = max(entrants, key=lambda index: population[index][1])
		winners.append(population[int(best)][0])
	return winners


class ElitistSelection:
	"""
	Elitism followed by scaled fitness-proportionate selection.

	Purpose:
		The ``elite_count`` best genomes always survive, so the maximum
		fitness never decreases. The rest of the parent list is filled with
		pairs of roulette-wheel picks over scaled fitness.

	Workflow:
		1. Keep the elite genomes, best first
		2. Scale fitness of the whole population
		3. Add two roulette picks at a time until the input size is reached

	An even input size needs an even ``elite_count`` for the parent list to
	pair up.
	"""
	def __init__(
		self,
		elite_count: int = 4,
		scaling: Callable[[Sequence[float]], List[float]] = sigma_scale,
	):
		"""
		Args:
			elite_count: Number of best genomes copied unchanged
			scaling: Transform applied to fitness before roulette selection
		"""
		if elite_count < 0:
			raise ValueError(f"elite_count must be non-negative, got {elite_count}")
		self.elite_count = elite_count
		self.scaling = scaling

	def __call__(self, population: Sequence[Individual], rng: np.random.Generator) -> List[Sequence]:
		selected = elite(population)[:self.elite_count]
		scaled = [
			Individual(genome, value)
			for (genome, _), value in zip(population, self.scaling([fitness for _, fitness in population]))
		]

		while len(selected) < len(population):
			selected.append(fitness_proportionate_select(scaled, rng))
			selected.append(fitness_proportionate_select(scaled, rng))

		logger.debug(f"Selected {len(selected)} parents ({min(self.elite_count, len(population))} elite)")
		return selected
