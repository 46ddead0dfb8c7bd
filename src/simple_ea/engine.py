"""
Generation loop of the evolutionary algorithm.

Purpose:
	Turns a start population and four operators into a lazily produced,
	unbounded sequence of evaluated generations driven by one seeded
	random stream.

Workflow:
	1. Evaluate the start population against itself (generation 0)
	2. For every following generation:
		a. Select parents (consumes the stream)
		b. Recombine adjacent parent pairs in order (consumes the stream per pair)
		c. Mutate every child in order (consumes the stream per genome)
		d. Re-evaluate every genome against its new siblings
	3. Yield each generation only when the consumer asks for it
"""
import itertools
import logging
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from simple_ea.contracts import (
	FitnessFunc,
	Individual,
	MutationOp,
	OperatorSet,
	Population,
	RecombinationOp,
	SelectionFunction,
)
from simple_ea.errors import EmptyPopulationError, OddPairingError
from simple_ea.random_stream import SeedLike, make_random_stream

logger = logging.getLogger(__name__)


def evaluate(genomes: Iterable[Sequence], fitness_func: FitnessFunc) -> Population:
	"""
	Pair every genome with its fitness against the whole genome list.

	Args:
		genomes: Genomes of one generation, in order
		fitness_func: Scores a genome given all genomes of the generation

	Returns:
		Population of (genome, fitness) individuals in input order
	"""
	siblings = tuple(genomes)
	return tuple(
		Individual(genome, float(fitness_func(genome, siblings)))
		for genome in siblings
	)


def recombine_pairs(
	genomes: Sequence[Sequence],
	recombination: RecombinationOp,
	rng: np.random.Generator,
	generation: Optional[int] = None,
) -> List[Sequence]:
	"""
	Apply a two-parent operator to consecutive, non-overlapping pairs.

	Purpose:
		Elements 0 and 1 form the first pair, 2 and 3 the second, and so on.
		Children keep the order of their pairs and the order the operator
		returns them in.

	Args:
		genomes: Selected parents
		recombination: Two-parent operator
		rng: Random stream, consumed once per pair in pair order
		generation: Index of the generation being produced, for diagnostics

	Returns:
		Children, same length as ``genomes``

	Raises:
		OddPairingError: If ``genomes`` has odd length
	"""
	if len(genomes) % 2:
		raise OddPairingError(len(genomes), generation)

	children: List[Sequence] = []
	for index in range(0, len(genomes), 2):
		child_a, child_b = recombination(genomes[index], genomes[index + 1], rng)
		children.append(child_a)
		children.append(child_b)
	return children


def next_generation(
	population: Population,
	operators: OperatorSet,
	rng: np.random.Generator,
	generation: Optional[int] = None,
) -> Population:
	"""
	Produce the evaluated successor of one population.

	Args:
		population: Current evaluated generation
		operators: Fitness, selection, recombination and mutation operators
		rng: Random stream, consumed by selection, then each pair, then each child
		generation: Index of the generation being produced

	Returns:
		Next evaluated population

	Workflow:
		1. Selection discards fitness and returns parent genomes
		2. Adjacent pairs are recombined
		3. Each child is mutated independently, in order
		4. Fitness is recomputed against the new siblings, never the parents
	"""
	parents = list(operators.selection(population, rng))
	children = recombine_pairs(parents, operators.recombination, rng, generation)
	mutants = [operators.mutation(child, rng) for child in children]
	if not mutants:
		logger.warning(f"Generation {generation} is empty; selection returned no parents")
	return evaluate(mutants, operators.fitness_func)


class GenerationSequence:
	"""
	Lazily realized, logically infinite sequence of evaluated populations.

	Purpose:
		Index 0 is the evaluated start population, index n its n-th
		descendant. Each ``iter()`` restarts from the stored seed, so the
		sequence is a pure function of the start genomes, the operators and
		the seed: any prefix can be reproduced, and consuming a prefix never
		prevents consuming more.

	Workflow:
		1. Iterate directly, or truncate with ``take`` / ``take_while`` / ``take_until``
		2. Advancing an iterator performs exactly one generation step
		3. The sequence never terminates by itself
	"""
	def __init__(
		self,
		start_genomes: Iterable[Sequence],
		operators: OperatorSet,
		random_state: SeedLike,
	):
		"""
		Args:
			start_genomes: Genomes of generation 0
			operators: Fitness, selection, recombination and mutation operators
			random_state: Integer seed or numpy Generator the stream starts from

		Raises:
			EmptyPopulationError: If no start genomes are given
		"""
		self.start_genomes = tuple(start_genomes)
		if not self.start_genomes:
			raise EmptyPopulationError("Start population must contain at least one genome")
		self.operators = operators
		self._initial_stream = make_random_stream(random_state)

	def __iter__(self) -> Iterator[Population]:
		return self._generations(make_random_stream(self._initial_stream))

	def __repr__(self) -> str:
		return (
			f"GenerationSequence(start_size={len(self.start_genomes)}, "
			f"selection={_operator_name(self.operators.selection)}, "
			f"recombination={_operator_name(self.operators.recombination)}, "
			f"mutation={_operator_name(self.operators.mutation)})"
		)

	@property
	def start_population(self) -> Population:
		"""Generation 0: the start genomes evaluated against each other."""
		return evaluate(self.start_genomes, self.operators.fitness_func)

	def take(self, count: int) -> List[Population]:
		"""
		Compute the first ``count`` generations and nothing beyond them.

		Args:
			count: Number of generations, including generation 0

		Returns:
			List of populations
		"""
		if count < 0:
			raise ValueError(f"count must be non-negative, got {count}")
		return list(itertools.islice(self, count))

	def take_while(self, predicate: Callable[[Population], bool]) -> List[Population]:
		"""
		Collect generations while ``predicate`` holds.

		The first generation failing the predicate is computed (to test it)
		but not returned.
		"""
		return list(itertools.takewhile(predicate, self))

	def take_until(self, predicate: Callable[[Population], bool]) -> List[Population]:
		"""
		Collect generations up to and including the first one satisfying ``predicate``.

		Args:
			predicate: Stopping criterion, e.g. "some individual reached the target"

		Returns:
			List of populations; the last one satisfies the predicate
		"""
		collected: List[Population] = []
		for population in self:
			collected.append(population)
			if predicate(population):
				break
		return collected

	def _generations(self, rng: np.random.Generator) -> Iterator[Population]:
		population = evaluate(self.start_genomes, self.operators.fitness_func)
		generation = 0
		while True:
			if logger.isEnabledFor(logging.DEBUG):
				best = max((individual.fitness for individual in population), default=None)
				logger.debug(f"Generation {generation}: size={len(population)} best_fitness={best}")
			yield population
			generation += 1
			population = next_generation(population, self.operators, rng, generation)


def run_ea(
	start_genomes: Iterable[Sequence],
	fitness_func: FitnessFunc,
	selection: SelectionFunction,
	recombination: RecombinationOp,
	mutation: MutationOp,
	random_state: SeedLike,
) -> GenerationSequence:
	"""
	Run an evolutionary algorithm from a start population.

	Purpose:
		Entry point of the engine. Nothing is computed until the returned
		sequence is iterated; use ``take`` to run a fixed number of
		generations or ``take_while`` / ``take_until`` to stop on a criterion.

	Args:
		start_genomes: Non-empty list of genomes forming generation 0
		fitness_func: Scores a genome against the other genomes of its generation
		selection: Picks an even-length parent list from an evaluated population
		recombination: Turns two parents into two children
		mutation: Returns a possibly altered copy of a genome
		random_state: Integer seed or numpy Generator for the shared stream

	Returns:
		GenerationSequence of evaluated populations

	Raises:
		EmptyPopulationError: If ``start_genomes`` is empty

	Example:
		>>> generations = run_ea(genomes, SymbolCountFitness(), select, crossover, mutate, 42).take(51)
	"""
	operators = OperatorSet(fitness_func, selection, recombination, mutation)
	return GenerationSequence(start_genomes, operators, random_state)


def _operator_name(operator) -> str:
	return getattr(operator, "__name__", type(operator).__name__)
