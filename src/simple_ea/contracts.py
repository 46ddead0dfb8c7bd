"""
Type and operator contracts for the evolutionary algorithm engine.

Purpose:
	Names the data model (genome, fitness, individual, population) and the
	four pluggable operator kinds the generation loop calls through.

Workflow:
	1. Genomes are immutable ordered sequences (str, tuple) of symbols
	2. Fitness functions score a genome against its sibling genomes
	3. Selection, recombination and mutation consume the shared random stream
"""
from typing import NamedTuple, Protocol, Sequence, Tuple, TypeVar

import numpy as np

Genome = Sequence
Fitness = float
RandomStream = np.random.Generator

G = TypeVar("G", bound=Sequence)
G_contra = TypeVar("G_contra", bound=Sequence, contravariant=True)


class Individual(NamedTuple):
	"""
	A genome paired with the fitness it scored in its generation.

	Attributes:
		genome: The candidate solution
		fitness: Score computed against the genome's sibling population
	"""
	genome: Sequence
	fitness: Fitness


Population = Tuple[Individual, ...]


class FitnessFunc(Protocol[G_contra]):
	"""Scores one genome given the full list of genomes of its generation."""

	def __call__(self, genome: G_contra, genomes: Sequence[G_contra]) -> float:
		...


class SelectionFunction(Protocol[G]):
	"""
	Chooses the parents of the next generation.

	The returned list must have even length when a two-parent recombination
	operator follows. Its size may differ from the input size.
	"""

	def __call__(self, population: Sequence[Individual], rng: RandomStream) -> Sequence[G]:
		...


class RecombinationOp(Protocol[G]):
	"""Produces two children from two parents."""

	def __call__(self, parent_a: G, parent_b: G, rng: RandomStream) -> Tuple[G, G]:
		...


class MutationOp(Protocol[G]):
	"""Returns a possibly altered copy of one genome."""

	def __call__(self, genome: G, rng: RandomStream) -> G:
		...


class OperatorSet(NamedTuple):
	"""
	The four operators a run is parameterized by.

	Attributes:
		fitness_func: Scores a genome against its siblings
		selection: Picks parents from an evaluated population
		recombination: Two-parent crossover operator
		mutation: Single-genome mutation operator
	"""
	fitness_func: FitnessFunc
	selection: SelectionFunction
	recombination: RecombinationOp
	mutation: MutationOp
