"""
Fitness evaluators usable as engine fitness functions.

Purpose:
	Reusable scoring functions for common benchmark problems, including a
	wrapper that makes any score relative to its sibling population.

Workflow:
	1. Instantiate an evaluator
	2. Pass it to run_ea as the fitness function (evaluators are callable)
"""
from typing import Callable, Sequence

from simple_ea.contracts import Fitness


class FitnessEvaluator:
	"""
	Base fitness evaluator interface.

	Purpose:
		Provide a standardized, callable interface matching the engine's
		fitness function contract: ``evaluator(genome, genomes) -> float``.

	Workflow:
		1. Subclasses implement evaluate()
		2. Returns a fitness score (higher is better)
	"""
	def __call__(self, genome: Sequence, genomes: Sequence[Sequence]) -> Fitness:
		return self.evaluate(genome, genomes)

	def evaluate(self, genome: Sequence, genomes: Sequence[Sequence]) -> Fitness:
		"""
		Evaluates fitness of one genome within its generation.

		Args:
			genome: Genome to score
			genomes: All genomes of the generation, ``genome`` included

		Returns:
			Fitness score (float)
		"""
		raise NotImplementedError


class SymbolCountFitness(FitnessEvaluator):
	"""
	Counts occurrences of one symbol (OneMax when the symbol is ``"1"``).

	Purpose:
		Absolute fitness baseline: the sibling population is ignored.
	"""
	def __init__(self, symbol="1"):
		self.symbol = symbol

	def evaluate(self, genome: Sequence, genomes: Sequence[Sequence]) -> Fitness:
		return float(sum(1 for gene in genome if gene == self.symbol))


class ProportionalFitness(FitnessEvaluator):
	"""
	Share of the population's total base fitness held by one genome.

	Purpose:
		Population-relative fitness: the same genome scores differently in
		different generations, which is why the engine re-evaluates every
		generation against its own members.

	Workflow:
		1. Score every sibling with the base function
		2. Divide the genome's score by the total
		3. A zero total gives every genome an equal share
	"""
	def __init__(self, base: Callable[[Sequence, Sequence[Sequence]], float]):
		self.base = base

	def evaluate(self, genome: Sequence, genomes: Sequence[Sequence]) -> Fitness:
		total = sum(self.base(sibling, genomes) for sibling in genomes)
		if total == 0:
			return 1.0 / len(genomes)
		return self.base(genome, genomes) / total
