"""
Variation operators and random genome generation.

Purpose:
	Recombination and mutation operators matching the engine contracts,
	plus a helper that draws a random start population from the same
	stream a run continues with.
"""
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

DEFAULT_BIT_FLIP = {"0": "1", "1": "0"}


def random_genomes(
	count: int,
	length: int,
	alphabet: Sequence,
	rng: np.random.Generator,
) -> List[Sequence]:
	"""
	Draw genomes whose symbols are uniform over an alphabet.

	Args:
		count: Number of genomes
		length: Symbols per genome
		alphabet: Available symbols; a string yields string genomes,
			any other sequence yields tuples
		rng: Random stream

	Returns:
		List of ``count`` genomes
	"""
	if count < 0 or length < 0:
		raise ValueError(f"count and length must be non-negative, got {count} and {length}")
	if len(alphabet) == 0:
		raise ValueError("Alphabet must contain at least one symbol")

	indices = rng.integers(0, len(alphabet), size=(count, length))
	symbols = [[alphabet[int(index)] for index in row] for row in indices]
	if isinstance(alphabet, str):
		return ["".join(row) for row in symbols]
	return [tuple(row) for row in symbols]


def _check_rate(rate: float) -> float:
	if not 0.0 <= rate <= 1.0:
		raise ValueError(f"Rate must be within [0, 1], got {rate}")
	return float(rate)


def _replace_at(genome: Sequence, index: int, symbol) -> Sequence:
	"""Copy of ``genome`` with one position replaced, same sequence type."""
	if isinstance(genome, str):
		return genome[:index] + symbol + genome[index + 1:]
	return genome[:index] + type(genome)((symbol,)) + genome[index + 1:]


class SinglePointCrossover:
	"""
	Swap the tails of two parents after a random cut point.

	Purpose:
		With probability ``rate`` a cut point in ``[0, len(parent_a))`` is
		drawn and everything from it onward is exchanged; otherwise the
		parents are returned unchanged.
	"""
	def __init__(self, rate: float = 0.75):
		self.rate = _check_rate(rate)

	def __call__(
		self,
		parent_a: Sequence,
		parent_b: Sequence,
		rng: np.random.Generator,
	) -> Tuple[Sequence, Sequence]:
		if rng.random() >= self.rate or len(parent_a) == 0:
			return parent_a, parent_b
		cut = int(rng.integers(0, len(parent_a)))
		return parent_a[:cut] + parent_b[cut:], parent_b[:cut] + parent_a[cut:]


class PointMutation:
	"""
	Replace one random position by its image under a flip table.

	Purpose:
		With probability ``rate`` one position is drawn and its symbol
		replaced (``"0"`` <-> ``"1"`` by default). The input genome is never
		modified; a new genome is returned.
	"""
	def __init__(self, rate: float = 0.01, flip: Optional[Dict] = None):
		self.rate = _check_rate(rate)
		self.flip = dict(DEFAULT_BIT_FLIP if flip is None else flip)

	def __call__(self, genome: Sequence, rng: np.random.Generator) -> Sequence:
		if rng.random() >= self.rate or len(genome) == 0:
			return genome
		index = int(rng.integers(0, len(genome)))
		symbol = genome[index]
		if symbol not in self.flip:
			raise ValueError(f"No flip defined for symbol {symbol!r}")
		return _replace_at(genome, index, self.flip[symbol])


def identity_recombination(parent_a: Sequence, parent_b: Sequence, rng: np.random.Generator):
	"""Return the parents unchanged without drawing from the stream."""
	return parent_a, parent_b


def identity_mutation(genome: Sequence, rng: np.random.Generator) -> Sequence:
	"""Return the genome unchanged without drawing from the stream."""
	return genome
