"""
Simple EA Package

A seeded evolutionary algorithm engine that lazily produces an unbounded
sequence of evaluated generations from pluggable fitness, selection,
recombination and mutation operators.
"""

__version__ = "0.1.0"
__author__ = "Caleb Kirschbaum"

from simple_ea.config import EAConfig
from simple_ea.contracts import (
	Fitness,
	FitnessFunc,
	Genome,
	Individual,
	MutationOp,
	OperatorSet,
	Population,
	RecombinationOp,
	SelectionFunction,
)
from simple_ea.engine import GenerationSequence, evaluate, next_generation, recombine_pairs, run_ea
from simple_ea.errors import (
	ConfigError,
	ContractViolationError,
	EmptyPopulationError,
	OddPairingError,
	SimpleEAError,
)
from simple_ea.random_stream import make_random_stream

__all__ = [
	"run_ea",
	"GenerationSequence",
	"evaluate",
	"next_generation",
	"recombine_pairs",
	"make_random_stream",
	"EAConfig",
	"Fitness",
	"FitnessFunc",
	"Genome",
	"Individual",
	"MutationOp",
	"OperatorSet",
	"Population",
	"RecombinationOp",
	"SelectionFunction",
	"ConfigError",
	"ContractViolationError",
	"EmptyPopulationError",
	"OddPairingError",
	"SimpleEAError",
]
