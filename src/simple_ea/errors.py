"""
Exception hierarchy for the evolutionary algorithm engine.

Purpose:
	Contract violations raised by the engine itself. Exceptions raised by
	caller-supplied operators are never wrapped and reach the caller as-is.
"""
from typing import Optional


class SimpleEAError(Exception):
	"""Base for all engine exceptions."""

	pass


class ContractViolationError(SimpleEAError):
	"""The caller's operators or population broke an engine contract."""

	pass


class EmptyPopulationError(ContractViolationError, ValueError):
	"""A run was started without any genomes."""

	pass


class OddPairingError(ContractViolationError, ValueError):
	"""
	Selection returned an odd number of parents for two-parent recombination.

	Attributes:
		generation: Index of the generation that was being produced
		parent_count: Length of the selected genome list
	"""

	def __init__(self, parent_count: int, generation: Optional[int] = None):
		self.parent_count = parent_count
		self.generation = generation
		where = f" while producing generation {generation}" if generation is not None else ""
		super().__init__(
			f"Odd number of parents ({parent_count}) selected{where}; "
			"recombination needs an even-length parent list"
		)


class ConfigError(SimpleEAError, ValueError):
	"""Invalid run configuration."""

	pass
