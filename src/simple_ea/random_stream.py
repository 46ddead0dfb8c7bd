"""
Seeded pseudo-random stream shared by every stochastic operator of a run.

Purpose:
	Builds the single numpy Generator a run threads through selection,
	recombination and mutation, without touching numpy's global state.

Workflow:
	1. An integer seed yields a Mersenne Twister backed Generator
	2. An existing Generator is copied, so the engine never advances it
	3. Snapshots expose the position of the stream for diagnostics
"""
import copy
import numbers
from typing import Any, Dict, Union

import numpy as np

SeedLike = Union[int, np.random.Generator]


def make_random_stream(random_state: SeedLike) -> np.random.Generator:
	"""
	Create an independent random stream from a seed or a generator.

	Args:
		random_state: Non-negative integer seed, or a Generator whose
			current position the new stream starts from

	Returns:
		Fresh Generator; advancing it leaves ``random_state`` untouched

	Raises:
		TypeError: If random_state is neither an integer nor a Generator
		ValueError: If the seed is negative
	"""
	if isinstance(random_state, np.random.Generator):
		return copy.deepcopy(random_state)
	if isinstance(random_state, bool) or not isinstance(random_state, numbers.Integral):
		raise TypeError(
			f"random_state must be an int seed or numpy Generator, got {type(random_state).__name__}"
		)
	if random_state < 0:
		raise ValueError(f"Seed must be non-negative, got {random_state}")
	return np.random.Generator(np.random.MT19937(int(random_state)))


def stream_state(rng: np.random.Generator) -> Dict[str, Any]:
	"""
	Snapshot the bit generator state of a stream.

	Args:
		rng: Stream to inspect

	Returns:
		JSON-compatible dictionary describing the stream position
	"""
	state = rng.bit_generator.state
	return _to_builtin(state)


def _to_builtin(value: Any) -> Any:
	"""Convert numpy arrays and scalars inside a state dict to plain Python."""
	if isinstance(value, dict):
		return {key: _to_builtin(item) for key, item in value.items()}
	if isinstance(value, np.ndarray):
		return value.tolist()
	if isinstance(value, np.generic):
		return value.item()
	return value
