"""
Configuration module for loading and validating evolutionary run settings.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict, fields

from simple_ea.errors import ConfigError


@dataclass
class EAConfig:
	"""
	Settings of one evolutionary run.

	Attributes:
		seed: Seed of the random stream shared by the whole run
		population_size: Number of genomes per generation
		genome_length: Symbols per genome
		generations: Generations to compute after generation 0
		crossover_rate: Probability that a parent pair is recombined
		mutation_rate: Probability that a genome is mutated
		elite_count: Best genomes carried over by elitist selection
		target_fitness: Stop early once an individual reaches this fitness
		output: File receiving plotting data, if any
		log_level: Logging level name for scripts
	"""

	seed: int = 0
	population_size: int = 100
	genome_length: int = 20
	generations: int = 100
	crossover_rate: float = 0.75
	mutation_rate: float = 0.01
	elite_count: int = 4
	target_fitness: Optional[float] = None
	output: Optional[str] = None
	log_level: str = "INFO"

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "EAConfig":
		"""
		Build a configuration from a plain dictionary.

		Args:
			data: Settings; a single ``evolution`` root key is unwrapped

		Returns:
			EAConfig with defaults for missing keys

		Raises:
			ConfigError: If unknown keys are present
		"""
		data = data or {}
		# If data is {"evolution": {...}}, unwrap it.
		if isinstance(data, dict) and "evolution" in data and len(data) == 1:
			data = data["evolution"] or {}
		if not isinstance(data, dict):
			raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

		known = {f.name for f in fields(cls)}
		unknown = sorted(set(data) - known)
		if unknown:
			raise ConfigError(f"Unknown configuration keys: {unknown}")
		return cls(**data)

	@classmethod
	def from_yaml(cls, path: str) -> "EAConfig":
		"""
		Load configuration from a YAML file.

		Args:
			path: Path to the configuration file

		Returns:
			EAConfig object with loaded settings

		Raises:
			FileNotFoundError: If the file does not exist
		"""
		if not Path(path).exists():
			raise FileNotFoundError(f"Config file not found: {path}")
		with open(path, 'r') as f:
			data = yaml.safe_load(f)
		return cls.from_dict(data)

	def validate(self) -> "EAConfig":
		"""
		Check that the settings describe a runnable EA.

		Returns:
			self, for chaining

		Raises:
			ConfigError: On the first invalid setting
		"""
		if self.seed < 0:
			raise ConfigError(f"seed must be non-negative, got {self.seed}")
		if self.population_size < 1:
			raise ConfigError(f"population_size must be positive, got {self.population_size}")
		if self.genome_length < 1:
			raise ConfigError(f"genome_length must be positive, got {self.genome_length}")
		if self.generations < 0:
			raise ConfigError(f"generations must be non-negative, got {self.generations}")
		for name in ("crossover_rate", "mutation_rate"):
			rate = getattr(self, name)
			if not 0.0 <= rate <= 1.0:
				raise ConfigError(f"{name} must be within [0, 1], got {rate}")
		if not 0 <= self.elite_count <= self.population_size:
			raise ConfigError(
				f"elite_count must be within [0, population_size], got {self.elite_count}"
			)
		# Elites plus pairs of roulette picks must pair up for recombination
		if (self.population_size - self.elite_count) % 2:
			raise ConfigError(
				"population_size and elite_count must have the same parity, "
				f"got {self.population_size} and {self.elite_count}"
			)
		return self

	def to_dict(self) -> Dict[str, Any]:
		"""Plain dictionary of all settings."""
		return asdict(self)

	def save(self, path: str) -> None:
		"""
		Save configuration to a YAML file under an ``evolution`` root key.

		Args:
			path: Destination file; parent directories are created
		"""
		output_path = Path(path)
		output_path.parent.mkdir(parents=True, exist_ok=True)
		with open(output_path, 'w') as f:
			yaml.dump({"evolution": self.to_dict()}, f, default_flow_style=False)
