"""
Shared pytest fixtures for test suite.
Provides common populations, operators, and configurations.
"""

import pytest

from simple_ea.config import EAConfig
from simple_ea.fitness import SymbolCountFitness


# ===== Operator Fixtures =====

def identity_selection(population, rng):
    """Selection returning every genome unchanged and in order."""
    return [genome for genome, _ in population]


def identity_recombination(parent_a, parent_b, rng):
    """Recombination returning its parents."""
    return parent_a, parent_b


def identity_mutation(genome, rng):
    """Mutation returning its input."""
    return genome


def swap_recombination(parent_a, parent_b, rng):
    """Recombination swapping the two parents."""
    return parent_b, parent_a


@pytest.fixture
def count_ones():
    """OneMax fitness: number of '1' symbols."""
    return SymbolCountFitness("1")


@pytest.fixture
def identity_operators():
    """Selection, recombination and mutation that change nothing."""
    return identity_selection, identity_recombination, identity_mutation


# ===== Population Fixtures =====

@pytest.fixture
def bitstrings():
    """Four binary genomes with distinct fitness."""
    return ["1111", "1100", "1000", "0000"]


@pytest.fixture
def seed():
    """Standard seed for reproducible runs."""
    return 1234


# ===== Configuration Fixtures =====

@pytest.fixture
def small_config():
    """Small OneMax configuration for quick runs."""
    return EAConfig(
        seed=7,
        population_size=10,
        genome_length=8,
        generations=5,
        crossover_rate=0.75,
        mutation_rate=0.1,
        elite_count=2,
    )
