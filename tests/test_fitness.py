"""
Tests for evolution fitness evaluation module.

Purpose:
    Verify fitness evaluators compute scores matching the engine's
    fitness function contract.
"""

import pytest

from simple_ea.fitness import FitnessEvaluator, ProportionalFitness, SymbolCountFitness


class TestFitnessEvaluatorBase:
    """Tests for FitnessEvaluator base class."""

    def test_base_evaluator_not_implemented(self):
        """
        Test base class raises NotImplementedError.

        Purpose:
            Verify abstract interface enforces implementation.
        """
        evaluator = FitnessEvaluator()

        with pytest.raises(NotImplementedError):
            evaluator("101", ["101"])

    def test_subclass_is_callable(self):
        class LengthFitness(FitnessEvaluator):
            def evaluate(self, genome, genomes):
                return float(len(genome))

        assert LengthFitness()("abc", ["abc"]) == 3.0


class TestSymbolCountFitness:
    """Tests for SymbolCountFitness evaluator."""

    def test_default_counts_ones(self):
        evaluator = SymbolCountFitness()

        assert evaluator("10110", []) == 3.0
        assert evaluator("000", []) == 0.0

    def test_custom_symbol_and_tuple_genome(self):
        evaluator = SymbolCountFitness(symbol=7)

        assert evaluator((7, 1, 7, 7), []) == 3.0

    def test_ignores_siblings(self):
        evaluator = SymbolCountFitness()

        assert evaluator("11", ["11"]) == evaluator("11", ["11", "00", "01"])


class TestProportionalFitness:
    """Tests for ProportionalFitness evaluator."""

    def test_shares_sum_to_one(self):
        evaluator = ProportionalFitness(SymbolCountFitness())
        genomes = ["111", "100", "110"]

        shares = [evaluator(genome, genomes) for genome in genomes]

        assert sum(shares) == pytest.approx(1.0)
        assert shares == pytest.approx([0.5, 1 / 6, 1 / 3])

    def test_depends_on_siblings(self):
        evaluator = ProportionalFitness(SymbolCountFitness())

        assert evaluator("11", ["11", "11"]) == pytest.approx(0.5)
        assert evaluator("11", ["11", "00"]) == pytest.approx(1.0)

    def test_zero_total_is_uniform(self):
        evaluator = ProportionalFitness(SymbolCountFitness())
        genomes = ["00", "00", "00", "00"]

        assert evaluator("00", genomes) == pytest.approx(0.25)
