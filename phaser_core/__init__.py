"""
Phaser Core Module

Genetic operators for evolving optimiser step sequences.

This module provides:
- Step alphabet (single-letter code <-> full step name)
- Chromosome value type (ordered sequence of steps)
- Seedable random source shared by all operators
- Mutation operators and combinators
- Crossover operators
"""

__version__ = "0.1.0"

from .chromosome import Chromosome
from .crossover import (
    Crossover,
    SymmetricCrossover,
    fixed_point_crossover,
    random_point_crossover,
    symmetric_random_point_crossover,
    uniform_crossover,
)
from .errors import InvalidArgumentError, PhaserError
from .mutations import (
    Mutation,
    alternative_mutations,
    gene_addition,
    gene_deletion,
    gene_randomisation,
    mutation_sequence,
    whole_chromosome_replacement,
)
from .rng import SimulationRNG
from .steps import DEFAULT_ALPHABET, Gene, StepAlphabet

__all__ = [
    "Chromosome",
    "Crossover",
    "DEFAULT_ALPHABET",
    "Gene",
    "InvalidArgumentError",
    "Mutation",
    "PhaserError",
    "SimulationRNG",
    "StepAlphabet",
    "SymmetricCrossover",
    "alternative_mutations",
    "fixed_point_crossover",
    "gene_addition",
    "gene_deletion",
    "gene_randomisation",
    "mutation_sequence",
    "random_point_crossover",
    "symmetric_random_point_crossover",
    "uniform_crossover",
    "whole_chromosome_replacement",
]
