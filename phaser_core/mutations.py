"""Mutation operators.

Each factory validates its parameters once and returns a closure that maps a
chromosome to a new chromosome. Per-gene operators walk the input from left
to right and spend exactly one Bernoulli trial per position, so under a fixed
seed the result depends only on the input and the probability.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .chromosome import Chromosome
from .errors import check_probability
from .rng import SimulationRNG
from .steps import DEFAULT_ALPHABET, Gene, StepAlphabet

Mutation = Callable[[Chromosome], Chromosome]


def gene_randomisation(
    probability: float,
    *,
    rng: SimulationRNG,
    alphabet: StepAlphabet = DEFAULT_ALPHABET,
) -> Mutation:
    """Replace each gene with a random one with the given probability.

    The replacement is drawn independently of the old gene and may be equal
    to it.
    """
    chance = check_probability(probability)

    def mutation(chromosome: Chromosome) -> Chromosome:
        genes: list[Gene] = []
        for gene in chromosome:
            if rng.bernoulli_trial(chance):
                genes.append(rng.gene(alphabet))
            else:
                genes.append(gene)
        return Chromosome(genes)

    return mutation


def gene_deletion(probability: float, *, rng: SimulationRNG) -> Mutation:
    """Drop each gene with the given probability."""
    chance = check_probability(probability)

    def mutation(chromosome: Chromosome) -> Chromosome:
        return Chromosome(gene for gene in chromosome if not rng.bernoulli_trial(chance))

    return mutation


def gene_addition(
    probability: float,
    *,
    rng: SimulationRNG,
    alphabet: StepAlphabet = DEFAULT_ALPHABET,
) -> Mutation:
    """Insert a random gene into each gap with the given probability.

    A chromosome of length n has n + 1 gaps: before the first gene, between
    every pair and after the last one. With probability 1 the original genes
    end up at the odd positions of the result.
    """
    chance = check_probability(probability)

    def mutation(chromosome: Chromosome) -> Chromosome:
        genes: list[Gene] = []
        if rng.bernoulli_trial(chance):
            genes.append(rng.gene(alphabet))
        for gene in chromosome:
            genes.append(gene)
            if rng.bernoulli_trial(chance):
                genes.append(rng.gene(alphabet))
        return Chromosome(genes)

    return mutation


def alternative_mutations(
    first_mutation_chance: float,
    mutation1: Mutation,
    mutation2: Mutation,
    *,
    rng: SimulationRNG,
) -> Mutation:
    """Pick one of two mutations per call; one trial per call, not per gene."""
    chance = check_probability(first_mutation_chance, "first_mutation_chance")

    def mutation(chromosome: Chromosome) -> Chromosome:
        if rng.bernoulli_trial(chance):
            return mutation1(chromosome)
        return mutation2(chromosome)

    return mutation


def mutation_sequence(mutations: Sequence[Mutation]) -> Mutation:
    """Apply mutations one after another, feeding each result to the next."""
    steps = tuple(mutations)

    def mutation(chromosome: Chromosome) -> Chromosome:
        for step in steps:
            chromosome = step(chromosome)
        return chromosome

    return mutation


def whole_chromosome_replacement(chromosome: Chromosome) -> Mutation:
    """Ignore the input and always return ``chromosome``. Draws nothing."""

    def mutation(_chromosome: Chromosome) -> Chromosome:
        return chromosome

    return mutation
