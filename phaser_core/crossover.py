"""Crossover operators.

All operators split both parents at the same index and join the head of the
first parent with the tail of the second. The index never exceeds the length
of the shorter parent.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from .chromosome import Chromosome
from .errors import check_probability
from .rng import SimulationRNG

Crossover = Callable[[Chromosome, Chromosome], Chromosome]
SymmetricCrossover = Callable[[Chromosome, Chromosome], tuple[Chromosome, Chromosome]]


def _split_at(parent1: Chromosome, parent2: Chromosome, point: int) -> Chromosome:
    return parent1[:point] + parent2[point:]


def _random_split_point(parent1: Chromosome, parent2: Chromosome, rng: SimulationRNG) -> int:
    min_length = min(len(parent1), len(parent2))
    # Position 0 just returns the second parent, so it is only used when one
    # side is empty. A single shared position keeps the first parent's gene.
    if min_length <= 1:
        return min_length
    return rng.index(min_length - 1) + 1


def random_point_crossover(*, rng: SimulationRNG) -> Crossover:
    def crossover(parent1: Chromosome, parent2: Chromosome) -> Chromosome:
        return _split_at(parent1, parent2, _random_split_point(parent1, parent2, rng))

    return crossover


def symmetric_random_point_crossover(*, rng: SimulationRNG) -> SymmetricCrossover:
    """Like random_point_crossover but returns both complementary offspring."""

    def crossover(parent1: Chromosome, parent2: Chromosome) -> tuple[Chromosome, Chromosome]:
        point = _random_split_point(parent1, parent2, rng)
        return _split_at(parent1, parent2, point), _split_at(parent2, parent1, point)

    return crossover


def fixed_point_crossover(crossover_point: float) -> Crossover:
    """Split at ``crossover_point`` times the length of the shorter parent.

    The split index is rounded half up, so 0.5 of a length-5 parent splits
    at 3. No randomness is consumed.
    """
    fraction = check_probability(crossover_point, "crossover_point")

    def crossover(parent1: Chromosome, parent2: Chromosome) -> Chromosome:
        min_length = min(len(parent1), len(parent2))
        point = int(math.floor(fraction * min_length + 0.5))
        return _split_at(parent1, parent2, point)

    return crossover


def uniform_crossover(swap_chance: float, *, rng: SimulationRNG) -> Crossover:
    """Take each shared position from the second parent with ``swap_chance``.

    One more trial after the shared positions decides whose remaining tail
    is appended.
    """
    chance = check_probability(swap_chance, "swap_chance")

    def crossover(parent1: Chromosome, parent2: Chromosome) -> Chromosome:
        min_length = min(len(parent1), len(parent2))
        genes = [
            parent2[index] if rng.bernoulli_trial(chance) else parent1[index]
            for index in range(min_length)
        ]
        tail = parent2[min_length:] if rng.bernoulli_trial(chance) else parent1[min_length:]
        return Chromosome(genes) + tail

    return crossover
