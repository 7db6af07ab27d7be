"""Build operator closures from an experiment configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from phaser_core.crossover import (
    Crossover,
    fixed_point_crossover,
    random_point_crossover,
    uniform_crossover,
)
from phaser_core.errors import InvalidArgumentError
from phaser_core.mutations import (
    Mutation,
    alternative_mutations,
    gene_addition,
    gene_deletion,
    gene_randomisation,
)
from phaser_core.rng import SimulationRNG

from .config import ExperimentConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperatorSet:
    rng: SimulationRNG
    mutation: Mutation
    crossover: Crossover


def build_rng(config: ExperimentConfig) -> SimulationRNG:
    return SimulationRNG(seed=config.seed)


def build_mutation(config: ExperimentConfig, rng: SimulationRNG) -> Mutation:
    settings = config.mutation
    alphabet = config.alphabet()
    logger.debug(
        "Building mutation: randomise %.3f of genes with chance %.3f, "
        "otherwise delete (chance %.3f) or add %.3f of genes",
        settings.percent_genes_to_randomise,
        settings.randomisation_chance,
        settings.deletion_vs_addition_chance,
        settings.percent_genes_to_add_or_delete,
    )
    return alternative_mutations(
        settings.randomisation_chance,
        gene_randomisation(settings.percent_genes_to_randomise, rng=rng, alphabet=alphabet),
        alternative_mutations(
            settings.deletion_vs_addition_chance,
            gene_deletion(settings.percent_genes_to_add_or_delete, rng=rng),
            gene_addition(settings.percent_genes_to_add_or_delete, rng=rng, alphabet=alphabet),
            rng=rng,
        ),
        rng=rng,
    )


def build_crossover(config: ExperimentConfig, rng: SimulationRNG) -> Crossover:
    settings = config.crossover
    logger.debug("Building %s crossover", settings.kind)
    if settings.kind == "random_point":
        return random_point_crossover(rng=rng)
    if settings.kind == "fixed_point":
        return fixed_point_crossover(settings.crossover_point)
    if settings.kind == "uniform":
        return uniform_crossover(settings.uniform_swap_chance, rng=rng)
    raise InvalidArgumentError(f"Unknown crossover kind: {settings.kind}")


def build_operators(config: ExperimentConfig) -> OperatorSet:
    """Create a seeded generator and the operators that share it."""
    rng = build_rng(config)
    return OperatorSet(
        rng=rng,
        mutation=build_mutation(config, rng),
        crossover=build_crossover(config, rng),
    )
