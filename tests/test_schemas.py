import pytest
from pydantic import ValidationError

from phaser_core.schemas import CrossoverConfig, MutationConfig


def test_mutation_config_create_and_serialize() -> None:
    config = MutationConfig(
        randomisation_chance=0.2,
        deletion_vs_addition_chance=0.7,
        percent_genes_to_randomise=0.05,
        percent_genes_to_add_or_delete=0.15,
    )

    restored = MutationConfig.from_json(config.to_json())

    assert restored.to_dict() == config.to_dict()


def test_crossover_config_load_from_dict() -> None:
    data: dict[str, object] = {
        "kind": "uniform",
        "crossover_point": 0.5,
        "uniform_swap_chance": 0.25,
    }

    config = CrossoverConfig.from_dict(data)

    assert config.to_dict() == data


def test_chance_validation() -> None:
    with pytest.raises(ValidationError):
        _ = MutationConfig(percent_genes_to_randomise=-0.5)
    with pytest.raises(ValidationError):
        _ = CrossoverConfig(uniform_swap_chance=2.0)
