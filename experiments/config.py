"""Experiment configuration with YAML support."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field, field_validator

from phaser_core.schemas import BaseSchema, CrossoverConfig, MutationConfig
from phaser_core.steps import DEFAULT_ALPHABET, StepAlphabet


class ExperimentConfig(BaseSchema):
    """Operator settings for one search run."""

    seed: int

    mutation: MutationConfig = Field(default_factory=MutationConfig)
    crossover: CrossoverConfig = Field(default_factory=CrossoverConfig)

    # Optional step table (code -> step name) supplied by the pass registry
    steps: dict[str, str] | None = None

    @field_validator("steps")
    @classmethod
    def steps_form_alphabet(cls, value: dict[str, str] | None) -> dict[str, str] | None:
        if value is not None:
            _ = StepAlphabet(value)
        return value

    def alphabet(self) -> StepAlphabet:
        if self.steps is None:
            return DEFAULT_ALPHABET
        return StepAlphabet(self.steps)


def load_config(yaml_path: str | Path) -> ExperimentConfig:
    """Read an ExperimentConfig from YAML.

    A missing file raises FileNotFoundError; an empty file or one that fails
    validation raises ValueError.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not data:
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

    try:
        return ExperimentConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: ExperimentConfig, yaml_path: str | Path) -> None:
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False, indent=2)
