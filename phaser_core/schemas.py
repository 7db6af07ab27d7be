from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, TypeVar

from pydantic import BaseModel, Field

TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


class BaseSchema(BaseModel):
    def to_json(self) -> str:
        return self.model_dump_json()

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_json(cls: type[TBaseSchema], data: str) -> TBaseSchema:
        return cls.model_validate_json(data)

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class MutationConfig(BaseSchema):
    """Chances driving the composite mutation applied to offspring.

    With ``randomisation_chance`` genes are randomised, otherwise genes are
    deleted (``deletion_vs_addition_chance``) or added.
    """

    randomisation_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    deletion_vs_addition_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    percent_genes_to_randomise: float = Field(default=0.1, ge=0.0, le=1.0)
    percent_genes_to_add_or_delete: float = Field(default=0.1, ge=0.0, le=1.0)


class CrossoverConfig(BaseSchema):
    kind: Literal["random_point", "fixed_point", "uniform"] = "random_point"
    crossover_point: float = Field(default=0.5, ge=0.0, le=1.0)
    uniform_swap_chance: float = Field(default=0.5, ge=0.0, le=1.0)
