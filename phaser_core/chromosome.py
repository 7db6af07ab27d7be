"""Chromosome value type: an ordered sequence of optimiser steps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from .errors import InvalidArgumentError
from .steps import DEFAULT_ALPHABET, Gene, StepAlphabet

if TYPE_CHECKING:
    from .rng import SimulationRNG


@dataclass(frozen=True)
class Chromosome:
    """Immutable sequence of genes.

    The gene order is the order in which the optimiser runs the steps.
    Equality and hashing are structural. Operators never modify a chromosome,
    they always build a new one.
    """

    genes: tuple[Gene, ...] = ()

    def __post_init__(self) -> None:
        genes = tuple(self.genes)
        for gene in genes:
            if not isinstance(gene, Gene):
                raise InvalidArgumentError(f"chromosome genes must be Gene instances, got {gene!r}")
        object.__setattr__(self, "genes", genes)

    @classmethod
    def from_string(cls, codes: str, alphabet: StepAlphabet = DEFAULT_ALPHABET) -> "Chromosome":
        """Decode a compact string where every character is one step code.

        Whitespace is not a step code and is rejected like any other unknown
        character.
        """
        return cls(tuple(alphabet.gene_for_code(code) for code in codes))

    @classmethod
    def from_step_names(cls, names: Iterable[str], alphabet: StepAlphabet = DEFAULT_ALPHABET) -> "Chromosome":
        return cls(tuple(alphabet.gene_for_name(name) for name in names))

    @classmethod
    def make_random(
        cls,
        length: int,
        rng: "SimulationRNG",
        alphabet: StepAlphabet = DEFAULT_ALPHABET,
    ) -> "Chromosome":
        if length < 0:
            raise InvalidArgumentError(f"chromosome length must be non-negative, got {length}")
        return cls(tuple(rng.gene(alphabet) for _ in range(length)))

    @property
    def length(self) -> int:
        return len(self.genes)

    def step_names(self) -> list[str]:
        return [gene.name for gene in self.genes]

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self.genes)

    @overload
    def __getitem__(self, key: int) -> Gene: ...

    @overload
    def __getitem__(self, key: slice) -> "Chromosome": ...

    def __getitem__(self, key: int | slice) -> Gene | "Chromosome":
        if isinstance(key, slice):
            return Chromosome(self.genes[key])
        return self.genes[key]

    def __add__(self, other: object) -> "Chromosome":
        if not isinstance(other, Chromosome):
            return NotImplemented
        return Chromosome(self.genes + other.genes)

    def __str__(self) -> str:
        return "".join(gene.code for gene in self.genes)

    def __repr__(self) -> str:
        return f"Chromosome({str(self)!r})"
