"""Optimiser step alphabet.

Every gene is one optimiser step. Steps have a single-character code used in
the compact string form of a chromosome and a full name used when the
sequence is handed to the compiler.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Gene:
    code: str
    name: str

    def __str__(self) -> str:
        return self.code


class StepAlphabet:
    """Immutable bidirectional lookup between step codes and step names.

    Genes are kept ordered by step name. Random gene draws index into that
    order, so two alphabets with the same table always produce the same genes
    for the same seed.
    """

    def __init__(self, code_to_name: Mapping[str, str]) -> None:
        if not code_to_name:
            raise InvalidArgumentError("step alphabet must not be empty")
        by_code: dict[str, Gene] = {}
        by_name: dict[str, Gene] = {}
        for code, name in code_to_name.items():
            if not isinstance(code, str) or len(code) != 1 or code.isspace():
                raise InvalidArgumentError(f"step code must be a single non-blank character, got {code!r}")
            if not name:
                raise InvalidArgumentError(f"step {code!r} has an empty name")
            if name in by_name:
                raise InvalidArgumentError(f"duplicate step name: {name}")
            gene = Gene(code=code, name=name)
            by_code[code] = gene
            by_name[name] = gene
        self._by_code: dict[str, Gene] = by_code
        self._by_name: dict[str, Gene] = by_name
        self._genes: tuple[Gene, ...] = tuple(sorted(by_code.values(), key=lambda gene: gene.name))

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self._genes)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Gene):
            return self._by_code.get(item.code) == item
        return item in self._by_code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepAlphabet):
            return NotImplemented
        return self._genes == other._genes

    def __hash__(self) -> int:
        return hash(self._genes)

    def __repr__(self) -> str:
        return f"StepAlphabet({''.join(self.codes())!r})"

    @property
    def genes(self) -> tuple[Gene, ...]:
        return self._genes

    def codes(self) -> list[str]:
        return [gene.code for gene in self._genes]

    def step_names(self) -> list[str]:
        return [gene.name for gene in self._genes]

    def gene_for_code(self, code: str) -> Gene:
        try:
            return self._by_code[code]
        except KeyError:
            raise InvalidArgumentError(f"unknown step code: {code!r}") from None

    def gene_for_name(self, name: str) -> Gene:
        try:
            return self._by_name[name]
        except KeyError:
            raise InvalidArgumentError(f"unknown step name: {name!r}") from None

    def to_dict(self) -> dict[str, str]:
        return {gene.code: gene.name for gene in self._genes}


YUL_OPTIMISER_STEPS: dict[str, str] = {
    "f": "BlockFlattener",
    "l": "CircularReferencesPruner",
    "c": "CommonSubexpressionEliminator",
    "C": "ConditionalSimplifier",
    "U": "ConditionalUnsimplifier",
    "n": "ControlFlowSimplifier",
    "D": "DeadCodeEliminator",
    "v": "EquivalentFunctionCombiner",
    "e": "ExpressionInliner",
    "j": "ExpressionJoiner",
    "s": "ExpressionSimplifier",
    "x": "ExpressionSplitter",
    "I": "ForLoopConditionIntoBody",
    "O": "ForLoopConditionOutOfBody",
    "o": "ForLoopInitRewriter",
    "i": "FullInliner",
    "g": "FunctionGrouper",
    "h": "FunctionHoister",
    "T": "LiteralRematerialiser",
    "L": "LoadResolver",
    "M": "LoopInvariantCodeMotion",
    "r": "RedundantAssignEliminator",
    "m": "Rematerialiser",
    "V": "SSAReverser",
    "a": "SSATransform",
    "t": "StructuralSimplifier",
    "u": "UnusedPruner",
    "d": "VarDeclInitializer",
}

DEFAULT_ALPHABET = StepAlphabet(YUL_OPTIMISER_STEPS)
