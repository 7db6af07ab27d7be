from __future__ import annotations

import logging
import random
import threading

from .errors import InvalidArgumentError
from .steps import DEFAULT_ALPHABET, Gene, StepAlphabet

logger = logging.getLogger(__name__)


class SimulationRNG:
    """Seedable random source shared by the operators of one search run.

    Operators never create their own generator; they receive a handle and
    draw from it in a fixed order, so the same seed and the same sequence of
    operator calls always produce the same chromosomes. Draws are serialised
    with a lock, which keeps a single draw order even if the handle is shared
    between threads. Use one handle per worker for parallel runs.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random: random.Random = random.Random(seed)
        self._lock: threading.Lock = threading.Lock()
        self._seed: int | None = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def reset(self, seed: int) -> None:
        with self._lock:
            self._random.seed(seed)
            self._seed = seed
        logger.debug("SimulationRNG reset with seed %s", seed)

    def probability(self) -> float:
        """Uniform float in [0, 1)."""
        with self._lock:
            return self._random.random()

    def bernoulli_trial(self, success_chance: float) -> bool:
        return self.probability() < success_chance

    def index(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        if bound <= 0:
            raise InvalidArgumentError(f"index bound must be positive, got {bound}")
        with self._lock:
            return self._random.randrange(bound)

    def uniform_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        if high < low:
            raise InvalidArgumentError(f"empty range [{low}, {high}]")
        return low + self.index(high - low + 1)

    def gene(self, alphabet: StepAlphabet = DEFAULT_ALPHABET) -> Gene:
        return alphabet.genes[self.index(len(alphabet))]
