from __future__ import annotations

import random
from typing import Optional, Sequence


class RandomDestination:
    """Chooses a drop-off floor uniformly among the candidates."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.random = rng if rng is not None else random.Random(seed)

    def __call__(self, candidates: Sequence[int]) -> int:
        if not candidates:
            raise ValueError("No candidate destinations to choose from")
        return self.random.choice(list(candidates))


def first_candidate(candidates: Sequence[int]) -> int:
    """Deterministic chooser: the candidate nearest to the pickup floor."""

    if not candidates:
        raise ValueError("No candidate destinations to choose from")
    return candidates[0]


def farthest_candidate(candidates: Sequence[int]) -> int:
    """Deterministic chooser: the terminal floor in the direction of travel."""

    if not candidates:
        raise ValueError("No candidate destinations to choose from")
    return candidates[-1]
