from __future__ import annotations

import math
import random
from typing import Iterable, List, Optional

from .colors import random_color


class RandomSource:
    """Seedable source of the draws used by the generator and the labeler."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self) -> float:
        return self._rng.random()

    def randint(self, max_value: int) -> int:
        # Rounds half up, so max_value itself is reachable; callers clamp.
        return int(math.floor(self.uniform() * max_value + 0.5))

    def random_color(self) -> str:
        return random_color(self.uniform)


class ScriptedRandom(RandomSource):
    """Deterministic source that replays fixed draws.

    Once the scripted uniforms run out every draw returns ``default_uniform``;
    once the scripted colors run out, colors come from the seeded fallback.
    """

    def __init__(
        self,
        uniforms: Optional[Iterable[float]] = None,
        *,
        colors: Optional[Iterable[str]] = None,
        default_uniform: float = 0.0,
    ) -> None:
        super().__init__(seed=0)
        self._uniforms: List[float] = list(uniforms or [])
        self._colors: List[str] = list(colors or [])
        self._default_uniform = default_uniform
        self.uniform_calls = 0
        self.color_calls = 0

    def uniform(self) -> float:
        self.uniform_calls += 1
        if self._uniforms:
            return self._uniforms.pop(0)
        return self._default_uniform

    def random_color(self) -> str:
        self.color_calls += 1
        if self._colors:
            return self._colors.pop(0)
        return random_color(self._rng.random)
