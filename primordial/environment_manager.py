"""Timing of environment reshuffles for procedural worlds."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_U64_MASK = (1 << 64) - 1
_SEED_MULTIPLIER = 6364136223846793005


@dataclass
class EnvironmentConfig:
    """Settings for environment variation."""

    enabled: bool = False
    reshuffle_interval: int = 50
    reshuffle_interval_steps: int | None = None
    base_seed: int = 42
    variation_level: float = 0.5


class EnvironmentManager:
    """Decides when the environment is reshuffled and with which seed."""

    def __init__(self, config: EnvironmentConfig) -> None:
        self._config = config
        self._current_seed = config.base_seed
        self._last_reshuffle_gen = 0
        self._last_reshuffle_step = 0
        self._reshuffle_count = 0

    def should_reshuffle_gen(self, current_generation: int) -> bool:
        """True when enough generations have passed since the last reshuffle."""
        if not self._config.enabled:
            return False
        elapsed = max(0, current_generation - self._last_reshuffle_gen)
        return elapsed >= self._config.reshuffle_interval

    def should_reshuffle_step(self, current_step: int) -> bool:
        """True when a step interval is set and enough steps have passed."""
        if not self._config.enabled:
            return False
        interval = self._config.reshuffle_interval_steps
        if interval is None:
            return False
        return max(0, current_step - self._last_reshuffle_step) >= interval

    def next_seed(self, current_gen: int, current_step: int) -> int:
        """Record a reshuffle and return the new 64-bit seed."""
        self._reshuffle_count += 1
        self._last_reshuffle_gen = current_gen
        self._last_reshuffle_step = current_step

        base = (self._config.base_seed + self._reshuffle_count) & _U64_MASK
        self._current_seed = (base * _SEED_MULTIPLIER) & _U64_MASK

        logger.info(
            "Environment reshuffle #%d at gen %d step %d (seed: %d)",
            self._reshuffle_count,
            current_gen,
            current_step,
            self._current_seed,
        )
        return self._current_seed

    def current_seed(self) -> int:
        """The seed of the current environment layout."""
        return self._current_seed

    def reshuffle_count(self) -> int:
        """How many reshuffles have happened."""
        return self._reshuffle_count