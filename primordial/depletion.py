"""Tracking of over-exploited grid cells and their recovery."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum


class DepletionState(Enum):
    """Exploitation state of a single cell."""

    HEALTHY = "healthy"
    DEPLETING = "depleting"
    DEPLETED = "depleted"
    RECOVERING = "recovering"


_REGEN_MULTIPLIER = {
    DepletionState.HEALTHY: 1.0,
    DepletionState.DEPLETING: 0.5,
    DepletionState.DEPLETED: 0.0,
    DepletionState.RECOVERING: 0.3,
}


@dataclass
class DepletionConfig:
    """Settings for resource depletion."""

    enabled: bool = True
    organism_threshold: int = 5
    food_threshold: float = 5.0
    depletion_time: int = 100
    recovery_delay: int = 200
    recovery_time: int = 300


class DepletionSystem:
    """Per-cell state machine for over-exploitation of the food grid."""

    def __init__(self, grid_size: int) -> None:
        self.grid_size = grid_size
        self.states = [[DepletionState.HEALTHY] * grid_size for _ in range(grid_size)]
        self.depletion_timers = [[0] * grid_size for _ in range(grid_size)]
        self.depleted_cells: set[tuple[int, int]] = set()
        self.total_depleted = 0

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def update_cell(
        self,
        x: int,
        y: int,
        food_amount: float,
        organism_count: int,
        config: DepletionConfig,
    ) -> None:
        """Advance the state of one cell by one step."""
        if not config.enabled or not self._inside(x, y):
            return

        timers = self.depletion_timers[y]
        state = self.states[y][x]

        if state is DepletionState.HEALTHY:
            if (
                organism_count >= config.organism_threshold
                and food_amount < config.food_threshold
            ):
                state = DepletionState.DEPLETING

        elif state is DepletionState.DEPLETING:
            timers[x] += 1
            if timers[x] >= config.depletion_time:
                self.depleted_cells.add((x, y))
                self.total_depleted += 1
                state = DepletionState.DEPLETED
            elif organism_count < config.organism_threshold // 2:
                timers[x] = 0
                state = DepletionState.HEALTHY

        elif state is DepletionState.DEPLETED:
            timers[x] += 1
            if organism_count == 0 and timers[x] >= config.recovery_delay:
                state = DepletionState.RECOVERING

        else:
            timers[x] += 1
            if timers[x] >= config.recovery_delay + config.recovery_time:
                self.depleted_cells.discard((x, y))
                self.total_depleted = max(0, self.total_depleted - 1)
                timers[x] = 0
                state = DepletionState.HEALTHY
            elif organism_count > 0:
                state = DepletionState.DEPLETED

        self.states[y][x] = state

    def get_state(self, x: int, y: int) -> DepletionState:
        """State of a cell; cells outside the grid count as depleted."""
        if self._inside(x, y):
            return self.states[y][x]
        return DepletionState.DEPLETED

    def is_depleted(self, x: int, y: int) -> bool:
        """True for depleted or depleting cells."""
        return self.get_state(x, y) in (DepletionState.DEPLETED, DepletionState.DEPLETING)

    def regen_multiplier(self, x: int, y: int) -> float:
        """Food regeneration multiplier for the cell's state."""
        return _REGEN_MULTIPLIER[self.get_state(x, y)]

    def ecological_pressure(self) -> float:
        """Fraction of all cells that are depleted."""
        return self.total_depleted / (self.grid_size * self.grid_size)

    def state_counts(self) -> dict[DepletionState, int]:
        """Number of cells in each state present on the grid."""
        return dict(Counter(state for row in self.states for state in row))

    def reset(self) -> None:
        """Return every cell to the healthy state."""
        size = self.grid_size
        self.states = [[DepletionState.HEALTHY] * size for _ in range(size)]
        self.depletion_timers = [[0] * size for _ in range(size)]
        self.depleted_cells.clear()
        self.total_depleted = 0