"""Localised food patches that deplete when eaten and regrow over time."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class PatchConfig:
    """Settings for the food patch world."""

    patch_count: int = 8
    initial_capacity: float = 80.0
    depletion_rate: float = 5.0
    regeneration_rate: float = 0.5
    regeneration_time: int = 200
    min_distance: int = 10
    patch_radius: int = 2


class FoodPatch:
    """A single food patch with depletion and regeneration."""

    def __init__(self, x: int, y: int, max_capacity: float) -> None:
        self.x = x
        self.y = y
        self.capacity = max_capacity
        self.max_capacity = max_capacity
        self.depleted_at: int | None = None
        self.times_depleted = 0
        self.times_visited = 0

    def __repr__(self) -> str:
        return (
            f"FoodPatch(x={self.x}, y={self.y}, capacity={self.capacity}, "
            f"max_capacity={self.max_capacity}, depleted_at={self.depleted_at})"
        )

    def deplete(self, amount: float, time: int) -> None:
        """Take food from the patch, recording when it runs out."""
        self.capacity = max(self.capacity - amount, 0.0)
        self.times_visited += 1
        if self.capacity <= 0.0 and self.depleted_at is None:
            self.depleted_at = time
            self.times_depleted += 1

    def regenerate(self, time: int, regen_time: int, regen_rate: float) -> None:
        """Regrow food; an exhausted patch waits ``regen_time`` steps first."""
        if self.depleted_at is not None:
            if time >= self.depleted_at + regen_time:
                self.capacity = min(self.capacity + regen_rate, self.max_capacity)
                if self.capacity >= self.max_capacity * 0.5:
                    self.depleted_at = None
        elif self.capacity < self.max_capacity:
            self.capacity = min(self.capacity + regen_rate, self.max_capacity)

    def has_food(self) -> bool:
        """True while the patch holds more than a crumb of food."""
        return self.capacity > 1.0

    def distance_to(self, x: int, y: int) -> int:
        """Manhattan distance to a point, capped at 255."""
        return min(abs(self.x - x) + abs(self.y - y), 255)


@dataclass
class PatchStats:
    """Aggregate figures over all food patches."""

    active_patches: int
    depleted_patches: int
    total_capacity: float
    capacity_ratio: float
    total_visits: int
    total_depletions: int

    def __str__(self) -> str:
        return (
            f"Patches: {self.active_patches}/{self.active_patches + self.depleted_patches} active, "
            f"capacity {self.capacity_ratio * 100.0:.0f}%, visits {self.total_visits}, "
            f"depletions {self.total_depletions}"
        )


class PatchWorld:
    """All food patches of a world."""

    def __init__(
        self,
        config: PatchConfig,
        grid_size: int,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.config = config
        self.grid_size = grid_size
        self.patches: list[FoodPatch] = []

        for _ in range(config.patch_count):
            attempts = 0
            while True:
                x, y = self._random_position(rng)
                too_close = any(
                    p.distance_to(x, y) < config.min_distance for p in self.patches
                )
                if not too_close or attempts > 100:
                    self.patches.append(FoodPatch(x, y, config.initial_capacity))
                    break
                attempts += 1

    def _random_position(self, rng: random.Random) -> tuple[int, int]:
        radius = self.config.patch_radius
        upper = max(self.grid_size - radius, 0)
        return rng.randrange(radius, upper), rng.randrange(radius, upper)

    def reshuffle_patches(self, seed: int) -> None:
        """Move every patch to a new place chosen from ``seed`` and refill it."""
        rng = random.Random(seed)
        for patch in self.patches:
            patch.x, patch.y = self._random_position(rng)
            patch.capacity = patch.max_capacity
            patch.depleted_at = None
            patch.times_visited = 0

    def update(self, time: int) -> None:
        """Regenerate all patches for one step."""
        for patch in self.patches:
            patch.regenerate(time, self.config.regeneration_time, self.config.regeneration_rate)

    def get_nearest_patch(self, x: int, y: int, max_dist: int) -> int | None:
        """Index of the closest patch within ``max_dist``; the first wins ties."""
        best: tuple[int, int] | None = None
        for index, patch in enumerate(self.patches):
            dist = patch.distance_to(x, y)
            if dist <= max_dist and (best is None or dist < best[1]):
                best = (index, dist)
        return best[0] if best is not None else None

    def stats(self) -> PatchStats:
        """Aggregate statistics over all patches."""
        active = sum(1 for p in self.patches if p.has_food())
        total_capacity = sum(p.capacity for p in self.patches)
        total_max = sum(p.max_capacity for p in self.patches)
        return PatchStats(
            active_patches=active,
            depleted_patches=len(self.patches) - active,
            total_capacity=total_capacity,
            capacity_ratio=total_capacity / total_max if total_max > 0.0 else 0.0,
            total_visits=sum(p.times_visited for p in self.patches),
            total_depletions=sum(p.times_depleted for p in self.patches),
        )