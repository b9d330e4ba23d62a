"""Obstacles that appear, move and disappear over time."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass

_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_COORD_MAX = 255


@dataclass
class DynamicObstacleConfig:
    """Settings for dynamic obstacles."""

    enabled: bool = True
    max_obstacles: int = 50
    initial_obstacles: int = 20
    movement_chance: float = 0.01
    spawn_rate: float = 0.001
    despawn_rate: float = 0.0005
    min_lifetime: int = 100


@dataclass
class DynamicObstacle:
    """One obstacle on the grid."""

    x: int
    y: int
    created_at: int
    last_moved: int
    times_moved: int = 0

    def age(self, current_time: int) -> int:
        """Steps since the obstacle appeared, never negative."""
        return max(0, current_time - self.created_at)


@dataclass
class ObstacleStats:
    """Summary figures over all obstacles."""

    count: int
    avg_age: float
    total_moves: int

    def __str__(self) -> str:
        return f"Obstacles: {self.count} (avg age {self.avg_age:.0f}, {self.total_moves} moves)"


class DynamicObstacleSystem:
    """All dynamic obstacles of a world, with a fast occupancy map."""

    def __init__(
        self,
        config: DynamicObstacleConfig,
        grid_size: int,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.config = dataclasses.replace(config)
        self.grid_size = grid_size
        self.obstacles: list[DynamicObstacle] = []
        self._obstacle_map = [False] * (grid_size * grid_size)

        if config.enabled:
            for _ in range(config.initial_obstacles):
                self.spawn_obstacle(rng, 0)

    def _index(self, x: int, y: int) -> int | None:
        idx = y * self.grid_size + x
        if 0 <= idx < len(self._obstacle_map):
            return idx
        return None

    def _mark(self, x: int, y: int, blocked: bool) -> None:
        idx = self._index(x, y)
        if idx is not None:
            self._obstacle_map[idx] = blocked

    def rebuild_map(self) -> None:
        """Recompute the occupancy map from the obstacle list."""
        self._obstacle_map = [False] * (self.grid_size * self.grid_size)
        for obs in self.obstacles:
            self._mark(obs.x, obs.y, True)

    def is_blocked(self, x: int, y: int) -> bool:
        """True when an obstacle occupies the cell."""
        idx = self._index(x, y)
        return idx is not None and self._obstacle_map[idx]

    def spawn_obstacle(self, rng: random.Random, time: int) -> bool:
        """Place an obstacle on a random free cell; False if none was placed."""
        if len(self.obstacles) >= self.config.max_obstacles:
            return False
        for _ in range(50):
            x = rng.randrange(self.grid_size)
            y = rng.randrange(self.grid_size)
            if not self.is_blocked(x, y):
                self._mark(x, y, True)
                self.obstacles.append(DynamicObstacle(x, y, time, time))
                return True
        return False

    def _remove_obstacle(self, index: int) -> None:
        # Swap-remove: the last obstacle takes the removed one's place.
        obs = self.obstacles[index]
        last = self.obstacles.pop()
        if index < len(self.obstacles):
            self.obstacles[index] = last
        self._mark(obs.x, obs.y, False)

    def _move_obstacle(self, index: int, rng: random.Random, time: int) -> bool:
        obs = self.obstacles[index]
        directions = list(_DIRECTIONS)
        rng.shuffle(directions)
        for dx, dy in directions:
            new_x = min(max(obs.x + dx, 0), _COORD_MAX)
            new_y = min(max(obs.y + dy, 0), _COORD_MAX)
            if new_x >= self.grid_size or new_y >= self.grid_size:
                continue
            if self.is_blocked(new_x, new_y):
                continue
            self._mark(obs.x, obs.y, False)
            self._mark(new_x, new_y, True)
            obs.x = new_x
            obs.y = new_y
            obs.last_moved = time
            obs.times_moved += 1
            return True
        return False

    def update(self, time: int, rng: random.Random) -> None:
        """Despawn, move and spawn obstacles for one step."""
        if not self.config.enabled:
            return

        for index in reversed(range(len(self.obstacles))):
            age = self.obstacles[index].age(time)
            if age >= self.config.min_lifetime and rng.random() < self.config.despawn_rate:
                self._remove_obstacle(index)
                continue
            if rng.random() < self.config.movement_chance:
                self._move_obstacle(index, rng, time)

        if rng.random() < self.config.spawn_rate:
            self.spawn_obstacle(rng, time)

    def count(self) -> int:
        """Number of obstacles."""
        return len(self.obstacles)

    def stats(self, time: int) -> ObstacleStats:
        """Count, average age and total moves of the obstacles."""
        total_age = sum(o.age(time) for o in self.obstacles)
        total_moves = sum(o.times_moved for o in self.obstacles)
        avg_age = total_age / len(self.obstacles) if self.obstacles else 0.0
        return ObstacleStats(count=len(self.obstacles), avg_age=avg_age, total_moves=total_moves)