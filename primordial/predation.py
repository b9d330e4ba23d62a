"""Attack mechanics and recognition of predator behaviour patterns."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum

_HISTORY_LENGTH = 10


class PredatorStrategy(Enum):
    """Behaviour patterns a predator can be recognised by."""

    RANDOM = 0
    PATROL = 1
    CHASE = 2
    AMBUSH = 3


class PredatorObservation:
    """What an organism has seen of one predator's movement."""

    def __init__(self, x: int, y: int, time: int) -> None:
        self.positions: deque[tuple[int, int]] = deque([(x, y)], maxlen=_HISTORY_LENGTH)
        self.last_seen = time
        self.movement_variance = 0.0
        self.average_speed = 0.0
        self.direction_consistency = 0.0
        self.classified_strategy = PredatorStrategy.RANDOM
        self.confidence = 0.0
        self.stationary_time = 0
        self.is_chasing = False

    def update(self, x: int, y: int, time: int, observer_x: int, observer_y: int) -> None:
        """Record a new sighting and reclassify once there are three positions."""
        if self.positions and self.positions[-1] == (x, y):
            self.stationary_time += 1
        else:
            self.stationary_time = 0

        self.positions.append((x, y))
        self.last_seen = time

        if len(self.positions) >= 3:
            self._calculate_metrics(observer_x, observer_y)
            self._classify_strategy()

    def _calculate_metrics(self, observer_x: int, observer_y: int) -> None:
        points = list(self.positions)
        if len(points) < 2:
            return

        steps = [(cx - px, cy - py) for (px, py), (cx, cy) in zip(points, points[1:])]
        moves = float(len(steps))
        dx_sum = sum(dx for dx, _ in steps)
        dy_sum = sum(dy for _, dy in steps)
        total_distance = sum(math.sqrt(dx * dx + dy * dy) for dx, dy in steps)

        self.average_speed = total_distance / moves

        if len(steps) >= 2:
            mean_dx = dx_sum / moves
            mean_dy = dy_sum / moves
            variance = sum((dx - mean_dx) ** 2 + (dy - mean_dy) ** 2 for dx, dy in steps)
            self.movement_variance = math.sqrt(variance / moves)

        total_movement = abs(dx_sum) + abs(dy_sum)
        if total_movement > 0:
            net_movement = math.sqrt(dx_sum * dx_sum + dy_sum * dy_sum)
            self.direction_consistency = min(max(net_movement / total_movement, 0.0), 1.0)

        (prev_x, prev_y), (curr_x, curr_y) = points[-2], points[-1]
        prev_dist = (prev_x - observer_x) ** 2 + (prev_y - observer_y) ** 2
        curr_dist = (curr_x - observer_x) ** 2 + (curr_y - observer_y) ** 2
        self.is_chasing = curr_dist < prev_dist and self.average_speed > 0.5

    def _classify_strategy(self) -> None:
        is_stationary = self.stationary_time > 5 or self.average_speed < 0.1
        is_fast = self.average_speed > 0.7
        is_consistent = self.direction_consistency > 0.6
        is_variable = self.movement_variance > 1.0

        if is_stationary:
            self.classified_strategy = PredatorStrategy.AMBUSH
            self.confidence = 0.7 + min(self.stationary_time / 20.0, 0.3)
        elif self.is_chasing and is_fast:
            self.classified_strategy = PredatorStrategy.CHASE
            self.confidence = 0.6 + min(self.average_speed / 2.0, 0.4)
        elif is_consistent and not self.is_chasing and not is_variable:
            self.classified_strategy = PredatorStrategy.PATROL
            self.confidence = self.direction_consistency
        else:
            self.classified_strategy = PredatorStrategy.RANDOM
            self.confidence = 0.8 if is_variable else 0.5

    def strategy_one_hot(self) -> list[float]:
        """Strategy as [random, patrol, chase, ambush] one-hot values."""
        result = [0.0] * len(PredatorStrategy)
        result[self.classified_strategy.value] = 1.0
        return result

    def approach_angle(self, observer_x: int, observer_y: int) -> float:
        """How directly the predator moves toward the observer: 1 toward, 0 away."""
        if len(self.positions) < 2:
            return 0.0

        (prev_x, prev_y), (curr_x, curr_y) = self.positions[-2], self.positions[-1]
        mov_dx = float(curr_x - prev_x)
        mov_dy = float(curr_y - prev_y)
        mov_len = math.hypot(mov_dx, mov_dy)
        if mov_len < 0.1:
            return 0.0

        obs_dx = float(observer_x - curr_x)
        obs_dy = float(observer_y - curr_y)
        obs_len = math.hypot(obs_dx, obs_dy)
        if obs_len < 0.1:
            return 1.0

        dot = (mov_dx * obs_dx + mov_dy * obs_dy) / (mov_len * obs_len)
        return min(max((dot + 1.0) / 2.0, 0.0), 1.0)

    def is_stale(self, current_time: int, max_age: int) -> bool:
        """True when the predator has not been seen for more than max_age steps."""
        return max(0, current_time - self.last_seen) > max_age


@dataclass(frozen=True)
class AttackHit:
    """An attack that connected."""

    damage: float
    killed: bool
    energy_gained: float


class AttackFailure(Enum):
    """Reasons an attack did not happen."""

    NO_TARGET = "no_target"
    OUT_OF_RANGE = "out_of_range"
    ON_COOLDOWN = "on_cooldown"


@dataclass
class PredationConfig:
    """Settings for attacks and kills."""

    enabled: bool = True
    damage_multiplier: float = 15.0
    size_energy_multiplier: float = 20.0
    stored_energy_fraction: float = 0.5
    attack_cooldown: int = 2


def calculate_damage(attacker_size: float, target_size: float, config: PredationConfig) -> float:
    """Damage of one attack; halved when attacking a larger organism."""
    damage = attacker_size * config.damage_multiplier
    if attacker_size - target_size < 0.0:
        return damage * 0.5
    return damage


def calculate_energy_gain(victim_size: float, victim_energy: float, config: PredationConfig) -> float:
    """Energy gained from a kill: meat from size plus part of stored energy."""
    size_energy = victim_size * config.size_energy_multiplier
    stored_energy = max(victim_energy, 0.0) * config.stored_energy_fraction
    return size_energy + stored_energy


def is_in_range(attacker_x: int, attacker_y: int, target_x: int, target_y: int) -> bool:
    """True when the target is on the same or an adjacent cell, diagonals included."""
    return abs(attacker_x - target_x) <= 1 and abs(attacker_y - target_y) <= 1