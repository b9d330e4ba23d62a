"""Terrain types and their effect on movement, food and vision."""

from __future__ import annotations

import random
from enum import Enum


class Terrain(Enum):
    """A kind of ground a grid cell can have."""

    PLAIN = "plain"
    FOREST = "forest"
    MOUNTAIN = "mountain"
    DESERT = "desert"
    WATER = "water"

    def movement_cost(self, is_aquatic: bool) -> float:
        """Movement cost multiplier; higher means harder to traverse."""
        if self is Terrain.WATER:
            return 0.5 if is_aquatic else 10.0
        return _MOVEMENT_COST[self]

    def food_multiplier(self) -> float:
        """Food availability multiplier."""
        return _FOOD_MULTIPLIER[self]

    def vision_modifier(self) -> int:
        """Amount added to an organism's base vision range."""
        return _VISION_MODIFIER[self]

    def is_passable(self, is_aquatic: bool) -> bool:
        """Whether an organism can enter this terrain."""
        if self is Terrain.WATER:
            return is_aquatic
        return True

    @staticmethod
    def random(rng: random.Random | None = None) -> "Terrain":
        """Pick a terrain with fixed probabilities."""
        rng = rng if rng is not None else random.Random()
        roll = rng.randrange(100)
        if roll <= 45:
            return Terrain.PLAIN
        if roll <= 70:
            return Terrain.FOREST
        if roll <= 85:
            return Terrain.MOUNTAIN
        if roll <= 95:
            return Terrain.DESERT
        return Terrain.WATER

    def symbol(self) -> str:
        """Single character used when drawing the map."""
        return _SYMBOL[self]

    def color_code(self) -> str:
        """ANSI colour escape used when drawing the map."""
        return _COLOR_CODE[self]


_MOVEMENT_COST = {
    Terrain.PLAIN: 1.0,
    Terrain.FOREST: 1.3,
    Terrain.MOUNTAIN: 2.5,
    Terrain.DESERT: 1.8,
}

_FOOD_MULTIPLIER = {
    Terrain.PLAIN: 1.0,
    Terrain.FOREST: 1.5,
    Terrain.MOUNTAIN: 0.4,
    Terrain.DESERT: 0.2,
    Terrain.WATER: 0.8,
}

_VISION_MODIFIER = {
    Terrain.PLAIN: 0,
    Terrain.FOREST: -1,
    Terrain.MOUNTAIN: 2,
    Terrain.DESERT: 1,
    Terrain.WATER: -1,
}

_SYMBOL = {
    Terrain.PLAIN: ".",
    Terrain.FOREST: "T",
    Terrain.MOUNTAIN: "^",
    Terrain.DESERT: "~",
    Terrain.WATER: "W",
}

_COLOR_CODE = {
    Terrain.PLAIN: "\x1b[32m",
    Terrain.FOREST: "\x1b[92m",
    Terrain.MOUNTAIN: "\x1b[90m",
    Terrain.DESERT: "\x1b[33m",
    Terrain.WATER: "\x1b[34m",
}