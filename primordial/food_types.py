"""Food cells holding several food types, and diets that digest them."""

from __future__ import annotations

import random
from dataclasses import dataclass

PLANT_ENERGY_DENSITY = 1.0
MEAT_ENERGY_DENSITY = 3.0
FRUIT_ENERGY_DENSITY = 2.0
INSECT_ENERGY_DENSITY = 0.5


@dataclass
class FoodConfig:
    """Regeneration rates, meat decay and per-cell limits for each food type."""

    plant_regen_rate: float = 0.5
    fruit_regen_rate: float = 0.2
    insect_regen_rate: float = 0.1
    meat_decay_rate: float = 0.95
    max_plant: float = 50.0
    max_meat: float = 100.0
    max_fruit: float = 30.0
    max_insects: float = 20.0


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass
class DietSpecialization:
    """How efficiently an organism extracts energy from each food type."""

    plant_efficiency: float = 0.5
    meat_efficiency: float = 0.5
    fruit_efficiency: float = 0.5
    insect_efficiency: float = 0.5

    @classmethod
    def herbivore(cls) -> "DietSpecialization":
        """A plant-eating diet."""
        return cls(1.0, 0.1, 0.8, 0.3)

    @classmethod
    def carnivore(cls) -> "DietSpecialization":
        """A meat-eating diet."""
        return cls(0.1, 1.0, 0.2, 0.5)

    @classmethod
    def omnivore(cls) -> "DietSpecialization":
        """Moderate efficiency for every food type."""
        return cls()

    @classmethod
    def random(cls, rng: random.Random | None = None) -> "DietSpecialization":
        """A diet with every efficiency drawn from [0.2, 1.0)."""
        rng = rng if rng is not None else random.Random()
        return cls(
            rng.uniform(0.2, 1.0),
            rng.uniform(0.2, 1.0),
            rng.uniform(0.2, 1.0),
            rng.uniform(0.2, 1.0),
        )

    def mutate(self, strength: float, rng: random.Random | None = None) -> None:
        """Shift every efficiency by up to ``strength`` and clamp to [0, 1]."""
        if not strength > 0.0:
            raise ValueError(f"mutation strength must be positive, got {strength}")
        rng = rng if rng is not None else random.Random()
        self.plant_efficiency = _clamp_unit(self.plant_efficiency + rng.uniform(-strength, strength))
        self.meat_efficiency = _clamp_unit(self.meat_efficiency + rng.uniform(-strength, strength))
        self.fruit_efficiency = _clamp_unit(self.fruit_efficiency + rng.uniform(-strength, strength))
        self.insect_efficiency = _clamp_unit(self.insect_efficiency + rng.uniform(-strength, strength))

    def dominant_type(self) -> str:
        """Name of the diet the highest efficiency points to."""
        best = max(
            self.plant_efficiency,
            self.meat_efficiency,
            self.fruit_efficiency,
            self.insect_efficiency,
        )
        for efficiency, name in (
            (self.meat_efficiency, "Carnivore"),
            (self.plant_efficiency, "Herbivore"),
            (self.fruit_efficiency, "Frugivore"),
            (self.insect_efficiency, "Insectivore"),
        ):
            if abs(efficiency - best) < 0.01:
                return name
        return "Omnivore"


@dataclass
class FoodCell:
    """A grid cell holding plants, meat, fruit and insects."""

    plant: float = 10.0
    meat: float = 0.0
    fruit: float = 5.0
    insects: float = 3.0

    @classmethod
    def empty(cls) -> "FoodCell":
        """A cell with no food at all."""
        return cls(0.0, 0.0, 0.0, 0.0)

    def total(self) -> float:
        """Sum of all food in the cell."""
        return self.plant + self.meat + self.fruit + self.insects

    def is_empty(self) -> bool:
        """True when almost no food is left."""
        return self.total() < 0.1

    def regenerate(
        self,
        config: FoodConfig,
        plant_multiplier: float,
        fruit_multiplier: float,
        insect_multiplier: float,
    ) -> None:
        """Grow plants, fruit and insects up to their limits; let meat decay."""
        self.plant = min(self.plant + config.plant_regen_rate * plant_multiplier, config.max_plant)
        self.meat *= config.meat_decay_rate
        self.fruit = min(self.fruit + config.fruit_regen_rate * fruit_multiplier, config.max_fruit)
        self.insects = min(
            self.insects + config.insect_regen_rate * insect_multiplier, config.max_insects
        )

    def consume(self, diet: DietSpecialization, consumption_rate: float) -> float:
        """Eat a fraction of every food type; returns the energy gained."""
        plant = min(self.plant * consumption_rate, self.plant)
        meat = min(self.meat * consumption_rate, self.meat)
        fruit = min(self.fruit * consumption_rate, self.fruit)
        insects = min(self.insects * consumption_rate, self.insects)

        self.plant -= plant
        self.meat -= meat
        self.fruit -= fruit
        self.insects -= insects

        return (
            plant * diet.plant_efficiency * PLANT_ENERGY_DENSITY
            + meat * diet.meat_efficiency * MEAT_ENERGY_DENSITY
            + fruit * diet.fruit_efficiency * FRUIT_ENERGY_DENSITY
            + insects * diet.insect_efficiency * INSECT_ENERGY_DENSITY
        )

    def add_meat(self, amount: float, config: FoodConfig) -> None:
        """Add meat from a kill, up to the cell's limit."""
        self.meat = min(self.meat + amount, config.max_meat)