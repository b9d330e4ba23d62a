import random

import pytest

from primordial.food_types import DietSpecialization, FoodCell, FoodConfig


def test_food_cell_creation():
    cell = FoodCell()
    assert cell.plant == pytest.approx(10.0, abs=0.01)
    assert cell.meat == pytest.approx(0.0, abs=0.01)
    assert cell.total() > 0.0


def test_empty_cell():
    cell = FoodCell.empty()
    assert cell.total() == 0.0
    assert cell.is_empty()
    assert not FoodCell().is_empty()


def test_food_consumption():
    cell = FoodCell()
    cell.plant = 20.0
    cell.meat = 10.0
    energy = cell.consume(DietSpecialization.herbivore(), 0.5)
    assert energy > 0.0
    assert cell.plant < 20.0
    assert cell.meat < 10.0
    assert cell.plant == pytest.approx(10.0)
    assert cell.meat == pytest.approx(5.0)


def test_consume_all_plants_with_full_efficiency():
    cell = FoodCell(plant=10.0, meat=0.0, fruit=0.0, insects=0.0)
    energy = cell.consume(DietSpecialization.herbivore(), 1.0)
    assert energy == pytest.approx(10.0)
    assert cell.is_empty()


def test_food_regeneration():
    cell = FoodCell.empty()
    cell.regenerate(FoodConfig(), 1.0, 1.0, 1.0)
    assert cell.plant > 0.0
    assert cell.fruit > 0.0
    assert cell.insects > 0.0


def test_regeneration_respects_limits():
    config = FoodConfig()
    cell = FoodCell(plant=config.max_plant, meat=0.0, fruit=config.max_fruit, insects=config.max_insects)
    cell.regenerate(config, 10.0, 10.0, 10.0)
    assert cell.plant == config.max_plant
    assert cell.fruit == config.max_fruit
    assert cell.insects == config.max_insects


def test_meat_decay():
    cell = FoodCell.empty()
    cell.meat = 100.0
    cell.regenerate(FoodConfig(), 1.0, 1.0, 1.0)
    assert cell.meat < 100.0
    assert cell.meat == pytest.approx(95.0, abs=0.01)


def test_add_meat_is_capped():
    config = FoodConfig()
    cell = FoodCell.empty()
    cell.add_meat(30.0, config)
    assert cell.meat == 30.0
    cell.add_meat(500.0, config)
    assert cell.meat == config.max_meat


def test_diet_specialization():
    herbivore = DietSpecialization.herbivore()
    assert herbivore.plant_efficiency > herbivore.meat_efficiency
    carnivore = DietSpecialization.carnivore()
    assert carnivore.meat_efficiency > carnivore.plant_efficiency


def test_omnivore_is_default():
    assert DietSpecialization.omnivore() == DietSpecialization()
    assert DietSpecialization().plant_efficiency == 0.5


def test_diet_mutation():
    diet = DietSpecialization()
    rng = random.Random(7)
    for _ in range(100):
        diet.mutate(0.1, rng)
    values = [
        diet.plant_efficiency,
        diet.meat_efficiency,
        diet.fruit_efficiency,
        diet.insect_efficiency,
    ]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert max(abs(v - 0.5) for v in values) > 0.01


def test_mutation_rejects_non_positive_strength():
    with pytest.raises(ValueError):
        DietSpecialization().mutate(0.0, random.Random(1))


def test_random_diet_in_range():
    rng = random.Random(3)
    for _ in range(50):
        diet = DietSpecialization.random(rng)
        for v in (
            diet.plant_efficiency,
            diet.meat_efficiency,
            diet.fruit_efficiency,
            diet.insect_efficiency,
        ):
            assert 0.2 <= v <= 1.0


@pytest.mark.parametrize(
    "diet, expected",
    [
        (DietSpecialization.herbivore(), "Herbivore"),
        (DietSpecialization.carnivore(), "Carnivore"),
        (DietSpecialization(0.1, 0.1, 0.9, 0.1), "Frugivore"),
        (DietSpecialization(0.1, 0.1, 0.1, 0.9), "Insectivore"),
        (DietSpecialization(), "Carnivore"),
    ],
)
def test_dominant_type(diet, expected):
    assert diet.dominant_type() == expected