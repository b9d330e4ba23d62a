# primordial

Ecology building blocks for an ecosystem simulator in which organisms live on
a grid world. The package is pure Python with no runtime dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `primordial.terrain` | `Terrain` kinds with movement costs, food, vision modifiers, map symbols and ANSI colours |
| `primordial.food_types` | `FoodCell` (plant, meat, fruit, insects), `DietSpecialization`, `FoodConfig` |
| `primordial.food_patches` | `FoodPatch`es that deplete and regrow, gathered in a `PatchWorld` with `PatchStats` |
| `primordial.depletion` | `DepletionSystem`: per-cell over-exploitation state machine with `DepletionState` |
| `primordial.predation` | Damage and kill-energy rules, `PredatorObservation` strategy recognition |
| `primordial.dynamic_obstacles` | `DynamicObstacleSystem`: obstacles that spawn, move and despawn |
| `primordial.environment_manager` | `EnvironmentManager`: when to reshuffle the environment and with which seed |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Terrain kinds:

```python
import random
from primordial.terrain import Terrain

Terrain.WATER.movement_cost(True)    # 0.5
Terrain.WATER.movement_cost(False)   # 10.0
Terrain.WATER.is_passable(False)     # False
Terrain.FOREST.symbol()              # "T"
Terrain.random(random.Random(1))     # one of the five kinds, plains most often
```

Food cells and diets:

```python
from primordial.food_types import DietSpecialization, FoodCell, FoodConfig

cell = FoodCell(plant=20.0, meat=10.0)
energy = cell.consume(DietSpecialization.herbivore(), 0.5)   # about 15.7
cell.regenerate(FoodConfig(), 1.0, 1.0, 1.0)                 # plants grow, meat decays by 5%
DietSpecialization.carnivore().dominant_type()               # "Carnivore"
```

`DietSpecialization.mutate(strength, rng)` shifts every efficiency by up to
`strength` and clamps it to [0, 1]; a strength that is not positive raises
`ValueError`.

Food patches:

```python
import random
from primordial.food_patches import PatchConfig, PatchWorld

world = PatchWorld(PatchConfig(), 100, random.Random(1))
world.patches[0].deplete(80.0, time=0)
world.update(time=1)
print(world.stats())   # Patches: 7/8 active, capacity ..., visits 1, depletions 1
world.reshuffle_patches(seed=7)   # new places, refilled patches
```

Resource depletion:

```python
from primordial.depletion import DepletionConfig, DepletionState, DepletionSystem

system = DepletionSystem(50)
config = DepletionConfig(organism_threshold=3, depletion_time=10)
for _ in range(5):
    system.update_cell(10, 10, 2.0, 5, config)
assert system.get_state(10, 10) is DepletionState.DEPLETING
system.regen_multiplier(10, 10)   # 0.5
```

Cells outside the grid report `DepletionState.DEPLETED`.

Predation rules:

```python
from primordial.predation import PredationConfig, calculate_damage, calculate_energy_gain, is_in_range

config = PredationConfig()
calculate_damage(1.0, 3.0, config)          # 7.5, the smaller attacker deals half damage
calculate_energy_gain(2.0, 50.0, config)    # 65.0
is_in_range(5, 5, 6, 6)                     # True, diagonals count
```

Recognising a predator's behaviour:

```python
from primordial.predation import PredatorObservation, PredatorStrategy

obs = PredatorObservation(10, 10, time=0)
for t in range(1, 8):
    obs.update(10, 10, time=t, observer_x=0, observer_y=0)
assert obs.classified_strategy is PredatorStrategy.AMBUSH
obs.strategy_one_hot()   # [0.0, 0.0, 0.0, 1.0]
```

Attack outcomes are described by `AttackHit` (damage, kill, energy gained) and
`AttackFailure` (`NO_TARGET`, `OUT_OF_RANGE`, `ON_COOLDOWN`).

Dynamic obstacles:

```python
import random
from primordial.dynamic_obstacles import DynamicObstacleConfig, DynamicObstacleSystem

rng = random.Random(7)
obstacles = DynamicObstacleSystem(DynamicObstacleConfig(), 50, rng)
obstacles.count()          # 20
obstacles.update(1, rng)
print(obstacles.stats(1))  # Obstacles: ... (avg age ..., ... moves)
```

Environment reshuffles:

```python
from primordial.environment_manager import EnvironmentConfig, EnvironmentManager

manager = EnvironmentManager(EnvironmentConfig(enabled=True, reshuffle_interval=10))
if manager.should_reshuffle_gen(10):
    seed = manager.next_seed(10, 1000)   # the same base seed always gives the same sequence
    world.reshuffle_patches(seed)
```

Any randomness is drawn from a `random.Random` instance that you pass in, so a
simulation can be reproduced from its seeds.

## What this package does not do

It provides the individual ecology rules, not a simulation. There is no
terrain grid or map generator (only the `Terrain` kinds themselves), no
seasonal cycle, no cooperative hunting of large prey, no organisms or neural
networks, no world loop, no command-line program, no display and no saving
of state. A simulator built on these modules supplies those parts itself.