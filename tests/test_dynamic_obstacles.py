import random

import pytest

from primordial.dynamic_obstacles import (
    DynamicObstacle,
    DynamicObstacleConfig,
    DynamicObstacleSystem,
    ObstacleStats,
)


@pytest.fixture
def rng():
    return random.Random(7)


def _blocked_cells(system, size=50):
    return [(x, y) for y in range(size) for x in range(size) if system.is_blocked(x, y)]


def test_obstacle_creation(rng):
    config = DynamicObstacleConfig()
    system = DynamicObstacleSystem(config, 50, rng)
    assert system.count() == config.initial_obstacles


def test_obstacle_blocking(rng):
    config = DynamicObstacleConfig(enabled=True, initial_obstacles=1, max_obstacles=10)
    system = DynamicObstacleSystem(config, 50, rng)
    assert len(_blocked_cells(system)) == 1


def test_obstacle_spawn(rng):
    config = DynamicObstacleConfig(enabled=True, initial_obstacles=0, max_obstacles=10)
    system = DynamicObstacleSystem(config, 50, rng)
    assert system.count() == 0
    assert system.spawn_obstacle(rng, 0) is True
    assert system.count() == 1


def test_obstacle_movement(rng):
    config = DynamicObstacleConfig(
        enabled=True, initial_obstacles=1, max_obstacles=10, movement_chance=1.0
    )
    system = DynamicObstacleSystem(config, 50, rng)
    initial = (system.obstacles[0].x, system.obstacles[0].y)
    for t in range(1, 10):
        system.update(t, rng)
    obs = system.obstacles[0]
    assert (obs.x, obs.y) != initial or obs.times_moved > 0
    assert obs.times_moved > 0
    assert system.is_blocked(obs.x, obs.y)


def test_obstacle_despawn(rng):
    config = DynamicObstacleConfig(
        enabled=True,
        initial_obstacles=10,
        max_obstacles=10,
        despawn_rate=1.0,
        min_lifetime=0,
    )
    system = DynamicObstacleSystem(config, 50, rng)
    assert system.count() == 10
    system.update(1, rng)
    assert system.count() < 10


def test_despawn_clears_map(rng):
    config = DynamicObstacleConfig(
        enabled=True,
        initial_obstacles=10,
        max_obstacles=10,
        despawn_rate=1.0,
        min_lifetime=0,
        spawn_rate=0.0,
    )
    system = DynamicObstacleSystem(config, 50, rng)
    system.update(1, rng)
    assert system.count() == 0
    assert _blocked_cells(system) == []


def test_max_obstacles(rng):
    config = DynamicObstacleConfig(enabled=True, initial_obstacles=5, max_obstacles=5)
    system = DynamicObstacleSystem(config, 50, rng)
    assert system.spawn_obstacle(rng, 0) is False
    assert system.count() == 5


def test_disabled_system(rng):
    config = DynamicObstacleConfig(enabled=False)
    system = DynamicObstacleSystem(config, 50, rng)
    assert system.count() == 0
    system.update(10, rng)
    assert system.count() == 0


def test_map_matches_obstacles(rng):
    system = DynamicObstacleSystem(DynamicObstacleConfig(), 50, rng)
    expected = sorted((o.y, o.x) for o in system.obstacles)
    assert sorted((y, x) for x, y in _blocked_cells(system)) == expected


def test_rebuild_map(rng):
    config = DynamicObstacleConfig(initial_obstacles=0)
    system = DynamicObstacleSystem(config, 20, rng)
    system.obstacles.append(DynamicObstacle(3, 4, 0, 0))
    assert not system.is_blocked(3, 4)
    system.rebuild_map()
    assert system.is_blocked(3, 4)
    assert _blocked_cells(system, 20) == [(3, 4)]


def test_obstacle_age_never_negative():
    obs = DynamicObstacle(1, 1, 100, 100)
    assert obs.age(150) == 50
    assert obs.age(50) == 0


def test_stats(rng):
    config = DynamicObstacleConfig(initial_obstacles=0)
    system = DynamicObstacleSystem(config, 20, rng)
    assert system.stats(10) == ObstacleStats(count=0, avg_age=0.0, total_moves=0)

    system.obstacles.extend(
        [DynamicObstacle(1, 1, 0, 0, times_moved=2), DynamicObstacle(5, 5, 10, 10, times_moved=3)]
    )
    stats = system.stats(20)
    assert stats.count == 2
    assert stats.avg_age == pytest.approx(15.0)
    assert stats.total_moves == 5


def test_stats_display():
    stats = ObstacleStats(count=3, avg_age=42.0, total_moves=7)
    assert str(stats) == "Obstacles: 3 (avg age 42, 7 moves)"


def test_config_is_copied(rng):
    config = DynamicObstacleConfig(initial_obstacles=0)
    system = DynamicObstacleSystem(config, 10, rng)
    config.max_obstacles = 0
    assert system.spawn_obstacle(rng, 0) is True
    assert system.config.max_obstacles == 50