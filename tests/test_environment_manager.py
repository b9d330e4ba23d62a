from primordial.environment_manager import EnvironmentConfig, EnvironmentManager


def test_reshuffle_timing():
    mgr = EnvironmentManager(EnvironmentConfig(enabled=True, reshuffle_interval=10))
    assert not mgr.should_reshuffle_gen(5)
    assert mgr.should_reshuffle_gen(10)
    assert mgr.should_reshuffle_gen(15)


def test_next_seed_deterministic():
    mgr = EnvironmentManager(EnvironmentConfig(enabled=True, base_seed=42))
    mgr2 = EnvironmentManager(EnvironmentConfig(enabled=True, base_seed=42))
    assert mgr.next_seed(50, 1000) == mgr2.next_seed(50, 1000)


def test_disabled():
    mgr = EnvironmentManager(EnvironmentConfig())
    assert not mgr.should_reshuffle_gen(1000)
    assert not mgr.should_reshuffle_step(10**6)


def test_initial_state():
    mgr = EnvironmentManager(EnvironmentConfig(base_seed=7))
    assert mgr.current_seed() == 7
    assert mgr.reshuffle_count() == 0


def test_next_seed_updates_state_and_resets_timing():
    mgr = EnvironmentManager(EnvironmentConfig(enabled=True, reshuffle_interval=10))
    seed = mgr.next_seed(20, 500)
    assert mgr.current_seed() == seed
    assert mgr.reshuffle_count() == 1
    assert not mgr.should_reshuffle_gen(25)
    assert mgr.should_reshuffle_gen(30)
    assert not mgr.should_reshuffle_gen(3)


def test_seeds_change_between_reshuffles():
    mgr = EnvironmentManager(EnvironmentConfig(enabled=True))
    seeds = [mgr.next_seed(g, g * 100) for g in range(5)]
    assert len(set(seeds)) == 5
    assert all(0 <= s < 2**64 for s in seeds)


def test_seed_wraps_at_64_bits():
    mgr = EnvironmentManager(EnvironmentConfig(enabled=True, base_seed=2**64 - 1))
    assert mgr.next_seed(1, 1) == 0


def test_step_reshuffle():
    config = EnvironmentConfig(enabled=True, reshuffle_interval_steps=100)
    mgr = EnvironmentManager(config)
    assert not mgr.should_reshuffle_step(99)
    assert mgr.should_reshuffle_step(100)
    mgr.next_seed(0, 100)
    assert not mgr.should_reshuffle_step(150)
    assert mgr.should_reshuffle_step(200)


def test_step_reshuffle_without_interval():
    mgr = EnvironmentManager(EnvironmentConfig(enabled=True))
    assert not mgr.should_reshuffle_step(10**9)