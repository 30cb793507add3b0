import pytest

from frame_engine.errors import ConfigurationError
from frame_engine.timing import (
    DampedSpring,
    EasedWindow,
    SpringConfig,
    initial_velocity,
    measure_spring,
    power2_out,
    spring_progress,
    wind_up_progress,
)

FPS = 30


def test_progress_is_exactly_zero_before_the_delay():
    config = SpringConfig(delay=30)
    for frame in range(-5, 31):
        assert spring_progress(frame, FPS, config) == 0


def test_overdamped_spring_is_monotonic_and_settles():
    config = SpringConfig(damping=200)
    horizon = measure_spring(FPS, config)
    values = [spring_progress(frame, FPS, config) for frame in range(horizon + 30)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert values[horizon] == pytest.approx(1, abs=0.01)
    assert values[-1] == pytest.approx(1, abs=0.01)


def test_default_spring_settles_within_its_horizon():
    config = SpringConfig()
    horizon = measure_spring(FPS, config)
    for frame in range(horizon, horizon + 60):
        assert spring_progress(frame, FPS, config) == pytest.approx(1, abs=0.01)


def test_heavier_mass_settles_later():
    light = measure_spring(FPS, SpringConfig())
    heavy = measure_spring(FPS, SpringConfig(mass=5))
    assert heavy > light


def test_duration_stretches_settle_time():
    config = SpringConfig(damping=200, delay=10, duration_in_frames=60)
    assert spring_progress(10, FPS, config) == 0
    assert spring_progress(70, FPS, config) == pytest.approx(1, abs=0.01)
    assert 0 < spring_progress(40, FPS, config) < 1


def test_overshoot_clamping():
    bouncy = SpringConfig(damping=2)
    clamped = SpringConfig(damping=2, overshoot_clamping=True)
    peak = max(spring_progress(f, FPS, bouncy) for f in range(60))
    assert peak > 1
    assert max(spring_progress(f, FPS, clamped) for f in range(60)) <= 1


def test_repeat_calls_agree():
    config = SpringConfig(mass=2, damping=8, stiffness=150, delay=3)
    frames = [40, 3, 17, 40, 0, 17]
    first = [spring_progress(f, FPS, config) for f in frames]
    second = [spring_progress(f, FPS, config) for f in reversed(frames)]
    assert first == list(reversed(second))


@pytest.mark.parametrize("kwargs", [
    {"mass": 0},
    {"mass": -1},
    {"stiffness": 0},
    {"damping": -1},
    {"damping": 0},
    {"duration_in_frames": 0},
    {"delay": float("inf")},
])
def test_bad_config_is_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        SpringConfig(**kwargs)


def test_bad_fps_is_rejected():
    with pytest.raises(ConfigurationError):
        spring_progress(10, 0, SpringConfig())


def test_eased_window_runs_exactly_over_its_duration():
    strategy = EasedWindow(power2_out)
    config = SpringConfig(delay=30, duration_in_frames=16)
    assert strategy.progress(30, FPS, config) == 0
    assert strategy.progress(38, FPS, config) == pytest.approx(power2_out(0.5))
    assert strategy.progress(46, FPS, config) == 1
    assert strategy.progress(500, FPS, config) == 1


def test_eased_window_needs_a_duration():
    with pytest.raises(ConfigurationError):
        EasedWindow().validate(FPS, SpringConfig(delay=10))


def test_damped_strategy_matches_function():
    config = SpringConfig(damping=200, delay=5)
    assert DampedSpring().progress(20, FPS, config) == spring_progress(20, FPS, config)


def test_initial_velocity_is_positive():
    config = SpringConfig(damping=200, delay=10, duration_in_frames=60)
    assert initial_velocity(FPS, config) > 0
    with pytest.raises(ConfigurationError):
        initial_velocity(FPS, config, sample_frames=0)


def test_wind_up_starts_below_zero_and_arrives():
    config = SpringConfig(damping=200, delay=10, duration_in_frames=60)
    assert wind_up_progress(0, FPS, config) == pytest.approx(-0.1)
    assert wind_up_progress(10, FPS, config) > -0.1
    assert wind_up_progress(70, FPS, config) == pytest.approx(1, abs=0.01)


def test_wind_up_bias_from_initial_velocity():
    config = SpringConfig(damping=200, delay=10, duration_in_frames=60)
    velocity = initial_velocity(FPS, config)
    assert wind_up_progress(0, FPS, config, bias=velocity) == pytest.approx(-velocity)
    assert wind_up_progress(70, FPS, config, bias=velocity) == pytest.approx(1, abs=0.01)


def test_spring_that_never_settles_fails_validation():
    config = SpringConfig(damping=1e-6, duration_in_frames=30)
    with pytest.raises(ConfigurationError):
        DampedSpring().validate(FPS, config)
