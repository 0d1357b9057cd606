import random

import pytest

import core.generator as generator_module

from core.generator import (
    LevelGenerator, difficulty_delta, perturb, random_color,
)
from settings import MIN_DELTA, BASE_DELTA, GRID_CELLS
from utils.color import HSLColor


def test_delta_starts_at_base():
    assert difficulty_delta(0) == pytest.approx(BASE_DELTA)
    assert difficulty_delta(1) == pytest.approx(15 * 0.92)


def test_delta_floor_and_monotonic():
    previous = difficulty_delta(0)
    for level in range(1, 500):
        delta = difficulty_delta(level)
        assert delta >= MIN_DELTA
        assert delta <= previous
        previous = delta
    assert difficulty_delta(499) == MIN_DELTA


def test_delta_rejects_negative_level():
    with pytest.raises(ValueError):
        difficulty_delta(-1)


def test_random_color_ranges(rng):
    for _ in range(2000):
        color = random_color(rng)
        assert 0 <= color.h < 360
        assert 50 <= color.s < 90
        assert 40 <= color.l < 60


def test_perturb_moves_away_from_midpoint():
    assert perturb(HSLColor(0, 80, 45), "s", 10) == HSLColor(0, 70, 45)
    assert perturb(HSLColor(0, 50, 45), "s", 10) == HSLColor(0, 60, 45)
    assert perturb(HSLColor(0, 60, 55), "l", 4) == HSLColor(0, 60, 51)
    assert perturb(HSLColor(0, 60, 40), "l", 4) == HSLColor(0, 60, 44)


@pytest.mark.parametrize("seed", [0, 1, 7, 99, 12345])
def test_rounds_differ_in_exactly_one_channel(seed):
    generator = LevelGenerator(random.Random(seed))
    for level in range(0, 60, 3):
        rnd = generator.generate(level)
        base, target = rnd.base_color, rnd.target_color

        assert rnd.level == level
        assert 0 <= rnd.target_index < GRID_CELLS
        assert target.h == base.h

        changed = [ch for ch in ("s", "l") if target.channel(ch) != base.channel(ch)]
        assert changed == [rnd.channel]
        assert abs(target.channel(rnd.channel) - base.channel(rnd.channel)) == pytest.approx(
            difficulty_delta(level)
        )
        assert 0 <= target.channel(rnd.channel) <= 100


def test_both_channels_and_many_cells_are_used(generator):
    rounds = [generator.generate(0) for _ in range(400)]
    assert {r.channel for r in rounds} == {"s", "l"}
    assert len({r.target_index for r in rounds}) == GRID_CELLS


def test_same_seed_same_rounds():
    a = LevelGenerator(random.Random(5))
    b = LevelGenerator(random.Random(5))
    assert [a.generate(n) for n in range(10)] == [b.generate(n) for n in range(10)]


def test_color_at_marks_only_target(generator):
    rnd = generator.generate(3)
    colors = [rnd.color_at(i) for i in range(GRID_CELLS)]
    assert colors.count(rnd.target_color) == 1
    assert colors.index(rnd.target_color) == rnd.target_index


def test_default_constants_pass_bounds_check():
    generator_module._check_bounds()


@pytest.mark.parametrize("overrides", [
    # midpoint inside the lightness range, pushed up past 100
    {"BASE_DELTA": 55.0, "SATURATION_RANGE": (60.0, 90.0)},
    # upper endpoint pushed down below 0
    {"BASE_DELTA": 95.0},
    # midpoint pushed up past 100 in both channels
    {"BASE_DELTA": 60.0},
    {"MIN_DELTA": 0.0, "BASE_DELTA": 0.0},
])
def test_bounds_check_rejects_unsafe_constants(monkeypatch, overrides):
    for name, value in overrides.items():
        monkeypatch.setattr(generator_module, name, value)
    with pytest.raises(RuntimeError):
        generator_module._check_bounds()


def test_midpoint_base_stays_in_range_under_defaults():
    target = perturb(HSLColor(0, 70, 50.0), "l", BASE_DELTA)
    assert 0 <= target.l <= 100
