import os
import random
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from carving import CarveWalker, spheroid_positions


def test_spheroid_is_flattened():
    points = spheroid_positions((0, 0, 0), 4)
    assert max(abs(x) for x, _, _ in points) == 3
    assert max(abs(z) for _, _, z in points) == 3
    assert max(abs(y) for _, y, _ in points) == 2
    assert len(points) == len(set(points))
    assert points == sorted(points)


def test_empty_spheroid():
    assert spheroid_positions((1.5, 2.5, 3.5), 0) == []
    assert spheroid_positions((1.5, 2.5, 3.5), -2.0) == []


def test_spheroid_follows_center():
    points = spheroid_positions((10.2, 40.7, -5.5), 1.0)
    assert points == [(10, 40, -6)]
    assert all(isinstance(c, int) for p in points for c in p)


def _walk(seed, **kwargs):
    rng = random.Random(seed)
    walker = CarveWalker(rng, 0.75, **kwargs)
    filled = []
    stamps = walker.walk((0, 60, 0), 40.0, 1.0, 0.5, lambda y, taper: 1.0 + taper, filled.append)
    return stamps, filled, rng.random()


def test_walk_is_deterministic():
    assert _walk(3) == _walk(3)
    assert _walk(3, stamp_chance=0.75, jitter=0.2) == _walk(3, stamp_chance=0.75, jitter=0.2)
    assert _walk(3)[1] != _walk(4)[1]


def test_full_chance_walk_draws_four_numbers_per_step():
    stamps, filled, after = _walk(9)
    assert stamps == 40
    assert filled
    rng = random.Random(9)
    for _ in range(40*4):
        rng.random()
    assert after == rng.random()


def test_partial_chance_skips_some_stamps():
    stamps, _, _ = _walk(9, stamp_chance=0.5)
    assert 0 < stamps < 40


def test_radius_taper_reaches_zero_at_start():
    tapers = []
    walker = CarveWalker(random.Random(1), 0.9)
    walker.walk((0, 0, 0), 10, 0.0, 0.0, lambda y, taper: tapers.append(taper) or 0.0, lambda p: None)
    assert len(tapers) == 10
    assert tapers[0] == 0.0
    assert max(tapers) == tapers[5]
