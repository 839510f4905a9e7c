import math

import pytest

from frostbloom.growth.seed import seed_crystal
from frostbloom.rng import new_rng


@pytest.mark.parametrize("seed", range(40))
def test_seed_crystal_arms_share_origin_and_max_depth(seed, params):
    arms = seed_crystal(100.0, 80.0, new_rng(seed), params)

    assert 3 <= len(arms) <= 6
    for arm in arms:
        assert arm.tip == (100.0, 80.0)
        assert arm.depth == params.max_depth
        assert arm.alpha == params.arm_alpha
        assert arm.width == params.arm_width
        assert 55.0 <= arm.remaining <= 125.0
        assert 0.018 <= abs(arm.curl_rate) <= 0.040
        assert 0.22 * arm.remaining <= arm.next_fork_in <= 0.42 * arm.remaining


def test_arm_count_covers_three_to_six(fixed_random, params):
    assert len(seed_crystal(0, 0, fixed_random(0.0), params)) == 3
    assert len(seed_crystal(0, 0, fixed_random(0.999), params)) == 6


def test_every_count_shows_up_eventually(params):
    rng = new_rng(3)
    counts = {len(seed_crystal(0, 0, rng, params)) for _ in range(200)}
    assert counts == {3, 4, 5, 6}


def test_arms_are_evenly_spaced_without_jitter(fixed_random, params):
    # 0.5 everywhere: 5 arms, zero jitter
    arms = seed_crystal(0, 0, fixed_random(0.5), params)
    assert len(arms) == 5
    for i, arm in enumerate(arms):
        assert arm.heading == pytest.approx(i * 2 * math.pi / 5)


def test_jitter_stays_within_quarter_radian(params):
    rng = new_rng(11)
    for _ in range(50):
        arms = seed_crystal(0, 0, rng, params)
        n = len(arms)
        for i, arm in enumerate(arms):
            assert abs(arm.heading - i * 2 * math.pi / n) <= 0.25 + 1e-9


def test_curl_direction_follows_coin_flip(fixed_random, params):
    # draw order per arm: jitter, curl sign, length, curl magnitude, fork
    left = seed_crystal(0, 0, fixed_random([0.0] + [0.5, 0.9, 0.5, 0.5, 0.5] * 3), params)
    assert all(a.curl_rate > 0 for a in left)
    right = seed_crystal(0, 0, fixed_random([0.0] + [0.5, 0.1, 0.5, 0.5, 0.5] * 3), params)
    assert all(a.curl_rate < 0 for a in right)


def test_same_seed_same_crystal(params):
    a = seed_crystal(5, 5, new_rng(42), params)
    b = seed_crystal(5, 5, new_rng(42), params)
    assert [(x.heading, x.curl_rate, x.remaining) for x in a] == [(y.heading, y.curl_rate, y.remaining) for y in b]
