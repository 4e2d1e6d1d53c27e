import numpy as np

from spso.random_source import RandomSource


def test_same_seed_same_stream():
    a, b = RandomSource(5), RandomSource(5)
    assert [a.rand_double(0, 1) for _ in range(5)] == [b.rand_double(0, 1) for _ in range(5)]
    np.testing.assert_array_equal(a.uniform([0, 10], [1, 20]), b.uniform([0, 10], [1, 20]))


def test_rand_double_range():
    rng = RandomSource(0)
    values = [rng.rand_double(-2.0, 3.0) for _ in range(500)]
    assert min(values) >= -2.0
    assert max(values) < 3.0


def test_choice_is_without_replacement():
    rng = RandomSource(1)
    for _ in range(20):
        drawn = rng.choice(10, 10)
        assert sorted(drawn.tolist()) == list(range(10))


def test_spawn_is_reproducible_and_independent():
    first = [c.rand_double(0, 1) for c in RandomSource(3).spawn(3)]
    again = [c.rand_double(0, 1) for c in RandomSource(3).spawn(3)]
    assert first == again
    assert len(set(first)) == 3
