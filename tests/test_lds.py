import pytest

from surkl.lds import GoldenLds, compute_phi, golden_steps


@pytest.mark.parametrize("d", [1, 2, 3])
def test_phi_is_fixed_point(d):
    x = compute_phi(d, 60)
    assert x ** (d + 1) == pytest.approx(x + 1.0, rel=1e-9)


def test_phi_golden_ratio():
    assert compute_phi(1, 60) == pytest.approx(1.6180339887, rel=1e-9)


def test_phi_more_precision_converges():
    assert compute_phi(3, 40) == pytest.approx(compute_phi(3, 80), rel=1e-12)


def test_steps_are_powers_of_inverse_phi():
    a1, a2, a3 = golden_steps()
    g = compute_phi(3, 40)
    assert a1 * g == pytest.approx(1.0)
    assert a2 == pytest.approx(a1 * a1)
    assert a3 == pytest.approx(a1 * a1 * a1)
    assert 1.0 > a1 > a2 > a3 > 0.0


def test_first_point_is_seed():
    lds = GoldenLds(0.25)
    assert lds.next() == (0.25, 0.25, 0.25)


def test_second_point_adds_steps_modulo_one():
    seed = 0.9
    lds = GoldenLds(seed)
    lds.next()
    second = lds.next()
    for value, step in zip(second, golden_steps()):
        expected = seed + step
        if expected >= 1.0:
            expected -= 1.0
        assert value == pytest.approx(expected)


def test_points_stay_in_unit_cube():
    lds = GoldenLds(0.5)
    for _ in range(2000):
        point = lds.next()
        assert all(0.0 <= c < 1.0 for c in point)


def test_iteration_protocol_matches_next():
    a = GoldenLds(0.3)
    b = GoldenLds(0.3)
    assert [next(a) for _ in range(5)] == [b.next() for _ in range(5)]


def test_default_seed_in_range():
    point = GoldenLds().next()
    assert 0.0 <= point[0] < 1.0
    assert point[0] == point[1] == point[2]


@pytest.mark.parametrize("seed", [-0.1, 1.0, 2.0])
def test_bad_seed_raises(seed):
    with pytest.raises(ValueError):
        GoldenLds(seed)