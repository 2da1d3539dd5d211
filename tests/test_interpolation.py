import pytest

from apekit.interpolation import (
    hermite4,
    hermite4_at,
    lagrange,
    lagrange5,
    lanczos_filter,
    linear,
    linear_at,
    sinc_filter,
)


def cubic(i):
    return 0.5 * i**3 - 2 * i**2 + i - 3


def quartic(x):
    return 0.1 * x**4 - x**3 + 2 * x - 1


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.9])
def test_linear_reproduces_line(t):
    assert linear(t, 2.0, 6.0) == pytest.approx(2.0 + 4.0 * t)


def test_linear_endpoints():
    assert linear(0.0, 3.0, 7.0) == 3.0
    assert linear(1.0, 3.0, 7.0) == 7.0


def test_linear_at_uses_floor():
    signal = lambda i: float(i * 10)  # noqa: E731
    assert linear_at(signal, 2.5) == pytest.approx(25.0)
    assert linear_at(signal, -1.5) == pytest.approx(-15.0)


def test_hermite_endpoints():
    assert hermite4(0.0, 5.0, 1.0, 2.0, 9.0) == pytest.approx(1.0)
    assert hermite4(1.0, 5.0, 1.0, 2.0, 9.0) == pytest.approx(2.0)


@pytest.mark.parametrize("t", [0.1, 0.5, 0.75])
def test_hermite_reproduces_line(t):
    assert hermite4(t, 0.0, 1.0, 2.0, 3.0) == pytest.approx(1.0 + t)


@pytest.mark.parametrize("x", [3.0, 3.3, -0.7])
def test_hermite_at_on_linear_signal(x):
    signal = lambda i: 2.0 * i + 1.0  # noqa: E731
    assert hermite4_at(signal, x) == pytest.approx(2.0 * x + 1.0)


@pytest.mark.parametrize("t", [0.0, 0.2, 0.5, 0.8])
def test_lagrange5_reproduces_quartic(t):
    ys = [quartic(x) for x in (-2, -1, 0, 1, 2)]
    assert lagrange5(t, *ys) == pytest.approx(quartic(t))


def test_lagrange5_at_zero_offset_is_centre():
    assert lagrange5(0.0, 9.0, 8.0, 4.0, 7.0, 6.0) == pytest.approx(4.0)


@pytest.mark.parametrize("position", [3.0, 3.25, 4.6, 7.5])
def test_lagrange_reproduces_cubic(position):
    assert lagrange(cubic, position, 4) == pytest.approx(cubic(position))
    assert lagrange(cubic, position, 5) == pytest.approx(cubic(position))


def test_lagrange_order5_matches_lagrange5():
    position = 6.3
    start = int(position)
    ys = [quartic(start + k) for k in (-2, -1, 0, 1, 2)]
    assert lagrange(quartic, position, 5) == pytest.approx(
        lagrange5(position - start, *ys)
    )


def test_lagrange_rejects_zero_order():
    with pytest.raises(ValueError):
        lagrange(cubic, 1.5, 0)


@pytest.mark.parametrize("n", [0, 3, 10])
def test_windowed_filters_hit_samples_at_integers(n):
    samples = [0.3, -1.0, 2.0, 0.5, 0.0, 1.5, -0.25, 0.75, 1.0, -2.0, 0.1]
    signal = lambda i: samples[i] if 0 <= i < len(samples) else 0.0  # noqa: E731
    assert lanczos_filter(signal, float(n), 3) == pytest.approx(samples[n], abs=1e-9)
    assert sinc_filter(signal, float(n), 4) == pytest.approx(samples[n], abs=1e-9)


def test_sinc_filter_is_linear_in_signal():
    first = lambda i: float(i % 3)  # noqa: E731
    second = lambda i: float((i * 7) % 5)  # noqa: E731
    both = lambda i: first(i) + second(i)  # noqa: E731
    x = 2.4
    assert sinc_filter(both, x, 3) == pytest.approx(
        sinc_filter(first, x, 3) + sinc_filter(second, x, 3)
    )