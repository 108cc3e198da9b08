import pytest

from lumina.materials.spline import CubicSpline


def test_spline_passes_through_data_points():
    xs = [1.0, 2.0, 3.0, 4.0, 5.0]
    ys = [2.0, 3.0, 5.0, 4.0, 1.0]
    spline = CubicSpline(xs, ys)
    for x, y in zip(xs, ys):
        assert spline.evaluate(x) == pytest.approx(y, abs=1e-10)


@pytest.mark.parametrize("x", [0.5, 1.25, 2.7, 3.9, 4.999])
def test_linear_data_reproduced_between_knots(x):
    xs = [0.0, 1.0, 2.5, 3.0, 5.0]
    spline = CubicSpline(xs, [3.0 * v + 1.0 for v in xs])
    assert spline(x) == pytest.approx(3.0 * x + 1.0, abs=1e-10)


def test_two_point_spline_is_linear():
    spline = CubicSpline([0.0, 4.0], [1.0, 9.0])
    assert spline(1.0) == pytest.approx(3.0)
    assert spline(4.0) == pytest.approx(9.0)


def test_extrapolation_continues_line():
    xs = [1.0, 2.0, 3.0, 4.0]
    spline = CubicSpline(xs, [2.0 * v for v in xs])
    assert spline(0.0) == pytest.approx(0.0, abs=1e-10)
    assert spline(6.0) == pytest.approx(12.0, abs=1e-10)


def test_call_matches_evaluate():
    spline = CubicSpline([1.0, 2.0, 3.0, 4.0], [1.0, -1.0, 2.0, 0.5])
    for x in (1.1, 2.2, 3.3):
        assert spline(x) == spline.evaluate(x)


def test_unequal_lengths_rejected():
    with pytest.raises(ValueError):
        CubicSpline([1.0, 2.0, 3.0], [1.0, 2.0])


def test_too_few_points_rejected():
    with pytest.raises(ValueError):
        CubicSpline([1.0], [1.0])


@pytest.mark.parametrize("xs", [[1.0, 1.0, 2.0], [1.0, 3.0, 2.0]])
def test_non_increasing_rejected(xs):
    with pytest.raises(ValueError, match="strictly increasing"):
        CubicSpline(xs, [0.0, 1.0, 2.0])