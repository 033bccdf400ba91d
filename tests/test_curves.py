import numpy as np
import pytest

from color_ramp.curves import CURVES, Curve, apply_curve, parse_curve
from color_ramp.errors import ConfigurationError


def test_every_curve_has_a_function():
    assert set(CURVES) == set(Curve)


@pytest.mark.parametrize("curve", list(Curve))
def test_endpoints_and_bounds(curve):
    u = np.linspace(0, 1, 21)
    v = apply_curve(curve, u)
    assert v[0] == pytest.approx(0.0, abs=1e-12)
    assert v[-1] == pytest.approx(1.0, abs=1e-12)
    assert np.all((v >= 0.0) & (v <= 1.0))
    # easing never reverses direction
    assert np.all(np.diff(v) >= -1e-12)


def test_linear_is_identity():
    u = np.linspace(0, 1, 11)
    assert np.allclose(apply_curve("linear", u), u)


def test_in_out_symmetry():
    u = np.linspace(0, 1, 9)
    v = apply_curve(Curve.EASE_IN_OUT_CUBIC, u)
    assert np.allclose(v + v[::-1], 1.0)
    assert apply_curve(Curve.EASE_IN_QUAD, np.array([0.5]))[0] == pytest.approx(0.25)
    assert apply_curve(Curve.EASE_OUT_QUAD, np.array([0.5]))[0] == pytest.approx(0.75)


def test_parse_curve_accepts_names():
    assert parse_curve("easeInOutSine") is Curve.EASE_IN_OUT_SINE
    assert parse_curve(Curve.LINEAR) is Curve.LINEAR


def test_unknown_curve_is_configuration_error():
    with pytest.raises(ConfigurationError):
        parse_curve("bouncy")
    with pytest.raises(ConfigurationError):
        apply_curve("", np.zeros(3))
