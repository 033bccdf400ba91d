import pytest

from color_ramp.contrast import (
    Ink,
    contrast_ratio,
    evaluate_contrast,
    first_sufficient_contrast,
    relative_luminance,
)
from color_ramp.defaults import canonical_request
from color_ramp.errors import InvalidColorError
from color_ramp.ramp import ChannelSpec, GeneratedColor, RampRequest, generate_ramp


def swatch(step, hex_):
    return GeneratedColor(step=step, hex=hex_, h=0.0, s=0.0, b=0.0, is_major=True, is_locked=False)


def test_white_on_white():
    (r,) = evaluate_contrast([swatch(0, "#FFFFFF")], "#FFFFFF")
    assert r.contrast_ratio == 1.0
    assert r.meets_threshold is False
    assert r.ink is Ink.BLACK


def test_black_on_white():
    (r,) = evaluate_contrast([swatch(0, "#000000")], "#FFFFFF")
    assert r.contrast_ratio == 21.0
    assert r.meets_threshold is True
    assert r.ink is Ink.WHITE
    assert r.ink.hex == "#FFFFFF"


def test_aa_boundary_greys():
    # #767676 is the lightest grey passing AA on white; #777777 just misses
    passing, failing = evaluate_contrast([swatch(0, "#767676"), swatch(1, "#777777")], "#FFFFFF")
    assert passing.meets_threshold and passing.contrast_ratio == pytest.approx(4.54, abs=0.01)
    assert not failing.meets_threshold and failing.contrast_ratio == pytest.approx(4.48, abs=0.01)


def test_luminance_and_symmetry():
    assert relative_luminance("#000000") == pytest.approx(0.0, abs=1e-9)
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0, abs=1e-6)
    assert contrast_ratio("#1FA846", "#FFFFFF") == pytest.approx(contrast_ratio("#FFFFFF", "1fa846"))
    assert contrast_ratio("#1FA846", "#FFFFFF") >= 1.0


def test_results_keep_step_order():
    colors = generate_ramp(canonical_request())
    results = evaluate_contrast(colors)
    assert [r.step for r in results] == [c.step for c in colors]
    assert [r.hex for r in results] == [c.hex for c in colors]
    assert all(r.contrast_ratio >= 1.0 for r in results)


def test_first_sufficient_contrast_is_lowest_passing_step():
    results = evaluate_contrast(generate_ramp(canonical_request()), "#FFFFFF")
    first = first_sufficient_contrast(results)
    assert first is not None
    passing = [r.step for r in results if r.contrast_ratio > 4.5]
    assert first.step == min(passing)
    # the light end of the ramp is unreadable with white text
    assert not results[0].meets_threshold
    assert results[-1].meets_threshold
    assert first_sufficient_contrast(results) == first


def test_first_sufficient_contrast_none_for_midtones():
    midtones = generate_ramp(
        RampRequest(
            steps=5,
            hue=ChannelSpec(0.0, 0.0),
            saturation=ChannelSpec(0.0, 0.0),
            brightness=ChannelSpec(0.4, 0.6),
        )
    )
    results = evaluate_contrast(midtones, "#777777")
    assert first_sufficient_contrast(results) is None
    assert all(r.ink is Ink.BLACK for r in results)


def test_first_sufficient_contrast_empty():
    assert first_sufficient_contrast([]) is None


@pytest.mark.parametrize(
    "colors,background",
    [
        ([swatch(0, "#FFFFFF")], "white"),
        ([swatch(0, "#FFFFFF")], "#FFF"),
        ([swatch(0, "#FFFFFF"), swatch(1, "#12")], "#FFFFFF"),
        ([swatch(0, "#\u0661\u0662\u0663\u0664\u0665\u0666")], "#FFFFFF"),
    ],
)
def test_malformed_colors_raise(colors, background):
    with pytest.raises(InvalidColorError):
        evaluate_contrast(colors, background)


def test_same_input_same_output():
    colors = generate_ramp(canonical_request("#3366CC"))
    assert evaluate_contrast(colors) == evaluate_contrast(colors)


def test_result_dict():
    (r,) = evaluate_contrast([swatch(2, "#000000")])
    d = r.to_dict()
    assert d == {
        "step": 2,
        "hex": "#000000",
        "contrast_ratio": 21.0,
        "ink": "white",
        "ink_hex": "#FFFFFF",
        "meets_threshold": True,
    }
