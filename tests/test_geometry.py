import math

import pytest

from sectioncanvas.config import CanvasConfiguration, DEFAULT_CANVAS
from sectioncanvas.model.geometry import (
    Viewport, ZoomBounds, compute_initial_position, compute_initial_scale, compute_total_extent,
    compute_zoom_bounds
)


def test_total_extent(config):
    width, height = compute_total_extent(config)
    assert width == 1660 * 4 + 200 + 300
    assert height == 1024 + 200


def test_initial_scale_fits_one_section_height(config, viewport):
    scale = compute_initial_scale(viewport, config)
    assert scale == pytest.approx(800 / 1224)
    assert scale == pytest.approx(0.6536, abs=1e-4)


def test_initial_scale_can_exceed_one(config):
    assert compute_initial_scale(Viewport(3000, 2448), config) == pytest.approx(2.0)


def test_initial_position_compensates_center_scaling(config):
    scale = 0.5
    pos = compute_initial_position(scale, config)
    width, height = compute_total_extent(config)
    assert pos.x == pytest.approx((width - width * scale) / 2)
    assert pos.y == pytest.approx((height - height * scale) / 2)


def test_initial_position_is_zero_at_unit_scale(config):
    pos = compute_initial_position(1.0, config)
    assert (pos.x, pos.y) == (0.0, 0.0)


def test_initial_position_negative_when_zoomed_in(config):
    pos = compute_initial_position(2.0, config)
    assert pos.x < 0 and pos.y < 0


def test_initial_position_is_pure(config):
    assert compute_initial_position(0.6536, config) == compute_initial_position(0.6536, config)


def test_zoom_bounds_scenario(config):
    bounds = compute_zoom_bounds(Viewport(1600, 800), config)
    assert bounds.min == pytest.approx(1600 / 7140)
    assert bounds.min == pytest.approx(0.2241, abs=1e-4)
    assert bounds.max == 1.0


@pytest.mark.parametrize("width,height", [(1, 1), (320, 640), (1600, 800), (3840, 2160), (20000, 300)])
def test_geometry_is_finite_and_positive(config, width, height):
    vp = Viewport(width, height)
    scale = compute_initial_scale(vp, config)
    bounds = compute_zoom_bounds(vp, config)
    assert math.isfinite(scale) and scale > 0
    assert math.isfinite(bounds.min) and bounds.min > 0
    assert bounds.max == 1


def test_zoom_bounds_returned_as_computed_when_content_is_narrow():
    cfg = CanvasConfiguration(section_width=100, section_height=100, padding_around=0,
                              padding_between=0, section_count=1)
    bounds = compute_zoom_bounds(Viewport(400, 300), cfg)
    assert bounds.min == pytest.approx(4.0)
    assert bounds.min > bounds.max


@pytest.mark.parametrize("kwargs", [
    {},
    {"section_count": 1},
    {"padding_around": 0, "padding_between": 0},
    {"section_width": 300, "padding_between": 250, "section_count": 7},
])
def test_zoom_bounds_width_matches_total_extent(kwargs):
    cfg = CanvasConfiguration(**kwargs)
    vp = Viewport(1280, 720)
    total_width, _ = compute_total_extent(cfg)

    assert compute_zoom_bounds(vp, cfg).min == pytest.approx(1280 / total_width)


def test_clamp_into_range():
    bounds = ZoomBounds(min=0.25, max=1.0)
    assert bounds.clamp(0.1) == 0.25
    assert bounds.clamp(0.5) == 0.5
    assert bounds.clamp(3.0) == 1.0


def test_clamp_collapses_to_max_when_range_is_inverted():
    bounds = ZoomBounds(min=4.0, max=1.0)
    for s in (0.1, 1.0, 2.5, 10.0):
        assert bounds.clamp(s) == 1.0


@pytest.mark.parametrize("width,height", [(0, 800), (1600, 0), (-5, 10)])
def test_degenerate_viewport_rejected(width, height):
    with pytest.raises(ValueError):
        Viewport(width, height)


@pytest.mark.parametrize("kwargs", [
    {"section_count": 0},
    {"section_width": 0},
    {"section_height": -1},
    {"padding_around": -10},
    {"padding_between": -1},
])
def test_invalid_configuration_rejected(kwargs):
    with pytest.raises(ValueError):
        CanvasConfiguration(**kwargs)


def test_default_canvas_matches_four_sections():
    assert DEFAULT_CANVAS.section_count == 4
    assert DEFAULT_CANVAS.total_width == 7140
    assert DEFAULT_CANVAS.total_height == 1224
