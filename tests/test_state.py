import math

import pytest

from sectioncanvas.model.geometry import Viewport
from sectioncanvas.model.transform import Position, TransformState


def test_default_state_before_mount(store):
    assert store.state == TransformState(scale=1.0, position=Position(0.0, 0.0))


def test_initialize_uses_layout_geometry(store, config, viewport):
    state = store.initialize(viewport, config)

    assert state.scale == pytest.approx(800 / 1224)
    assert state.position.x == pytest.approx((7140 - 7140 * state.scale) / 2)
    assert state.position.y == pytest.approx((1224 - 1224 * state.scale) / 2)
    assert store.state is state


def test_initialize_emits_once(store, config, viewport):
    emitted = []
    store.transform_changed.connect(lambda s: emitted.append(s))

    state = store.initialize(viewport, config)

    assert emitted == [state]


def test_replace_overwrites_completely(store):
    store.replace(TransformState(0.5, Position(1, 2)))
    new = TransformState(0.9, Position(-3, 4))

    store.replace(new)

    assert store.state is new


def test_replace_emits_new_state(store):
    emitted = []
    store.transform_changed.connect(lambda s: emitted.append(s))
    new = TransformState(0.3, Position(5, 6))

    store.replace(new)

    assert emitted == [new]


def test_state_is_immutable():
    state = TransformState(0.5, Position(1, 2))
    with pytest.raises(AttributeError):
        state.scale = 2.0  # type: ignore[misc]


@pytest.mark.parametrize("scale", [0.0, -1.0, math.inf, math.nan])
def test_invalid_scale_rejected(scale):
    with pytest.raises(ValueError):
        TransformState(scale=scale)


def test_with_position_keeps_scale():
    state = TransformState(0.25, Position(1, 1)).with_position(Position(9, 9))
    assert state == TransformState(0.25, Position(9, 9))


def test_position_array_conversion():
    pos = Position(3.5, -2.0)
    assert Position.from_array(pos.as_array()) == pos


def test_initialize_on_tiny_viewport(store, config):
    state = store.initialize(Viewport(1, 1), config)
    assert state.scale > 0
