import numpy as np
import pytest

from pulsecode import Level, Scheme, Transition, Vertex, Waveform, generate

H, Z, L = Level.HIGH, Level.ZERO, Level.LOW


@pytest.fixture
def step_up():
    """NRZ-L drawing of bits 0, 1."""
    return generate([0, 1], Scheme.NRZ_L)


def test_basic_properties(step_up):
    assert step_up.num_bits == 2
    assert step_up.duration == 2.0
    np.testing.assert_array_equal(step_up.positions, [0.0, 1.0, 1.0, 2.0])
    np.testing.assert_array_equal(step_up.levels, [0, 0, 1, 1])
    assert list(step_up) == list(step_up.vertices)


def test_level_at(step_up):
    assert step_up.level_at(0.0) is Z
    assert step_up.level_at(0.99) is Z
    # At an edge the level after the edge holds.
    assert step_up.level_at(1.0) is H
    assert step_up.level_at(2.0) is H


@pytest.mark.parametrize("position", [-0.1, 2.01, 10])
def test_level_at_out_of_range(step_up, position):
    with pytest.raises(ValueError):
        step_up.level_at(position)


def test_levels_per_bit_offset_range(step_up):
    with pytest.raises(ValueError):
        step_up.levels_per_bit(1.0)


def test_transitions(step_up):
    edges = step_up.transitions()
    assert edges == [Transition(1.0, Z, H)]
    assert edges[0].rising


def test_segments_single_path(step_up):
    segments = step_up.segments()
    assert len(segments) == 1
    xs, ys = segments[0]
    np.testing.assert_array_equal(xs, step_up.positions)
    np.testing.assert_array_equal(ys, step_up.levels)


def test_segments_split_on_pen_up():
    wf = Waveform(
        scheme=Scheme.NRZ_L,
        bits=np.array([0, 1], dtype=np.uint8),
        vertices=(
            Vertex(0.0, Z, True),
            Vertex(1.0, Z),
            Vertex(1.0, H, True),
            Vertex(2.0, H),
        ),
    )

    segments = wf.segments()
    assert len(segments) == 2
    np.testing.assert_array_equal(segments[1][0], [1.0, 2.0])
    # A pen-up jump is not an edge.
    assert wf.transitions() == []
    assert wf.level_at(1.0) is H


def test_equality():
    a = generate("0110", Scheme.AMI)
    assert a == generate([0, 1, 1, 0], "ami")
    assert a != generate("0110", Scheme.NRZ_L)
    assert a != generate("0111", Scheme.AMI)
    assert a != "0110"


def test_waveform_is_frozen(step_up):
    with pytest.raises(AttributeError):
        step_up.vertices = ()


def test_level_labels():
    assert [lvl.label for lvl in Level] == ["+V", "0", "-V"]


def test_waveform_is_hashable():
    a = generate("0110", Scheme.AMI)
    b = generate([0, 1, 1, 0], Scheme.AMI)

    assert hash(a) == hash(b)
    assert len({a, b, generate("0110", Scheme.CMI)}) == 2
