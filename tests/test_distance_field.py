import pytest

from massive.distance_field import (
    DISTANCE_FIELD_PAD,
    edge_distance,
    generate_distance_field,
    pack_distance_field_value,
)


def _padded(width, height, value):
    """A width x height glyph filled with `value`, padded by one zero texel."""
    rows = [[0] * (width + 2)]
    for _ in range(height):
        rows.append([0] + [value] * width + [0])
    rows.append([0] * (width + 2))
    return bytes(v for row in rows for v in row)


def test_pack_zero_distance_is_128():
    assert pack_distance_field_value(0.0) == 128


def test_pack_saturates():
    assert pack_distance_field_value(1000.0) == 0
    assert pack_distance_field_value(-1000.0) == 255


def test_pack_respects_magnitude():
    assert pack_distance_field_value(8.0, 8) == 0
    assert pack_distance_field_value(-8.0, 8) == 255
    assert pack_distance_field_value(0.0, 8) == 128


def test_pack_is_monotonically_non_increasing():
    values = [pack_distance_field_value(d / 10.0) for d in range(-60, 61)]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_pack_rejects_non_positive_magnitude():
    with pytest.raises(ValueError):
        pack_distance_field_value(0.0, 0)


def test_edge_distance_axis_aligned():
    assert edge_distance(1.0, 0.0, 0.25) == pytest.approx(0.25)
    assert edge_distance(0.0, -1.0, 1.0) == pytest.approx(-0.5)


@pytest.mark.parametrize("alpha", [0.05, 0.2, 0.4, 0.6, 0.8, 0.95])
@pytest.mark.parametrize("direction", [(0.6, 0.8), (0.8, 0.6), (0.7071, 0.7071)])
def test_edge_distance_is_antisymmetric_in_alpha(direction, alpha):
    dx, dy = direction
    assert edge_distance(dx, dy, alpha) == pytest.approx(-edge_distance(dx, dy, 1.0 - alpha))


@pytest.mark.parametrize("alpha", [0.1, 0.3, 0.5, 0.9])
def test_edge_distance_octant_symmetry(alpha):
    base = edge_distance(0.6, 0.8, alpha)
    assert edge_distance(0.8, 0.6, alpha) == pytest.approx(base)
    assert edge_distance(-0.6, 0.8, alpha) == pytest.approx(base)
    assert edge_distance(0.6, -0.8, alpha) == pytest.approx(base)


def test_edge_distance_half_coverage_is_on_edge():
    assert edge_distance(0.7071, 0.7071, 0.5) == pytest.approx(0.0, abs=1e-9)


def test_edge_distance_decreases_with_coverage():
    values = [edge_distance(0.6, 0.8, a / 20.0) for a in range(21)]
    assert all(a >= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("size", [(1, 1), (5, 3), (3, 7)])
def test_output_size(size):
    width, height = size
    field = generate_distance_field(_padded(width, height, 255), width, height)
    assert len(field) == (width + 2 * DISTANCE_FIELD_PAD) * (height + 2 * DISTANCE_FIELD_PAD)


def test_empty_glyph_is_far_outside_everywhere():
    field = generate_distance_field(_padded(3, 2, 0), 3, 2)
    assert set(field) == {0}


def test_filled_square_profile():
    size = 16
    field = generate_distance_field(_padded(size, size, 255), size, size)
    out_width = size + 2 * DISTANCE_FIELD_PAD
    middle = DISTANCE_FIELD_PAD + size // 2
    row = field[middle * out_width : (middle + 1) * out_width]

    # Far outside in the corner, deep inside at the center.
    assert field[0] == 0
    assert row[middle] == 255

    # Values rise from the outside up to the center.
    left_half = list(row[: middle + 1])
    assert left_half == sorted(left_half)

    # The glyph's first column is inside, the texel before it is outside.
    assert row[DISTANCE_FIELD_PAD - 1] < 128 <= row[DISTANCE_FIELD_PAD]


def test_accepts_list_of_ints():
    data = list(_padded(2, 2, 255))
    assert generate_distance_field(data, 2, 2) == generate_distance_field(bytes(data), 2, 2)


def test_rejects_wrong_image_length():
    with pytest.raises(ValueError):
        generate_distance_field(b"\x00" * 5, 2, 2)


def test_rejects_negative_size():
    with pytest.raises(ValueError):
        generate_distance_field(b"", -1, 2)