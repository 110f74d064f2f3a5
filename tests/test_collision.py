import pytest

from petrol_survivor.aabb import AABB, Vec3
from petrol_survivor.collision import (
    SEPARATION_EPSILON,
    closest_enemies,
    resolve_dynamic_overlap,
)


def box(min_xyz, max_xyz):
    return AABB(Vec3(*min_xyz), Vec3(*max_xyz))


def moved(b, offset):
    copy = AABB(b.min, b.max)
    copy.translate(offset)
    return copy


def test_disjoint_boxes_are_not_resolved():
    lhs = box((0, 0, 0), (1, 1, 1))
    rhs = box((5, 0, 5), (6, 1, 6))
    assert resolve_dynamic_overlap(lhs, rhs) is None


def test_touching_boxes_are_not_resolved():
    lhs = box((0, 0, 0), (1, 1, 1))
    rhs = box((1, 0, 0), (2, 1, 1))
    assert resolve_dynamic_overlap(lhs, rhs) is None


def test_separates_along_x_when_x_overlap_is_smaller():
    lhs = box((0, 0, 0), (2, 1, 2))
    rhs = box((1.5, 0, 0), (3.5, 1, 2))
    lhs_off, rhs_off = resolve_dynamic_overlap(lhs, rhs)
    assert lhs_off.y == 0.0 and lhs_off.z == 0.0
    assert lhs_off.x < 0.0 < rhs_off.x
    assert rhs_off == -lhs_off
    new_lhs, new_rhs = moved(lhs, lhs_off), moved(rhs, rhs_off)
    assert new_rhs.min.x - new_lhs.max.x == pytest.approx(2 * SEPARATION_EPSILON)
    assert not new_lhs.intersects(new_rhs)


def test_separates_along_z_when_z_overlap_is_smaller():
    lhs = box((0, 0, 1.8), (2, 1, 3.8))
    rhs = box((0, 0, 0), (2, 1, 2))
    lhs_off, rhs_off = resolve_dynamic_overlap(lhs, rhs)
    assert lhs_off.x == 0.0 and lhs_off.y == 0.0
    # lhs lies further along z, so it is pushed in +z.
    assert lhs_off.z > 0.0 > rhs_off.z
    new_lhs, new_rhs = moved(lhs, lhs_off), moved(rhs, rhs_off)
    assert new_lhs.min.z - new_rhs.max.z == pytest.approx(2 * SEPARATION_EPSILON)


def test_equal_overlaps_choose_z():
    lhs = box((0, 0, 0), (2, 1, 2))
    rhs = box((1, 0, 1), (3, 1, 3))
    lhs_off, _ = resolve_dynamic_overlap(lhs, rhs)
    assert lhs_off.x == 0.0
    assert lhs_off.z < 0.0


def test_lhs_with_larger_center_moves_positive_x():
    lhs = box((1.5, 0, 0), (3.5, 1, 2))
    rhs = box((0, 0, 0), (2, 1, 2))
    lhs_off, rhs_off = resolve_dynamic_overlap(lhs, rhs)
    assert lhs_off.x > 0.0 > rhs_off.x


def test_closest_enemies_sorted_by_distance():
    origin = Vec3(0, 0, 0)
    enemies = [
        ("far", box((9, 0, 0), (10, 1, 1))),
        ("near", box((1, 0, 0), (2, 1, 1))),
        ("mid", box((4, 0, 0), (5, 1, 1))),
    ]
    result = closest_enemies(origin, enemies, 100.0, 10)
    assert [e.enemy for e in result] == ["near", "mid", "far"]
    dists = [e.dist_sq for e in result]
    assert dists == sorted(dists)
    assert result[0].dist_sq == pytest.approx(1.0)


def test_inside_hitbox_has_zero_distance():
    result = closest_enemies(Vec3(0.5, 0.5, 0.5), [("e", box((0, 0, 0), (1, 1, 1)))])
    assert result[0].dist_sq == 0.0


def test_radius_is_strict_and_top_k_limits():
    origin = Vec3(0, 0, 0)
    enemies = [
        ("a", box((1, 0, 0), (2, 1, 1))),
        ("b", box((2, 0, 0), (3, 1, 1))),
        ("c", box((3, 0, 0), (4, 1, 1))),
    ]
    assert [e.enemy for e in closest_enemies(origin, enemies, 3.0)] == ["a", "b"]
    assert [e.enemy for e in closest_enemies(origin, enemies, 10.0, 1)] == ["a"]
    assert closest_enemies(origin, enemies, 10.0, 0) == []


def test_negative_top_k_rejected():
    with pytest.raises(ValueError):
        closest_enemies(Vec3(), [], 1.0, -1)