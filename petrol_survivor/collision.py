"""Separation of overlapping enemies and nearest-enemy queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from petrol_survivor.aabb import AABB, Vec3

# Extra distance added to each half-shift so separated boxes no longer touch.
SEPARATION_EPSILON = 0.001


@dataclass(frozen=True)
class EnemyDist:
    """An enemy with its squared distance from a query position."""

    enemy: Any
    dist_sq: float


def resolve_dynamic_overlap(
    lhs_box: AABB, rhs_box: AABB
) -> Optional[Tuple[Vec3, Vec3]]:
    """Offsets that push two overlapping hitboxes apart on the ground plane.

    The boxes are pushed in opposite directions along whichever of the x and z
    axes overlaps least (z when the overlaps are equal), each by half the
    overlap plus ``SEPARATION_EPSILON``. Returns ``(lhs_offset, rhs_offset)``,
    or None when the boxes do not overlap with positive depth on both x and z.
    """
    if not lhs_box.intersects(rhs_box):
        return None

    overlap_x = min(lhs_box.max.x, rhs_box.max.x) - max(lhs_box.min.x, rhs_box.min.x)
    overlap_z = min(lhs_box.max.z, rhs_box.max.z) - max(lhs_box.min.z, rhs_box.min.z)
    if overlap_x <= 0.0 or overlap_z <= 0.0:
        return None

    lhs_center = lhs_box.center()
    rhs_center = rhs_box.center()

    if overlap_x < overlap_z:
        shift = overlap_x * 0.5 + SEPARATION_EPSILON
        direction = -1.0 if lhs_center.x <= rhs_center.x else 1.0
        lhs_offset = Vec3(direction * shift, 0.0, 0.0)
    else:
        shift = overlap_z * 0.5 + SEPARATION_EPSILON
        direction = -1.0 if lhs_center.z <= rhs_center.z else 1.0
        lhs_offset = Vec3(0.0, 0.0, direction * shift)

    return lhs_offset, -lhs_offset


def closest_enemies(
    position: Vec3,
    enemies: Iterable[Tuple[Any, AABB]],
    radius: float = float("inf"),
    top_k: Optional[int] = None,
) -> List[EnemyDist]:
    """Enemies nearest to ``position``, closest first.

    ``enemies`` yields ``(enemy, hitbox)`` pairs; distance is measured to the
    nearest point of the hitbox. Only enemies strictly closer than ``radius``
    are kept, and at most ``top_k`` of them when it is given.
    """
    if top_k is not None and top_k < 0:
        raise ValueError("top_k must not be negative")

    ranked = []
    for enemy, box in enemies:
        offset = position - box.closest_point(position)
        ranked.append(EnemyDist(enemy, offset.dot(offset)))
    ranked.sort(key=lambda entry: entry.dist_sq)

    limit = radius * radius
    result: List[EnemyDist] = []
    for entry in ranked:
        if entry.dist_sq >= limit:
            break
        if top_k is not None and len(result) >= top_k:
            break
        result.append(entry)
    return result