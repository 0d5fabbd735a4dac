"""Geometry utilities for box packing."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models import BoxItem, Packable, PackedBox


class Rotation(IntEnum):
    """
    The 6 axis-aligned orientations, in the order the packer tries them.
    rotation code meaning:
      RT1:(w,h,d) RT2:(h,w,d) RT3:(h,d,w) RT4:(d,h,w) RT5:(d,w,h) RT6:(w,d,h)
    """

    RT1 = 0
    RT2 = 1
    RT3 = 2
    RT4 = 3
    RT5 = 4
    RT6 = 5


ROTATIONS: tuple[Rotation, ...] = tuple(Rotation)

ORIGIN: tuple[int, int, int] = (0, 0, 0)


def rotated_dimensions(rotation: Rotation, item: "Packable") -> tuple[int, int, int]:
    """Map an item's (width, height, depth) to (x, y, z) extents for a rotation."""
    w, h, d = int(item.width), int(item.height), int(item.depth)
    orientations = (
        (w, h, d),
        (h, w, d),
        (h, d, w),
        (d, h, w),
        (d, w, h),
        (w, d, h),
    )
    return orientations[int(rotation)]


def item_volume(item: "Packable") -> int:
    return int(item.width) * int(item.height) * int(item.depth)


def rects_intersect(
    o1: Sequence[int],
    o2: Sequence[int],
    x1: int,
    y1: int,
    x2: int,
    y2: int,
) -> bool:
    """
    Rectangle overlap test by centre distance.

    o1, o2 are the corners of two rectangles sized (x1, y1) and (x2, y2).
    They overlap when, on both axes, the distance between centres is
    strictly less than the sum of the half extents. Touching edges is NOT
    an overlap. Coordinates are doubled so odd extents stay exact.
    """
    dx = abs((2 * o1[0] + x1) - (2 * o2[0] + x2))
    dy = abs((2 * o1[1] + y1) - (2 * o2[1] + y2))
    return dx < x1 + x2 and dy < y1 + y2


def items_overlap(a: "BoxItem", b: "BoxItem") -> bool:
    """
    True iff two placed items intersect with positive volume.

    The XY, YZ and XZ projections must all overlap; if any one pair of
    axes is disjoint the items only touch or are apart.
    """
    d1 = a.dimensions
    d2 = b.dimensions
    p1 = a.position
    p2 = b.position
    return (
        rects_intersect((p1[0], p1[1]), (p2[0], p2[1]), d1[0], d1[1], d2[0], d2[1])
        and rects_intersect((p1[1], p1[2]), (p2[1], p2[2]), d1[1], d1[2], d2[1], d2[2])
        and rects_intersect((p1[0], p1[2]), (p2[0], p2[2]), d1[0], d1[2], d2[0], d2[2])
    )


def fits_within(
    box: "PackedBox",
    position: Sequence[int],
    dims: Sequence[int],
) -> bool:
    """Check that an extent anchored at position stays inside the box bounds."""
    return (
        position[0] + dims[0] <= box.width
        and position[1] + dims[1] <= box.height
        and position[2] + dims[2] <= box.depth
    )
