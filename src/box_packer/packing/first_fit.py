# src/box_packer/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Optional, Sequence

from box_packer.catalog import next_larger
from box_packer.geometry import ORIGIN, ROTATIONS, fits_within, items_overlap, rotated_dimensions
from box_packer.models import BoxItem, Packable, PackedBox

logger = logging.getLogger(__name__)


def place(box: PackedBox, item: Packable, anchor: tuple[int, int, int]) -> bool:
    """
    Try to seat `item` with its corner at `anchor`.

    Rotations are tried RT1..RT6. A rotation that sticks out of the box is
    skipped. The first rotation that stays inside the box is checked against
    every placed item, and if it collides the attempt at this anchor ends
    there: the remaining rotations are NOT tried.

    On success the item is appended to box.items; on failure the box is untouched.
    """
    for rotation in ROTATIONS:
        if not fits_within(box, anchor, rotated_dimensions(rotation, item)):
            continue

        candidate = BoxItem(item=item, position=tuple(anchor), rotation=rotation)
        for placed in box.items:
            if items_overlap(candidate, placed):
                return False

        box.items.append(candidate)
        return True

    return False


def anchor_for(placed: BoxItem, axis: int) -> tuple[int, int, int]:
    """Corner next to `placed`, moved by its rotated extent along one axis."""
    pos = list(placed.position)
    pos[axis] += placed.dimensions[axis]
    return pos[0], pos[1], pos[2]


def seat(box: PackedBox, item: Packable) -> bool:
    """
    First-fit search over the anchors next to already placed items.
    Outer loop over axes (width, height, depth), inner loop over placed
    items in placement order.
    """
    for axis in range(3):
        # box.items only grows on success, and we return right after
        for placed in list(box.items):
            if place(box, item, anchor_for(placed, axis)):
                return True
    return False


def fill_box(
    box: PackedBox,
    items: Sequence[Packable],
    escalate: bool = True,
) -> tuple[PackedBox, list[Packable]]:
    """
    Fill `box` with `items` (largest first), growing it through the catalog when needed.

    Returns the final working box and the items left for a later box. With
    escalate=False the box is never swapped, which is how tentative repacks
    into a larger template are run.
    """
    if not items:
        return box, []

    first = items[0]
    if not place(box, first, ORIGIN):
        if escalate:
            larger = next_larger(box)
            if larger is not None:
                logger.debug(f"first item does not fit {box.name}, retrying in {larger.name}")
                return fill_box(PackedBox.from_template(larger), items, escalate=True)
        return box, list(items)

    unpacked: list[Packable] = []
    for item in items[1:]:
        if seat(box, item):
            continue

        if escalate:
            grown = escalate_box(box, item)
            if grown is not None:
                box = grown
                continue

        logger.debug(f"deferring {item.width}x{item.height}x{item.depth} from {box.name}")
        unpacked.append(item)

    return box, unpacked


def escalate_box(box: PackedBox, item: Packable) -> Optional[PackedBox]:
    """
    Repack everything in `box` plus `item` into successively larger catalog
    boxes. Returns the first repacked box that holds them all, or None.
    """
    contents = [placed.item for placed in box.items] + [item]

    candidate = next_larger(box)
    while candidate is not None:
        trial, leftover = fill_box(PackedBox.from_template(candidate), contents, escalate=False)
        if not leftover:
            logger.debug(f"escalated {box.name} -> {candidate.name} ({len(contents)} items)")
            return trial
        candidate = next_larger(candidate)

    return None
