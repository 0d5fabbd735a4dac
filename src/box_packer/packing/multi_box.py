from __future__ import annotations

import logging
from typing import Iterable

from box_packer.catalog import smallest_fitting
from box_packer.errors import ItemTooBig
from box_packer.geometry import item_volume
from box_packer.metrics import compute_metrics
from box_packer.models import Packable, PackedBox, PackingResult
from box_packer.packing.first_fit import fill_box

logger = logging.getLogger(__name__)


def pack_items(items: Iterable[Packable]) -> list[PackedBox]:
    """
    Pack items into as many catalog boxes as needed.

    Each round sorts what is left by descending volume (stable, so equal
    volumes keep input order), opens the smallest box that holds the largest
    item and fills it. Items that did not fit go to the next round.

    Raises ItemTooBig when an item fits no catalog box on its own; nothing
    is returned in that case.
    """
    remaining = list(items)
    boxes: list[PackedBox] = []

    while remaining:
        remaining = sorted(remaining, key=item_volume, reverse=True)

        template = smallest_fitting(remaining[0])
        if template is None:
            raise ItemTooBig(remaining[0])

        box, remaining = fill_box(PackedBox.from_template(template), remaining)
        if box.items:
            logger.debug(f"committed {box.name} with {len(box.items)} items, {len(remaining)} left")
            boxes.append(box)

    return boxes


def pack(items: Iterable[Packable]) -> PackingResult:
    """Pack items and summarise the boxes used."""
    items = list(items)
    boxes = pack_items(items)
    used_volume, box_volume, fill_rate = compute_metrics(boxes)

    result = PackingResult(
        boxes=boxes,
        item_count=sum(len(b.items) for b in boxes),
        used_volume=used_volume,
        box_volume=box_volume,
        fill_rate=fill_rate,
        total_weight=sum(b.total_weight for b in boxes),
    )
    logger.info(
        f"packed {result.item_count}/{len(items)} items into {len(boxes)} boxes, "
        f"fill_rate={result.fill_rate:.3f}"
    )
    return result
