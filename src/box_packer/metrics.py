from __future__ import annotations

from typing import Any

from box_packer.models import BoxItem, PackedBox


def placement_volume(p: BoxItem) -> int:
    L, W, H = p.dimensions
    return L * W * H


def box_metrics(box: PackedBox) -> dict[str, Any]:
    used_volume = sum(placement_volume(p) for p in box.items)
    box_volume = box.volume
    fill_rate = 0.0 if box_volume == 0 else used_volume / box_volume
    return {
        "used_volume": used_volume,
        "box_volume": box_volume,
        "fill_rate": fill_rate,
        "total_weight": box.total_weight,
    }


def compute_metrics(boxes: list[PackedBox]) -> tuple[int, int, float]:
    used_volume = sum(placement_volume(p) for box in boxes for p in box.items)
    box_volume = sum(box.volume for box in boxes)
    fill_rate = 0.0 if box_volume == 0 else used_volume / box_volume
    return used_volume, box_volume, fill_rate
