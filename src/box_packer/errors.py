"""Errors raised by the packer."""

from __future__ import annotations

from typing import Any


class PackingError(Exception):
    """Base class for packing failures."""


class ItemTooBig(PackingError):
    """An item does not fit, alone and in any rotation, in the largest catalog box."""

    def __init__(self, item: Any):
        self.item = item
        super().__init__(
            f"item too big: {item.width}x{item.height}x{item.depth} mm, {item.weight} g"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": getattr(self.item, "id", None),
            "width": int(self.item.width),
            "height": int(self.item.height),
            "depth": int(self.item.depth),
            "weight": int(self.item.weight),
        }
