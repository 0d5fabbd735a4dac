"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from box_packer.metrics import box_metrics
from box_packer.models import Item, PackedBox, PackingResult


class ItemSchema(BaseModel):
    """Schema for an order line (dimensions in mm, weight in g)."""
    sku: str = Field(default="ITEM", description="SKU identifier")
    width: int = Field(gt=0, description="Width of the item in mm")
    height: int = Field(gt=0, description="Height of the item in mm")
    depth: int = Field(gt=0, description="Depth of the item in mm")
    weight: int = Field(ge=0, default=0, description="Weight of the item in g")
    qty: int = Field(ge=1, default=1, description="Quantity")

    def to_items(self) -> list[Item]:
        if self.qty == 1:
            ids = [self.sku]
        else:
            ids = [f"{self.sku}_{i+1}" for i in range(self.qty)]
        return [
            Item(id=item_id, width=self.width, height=self.height, depth=self.depth, weight=self.weight)
            for item_id in ids
        ]


class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    items: List[ItemSchema] = Field(default_factory=list, description="Order lines to pack")


def items_from_request(payload: dict[str, Any]) -> list[Item]:
    """Validate a raw request dict and expand it into items. Raises pydantic.ValidationError."""
    return request_items(PackRequestSchema.model_validate(payload))


def request_items(request: PackRequestSchema) -> list[Item]:
    items: list[Item] = []
    for line in request.items:
        items.extend(line.to_items())
    return items


def box_to_dict(box: PackedBox) -> dict[str, Any]:
    return {
        "name": box.name,
        "width": box.width,
        "height": box.height,
        "depth": box.depth,
        "weight": box.weight,
        "metrics": box_metrics(box),
        "items": [
            {
                "id": getattr(p.item, "id", None),
                "position": list(p.position),
                "rotation": p.rotation.name,
                "dims": list(p.dimensions),
                "weight": int(p.item.weight),
            }
            for p in box.items
        ],
    }


def plan_from_result(result: PackingResult) -> dict[str, Any]:
    """JSON-ready plan (primitives only)."""
    return {
        "summary": {
            "box_count": len(result.boxes),
            "item_count": result.item_count,
            "used_volume": result.used_volume,
            "box_volume": result.box_volume,
            "fill_rate": result.fill_rate,
            "total_weight": result.total_weight,
        },
        "boxes": [box_to_dict(box) for box in result.boxes],
    }


def build_placements_render(box: PackedBox) -> list[dict[str, Any]]:
    """Lightweight placements for a 3D viewer: x, y, z, dims."""
    placements_render = []
    for p in box.items:
        x, y, z = p.position
        placements_render.append({"x": x, "y": y, "z": z, "dims": list(p.dimensions)})
    return placements_render
