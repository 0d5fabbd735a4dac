from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from box_packer.geometry import Rotation, rotated_dimensions


@runtime_checkable
class Packable(Protocol):
    """Anything the packer can seat: integer mm dimensions and a weight in g."""

    width: int
    height: int
    depth: int
    weight: int


class Item(BaseModel):
    """Shippable unit with dimensions in millimetres and weight in grams."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Identifier used in reports")
    width: int = Field(gt=0, description="Width in mm")
    height: int = Field(gt=0, description="Height in mm")
    depth: int = Field(gt=0, description="Depth in mm")
    weight: int = Field(default=0, ge=0, description="Weight in g")


class BoxTemplate(BaseModel):
    """Catalog entry. weight is the empty box's own weight, not a capacity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Catalog name of the box")
    width: int = Field(gt=0, description="Inner width in mm")
    height: int = Field(gt=0, description="Inner height in mm")
    depth: int = Field(gt=0, description="Inner depth in mm")
    weight: int = Field(ge=0, description="Empty box weight in g")

    @property
    def volume(self) -> int:
        return self.width * self.height * self.depth

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        return self.width, self.height, self.depth


class BoxItem(BaseModel):
    """An item seated in a box at a position with a rotation."""

    item: Any = Field(description="The placed item (any Packable)")
    position: Tuple[int, int, int] = Field(description="(x, y, z) of the item's corner in mm")
    rotation: Rotation = Field(default=Rotation.RT1)

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        """Extents along (x, y, z) after rotation."""
        return rotated_dimensions(self.rotation, self.item)

    @property
    def volume(self) -> int:
        return self.item.width * self.item.height * self.item.depth


class PackedBox(BaseModel):
    """Working box: a catalog template plus the items placed in it so far."""

    name: str
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    depth: int = Field(ge=0)
    weight: int = Field(ge=0)
    items: list[BoxItem] = Field(default_factory=list)

    @classmethod
    def from_template(cls, template: BoxTemplate) -> "PackedBox":
        return cls(
            name=template.name,
            width=template.width,
            height=template.height,
            depth=template.depth,
            weight=template.weight,
        )

    @property
    def volume(self) -> int:
        return self.width * self.height * self.depth

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        return self.width, self.height, self.depth

    @property
    def is_valid(self) -> bool:
        return self.volume != 0

    @property
    def size(self) -> int:
        return self.width + self.height + self.depth

    @property
    def total_weight(self) -> int:
        """Box weight plus the weight of everything in it (g)."""
        return self.weight + sum(int(bi.item.weight) for bi in self.items)


class PackingResult(BaseModel):
    """Standard result returned by the packer."""

    boxes: list[PackedBox] = Field(default_factory=list)
    item_count: int = 0
    used_volume: int = 0
    box_volume: int = 0
    fill_rate: float = 0.0
    total_weight: int = 0
