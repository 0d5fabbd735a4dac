# src/box_packer/catalog.py
from __future__ import annotations

from typing import Any, Optional, Union

from box_packer.geometry import ORIGIN, ROTATIONS, fits_within, rotated_dimensions
from box_packer.models import BoxTemplate, Packable, PackedBox

# Inner dims in mm, empty box weight in g.
_BOX_SAMPLES: tuple[BoxTemplate, ...] = (
    BoxTemplate(name="Box1", width=220, height=160, depth=100, weight=110),
    BoxTemplate(name="Box2", width=260, height=145, depth=145, weight=120),
    BoxTemplate(name="Box3", width=270, height=185, depth=110, weight=140),
    BoxTemplate(name="Box4", width=310, height=220, depth=140, weight=210),
    BoxTemplate(name="Box5", width=300, height=210, depth=200, weight=250),
    BoxTemplate(name="Box6", width=300, height=300, depth=130, weight=290),
    BoxTemplate(name="Box7", width=370, height=270, depth=150, weight=300),
    BoxTemplate(name="Box8", width=300, height=300, depth=250, weight=360),
    BoxTemplate(name="Box9", width=470, height=280, depth=210, weight=400),
    BoxTemplate(name="Box10", width=430, height=315, depth=200, weight=430),
    BoxTemplate(name="Box11", width=330, height=330, depth=350, weight=500),
    BoxTemplate(name="Box12", width=465, height=350, depth=370, weight=650),
)

# Ascending volume; sorted() is stable so equal volumes keep declaration order.
BOX_CATALOG: tuple[BoxTemplate, ...] = tuple(sorted(_BOX_SAMPLES, key=lambda b: b.volume))


def get_template(name: str) -> BoxTemplate:
    key = name.strip().upper()
    for template in BOX_CATALOG:
        if template.name.upper() == key:
            return template
    raise ValueError(f"Unknown box '{name}'. Valid: {[t.name for t in BOX_CATALOG]}")


def smallest_fitting(item: Packable) -> Optional[BoxTemplate]:
    """
    Return the first catalog box that holds `item` alone at the origin in some
    rotation, or None when the item is bigger than every box.
    """
    for template in BOX_CATALOG:
        for rotation in ROTATIONS:
            if fits_within(template, ORIGIN, rotated_dimensions(rotation, item)):
                return template
    return None


def next_larger(box: Union[BoxTemplate, PackedBox]) -> Optional[BoxTemplate]:
    """Return the first catalog box with strictly more volume than `box`, if any."""
    volume = box.volume
    for template in BOX_CATALOG:
        if template.volume > volume:
            return template
    return None


def describe_catalog() -> list[dict[str, Any]]:
    """Catalog as JSON-ready rows, ascending volume."""
    return [{**t.model_dump(), "volume": t.volume} for t in BOX_CATALOG]
