from __future__ import annotations

import pytest

from box_packer.catalog import BOX_CATALOG, describe_catalog, get_template, next_larger, smallest_fitting
from box_packer.models import Item, PackedBox


def test_catalog_is_ascending_by_volume() -> None:
    volumes = [t.volume for t in BOX_CATALOG]

    assert len(BOX_CATALOG) == 12
    assert volumes == sorted(volumes)
    assert [t.name for t in BOX_CATALOG] == [
        "Box1", "Box2", "Box3", "Box4", "Box6", "Box5",
        "Box7", "Box8", "Box10", "Box9", "Box11", "Box12",
    ]


def test_smallest_fitting_picks_first_box_that_holds_item() -> None:
    assert smallest_fitting(Item(width=100, height=100, depth=30)).name == "Box1"
    # 230 mm is longer than any side of Box1
    assert smallest_fitting(Item(width=230, height=10, depth=10)).name == "Box2"
    # needs two 300 mm sides
    assert smallest_fitting(Item(width=300, height=300, depth=130)).name == "Box6"


def test_smallest_fitting_tries_rotations() -> None:
    """160 x 220 x 100 only fits Box1 on its side."""
    assert smallest_fitting(Item(width=160, height=220, depth=100)).name == "Box1"


def test_smallest_fitting_too_big() -> None:
    assert smallest_fitting(Item(width=1000, height=1000, depth=1000)) is None
    assert smallest_fitting(Item(width=466, height=10, depth=10)).name == "Box9"
    assert smallest_fitting(Item(width=471, height=10, depth=10)) is None


def test_next_larger() -> None:
    assert next_larger(get_template("Box1")).name == "Box2"
    assert next_larger(get_template("Box6")).name == "Box5"
    assert next_larger(get_template("Box5")).name == "Box7"
    assert next_larger(get_template("Box12")) is None


def test_next_larger_accepts_working_box() -> None:
    box = PackedBox.from_template(get_template("Box3"))

    assert next_larger(box).name == "Box4"


def test_get_template_is_case_insensitive() -> None:
    assert get_template(" box3 ").name == "Box3"

    with pytest.raises(ValueError, match="Unknown box"):
        get_template("Box99")


def test_describe_catalog() -> None:
    rows = describe_catalog()

    assert rows[0] == {
        "name": "Box1",
        "width": 220,
        "height": 160,
        "depth": 100,
        "weight": 110,
        "volume": 3_520_000,
    }
    assert rows[-1]["name"] == "Box12"
