from __future__ import annotations

import json
import logging

from box_packer.cli import load_input, main
from box_packer.settings import log_level


def write_order(path, payload) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_cli_writes_plan(tmp_path, capsys) -> None:
    order = write_order(tmp_path / "order.json", {
        "items": [
            {"sku": "A", "width": 220, "height": 160, "depth": 100, "weight": 900},
            {"sku": "B", "width": 10, "height": 10, "depth": 10, "weight": 5},
        ]
    })
    out = tmp_path / "out" / "plan.json"

    assert main(["--input", order, "--output", str(out)]) == 0

    plan = json.loads(out.read_text(encoding="utf-8"))
    assert plan["summary"]["box_count"] == 1
    assert plan["boxes"][0]["name"] == "Box3"
    assert [i["id"] for i in plan["boxes"][0]["items"]] == ["A", "B"]
    assert "placements_render" not in plan["boxes"][0]
    assert "Packed 2/2 items into 1 boxes" in capsys.readouterr().out


def test_cli_render_flag(tmp_path) -> None:
    order = write_order(tmp_path / "order.json", [{"width": 50, "height": 50, "depth": 50}])
    out = tmp_path / "plan.json"

    assert main(["--input", order, "--output", str(out), "--render"]) == 0

    plan = json.loads(out.read_text(encoding="utf-8"))
    assert plan["boxes"][0]["placements_render"] == [{"x": 0, "y": 0, "z": 0, "dims": [50, 50, 50]}]


def test_cli_item_too_big(tmp_path, capsys) -> None:
    order = write_order(tmp_path / "order.json", {"items": [{"width": 1000, "height": 1000, "depth": 1000}]})
    out = tmp_path / "plan.json"

    assert main(["--input", order, "--output", str(out)]) == 1
    assert "item too big" in capsys.readouterr().err
    assert not out.exists()


def test_cli_invalid_json(tmp_path, capsys) -> None:
    bad = tmp_path / "order.json"
    bad.write_text("{not json", encoding="utf-8")

    assert main(["--input", str(bad), "--output", str(tmp_path / "plan.json")]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_cli_list_catalog(capsys) -> None:
    assert main(["--list-catalog"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 12
    assert lines[0].startswith("Box1")
    assert lines[-1].startswith("Box12")


def test_load_input_expands_quantity(tmp_path) -> None:
    write_order(tmp_path / "order.json", {
        "items": [{"sku": "SKU9", "width": 10, "height": 20, "depth": 30, "weight": 4, "qty": 3}]
    })

    items = load_input(tmp_path / "order.json")

    assert [i.id for i in items] == ["SKU9_1", "SKU9_2", "SKU9_3"]
    assert all((i.width, i.height, i.depth, i.weight) == (10, 20, 30, 4) for i in items)


def test_log_level_from_environment(monkeypatch) -> None:
    monkeypatch.delenv("BOX_PACKER_DEBUG", raising=False)
    monkeypatch.setenv("BOX_PACKER_LOG_LEVEL", "warning")
    assert log_level() == logging.WARNING

    monkeypatch.setenv("BOX_PACKER_LOG_LEVEL", "nonsense")
    assert log_level() == logging.INFO

    monkeypatch.setenv("BOX_PACKER_DEBUG", "1")
    assert log_level() == logging.DEBUG
