from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from box_packer.catalog import describe_catalog
from box_packer.errors import ItemTooBig
from box_packer.io.schemas import build_placements_render, items_from_request, plan_from_result
from box_packer.models import Item
from box_packer.packing.multi_box import pack
from box_packer.settings import configure_logging

logger = logging.getLogger(__name__)


def load_input(path: Path) -> list[Item]:
    """
    Read an order JSON file.

    Accepted shapes:
      {"items": [{"sku": "A", "width": 100, "height": 20, "depth": 30, "weight": 10, "qty": 3}, ...]}
      [{"width": ..., "height": ..., "depth": ...}, ...]
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        data = {"items": data}
    return items_from_request(data)


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """
    Write a plan dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"writing plan to {output_path}")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pack an order into standard shipping boxes")
    parser.add_argument("--input", help="Input order JSON file")
    parser.add_argument("--output", default="plan.json", help="Output plan JSON file")
    parser.add_argument(
        "--render",
        action="store_true",
        help="Add lightweight x/y/z/dims placements per box for 3D viewers",
    )
    parser.add_argument(
        "--list-catalog",
        action="store_true",
        help="Print the box catalog (ascending volume) and exit",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    if args.list_catalog:
        for row in describe_catalog():
            print(f"{row['name']:<6} {row['width']}x{row['height']}x{row['depth']} mm  {row['weight']} g  vol={row['volume']}")
        return 0

    if not args.input:
        parser.error("--input is required unless --list-catalog is given")

    try:
        items = load_input(Path(args.input))
    except (OSError, ValueError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"❌ Invalid input {args.input}: {e}", file=sys.stderr)
        return 1

    try:
        result = pack(items)
    except ItemTooBig as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    plan = plan_from_result(result)
    if args.render:
        for box_plan, box in zip(plan["boxes"], result.boxes):
            box_plan["placements_render"] = build_placements_render(box)

    write_plan(plan, args.output)

    print(f"Packed {result.item_count}/{len(items)} items into {len(result.boxes)} boxes, Fill={result.fill_rate:.3f}")
    for box in result.boxes:
        print(f"  {box.name}: {len(box.items)} items, {box.total_weight} g")
    print(f"✅ Plan written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
