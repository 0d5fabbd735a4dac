"""FastAPI endpoint for the box packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Query

from box_packer.catalog import BOX_CATALOG, describe_catalog
from box_packer.errors import ItemTooBig
from box_packer.io.schemas import PackRequestSchema, build_placements_render, plan_from_result, request_items
from box_packer.models import PackingResult
from box_packer.packing.multi_box import pack

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Box Packer API",
    description="Packs order items into standard shipping boxes",
)


def format_output(result: PackingResult, include_render: bool = False) -> dict[str, Any]:
    """
    Format a packing result with guaranteed fields and a user-friendly summary.
    """
    plan = plan_from_result(result)
    fill_pct = round(result.fill_rate * 100.0, 1)
    box_names = ", ".join(box.name for box in result.boxes) or "none"

    summary_text = f"""📦 Packing Complete
🗃️ Boxes: {len(result.boxes)} ({box_names})
✅ Items Packed: {result.item_count}
📊 Volume Fill: {fill_pct:.1f}%
⚖️ Total Weight: {result.total_weight} g"""

    response = {
        "metrics": {
            "box_count": len(result.boxes),
            "items_packed": result.item_count,
            "fill_rate": result.fill_rate,
            "total_weight": result.total_weight,
        },
        "summary": summary_text,
        "plan": plan,
    }

    if include_render:
        # Always present when render=1 (empty [] if no boxes)
        response["placements_render"] = [
            {
                "box": box.name,
                "container_render": {"W": box.width, "H": box.height, "D": box.depth},
                "placements": build_placements_render(box),
            }
            for box in result.boxes
        ]

    return response


@app.post("/pack")
async def pack_order(
    request: PackRequestSchema,
    render: int = Query(0, description="Include rendering data (1) or not (0)"),
) -> dict[str, Any]:
    """
    Pack an order and return the boxes used.

    Input (request body):
        {
            "items": [
                { "sku": "A", "width": 100, "height": 20, "depth": 30, "weight": 10, "qty": 3 }
            ]
        }
    """
    items = request_items(request)

    try:
        result = pack(items)
    except ItemTooBig as e:
        logger.warning(f"Rejected order: {e}")
        raise HTTPException(
            status_code=422,
            detail={
                "error": "ITEM_TOO_BIG",
                "summary": "⚠️ An item does not fit in any standard box.",
                "details": e.to_dict(),
            },
        )
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    response = format_output(result, include_render=render == 1)
    logger.info(
        f"boxes={response['metrics']['box_count']}, "
        f"items_packed={response['metrics']['items_packed']}"
    )
    return response


@app.get("/catalog")
async def catalog() -> list[dict[str, Any]]:
    """Box catalog in ascending volume order."""
    return describe_catalog()


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True, "catalog_size": len(BOX_CATALOG)}
