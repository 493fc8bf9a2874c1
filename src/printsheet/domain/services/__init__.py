"""Domain services for sheet yield, imposition and pricing.

All services are pure functions over immutable value objects. They hold no
state between calls and perform no I/O.
"""

from .dimension_resolver import resolve_item, resolve_sheet
from .imposition import compute_sheets_needed, plan_imposition
from .orientation import require_feasible, select_orientation
from .packing import GridGeometry, grid_geometry, pack_orientation, usable_area
from .pricing import (
    PriceSchedule,
    check_bands,
    coverage_gaps,
    evaluate,
    find_band,
    next_tier,
)

__all__ = [
    "GridGeometry",
    "PriceSchedule",
    "check_bands",
    "compute_sheets_needed",
    "coverage_gaps",
    "evaluate",
    "find_band",
    "grid_geometry",
    "next_tier",
    "pack_orientation",
    "plan_imposition",
    "require_feasible",
    "resolve_item",
    "resolve_sheet",
    "select_orientation",
    "usable_area",
]
