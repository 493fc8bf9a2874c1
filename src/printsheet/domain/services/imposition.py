"""Conversion of per-sheet yield into sheets needed for multi-page jobs."""

from __future__ import annotations

import logging
import math

from ..exceptions import ImpositionUnconfiguredError
from ..value_objects import ImpositionPlan, ImpositionRequest, Sides

logger = logging.getLogger(__name__)


def plan_imposition(request: ImpositionRequest) -> ImpositionPlan:
    """Compute pages per sheet, sheets per product and total sheets.

    Duplex printing doubles the pages carried by each sheet. Partial sheets
    always round up so stock is never under-ordered.

    Raises:
        ImpositionUnconfiguredError: If pages per sheet is 0.
    """
    pages_per_sheet = request.items_per_sheet_face * (
        2 if request.sides == Sides.DUPLEX else 1
    )
    if pages_per_sheet == 0:
        raise ImpositionUnconfiguredError()

    sheets_per_product = math.ceil(request.pages_per_product / pages_per_sheet)
    total_sheets = sheets_per_product * max(0, request.quantity)
    logger.debug(
        "%d pages/sheet, %d sheets/product, %d sheets total",
        pages_per_sheet,
        sheets_per_product,
        total_sheets,
    )
    return ImpositionPlan(
        pages_per_sheet=pages_per_sheet,
        sheets_per_product=sheets_per_product,
        total_sheets=total_sheets,
    )


def compute_sheets_needed(request: ImpositionRequest) -> int | None:
    """Total sheets for the run, or None when the layout is not configured."""
    try:
        return plan_imposition(request).total_sheets
    except ImpositionUnconfiguredError:
        return None
