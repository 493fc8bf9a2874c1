"""Orientation selection between the unrotated and 90-degree rotated layout."""

from __future__ import annotations

import logging

from ..exceptions import LayoutInfeasibleError
from ..value_objects import (
    DEFAULT_MARGINS,
    DEFAULT_SELECTION_POLICY,
    Dimension,
    MarginProfile,
    SelectionPolicy,
    YieldDecision,
)
from .packing import grid_geometry, pack_orientation

logger = logging.getLogger(__name__)


def select_orientation(
    item: Dimension,
    sheet: Dimension,
    margins: MarginProfile = DEFAULT_MARGINS,
    policy: SelectionPolicy = DEFAULT_SELECTION_POLICY,
) -> YieldDecision:
    """Pack both orientations of ``item`` and choose which yield to report.

    The larger yield wins, except when the unrotated layout is ahead by at
    most ``policy.max_yield_difference`` items, the rotated layout fits, and
    the unrotated grid leaves less than ``policy.min_headroom`` of clearance
    on either axis. In that case the rotated layout is reported instead.
    Equal yields keep the unrotated layout.

    A decision with ``items_per_sheet == 0`` means the item does not fit
    the sheet at all.
    """
    unrotated = pack_orientation(item, sheet, margins)
    rotated = pack_orientation(item.rotated(), sheet, margins)

    tie_break = False
    difference = unrotated.items_per_sheet - rotated.items_per_sheet
    if 0 < difference <= policy.max_yield_difference and rotated.items_per_sheet > 0:
        width_margin, height_margin = _headroom(item, sheet, margins)
        if width_margin < policy.min_headroom or height_margin < policy.min_headroom:
            logger.debug(
                "Preferring rotated layout (%d) over edge-hugging unrotated "
                "layout (%d): headroom %.1f x %.1f mm",
                rotated.items_per_sheet,
                unrotated.items_per_sheet,
                width_margin,
                height_margin,
            )
            tie_break = True

    use_rotated = tie_break or rotated.items_per_sheet > unrotated.items_per_sheet
    return YieldDecision(
        layout=rotated if use_rotated else unrotated,
        rotated=use_rotated,
        unrotated=unrotated,
        rotated_candidate=rotated,
        tie_break_applied=tie_break,
        item=item,
        sheet=sheet,
    )


def require_feasible(decision: YieldDecision) -> YieldDecision:
    """Return ``decision`` unchanged if the item fits.

    Raises:
        LayoutInfeasibleError: If neither orientation yields any item.
    """
    if not decision.is_feasible:
        raise LayoutInfeasibleError(
            decision.item.width,
            decision.item.height,
            decision.sheet.width,
            decision.sheet.height,
        )
    return decision


def _headroom(
    item: Dimension, sheet: Dimension, margins: MarginProfile
) -> tuple[float, float]:
    # Measured on the unreduced unrotated grid with edge bleed but without
    # the safety slack.
    grid = grid_geometry(item, sheet, margins)
    return (
        grid.usable_width - grid.span_width(margins),
        grid.usable_height - grid.span_height(margins),
    )
