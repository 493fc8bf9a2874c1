"""Single-orientation grid packing of items on a press sheet.

The sheet's usable area loses the gripper strip along its width only. Items
are stepped on a grid of ``item + gap``; a candidate grid is accepted only if
it still clears the sheet once edge bleed and the safety slack are re-added.
When it does not, one reduced grid along the offending axis is tried, and
the orientation yields nothing if that reduction is not possible.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..value_objects import DEFAULT_MARGINS, Dimension, LayoutResult, MarginProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridGeometry:
    """Unreduced grid for one orientation and the space it is measured in.

    Attributes:
        usable_width: Sheet width minus the gripper strip.
        usable_height: Full sheet height.
        step_width: Item width plus gap.
        step_height: Item height plus gap.
        columns: Columns that fit by step alone.
        rows: Rows that fit by step alone.
    """

    usable_width: float
    usable_height: float
    step_width: float
    step_height: float
    columns: int
    rows: int

    def span_width(self, margins: MarginProfile) -> float:
        """Width of the grid including bleed on both outer edges."""
        return self.columns * self.step_width - margins.gap + 2 * margins.bleed

    def span_height(self, margins: MarginProfile) -> float:
        """Height of the grid including bleed on both outer edges."""
        return self.rows * self.step_height - margins.gap + 2 * margins.bleed


def usable_area(sheet: Dimension, margins: MarginProfile = DEFAULT_MARGINS) -> tuple[float, float]:
    """Return (width, height) available for items on ``sheet``."""
    return sheet.width - margins.gripper, sheet.height


def grid_geometry(
    item: Dimension,
    sheet: Dimension,
    margins: MarginProfile = DEFAULT_MARGINS,
) -> GridGeometry:
    """Compute the unreduced grid for ``item`` as oriented on ``sheet``."""
    usable_width, usable_height = usable_area(sheet, margins)
    step_width = item.width + margins.gap
    step_height = item.height + margins.gap
    columns = max(0, math.floor(usable_width / step_width))
    rows = max(0, math.floor(usable_height / step_height))
    return GridGeometry(
        usable_width=usable_width,
        usable_height=usable_height,
        step_width=step_width,
        step_height=step_height,
        columns=columns,
        rows=rows,
    )


def pack_orientation(
    item: Dimension,
    sheet: Dimension,
    margins: MarginProfile = DEFAULT_MARGINS,
) -> LayoutResult:
    """Compute the largest grid of ``item`` (as oriented) that fits ``sheet``.

    Args:
        item: Item trim size in the orientation to try.
        sheet: Sheet dimensions.
        margins: Press allowances.

    Returns:
        The accepted grid, or ``LayoutResult.zero()`` if this orientation
        does not fit.
    """
    grid = grid_geometry(item, sheet, margins)
    if grid.usable_width <= 0 or grid.columns == 0 or grid.rows == 0:
        return LayoutResult.zero()

    total_width = grid.span_width(margins) + margins.safety_margin
    total_height = grid.span_height(margins) + margins.safety_margin

    if total_width > grid.usable_width:
        reduced = math.floor(
            (grid.usable_width - margins.edge_allowance) / grid.step_width
        )
        if 0 < reduced < grid.columns:
            logger.debug(
                "Reduced columns %d -> %d for %gx%g item",
                grid.columns,
                reduced,
                item.width,
                item.height,
            )
            return _layout(reduced, grid.rows)
        return LayoutResult.zero()

    if total_height > grid.usable_height:
        reduced = math.floor(
            (grid.usable_height - margins.edge_allowance) / grid.step_height
        )
        if 0 < reduced < grid.rows:
            logger.debug(
                "Reduced rows %d -> %d for %gx%g item",
                grid.rows,
                reduced,
                item.width,
                item.height,
            )
            return _layout(grid.columns, reduced)
        return LayoutResult.zero()

    return _layout(grid.columns, grid.rows)


def _layout(columns: int, rows: int) -> LayoutResult:
    return LayoutResult(items_per_sheet=columns * rows, columns=columns, rows=rows)
