"""Layout and imposition endpoints."""

from fastapi import APIRouter

from printsheet.application.dtos import (
    ImpositionInput,
    ItemInput,
    SheetInput,
    YieldOutput,
)
from printsheet.domain import LayoutResult
from printsheet.web.dependencies import YieldCommandDep
from printsheet.web.exceptions import CalculationError
from printsheet.web.schemas.common import SheetSchema
from printsheet.web.schemas.requests import ImpositionRequestSchema, LayoutRequest
from printsheet.web.schemas.responses import (
    GridSchema,
    ImpositionPlanSchema,
    LayoutResponseSchema,
)

router = APIRouter(tags=["layout"])


def _grid_to_schema(layout: LayoutResult) -> GridSchema:
    return GridSchema(
        items_per_sheet=layout.items_per_sheet,
        columns=layout.columns,
        rows=layout.rows,
    )


def _sheet_input(sheet: SheetSchema) -> SheetInput:
    return SheetInput(
        preset=sheet.preset.value if sheet.preset else None,
        width=sheet.width,
        height=sheet.height,
    )


def yield_output_to_schema(output: YieldOutput) -> LayoutResponseSchema:
    """Convert a successful YieldOutput to the response schema.

    Raises:
        CalculationError: If the output carries errors.
    """
    if not output.is_valid or output.decision is None:
        raise CalculationError(output.errors, output.error_type)

    decision = output.decision
    imposition = None
    if output.plan is not None:
        imposition = ImpositionPlanSchema(
            pages_per_sheet=output.plan.pages_per_sheet,
            sheets_per_product=output.plan.sheets_per_product,
            total_sheets=output.plan.total_sheets,
        )

    return LayoutResponseSchema(
        sheet_width=decision.sheet.width,
        sheet_height=decision.sheet.height,
        item_width=decision.item.width,
        item_height=decision.item.height,
        items_per_sheet=decision.items_per_sheet,
        columns=decision.layout.columns,
        rows=decision.layout.rows,
        rotated=decision.rotated,
        tie_break_applied=decision.tie_break_applied,
        unrotated=_grid_to_schema(decision.unrotated),
        rotated_candidate=_grid_to_schema(decision.rotated_candidate),
        utilization_percentage=round(decision.utilization_percentage, 2),
        imposition=imposition,
    )


@router.post("/layout", response_model=LayoutResponseSchema)
async def calculate_layout(
    request: LayoutRequest,
    command: YieldCommandDep,
) -> LayoutResponseSchema:
    """Calculate how many items fit on one sheet.

    Raises:
        CalculationError: If the item does not fit the sheet.
    """
    output = command.execute(
        _sheet_input(request.sheet),
        ItemInput(width=request.item.width, height=request.item.height),
    )
    return yield_output_to_schema(output)


@router.post("/imposition", response_model=LayoutResponseSchema)
async def calculate_imposition(
    request: ImpositionRequestSchema,
    command: YieldCommandDep,
) -> LayoutResponseSchema:
    """Calculate the layout and the sheets needed for a production run."""
    output = command.execute(
        _sheet_input(request.sheet),
        ItemInput(width=request.item.width, height=request.item.height),
        ImpositionInput(
            sides=request.imposition.sides,
            pages_per_product=request.imposition.pages_per_product,
            quantity=request.imposition.quantity,
        ),
    )
    return yield_output_to_schema(output)
