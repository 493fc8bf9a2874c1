"""Application commands (use cases) for yield and price calculation."""

from __future__ import annotations

import logging

from printsheet.domain import (
    DEFAULT_MARGINS,
    DEFAULT_SELECTION_POLICY,
    ImpositionRequest,
    LayoutInfeasibleError,
    MarginProfile,
    PriceSchedule,
    PrintSheetError,
    SelectionPolicy,
    Sides,
    evaluate,
    next_tier,
    plan_imposition,
    require_feasible,
    resolve_item,
    resolve_sheet,
    select_orientation,
)

from .dtos import (
    ImpositionInput,
    ItemInput,
    JobOutput,
    PriceInput,
    PriceOutput,
    SheetInput,
    YieldOutput,
)

logger = logging.getLogger(__name__)


class CalculateYieldCommand:
    """Command to compute items per sheet and, optionally, sheets needed."""

    def __init__(
        self,
        margins: MarginProfile = DEFAULT_MARGINS,
        policy: SelectionPolicy = DEFAULT_SELECTION_POLICY,
    ) -> None:
        self.margins = margins
        self.policy = policy

    def execute(
        self,
        sheet_input: SheetInput,
        item_input: ItemInput,
        imposition_input: ImpositionInput | None = None,
    ) -> YieldOutput:
        """Execute the yield calculation.

        Args:
            sheet_input: Press sheet preset or custom size.
            item_input: Item trim size.
            imposition_input: Optional run parameters. When given, the
                output also carries the sheets needed.

        Returns:
            YieldOutput with the orientation decision and imposition plan,
            or with errors describing why the calculation failed.
        """
        errors = sheet_input.validate()
        if imposition_input is not None:
            errors.extend(imposition_input.validate())
        if errors:
            return YieldOutput(errors=errors, error_type="validation")

        try:
            sheet = resolve_sheet(sheet_input.to_sheet_spec())
            item = resolve_item(item_input.width, item_input.height)
        except PrintSheetError as e:
            return YieldOutput(errors=[str(e)], error_type=e.error_type)

        decision = select_orientation(item, sheet, self.margins, self.policy)
        try:
            require_feasible(decision)
        except LayoutInfeasibleError as e:
            return YieldOutput(decision=decision, errors=[str(e)], error_type=e.error_type)

        if imposition_input is None:
            return YieldOutput(decision=decision)

        request = ImpositionRequest(
            items_per_sheet_face=decision.items_per_sheet,
            sides=Sides(imposition_input.sides),
            pages_per_product=imposition_input.pages_per_product,
            quantity=imposition_input.quantity,
        )
        try:
            plan = plan_imposition(request)
        except PrintSheetError as e:
            return YieldOutput(decision=decision, errors=[str(e)], error_type=e.error_type)

        return YieldOutput(decision=decision, plan=plan)


class EvaluatePriceCommand:
    """Command to price a quantity against tiered bands."""

    def execute(self, price_input: PriceInput) -> PriceOutput:
        """Execute the price evaluation.

        With ``strict`` input the bands are first validated as a
        ``PriceSchedule``; otherwise the first matching band in the given
        order is used.
        """
        try:
            if price_input.strict:
                schedule = PriceSchedule.from_bands(price_input.bands)
                result = schedule.evaluate(
                    price_input.quantity, price_input.base_unit_price
                )
            else:
                result = evaluate(
                    price_input.bands,
                    price_input.quantity,
                    price_input.base_unit_price,
                )
        except PrintSheetError as e:
            logger.debug("Pricing failed for quantity %r: %s", price_input.quantity, e)
            return PriceOutput(errors=[str(e)], error_type=e.error_type)

        return PriceOutput(
            result=result,
            next_tier=next_tier(price_input.bands, price_input.quantity),
        )


class CalculateJobCommand:
    """Command combining yield, imposition and pricing for one job."""

    def __init__(
        self,
        yield_command: CalculateYieldCommand | None = None,
        price_command: EvaluatePriceCommand | None = None,
    ) -> None:
        self.yield_command = yield_command or CalculateYieldCommand()
        self.price_command = price_command or EvaluatePriceCommand()

    def execute(
        self,
        sheet_input: SheetInput,
        item_input: ItemInput,
        imposition_input: ImpositionInput | None = None,
        price_input: PriceInput | None = None,
    ) -> JobOutput:
        """Run the yield calculation and, if bands are given, the pricing."""
        yield_output = self.yield_command.execute(
            sheet_input, item_input, imposition_input
        )
        price_output = None
        if price_input is not None:
            price_output = self.price_command.execute(price_input)
        return JobOutput(yield_output=yield_output, price_output=price_output)
