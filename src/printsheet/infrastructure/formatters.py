"""Output formatters and exporters for yield and price reports."""

from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from printsheet.application.dtos import JobOutput, PriceOutput, YieldOutput
from printsheet.domain import (
    ImpositionPlan,
    LayoutResult,
    PriceBand,
    PriceResult,
    SheetPreset,
    TierHint,
    YieldDecision,
)

_CENT = Decimal("0.01")


def format_money(amount: Decimal) -> str:
    """Round an amount to cents for display.

    Rounding happens only here; computed prices keep full precision.
    """
    return str(amount.quantize(_CENT, rounding=ROUND_HALF_UP))


def _describe_band(band: PriceBand) -> str:
    upper = "+" if band.max_qty is None else f"-{band.max_qty}"
    text = f"{band.min_qty}{upper}"
    if band.label:
        text = f"{text} ({band.label})"
    return text


def _describe_layout(layout: LayoutResult) -> str:
    if not layout.fits:
        return "does not fit"
    return f"{layout.items_per_sheet} ({layout.columns} x {layout.rows})"


class YieldReportFormatter:
    """Formats the orientation decision and imposition plan as text."""

    def format(self, output: YieldOutput) -> str:
        if output.decision is None:
            return "No layout to display."

        decision = output.decision
        lines = [
            "SHEET YIELD",
            "=" * 60,
            f"Sheet:           {decision.sheet.width:g} x {decision.sheet.height:g} mm",
            f"Item:            {decision.item.width:g} x {decision.item.height:g} mm",
            "",
            f"{'Orientation':<16} {'Items per sheet'}",
            "-" * 60,
            f"{'Unrotated':<16} {_describe_layout(decision.unrotated)}",
            f"{'Rotated':<16} {_describe_layout(decision.rotated_candidate)}",
            "-" * 60,
        ]

        if not decision.is_feasible:
            lines.append("Item does not fit the sheet in either orientation.")
            return "\n".join(lines)

        chosen = "rotated" if decision.rotated else "unrotated"
        lines.append(f"Selected:        {decision.items_per_sheet} per sheet ({chosen})")
        if decision.tie_break_applied:
            lines.append(
                "                 rotated layout preferred for edge clearance"
            )
        lines.append(
            f"Utilization:     {decision.utilization_percentage:.1f}% "
            f"(waste {decision.waste_percentage:.1f}%)"
        )

        if output.plan is not None:
            lines.append("")
            lines.extend(self._format_plan(output.plan))

        return "\n".join(lines)

    def _format_plan(self, plan: ImpositionPlan) -> list[str]:
        return [
            "IMPOSITION",
            "-" * 60,
            f"Pages per sheet:    {plan.pages_per_sheet}",
            f"Sheets per product: {plan.sheets_per_product}",
            f"Total sheets:       {plan.total_sheets}",
        ]


class SheetDiagramFormatter:
    """Formats an ASCII sketch of the chosen grid on the sheet.

    The sketch is schematic: one cell per item, with the gripper edge
    marked along the bottom.
    """

    def __init__(self, max_columns: int = 12, max_rows: int = 12) -> None:
        self._max_columns = max_columns
        self._max_rows = max_rows

    def format(self, decision: YieldDecision) -> str:
        layout = decision.layout
        if not layout.fits:
            return "No layout to display."

        columns = min(layout.columns, self._max_columns)
        rows = min(layout.rows, self._max_rows)
        cell = "[]"
        inner_width = columns * len(cell) + 2

        lines = ["+" + "-" * inner_width + "+"]
        for _ in range(rows):
            lines.append("| " + cell * columns + " |")
        lines.append("+" + "=" * inner_width + "+")
        lines.append("  gripper edge")

        if columns < layout.columns or rows < layout.rows:
            lines.append(f"  (showing {columns} x {rows} of {layout.columns} x {layout.rows})")
        return "\n".join(lines)


class PriceReportFormatter:
    """Formats a price result and the next tier hint."""

    def format(self, output: PriceOutput) -> str:
        if output.result is None:
            return "No price to display."

        result = output.result
        lines = [
            "PRICE",
            "=" * 60,
            f"Quantity:    {result.quantity}",
            f"Band:        {_describe_band(result.band)}",
        ]
        if result.band.discount_percent is not None:
            lines.append(f"Discount:    {result.band.discount_percent.normalize():f}%")
        lines.append(f"Unit price:  {format_money(result.unit_price)}")
        lines.append(f"Total:       {format_money(result.total_price)}")

        if output.next_tier is not None:
            lines.append("")
            lines.append(self._format_hint(output.next_tier))
        return "\n".join(lines)

    def _format_hint(self, hint: TierHint) -> str:
        text = (
            f"Order {hint.additional_quantity} more to reach band "
            f"{_describe_band(hint.band)}"
        )
        if hint.additional_discount is not None and hint.additional_discount > 0:
            text += f" (+{hint.additional_discount.normalize():f}% discount)"
        elif hint.band.unit_price is not None:
            text += f" (unit price {format_money(hint.band.unit_price)})"
        return text


class PresetListFormatter:
    """Formats the table of named sheet presets."""

    def format(self) -> str:
        lines = [
            "SHEET PRESETS",
            "=" * 40,
            f"{'Code':<8} {'Width (mm)':>12} {'Height (mm)':>12}",
            "-" * 40,
        ]
        for preset in SheetPreset:
            size = preset.dimension
            lines.append(f"{preset.value:<8} {size.width:>12g} {size.height:>12g}")
        return "\n".join(lines)


class JsonExporter:
    """Exports yield, price and job outputs as JSON.

    Money is written as decimal strings so no precision is lost.
    """

    def export_yield(self, output: YieldOutput) -> str:
        return json.dumps(self.yield_to_dict(output), indent=2)

    def export_price(self, output: PriceOutput) -> str:
        return json.dumps(self.price_to_dict(output), indent=2)

    def export_job(self, output: JobOutput) -> str:
        data: dict[str, Any] = {"layout": self.yield_to_dict(output.yield_output)}
        if output.price_output is not None:
            data["price"] = self.price_to_dict(output.price_output)
        return json.dumps(data, indent=2)

    def export_presets(self) -> str:
        return json.dumps(
            [
                {
                    "code": preset.value,
                    "width": preset.dimension.width,
                    "height": preset.dimension.height,
                }
                for preset in SheetPreset
            ],
            indent=2,
        )

    def yield_to_dict(self, output: YieldOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors, "error_type": output.error_type}

        decision = output.decision
        assert decision is not None
        data: dict[str, Any] = {
            "sheet": {"width": decision.sheet.width, "height": decision.sheet.height},
            "item": {"width": decision.item.width, "height": decision.item.height},
            "items_per_sheet": decision.items_per_sheet,
            "rotated": decision.rotated,
            "tie_break_applied": decision.tie_break_applied,
            "columns": decision.layout.columns,
            "rows": decision.layout.rows,
            "candidates": {
                "unrotated": self._layout_to_dict(decision.unrotated),
                "rotated": self._layout_to_dict(decision.rotated_candidate),
            },
            "utilization_percentage": round(decision.utilization_percentage, 2),
        }
        if output.plan is not None:
            data["imposition"] = {
                "pages_per_sheet": output.plan.pages_per_sheet,
                "sheets_per_product": output.plan.sheets_per_product,
                "total_sheets": output.plan.total_sheets,
            }
        return data

    def price_to_dict(self, output: PriceOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors, "error_type": output.error_type}

        result = output.result
        assert result is not None
        data = self._result_to_dict(result)
        if output.next_tier is not None:
            hint = output.next_tier
            data["next_tier"] = {
                "band": self.band_to_dict(hint.band),
                "next_min_qty": hint.next_min_qty,
                "additional_quantity": hint.additional_quantity,
                "additional_discount": (
                    str(hint.additional_discount)
                    if hint.additional_discount is not None
                    else None
                ),
            }
        return data

    def band_to_dict(self, band: PriceBand) -> dict[str, Any]:
        return {
            "min_qty": band.min_qty,
            "max_qty": band.max_qty,
            "unit_price": str(band.unit_price) if band.unit_price is not None else None,
            "discount_percent": (
                str(band.discount_percent) if band.discount_percent is not None else None
            ),
            "label": band.label,
        }

    def _result_to_dict(self, result: PriceResult) -> dict[str, Any]:
        return {
            "quantity": result.quantity,
            "total_price": str(result.total_price),
            "unit_price": str(result.unit_price),
            "total_price_display": format_money(result.total_price),
            "band": self.band_to_dict(result.band),
        }

    def _layout_to_dict(self, layout: LayoutResult) -> dict[str, int]:
        return {
            "items_per_sheet": layout.items_per_sheet,
            "columns": layout.columns,
            "rows": layout.rows,
        }
