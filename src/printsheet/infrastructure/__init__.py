"""Infrastructure layer - report formatters and exporters."""

from .formatters import (
    JsonExporter,
    PriceReportFormatter,
    PresetListFormatter,
    SheetDiagramFormatter,
    YieldReportFormatter,
    format_money,
)

__all__ = [
    "JsonExporter",
    "PresetListFormatter",
    "PriceReportFormatter",
    "SheetDiagramFormatter",
    "YieldReportFormatter",
    "format_money",
]
