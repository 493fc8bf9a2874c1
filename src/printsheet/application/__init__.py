"""Application layer - use cases and orchestration."""

from .commands import CalculateJobCommand, CalculateYieldCommand, EvaluatePriceCommand
from .dtos import (
    ImpositionInput,
    ItemInput,
    JobOutput,
    PriceInput,
    PriceOutput,
    SheetInput,
    YieldOutput,
)

__all__ = [
    "CalculateJobCommand",
    "CalculateYieldCommand",
    "EvaluatePriceCommand",
    "ImpositionInput",
    "ItemInput",
    "JobOutput",
    "PriceInput",
    "PriceOutput",
    "SheetInput",
    "YieldOutput",
]
