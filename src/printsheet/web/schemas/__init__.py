"""Pydantic schemas for the REST API."""

from printsheet.web.schemas.common import (
    ImpositionSchema,
    ItemSchema,
    PriceBandSchema,
    SheetSchema,
)
from printsheet.web.schemas.requests import (
    CalculateRequest,
    ConfigValidateRequest,
    ImpositionRequestSchema,
    LayoutRequest,
    PriceRequest,
)
from printsheet.web.schemas.responses import (
    CalculateResponseSchema,
    ErrorResponseSchema,
    GridSchema,
    ImpositionPlanSchema,
    LayoutResponseSchema,
    PresetListSchema,
    PresetSchema,
    PriceResponseSchema,
    TierHintSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "ImpositionSchema",
    "ItemSchema",
    "PriceBandSchema",
    "SheetSchema",
    # Requests
    "CalculateRequest",
    "ConfigValidateRequest",
    "ImpositionRequestSchema",
    "LayoutRequest",
    "PriceRequest",
    # Responses
    "CalculateResponseSchema",
    "ErrorResponseSchema",
    "GridSchema",
    "ImpositionPlanSchema",
    "LayoutResponseSchema",
    "PresetListSchema",
    "PresetSchema",
    "PriceResponseSchema",
    "TierHintSchema",
    "ValidationResultSchema",
]
