"""Domain layer - sheet yield geometry and pricing policy."""

from .exceptions import (
    BandConfigurationError,
    ImpositionUnconfiguredError,
    InvalidDimensionError,
    InvalidQuantityError,
    LayoutInfeasibleError,
    MissingBasePriceError,
    NoMatchingBandError,
    PricingError,
    PrintSheetError,
    UnknownSheetPresetError,
)
from .services import (
    PriceSchedule,
    compute_sheets_needed,
    evaluate,
    next_tier,
    pack_orientation,
    plan_imposition,
    require_feasible,
    resolve_item,
    resolve_sheet,
    select_orientation,
)
from .value_objects import (
    DEFAULT_MARGINS,
    DEFAULT_SELECTION_POLICY,
    Dimension,
    ImpositionPlan,
    ImpositionRequest,
    LayoutResult,
    MarginProfile,
    PriceBand,
    PriceResult,
    SelectionPolicy,
    SheetPreset,
    SheetSpec,
    Sides,
    TierHint,
    YieldDecision,
)

__all__ = [
    "BandConfigurationError",
    "DEFAULT_MARGINS",
    "DEFAULT_SELECTION_POLICY",
    "Dimension",
    "ImpositionPlan",
    "ImpositionRequest",
    "ImpositionUnconfiguredError",
    "InvalidDimensionError",
    "InvalidQuantityError",
    "LayoutInfeasibleError",
    "LayoutResult",
    "MarginProfile",
    "MissingBasePriceError",
    "NoMatchingBandError",
    "PriceBand",
    "PriceResult",
    "PriceSchedule",
    "PricingError",
    "PrintSheetError",
    "SelectionPolicy",
    "SheetPreset",
    "SheetSpec",
    "Sides",
    "TierHint",
    "UnknownSheetPresetError",
    "YieldDecision",
    "compute_sheets_needed",
    "evaluate",
    "next_tier",
    "pack_orientation",
    "plan_imposition",
    "require_feasible",
    "resolve_item",
    "resolve_sheet",
    "select_orientation",
]
