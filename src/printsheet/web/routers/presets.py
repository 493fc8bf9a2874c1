"""Sheet preset endpoints."""

from fastapi import APIRouter

from printsheet.domain import SheetPreset
from printsheet.web.schemas.responses import PresetListSchema, PresetSchema

router = APIRouter(prefix="/presets", tags=["presets"])


def _preset_to_schema(preset: SheetPreset) -> PresetSchema:
    size = preset.dimension
    return PresetSchema(code=preset.value, width=size.width, height=size.height)


@router.get("", response_model=PresetListSchema)
async def list_presets() -> PresetListSchema:
    """List the named sheet formats."""
    return PresetListSchema(presets=[_preset_to_schema(p) for p in SheetPreset])


@router.get("/{code}", response_model=PresetSchema)
async def get_preset(code: str) -> PresetSchema:
    """Get one sheet format by code.

    Raises:
        UnknownSheetPresetError: If the code is not a known preset.
    """
    return _preset_to_schema(SheetPreset.from_code(code))
