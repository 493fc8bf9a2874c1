"""Resolution of sheet and item sizes into concrete millimeter dimensions."""

from __future__ import annotations

from ..value_objects import Dimension, SheetSpec


def resolve_sheet(spec: SheetSpec) -> Dimension:
    """Resolve a sheet spec to its dimensions.

    A preset always wins over custom width/height supplied with it.

    Raises:
        InvalidDimensionError: If a custom width or height is not positive
            or not finite.
    """
    if spec.preset is not None:
        return spec.preset.dimension
    return Dimension(width=_as_float(spec.width), height=_as_float(spec.height))


def resolve_item(width: float, height: float) -> Dimension:
    """Resolve an item trim size.

    Raises:
        InvalidDimensionError: If width or height is not positive or not finite.
    """
    return Dimension(width=_as_float(width), height=_as_float(height))


def _as_float(value: object) -> object:
    # Strings from form fields are parsed; anything unparseable is left for
    # Dimension to reject with InvalidDimensionError.
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value
