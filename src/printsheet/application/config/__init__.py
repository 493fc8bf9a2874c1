"""Configuration schema and loading system for print job files.

This package provides JSON-based configuration loading and validation for
print jobs. It includes Pydantic models for schema validation, a loader with
comprehensive error handling, semantic checks on layouts and price bands,
and adapters to domain values.

Public API:
    - PrintJobConfiguration: Root configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Perform full configuration validation
    - config_to_inputs: Convert a configuration to command input DTOs

Example:
    >>> from pathlib import Path
    >>> from printsheet.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("flyer.json"))
    ...     print(f"Item: {config.item.width}x{config.item.height}mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from printsheet.application.config.adapter import (
    band_config_to_domain,
    config_to_bands,
    config_to_imposition,
    config_to_inputs,
    config_to_item,
    config_to_sheet_spec,
)
from printsheet.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from printsheet.application.config.schema import (
    SUPPORTED_VERSIONS,
    ImpositionConfig,
    ItemConfig,
    PriceBandConfig,
    PricingConfig,
    PrintJobConfiguration,
    SheetConfig,
)
from printsheet.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_layout,
    check_pricing,
    validate_config,
)

__all__ = [
    "ConfigError",
    "ImpositionConfig",
    "ItemConfig",
    "PriceBandConfig",
    "PricingConfig",
    "PrintJobConfiguration",
    "SUPPORTED_VERSIONS",
    "SheetConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "band_config_to_domain",
    "check_layout",
    "check_pricing",
    "config_to_bands",
    "config_to_imposition",
    "config_to_inputs",
    "config_to_item",
    "config_to_sheet_spec",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
