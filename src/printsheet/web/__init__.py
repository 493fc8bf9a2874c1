"""FastAPI REST API for print sheet yield and pricing.

This module provides a REST API for calculating items per sheet, sheets
needed for a run, tiered prices, and validating job configurations.

Usage:
    uvicorn printsheet.web:app --reload
"""

from printsheet.web.app import app, create_app

__all__ = ["app", "create_app"]
