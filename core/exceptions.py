"""
Custom exception classes.

The plan generation path never raises for a valid profile. These cover the
edges around it: catalog loading, raw profile validation and export.
"""
from typing import Optional


class PlanEngineError(Exception):
    """Base engine exception with consistent structure."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class CatalogError(PlanEngineError):
    """Reference catalog missing or malformed."""

    def __init__(self, catalog: str, detail: str):
        super().__init__(
            detail=f"{catalog} catalog: {detail}",
            error_code="CATALOG_ERROR"
        )
        self.catalog = catalog


class ProfileValidationError(PlanEngineError):
    """Profile failed validation."""

    def __init__(self, detail: str, field: Optional[str] = None):
        error_code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(detail=detail, error_code=error_code)
        self.field = field


class ExportError(PlanEngineError):
    """Plan could not be exported in the requested format."""

    def __init__(self, format: str, detail: str):
        super().__init__(
            detail=f"{format} export failed: {detail}",
            error_code="EXPORT_ERROR"
        )
        self.format = format
