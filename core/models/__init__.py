# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - conversion.py: Conversion response schema
#
# These models define the "contract" between API and clients.
# =============================================================================

from .conversion import ConversionResponse

__all__ = [
    "ConversionResponse",
]
