# =============================================================================
# core/models/conversion.py - Conversion Schemas
# =============================================================================
# These models define the API contract for numeral conversion:
# - ConversionResponse: Output of GET /romannumeral
#
# The field order (input, output) is the order clients see in the JSON body.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
    """
    Schema for a successful Arabic -> Roman conversion.

    Example:
        {
            "input": "42",
            "output": "XLII"
        }
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"input": "42", "output": "XLII"}},
    )

    # Decimal string of the converted integer ("042" is echoed as "42")
    input: str = Field(
        ...,
        pattern=r"^[1-9][0-9]{0,3}$",
        description="The converted number, as a decimal string"
    )

    output: str = Field(
        ...,
        min_length=1,
        max_length=15,
        pattern=r"^[IVXLCDM]+$",
        description="Canonical Roman numeral"
    )
