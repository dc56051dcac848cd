# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the response models to ensure:
# - Valid data is accepted and serialized in field order
# - Invalid data raises ValidationError
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import ConversionResponse


class TestConversionResponse:
    """Tests for ConversionResponse model."""

    def test_valid_response(self):
        """Test creating a valid ConversionResponse."""
        response = ConversionResponse(input="42", output="XLII")

        assert response.model_dump() == {"input": "42", "output": "XLII"}
        assert response.model_dump_json() == '{"input":"42","output":"XLII"}'

    def test_rejects_non_numeral_output(self):
        """Test output must be a Roman numeral."""
        with pytest.raises(ValidationError):
            ConversionResponse(input="42", output="42")

        with pytest.raises(ValidationError):
            ConversionResponse(input="42", output="")

    def test_rejects_unnormalized_input(self):
        """Test input must be the normalized decimal string."""
        with pytest.raises(ValidationError):
            ConversionResponse(input="042", output="XLII")

    def test_frozen(self):
        """Test the response cannot be mutated after creation."""
        response = ConversionResponse(input="1", output="I")

        with pytest.raises(ValidationError):
            response.output = "II"
