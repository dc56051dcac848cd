# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Roman Numeral Converter API:
# - test_converter.py: Conversion, validation and round-trip tests
# - test_api.py: HTTP endpoint tests via FastAPI's TestClient
# - test_config.py: Settings validation and computed properties
# - test_models.py: Pydantic response model validation
# - test_convert_script.py: Command-line conversion script
#
# Run tests with: pytest
# =============================================================================
