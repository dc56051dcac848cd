#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the Roman Numeral Converter API with uvicorn.
#
# Usage:
#   # Start server (development)
#   python scripts/start_server.py
#
#   # Or use the uvicorn CLI directly
#   uvicorn app.main:app --reload --port 8080
#
# Host, port and log level come from app.config (API_HOST, PORT, LOG_LEVEL).
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("Roman Numeral Converter API")
    print("=" * 60)
    print()
    print(f"Listening on http://{settings.API_HOST}:{settings.PORT}")
    print("Endpoints:")
    print("  GET /health")
    print("  GET /romannumeral?query={number}")
    print()
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.is_development and settings.DEBUG,
    )


if __name__ == "__main__":
    main()
