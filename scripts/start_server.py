#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - Gallery Server Entry Point
# =============================================================================
# Starts the gallery server with uvicorn.
#
# Usage:
#   # Start server (development)
#   poetry run python scripts/start_server.py
#
#   # Or use uvicorn directly
#   poetry run uvicorn app.main:app --port 3000
#
# Prerequisites:
#   - GALLERY_ROOT must contain templates/, gallery.css and details.css
#     (defaults to the current directory)
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the gallery server."""
    print("=" * 60)
    print("Photo Gallery Server")
    print("=" * 60)
    print()
    print(f"Serving {settings.GALLERY_ROOT.resolve()}")
    print(f"Listening on http://{settings.API_HOST}:{settings.API_PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
