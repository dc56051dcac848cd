# =============================================================================
# app/static.py - Front-end Hosting
# =============================================================================
# Serves a built single-page front-end (e.g. a React build directory) for
# GET paths that match no API route. Existing files are returned as-is;
# any other path gets index.html so client-side routing works.
#
# Disabled unless STATIC_DIR points to an existing directory.
# =============================================================================

import logging
from pathlib import Path

from fastapi.responses import FileResponse

from app.config import settings

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def _resolve_asset(root: Path, relative: str) -> Path | None:
    """Return the file inside root named by relative, or None."""
    try:
        candidate = (root / relative).resolve()
        # Never serve anything outside the static directory
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    except (OSError, ValueError) as e:
        # NUL bytes, over-long names and the like
        logger.debug(f"Unservable static path {relative!r}: {e}")
    return None


def static_fallback(request_path: str) -> FileResponse | None:
    """
    Find the static response for an unmatched GET path.

    Args:
        request_path: Decoded URL path, e.g. "/static/js/main.js"

    Returns:
        FileResponse for the asset or index.html, or None when no static
        directory is configured or it holds neither.
    """
    root = settings.static_path
    if root is None:
        return None

    relative = request_path.lstrip("/")
    if relative:
        candidate = _resolve_asset(root, relative)
        if candidate is not None:
            return FileResponse(candidate)

    index = root / INDEX_FILE
    if index.is_file():
        logger.debug(f"Serving {INDEX_FILE} for {request_path}")
        return FileResponse(index)

    return None
