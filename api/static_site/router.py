"""
SPA fallback route. Registered last so every API route wins.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from fastapi import APIRouter
from fastapi.responses import FileResponse

from core.errors import ApiError

from . import paths

logger = logging.getLogger(__name__)

router = APIRouter()


def _has_extension(path: str) -> bool:
    return bool(PurePosixPath(path).suffix)


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str) -> FileResponse:
    if full_path == "api" or full_path.startswith("api/"):
        raise ApiError(404, "Not found")

    build = paths.resolve_build()
    if not build.found:
        raise ApiError(
            404,
            "Frontend build not found",
            [str(p) for p in build.candidates],
        )

    if _has_extension(full_path):
        asset = paths.resolve_asset(build.directory, full_path)
        if asset is None:
            raise ApiError(404, "Not found")
        return FileResponse(asset)

    index_path = build.index_path
    if index_path is None or not index_path.is_file():
        logger.error("frontend_index_missing directory=%s", build.directory)
        raise ApiError(500, "Frontend build is incomplete", str(build.directory))
    return FileResponse(index_path)
