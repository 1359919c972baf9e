"""
Static frontend serving. Any GET that no API route claims gets the matching file
from STATIC_DIR, or index.html so the client-side router can take over.
Other methods on unclaimed paths are a 404. Include this router last.
"""
from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse
from healthchat.core import config
from healthchat.core.errors import ApiError

router = APIRouter(tags=["frontend"])

def resolve_static(root: Path, requested: str) -> Path | None:
    try:
        base = root.resolve()
        candidate = (base / requested).resolve()
        if not candidate.is_relative_to(base) or not candidate.is_file():
            return None
    except (OSError, ValueError):
        # null bytes, over-long names and the like are just misses
        return None
    return candidate

@router.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def frontend(full_path: str):
    root = Path(config.STATIC_DIR)
    found = resolve_static(root, full_path) if full_path else None
    if found is not None:
        return FileResponse(found)
    index = root / "index.html"
    if not index.is_file():
        raise ApiError(404, "Not found")
    return FileResponse(index, media_type="text/html")

@router.api_route("/{full_path:path}", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def not_found(full_path: str):
    raise ApiError(404, "Not found")
