# dummygen/routes/pages.py
from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse

from dummygen.core.constants import MediaTypes
from dummygen.core.settings import settings

router = APIRouter(tags=["pages"])

FALLBACK_PAGE = "<h1>Dummy Data Generator</h1><p>POST form fields to /generate.</p>"
PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# every path except /generate serves the preview page; include this router last
@router.api_route("/", methods=PAGE_METHODS, response_class=HTMLResponse, include_in_schema=False)
@router.api_route("/{path:path}", methods=PAGE_METHODS, response_class=HTMLResponse, include_in_schema=False)
async def serve_index(path: str = ""):
    index_file = settings.index_page_path
    if index_file.exists():
        return FileResponse(index_file, media_type=MediaTypes.HTML)
    return HTMLResponse(FALLBACK_PAGE)
