"""
Purpose:
- GET / serves the landing page (upload form, no vehicle data yet).
- Page assets are mounted under /static by the app factory.
"""

from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse

WEB_DIR = Path(__file__).resolve().parent.parent / "web"
STATIC_DIR = WEB_DIR / "static"

router = APIRouter(tags=["pages"])

@router.get("/", response_class=HTMLResponse)
def index():
    return FileResponse(WEB_DIR / "index.html")
