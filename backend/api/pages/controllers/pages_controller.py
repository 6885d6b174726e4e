"""Pages controller — HTML route hosting the browser paste script."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from config import MAX_FILE_SIZE, PASTE_SAVE_PATH, UPLOAD_FIELD

router = APIRouter(tags=["Pages"])

TEMPLATES_DIR = Path(__file__).parent.parent.parent.parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def _filesize(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024**2:
        return f"{size / 1024:.1f} KB"
    return f"{size / 1024**2:.1f} MB"


templates.env.filters["filesize"] = _filesize


@router.get("/", response_class=HTMLResponse)
async def paste_page(request: Request):
    return templates.TemplateResponse(request, "paste.html", {
        "max_file_size": MAX_FILE_SIZE,
        "save_path": PASTE_SAVE_PATH,
        "upload_field": UPLOAD_FIELD,
    })
