"""
HTML pages rendered with Jinja2.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from statusboard.api.deps import get_status_board
from statusboard.services.status_board import StatusBoard

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url="/current-status")


@router.get("/most-recent", include_in_schema=False)
def most_recent(request: Request, board: StatusBoard = Depends(get_status_board)):
    rows = board.get_history_rows()
    return templates.TemplateResponse(request, "most-recent.html", {"rows": rows})


@router.get("/current-status", include_in_schema=False)
def current_status(request: Request, board: StatusBoard = Depends(get_status_board)):
    entry = board.get_current_status_entry()
    return templates.TemplateResponse(
        request,
        "current-status.html",
        {"rows": entry.rows, "expires_at": entry.expires_at},
    )
