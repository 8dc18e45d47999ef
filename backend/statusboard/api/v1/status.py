from fastapi import APIRouter, Depends

from statusboard.api.deps import get_status_board
from statusboard.schemas.status import CurrentStatusResponse, HistoryResponse
from statusboard.services.status_board import StatusBoard

router = APIRouter()


@router.get("/history", response_model=HistoryResponse)
def get_history(board: StatusBoard = Depends(get_status_board)):
    """Last state transitions across all monitored services, newest first."""
    return HistoryResponse(rows=board.get_history_rows())


@router.get("/current", response_model=CurrentStatusResponse)
def get_current_status(board: StatusBoard = Depends(get_status_board)):
    """
    Current state of every actively checked service.

    Served from the recency cache; `expires_at` tells when it will next be
    refreshed.
    """
    entry = board.get_current_status_entry()
    return CurrentStatusResponse(rows=list(entry.rows), expires_at=entry.expires_at)
