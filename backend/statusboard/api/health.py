from fastapi import APIRouter, Depends

from statusboard.api.deps import get_status_board
from statusboard.schemas.status import CacheStats, HealthResponse
from statusboard.services.status_board import StatusBoard

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(board: StatusBoard = Depends(get_status_board)):
    """Liveness probe. Does not touch the database."""
    return HealthResponse(status="ok", cache=CacheStats(**board.cache.stats()))
