from fastapi import Request

from statusboard.services.status_board import StatusBoard


def get_status_board(request: Request) -> StatusBoard:
    """Dependency returning the StatusBoard built at startup."""
    return request.app.state.status_board
