from fastapi import APIRouter
from statusboard.api.v1 import status

router = APIRouter()

router.include_router(status.router, prefix="/status", tags=["status"])
