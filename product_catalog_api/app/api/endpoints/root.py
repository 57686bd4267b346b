"""
Public routes served without an API key.
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
