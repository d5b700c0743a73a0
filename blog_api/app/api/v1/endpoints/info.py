"""
Root endpoint.

Returns a short plain text greeting, handy as a liveness check.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello World!"
