"""Liveness Probe — fixed plaintext root endpoint.

Invariants:
    - GET / always returns 200 "Hello, World!" if the process is up
    - Never touches the animal store
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/", status_code=status.HTTP_200_OK, response_class=PlainTextResponse,
    summary="Liveness check",
)
async def hello():
    return "Hello, World!"
