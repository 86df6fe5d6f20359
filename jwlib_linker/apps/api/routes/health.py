"""Health and readiness routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Welcome to the JWLib Linker API. Refer to /docs for available endpoints."}


@router.get("/alive")
async def alive_check() -> JSONResponse:
    """Health check endpoint for infrastructure probes."""
    return JSONResponse({"status": "ok", "message": "JWLib Linker is alive and healthy."})


__all__ = ["router"]
