"""Helpers shared by the routers."""

from fastapi.responses import JSONResponse


def not_found(what: str) -> JSONResponse:
    """404 response in the API's error shape."""
    return JSONResponse(status_code=404, content={"error": f"{what} not found"})


def bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})
