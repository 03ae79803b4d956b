from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from typing import Any, Optional


class ApiError(HTTPException):
    """HTTPException with a short machine code and a human-readable message."""

    code = "bad_request"
    status = 400

    def __init__(self, message: str, status: Optional[int] = None, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(status_code=status or self.status, detail=message)


class Unauthorized(ApiError):
    code = "unauthorized"
    status = 401


def err_body(code: str, message: str, details: Optional[Any] = None):
    return {"ok": False, "error": {"code": code, "message": message, "details": details}}


async def api_error_handler(request: Request, exc: ApiError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=err_body(exc.code, exc.message, exc.details),
        headers=headers,
    )
