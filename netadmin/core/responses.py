"""JSON error bodies shared by routers and exception handlers."""
from __future__ import annotations

from fastapi.responses import JSONResponse

ERR_CODE_INVALID_INPUT = "INVALID_INPUT"
ERR_CODE_NOT_FOUND = "NOT_FOUND"
ERR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse({"code": code, "message": message}, status_code=status_code)


def invalid_input(message: str) -> JSONResponse:
    return error_response(400, ERR_CODE_INVALID_INPUT, message)


def not_found(message: str = "not found") -> JSONResponse:
    return error_response(404, ERR_CODE_NOT_FOUND, message)


def internal_error(message: str) -> JSONResponse:
    return error_response(500, ERR_CODE_INTERNAL_ERROR, message)
