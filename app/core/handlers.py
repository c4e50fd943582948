# app/core/handlers.py
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import BadRequestException, BaseAPIException, NotFoundException
from app.core.logging import logger


def _error_body(code: str, message: str, details=None) -> dict:
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details
        }
    }

# 1. Handle Custom Logic Errors (Do mình throw ra)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, exc.details),
    )

# 2. Record không tồn tại -> 404, body rỗng
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return Response(status_code=status.HTTP_404_NOT_FOUND)

# 3. Handle Validation Errors (JSON hỏng hoặc thiếu trường bắt buộc)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # Get field name (e.g., "body.email" or just "email")
        field = ".".join(str(x) for x in error["loc"] if x != "body") or "body"
        details[field] = error["msg"]

    bad_request = BadRequestException(
        "Input validation failed", details=details, code="VALIDATION_ERROR"
    )
    return await custom_api_exception_handler(request, bad_request)

# 4. Handle Standard HTTP Errors (404 do gõ sai URL, 405...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )

# 5. Handle General System Errors (Crash, Bug code, Library lỗi ngầm)
async def general_exception_handler(request: Request, exc: Exception):
    # Log lỗi chi tiết để Dev sửa
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred. Please contact support.",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette chọn handler theo MRO: NotFoundException -> body rỗng
    app.add_exception_handler(NotFoundException, not_found_exception_handler)
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
