import logging

from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError

from logger import LOGGER_NAME
from response_formatter import error_response

logger = logging.getLogger(LOGGER_NAME)

# ✅ Handler cho HTTPException
async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(
        message=exc.detail,
        code=exc.__class__.__name__,
        status_code=exc.status_code
    )

# ✅ Handler cho lỗi validate body/params
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(
        message="Invalid request",
        code="VALIDATION_ERROR",
        status_code=422
    )

# ✅ Handler cho Exception thường
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        message=str(exc) or "Unexpected error",
        code="INTERNAL_ERROR",
        status_code=500
    )
