import logging
from typing import Awaitable, Callable

from fastapi.responses import JSONResponse

from response_formatter import HandlerResult, failure_result


async def run_handler(
    operation: Callable[[], Awaitable[HandlerResult]],
    failure_message: str,
    logger: logging.Logger,
) -> JSONResponse:
    """
    Chạy một thao tác của handler và luôn trả về response.

    `operation` lo phần nghiệp vụ và trả HandlerResult. Mọi exception đều
    được log rồi đổi thành envelope 500 với `failure_message`, không bao giờ
    thoát ra khỏi handler.
    """
    try:
        result = await operation()
    except Exception as e:
        logger.exception("%s: %s", failure_message, e)
        result = failure_result(failure_message, e)
    return result.to_response()
