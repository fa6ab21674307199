import logging
import sys

from config import LOG_LEVEL

LOGGER_NAME = "ecommerce-api"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Cấu hình handler gốc và trả về logger của ứng dụng."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # bỏ log preflight CORS của uvicorn
    logging.getLogger("uvicorn.access").addFilter(
        lambda record: "OPTIONS" not in record.getMessage()
    )
    return logging.getLogger(LOGGER_NAME)


def get_logger() -> logging.Logger:
    """Dependency của FastAPI: logger mà handler ghi lỗi vào."""
    return logging.getLogger(LOGGER_NAME)
