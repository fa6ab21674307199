from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

import config
from middleware import CustomResponseMiddleware
from exception_handle import http_exception_handler, validation_exception_handler, generic_exception_handler
from logger import setup_logging

# Import các controller (router)
from controllers.auth_controller import router as auth_router
from controllers.category_controller import router as category_router
from database.connection import client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Quản lý vòng đời của ứng dụng.
    - Khi server khởi động: cấu hình logging.
    - Khi server tắt: đóng kết nối MongoDB.
    """
    logger = setup_logging()
    logger.info("🚀 Server is starting up")
    yield
    logger.info("🛑 Server is shutting down, closing database client")
    client.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ecommerce Category API",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CustomResponseMiddleware)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(auth_router)
    app.include_router(category_router)

    return app

app = create_app()
