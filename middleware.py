import json

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from response_formatter import success_response

SKIP_PATHS = ("/openapi.json", "/docs", "/redoc")


class CustomResponseMiddleware(BaseHTTPMiddleware):
    """
    Bọc body JSON "trần" vào envelope chuẩn.

    Body đã là envelope (có `success` hoặc `message`) được trả nguyên văn,
    kể cả status code.
    """

    async def dispatch(self, request: Request, call_next):
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        response = await call_next(request)

        # ⚠ Bỏ qua mọi response không phải JSON
        if not response.headers.get("content-type", "").startswith("application/json"):
            return response

        # Đọc body gốc
        body = b"".join([chunk async for chunk in response.body_iterator])
        try:
            data = json.loads(body) if body else None
        except ValueError:
            data = body.decode() if body else None

        # content-length được tính lại cho body mới
        headers = {k: v for k, v in response.headers.items() if k.lower() not in ("content-length", "set-cookie")}

        if isinstance(data, dict) and ("success" in data or "message" in data):
            content = data
        elif response.status_code < 400:
            content = success_response(message="Success", data=data)
        else:
            content = {
                "success": False,
                "message": "Error",
                "extensions": {
                    "code": "ERROR",
                    "status": response.status_code,
                    "data": data,
                },
            }

        formatted = JSONResponse(content=content, status_code=response.status_code, headers=headers)
        # ✅ giữ lại mọi Set-Cookie
        for cookie in response.headers.getlist("set-cookie"):
            formatted.raw_headers.append((b"set-cookie", cookie.encode("latin-1")))
        return formatted
