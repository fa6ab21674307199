from dataclasses import dataclass, field
from typing import Any, Dict

from fastapi.responses import JSONResponse

def success_response(message: str = "Success", data: dict | list | None = None):
    return {
        "success": True,
        "message": message,
        "extensions": {
            "code": "SUCCESS",
            "status": 200,
            "data": data,
        }
    }

def error_response(message: str, code: str = "ERROR", status_code: int = 400):
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "extensions": {
                "code": code,
                "status": status_code
            }
        }
    )


@dataclass
class HandlerResult:
    """Status code và body JSON mà handler trả về"""
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body)


def serialize_error(exc: Exception) -> Dict[str, str]:
    return {"name": exc.__class__.__name__, "message": str(exc)}


def failure_result(message: str, exc: Exception, status_code: int = 500) -> HandlerResult:
    return HandlerResult(
        status_code,
        {"success": False, "message": message, "error": serialize_error(exc)},
    )
