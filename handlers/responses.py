"""
handlers/responses.py
---------------------
The JSON envelope shared by every order endpoint:
    {"status": bool, "message": str | null, "data": any | null}
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse


def envelope(data: Any = None, message: Optional[str] = None, status: bool = True) -> dict[str, Any]:
    return {"status": status, "message": message, "data": data}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a failed envelope with the given HTTP status."""
    return JSONResponse(status_code=status_code, content=envelope(message=message, status=False))
