from typing import Any, Dict

from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def error_body(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    """Stable error envelope returned for every failed request"""
    error_dict = {"code": code, "message": message}
    if details is not None:
        error_dict["details"] = details
    return {"error": error_dict}
