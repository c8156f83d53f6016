from typing import Any, Dict

from fastapi import status
from libs.result import Error


class ApiError(Exception):
    """Business error raised by a route, rendered by the app exception handlers"""

    def __init__(self, base_error: Error, status_code: int):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def body(self) -> Dict[str, Any]:
        error = {"code": self.base_error.code, "message": self.base_error.message}
        if self.base_error.reason:
            error["reason"] = self.base_error.reason
        if self.base_error.details:
            error["details"] = self.base_error.details
        return {"success": False, "message": self.base_error.message, "error": error}


class ClientError(ApiError):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error, status_code)


class ServerError(ApiError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status.HTTP_500_INTERNAL_SERVER_ERROR)
