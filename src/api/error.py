"""
HTTP-facing wrappers for use case errors.

Routes translate an `Error` code into one of these; the handlers registered
in `src.api.app` render them as `{"error": {"code", "message"}}`.
"""

from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    """Caller's fault: the use case error is shown as is with a 4xx/502 status"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unmapped use case error; the message is logged but not returned"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
