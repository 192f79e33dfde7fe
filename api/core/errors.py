"""
Error types shared by feature packages.

Each error carries the HTTP status and the message shown to the client.
`main.py` turns them into `{"error": message}` responses.
"""

from __future__ import annotations


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class StoreError(AppError):
    """
    Any failure coming out of the store.

    The client only ever sees the generic message; the underlying exception
    stays attached as `__cause__` for logs.
    """

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
