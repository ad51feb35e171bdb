"""HTTP error mapping for use case failures"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from repair_shop.libs.result import Error


class ClientError(Exception):
    """
    Raised by routes when a use case returns an error result

    Rendered as ``{"error": {"code": ..., "message": ...}}``.
    """

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )


def raise_for_error(error: Error) -> None:
    """Raise ClientError with 404 for *_NOT_FOUND codes and 400 otherwise"""
    if error.code.endswith("_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ClientError(error)
