# shared/errors.py
from fastapi import Request, status
from fastapi.responses import JSONResponse


class ContentError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(ContentError):
    """Malformed or missing input, rejected before anything is persisted."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(ContentError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, record_id: int):
        super().__init__(f"{entity} with id {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class StoreError(ContentError):
    """The database could not complete the operation."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


async def content_error_handler(request: Request, exc: ContentError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
