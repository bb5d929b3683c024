from enum import Enum

from fastapi import HTTPException, Request
from starlette.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ErrorCode(str, Enum):
    """
    An enumeration of error codes.
    """

    FILTER_MISCONFIGURED = "filter_misconfigured"
    INVALID_OPTION_SOURCE = "invalid_option_source"
    RESOURCE_NOT_FOUND = "resource_not_found"
    LENS_NOT_FOUND = "lens_not_found"
    INVALID_FILTER_VALUES = "invalid_filter_values"


class DependentFilterError(HTTPException):
    def __init__(self, status_code: int, code: ErrorCode, detail: str):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code


class FilterMisconfiguredError(DependentFilterError):
    def __init__(self, filter_key: str):
        self.filter_key = filter_key
        detail = f"Misconfigured filter '{filter_key}': no options source."
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail, code=ErrorCode.FILTER_MISCONFIGURED
        )


class InvalidOptionSourceError(DependentFilterError):
    def __init__(self, filter_key: str, source_type: str):
        self.filter_key = filter_key
        self.source_type = source_type
        detail = (
            f"Options source of filter '{filter_key}' must be a mapping from value to label/record, "
            f"got '{source_type}'."
        )
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail, code=ErrorCode.INVALID_OPTION_SOURCE
        )


class ResourceNotFoundError(DependentFilterError):
    def __init__(self, resource: str):
        self.resource = resource
        detail = f"Resource '{resource}' not found."
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail, code=ErrorCode.RESOURCE_NOT_FOUND)


class LensNotFoundError(DependentFilterError):
    def __init__(self, resource: str, lens: str):
        self.resource = resource
        self.lens = lens
        detail = f"Lens '{lens}' not found on resource '{resource}'."
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail, code=ErrorCode.LENS_NOT_FOUND)


class InvalidFilterValuesError(DependentFilterError):
    def __init__(self, detail: str = "Could not decode the filters payload."):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail, code=ErrorCode.INVALID_FILTER_VALUES)


def add_exception_handlers(app):
    @app.exception_handler(DependentFilterError)
    async def dependent_filter_exception_handler(request: Request, exc: DependentFilterError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "detail": exc.detail},
        )
