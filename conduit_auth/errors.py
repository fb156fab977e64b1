"""
Error type shared by the service and the HTTP layer.

Every failure the service reports carries a payload of the form
``{"errors": {<field>: [<message>, ...]}}`` so clients can render
messages next to the offending input.
"""
import json
import logging
from typing import Dict, List

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class HttpException(Exception):
    def __init__(self, status_code: int, errors: Dict[str, List[str]]):
        self.status_code = status_code
        self.errors = errors
        super().__init__(str(self))

    @property
    def payload(self) -> dict:
        return {"errors": self.errors}

    def __str__(self) -> str:
        return json.dumps(self.payload)


def blank_fields_error(fields: List[str]) -> HttpException:
    return HttpException(
        422,
        {field: ["can't be blank"] for field in fields},
    )


def taken_fields_error(fields: List[str]) -> HttpException:
    return HttpException(
        422,
        {field: ["has already been taken"] for field in fields},
    )


def http_exception_handler(_request: Request, exc: HttpException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Reshape FastAPI request validation errors into the service error format.

    The field key is the last element of the error location, e.g. a bad
    ``user.email`` is reported under ``email``; body-level problems such as
    malformed JSON (located by character offset) are reported under ``body``.
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        field = loc[-1] if loc else "body"
        errors.setdefault(field, []).append(error.get("msg", "is invalid"))

    logger.debug("Request validation failed: %s", errors)
    return JSONResponse(
        status_code=422,
        content={"errors": errors},
    )
