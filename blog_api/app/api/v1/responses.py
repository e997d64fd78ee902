"""
Response helpers shared by the v1 endpoints.

Structured replies use the ``{"Message", "Status"}`` envelope, entities
are serialised with their wire field names, and failures escaping
validation are reported as plain text.
"""

from enum import Enum
from typing import Iterable, Optional

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from blog_api.app.schemas import AckResponse


COMMENT_PAYLOAD_MESSAGE = "Could not deserialize comment JSON payload"


class RequestError(str, Enum):
    """Reasons a request is rejected before reaching a repository."""

    MALFORMED_PAYLOAD = "malformed_payload"
    MISSING_FIELD = "missing_field"
    INVALID_ID_FORMAT = "invalid_id_format"
    MISSING_QUERY_PARAM = "missing_query_param"


def ack(message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Return the envelope with ``Status`` mirroring the HTTP status."""
    body = AckResponse(message=message, status=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def request_error(kind: RequestError, raw: Optional[str] = None) -> JSONResponse:
    """Build the 400 envelope for a rejected request.

    ``raw`` is the offending input: the request path for a bad path id,
    the parameter value for a bad query id, or the parameter name when
    it is missing.  Missing comment fields are reported with the same
    message as a malformed comment body.
    """
    if kind in (RequestError.MALFORMED_PAYLOAD, RequestError.MISSING_FIELD):
        message = COMMENT_PAYLOAD_MESSAGE
    elif kind is RequestError.MISSING_QUERY_PARAM:
        message = f"Wrong id path variable: {raw} is missing"
    else:
        message = f"Wrong id path variable: {raw}"
    return ack(message, status.HTTP_400_BAD_REQUEST)


def entity(model: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=model.model_dump(mode="json", by_alias=True))


def entities(models: Iterable[BaseModel]) -> JSONResponse:
    return JSONResponse(content=[model.model_dump(mode="json", by_alias=True) for model in models])


def plain_error(message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def json_body_schema(model: type) -> dict:
    """OpenAPI ``requestBody`` for routes that read and validate the raw body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }
