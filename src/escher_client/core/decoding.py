# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Classification of Escher API responses.

The API answers business rejections (expired quote, insufficient balance, ...)
with the same transport status as successful requests. The only way to tell
them apart is the shape of the JSON body, so every body is parsed once into a
plain JSON value and then validated against the expected schema first and the
error schema second:

1. matches the expected schema -> the typed model
2. matches ``{"success": bool, "message": str}`` -> :class:`EscherHandledError`
3. matches neither -> :class:`EscherDecodingError`

The expected schema is always probed first since it is the common case and
the error shape could match parts of a valid response.
"""

from logging import getLogger
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from requests import Response

from escher_client.exceptions import (
    EscherDecodingError,
    EscherError,
    EscherHandledError,
)
from escher_client.models.schemas import ErrorResponse

LOG = getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_json_body(response: Response) -> Any:  # noqa: ANN401
    """Parse the raw response body into a plain JSON value."""
    try:
        return response.json()
    except ValueError as exc:
        LOG.debug(
            "Response body is not JSON (status %s): %.200s",
            response.status_code,
            response.text,
        )
        raise EscherDecodingError(
            f"Response body is not valid JSON: {exc}",
            status_code=response.status_code,
        ) from exc


def classify_response(
    payload: Any,  # noqa: ANN401
    schema: type[SchemaT],
    status_code: int | None = None,
) -> SchemaT | EscherHandledError | EscherDecodingError:
    """
    Returns the payload validated as ``schema``, or the error describing why
    it is not one. Errors are returned, not raised.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        schema_error = exc

    try:
        error = ErrorResponse.model_validate(payload)
    except ValidationError:
        LOG.debug(
            "Response matched neither %s nor the error shape: %s",
            schema.__name__,
            schema_error,
        )
        decoding_error = EscherDecodingError(
            f"Response matched neither {schema.__name__} nor the error shape: "
            f"{schema_error}",
            status_code=status_code,
        )
        decoding_error.__cause__ = schema_error
        return decoding_error

    LOG.warning("Escher rejected the request: %s", error.message)
    return EscherHandledError(error.message, status_code=status_code)


def decode_response(
    payload: Any,  # noqa: ANN401
    schema: type[SchemaT],
    status_code: int | None = None,
) -> SchemaT:
    """Like :func:`classify_response` but raises the returned errors."""
    if isinstance(
        result := classify_response(payload, schema, status_code=status_code),
        EscherError,
    ):
        raise result
    return result
