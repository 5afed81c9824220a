# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Exceptions raised by the Escher client.

Every failing request ends in exactly one of the three concrete kinds below,
so callers can tell a rejection they should show to the user
(:class:`EscherHandledError`) apart from a broken transport or a protocol
mismatch.
"""

from typing import Self


class EscherError(Exception):
    """Base class for all errors raised by the Escher client."""

    def __init__(
        self: Self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class EscherNetworkingError(EscherError):
    """The request could not be sent or no response was received."""


class EscherDecodingError(EscherError):
    """The response body matched neither the expected nor the error shape."""


class EscherHandledError(EscherError):
    """The server rejected the request with a structured business error."""

    def __str__(self: Self) -> str:
        return f"Escher Client - Handled Error: {self.message}"


__all__ = [
    "EscherDecodingError",
    "EscherError",
    "EscherHandledError",
    "EscherNetworkingError",
]
