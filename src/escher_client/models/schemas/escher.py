# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Wire schemas of the Escher REST API.

The API transmits all amounts and prices as decimal strings, e.g.
``"50000.00"``. These are parsed into floats on receipt; anything that is not
a string holding a finite number fails validation. Authentication payloads use
PascalCase field names while the trading payloads use the snake_case names
verbatim.
"""

import re
from datetime import UTC, datetime
from math import isfinite
from typing import Annotated, Any, Self

from pydantic import AwareDatetime, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_pascal

from escher_client.models.domain import Side

DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_decimal_string(value: Any) -> float:  # noqa: ANN401
    """Parse a string-encoded number as sent by the API into a float"""
    if not isinstance(value, str):
        raise ValueError(  # noqa: TRY004
            f"Expected a decimal string, got {type(value).__name__}",
        )
    if not DECIMAL_PATTERN.fullmatch(value):
        raise ValueError(f"Expected a decimal string, got '{value}'")
    number = float(value)
    if not isfinite(number):
        raise ValueError(f"Expected a finite decimal string, got '{value}'")
    return number


def parse_side(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, str):
        return Side(value)
    return value


DecimalString = Annotated[float, BeforeValidator(parse_decimal_string)]
WireSide = Annotated[Side, BeforeValidator(parse_side)]


# ==============================================================================
# Authentication


class AuthResult(BaseModel):
    """Tokens issued by a sign-in or refresh call"""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        frozen=True,
    )

    access_token: str
    refresh_token: str
    # Only sent by some API revisions
    expires_in: int | None = None
    token_type: str | None = None
    id_token: str | None = None


class AuthResponse(BaseModel):
    """Envelope of a successful sign-in or refresh call"""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        frozen=True,
    )

    authentication_result: AuthResult

    @property
    def access_token(self: Self) -> str:
        return self.authentication_result.access_token

    @property
    def refresh_token(self: Self) -> str:
        return self.authentication_result.refresh_token


# ==============================================================================
# Trading


class Quote(BaseModel):
    """A firm, time-boxed price offer"""

    model_config = ConfigDict(frozen=True)

    quote_id: str
    product_id: str  # e.g. "BTC-USD"
    base_currency: str  # e.g. "BTC"
    price: DecimalString
    base_currency_size: DecimalString
    quote_currency_size: DecimalString
    side: WireSide
    created_at: AwareDatetime
    expiry: AwareDatetime

    def is_expired(self: Self, now: datetime | None = None) -> bool:
        """
        Returns True if the quote's expiry lies in the past.

        This is advisory only, the server decides whether a quote can still
        be accepted.
        """
        return (now or datetime.now(UTC)) >= self.expiry


class Order(BaseModel):
    """Execution record created by accepting a quote"""

    model_config = ConfigDict(frozen=True)

    id: str
    product_id: str
    order_type: str
    order_status: str
    time_in_force: str
    fill_price: DecimalString
    fill_qty: DecimalString
    price: DecimalString  # requested price
    order_size: DecimalString  # requested size
    client_side: WireSide
    status: str
    executed_value: DecimalString
    # Only sent by some API revisions
    created_at_server: AwareDatetime | None = None


class AcceptQuote(BaseModel):
    """Outcome of an accept-quote request"""

    model_config = ConfigDict(frozen=True)

    success: bool
    quote_id: str
    order: Order


# ==============================================================================
# Errors


class ErrorResponse(BaseModel):
    """Structured business error, e.g. {"success": false, "message": "quote expired"}"""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
