# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from escher_client.models.schemas.escher import (
    AcceptQuote,
    AuthResponse,
    AuthResult,
    DecimalString,
    ErrorResponse,
    Order,
    Quote,
)

__all__ = [
    "AcceptQuote",
    "AuthResponse",
    "AuthResult",
    "DecimalString",
    "ErrorResponse",
    "Order",
    "Quote",
]
