# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Client for the Escher REST API"""

from escher_client.adapters import ACCESS_KEY_HEADER, EscherClient
from escher_client.exceptions import (
    EscherDecodingError,
    EscherError,
    EscherHandledError,
    EscherNetworkingError,
)
from escher_client.models.domain import Side
from escher_client.models.schemas import (
    AcceptQuote,
    AuthResponse,
    AuthResult,
    ErrorResponse,
    Order,
    Quote,
)

__all__ = [
    "ACCESS_KEY_HEADER",
    "AcceptQuote",
    "AuthResponse",
    "AuthResult",
    "ErrorResponse",
    "EscherClient",
    "EscherDecodingError",
    "EscherError",
    "EscherHandledError",
    "EscherNetworkingError",
    "Order",
    "Quote",
    "Side",
]
