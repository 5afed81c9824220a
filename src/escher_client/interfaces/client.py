# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Interface of the Escher REST API client"""

from abc import ABC, abstractmethod
from typing import Self

from escher_client.models.domain import Side
from escher_client.models.schemas import AcceptQuote, AuthResponse, Quote


class IEscherClient(ABC):
    """
    Interface for the Escher trading operations.

    Every operation is a single, independent request. Implementations raise
    :class:`~escher_client.exceptions.EscherHandledError` for business
    rejections, :class:`~escher_client.exceptions.EscherDecodingError` for
    unexpected bodies and
    :class:`~escher_client.exceptions.EscherNetworkingError` for transport
    failures.
    """

    # == Authentication ========================================================
    @abstractmethod
    def sign_in(self: Self, email: str, password: str) -> AuthResponse:
        """Sign in with email and password."""

    @abstractmethod
    def refresh_token(self: Self, refresh_token: str, email: str) -> AuthResponse:
        """Obtain new tokens using a refresh token."""

    # == Trading ===============================================================
    @abstractmethod
    def quote(
        self: Self,
        access_token: str,
        product_id: str,
        base_currency_size: str,
        side: Side,
    ) -> Quote:
        """Request a firm quote for ``base_currency_size`` of ``product_id``.

        The size is passed as string to keep the caller's precision.
        """

    @abstractmethod
    def accept_quote(
        self: Self,
        access_token: str,
        quote_id: str,
        quantity: float | None = None,
    ) -> AcceptQuote:
        """Accept a quote, partially if ``quantity`` is given."""
