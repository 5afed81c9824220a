# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from logging import getLogger
from typing import Any, Self

import requests

from escher_client.core.decoding import decode_response, parse_json_body
from escher_client.exceptions import EscherNetworkingError
from escher_client.interfaces import IEscherClient
from escher_client.models.domain import Side
from escher_client.models.dto import ClientConfigDTO
from escher_client.models.schemas import AcceptQuote, AuthResponse, Quote

LOG = getLogger(__name__)

ACCESS_KEY_HEADER = "i2-ACCESS-KEY"


class EscherClient(IEscherClient):
    """
    Client for the Escher REST API.

    Holds nothing but its configuration; each call sends a fresh request, so
    one instance may be shared between threads.

    .. code-block:: python

        client = EscherClient("https://api.example.com")
        auth = client.sign_in(email="user@example.com", password="secret")
        quote = client.quote(auth.access_token, "BTC-USD", "1.5", Side.BUY)
        client.accept_quote(auth.access_token, quote.quote_id)
    """

    def __init__(self: Self, url: str, timeout: float | None = None) -> None:
        self.__config = ClientConfigDTO(url=url, timeout=timeout)

    @property
    def url(self: Self) -> str:
        return self.__config.url

    # == Implemented abstract methods from IEscherClient =======================

    def sign_in(self: Self, email: str, password: str) -> AuthResponse:
        """Sign in with email and password."""
        return self.__post(
            "/sign-in",
            params={"email": email, "password": password},
            schema=AuthResponse,
        )

    def refresh_token(self: Self, refresh_token: str, email: str) -> AuthResponse:
        """
        Obtain new tokens. Uses the sign-in endpoint, the server tells both
        requests apart by their payload.
        """
        return self.__post(
            "/sign-in",
            params={"refreshToken": refresh_token, "email": email},
            schema=AuthResponse,
        )

    def quote(
        self: Self,
        access_token: str,
        product_id: str,
        base_currency_size: str,
        side: Side,
    ) -> Quote:
        """Request a quote, e.g. ``quote(token, "BTC-USD", "1.5", Side.BUY)``"""
        return self.__post(
            "/quotes",
            params={
                "product_id": product_id,
                "base_currency_size": base_currency_size,
                "side": Side(side).value,
            },
            schema=Quote,
            access_token=access_token,
        )

    def accept_quote(
        self: Self,
        access_token: str,
        quote_id: str,
        quantity: float | None = None,
    ) -> AcceptQuote:
        """
        Accept a quote. Without ``quantity`` the full quoted size is accepted,
        which is signaled by sending ``"quantity": null``.
        """
        return self.__post(
            "/quotes/accept",
            params={"quote_id": quote_id, "quantity": quantity},
            schema=AcceptQuote,
            access_token=access_token,
        )

    # == Helpers ===============================================================

    def __post(
        self: Self,
        path: str,
        params: dict[str, Any],
        schema: type,
        access_token: str | None = None,
    ) -> Any:  # noqa: ANN401
        url = f"{self.__config.url}{path}"
        headers = (
            {ACCESS_KEY_HEADER: access_token} if access_token is not None else {}
        )

        LOG.debug("POST %s", url)
        try:
            response = requests.post(
                url,
                json=params,
                headers=headers,
                timeout=self.__config.timeout,
            )
        except requests.exceptions.RequestException as exc:
            LOG.error("Request to %s failed: %s", url, exc)
            raise EscherNetworkingError(
                f"Escher Client - API Error {exc}",
            ) from exc

        LOG.debug("Received response from %s (status %d)", url, response.status_code)
        return decode_response(
            parse_json_body(response),
            schema,
            status_code=response.status_code,
        )
