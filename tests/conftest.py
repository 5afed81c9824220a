# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from typing import Any

import pytest

ACCESS_TOKEN = "test_access_token"  # noqa: S105


@pytest.fixture
def auth_payload() -> dict[str, Any]:
    return {
        "AuthenticationResult": {
            "AccessToken": ACCESS_TOKEN,
            "ExpiresIn": 3600,
            "TokenType": "Bearer",
            "RefreshToken": "test_refresh_token",
            "IdToken": "test_id_token",
        },
    }


@pytest.fixture
def quote_payload() -> dict[str, Any]:
    return {
        "quote_id": "q1",
        "product_id": "BTC-USD",
        "base_currency": "BTC",
        "price": "50000.00",
        "base_currency_size": "1.5",
        "quote_currency_size": "75000.00",
        "side": "buy",
        "created_at": "2023-01-01T00:00:00Z",
        "expiry": "2023-01-01T00:05:00Z",
    }


@pytest.fixture
def order_payload() -> dict[str, Any]:
    return {
        "id": "o1",
        "product_id": "BTC-USD",
        "order_type": "market",
        "order_status": "filled",
        "time_in_force": "FOK",
        "fill_price": "50000.00",
        "fill_qty": "0.5",
        "price": "50000.00",
        "order_size": "0.5",
        "client_side": "buy",
        "status": "done",
        "executed_value": "25000.00",
        "created_at_server": "2023-01-01T00:01:00Z",
    }


@pytest.fixture
def accept_quote_payload(order_payload: dict[str, Any]) -> dict[str, Any]:
    return {"success": True, "quote_id": "q1", "order": order_payload}


@pytest.fixture
def error_payload() -> dict[str, Any]:
    return {"success": False, "message": "quote expired"}
