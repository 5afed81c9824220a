# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

import pytest

from escher_client.exceptions import (
    EscherDecodingError,
    EscherError,
    EscherHandledError,
    EscherNetworkingError,
)


@pytest.mark.parametrize(
    "exc_type",
    [EscherDecodingError, EscherHandledError, EscherNetworkingError],
)
def test_error_kinds_share_base(exc_type: type[EscherError]) -> None:
    error = exc_type("message", status_code=200)
    assert isinstance(error, EscherError)
    assert error.message == "message"
    assert error.status_code == 200


def test_handled_error_str() -> None:
    assert str(EscherHandledError("quote expired")) == (
        "Escher Client - Handled Error: quote expired"
    )


def test_error_kinds_are_distinct() -> None:
    assert not issubclass(EscherHandledError, EscherDecodingError)
    assert not issubclass(EscherDecodingError, EscherHandledError)
    assert not issubclass(EscherNetworkingError, EscherDecodingError)
