# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Domain models

from enum import Enum
from typing import Any, Self


class Side(str, Enum):
    """Direction of a trade; the value is the token used on the wire."""

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def _missing_(cls: type[Self], value: Any) -> Self | None:  # noqa: ANN401
        # Older API revisions answer with the variant name, e.g. "Buy".
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None

    def __str__(self: Self) -> str:
        return self.value


__all__ = ["Side"]
