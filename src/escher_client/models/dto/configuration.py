# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from urllib.parse import urlparse

from pydantic import BaseModel, field_validator


class ClientConfigDTO(BaseModel):
    """
    Data transfer object for the client configuration. The client holds
    nothing besides these values.
    """

    url: str
    # Seconds passed to the transport, None waits indefinitely.
    timeout: float | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Ensure an absolute http(s) URL and strip trailing slashes."""
        parsed = urlparse(value.strip())
        if parsed.scheme not in (valid_schemes := ("http", "https")):
            raise ValueError(f"URL scheme must be one of: {', '.join(valid_schemes)}")
        if not parsed.netloc:
            raise ValueError(f"URL '{value}' has no host")
        # Endpoint paths are appended to the URL
        if parsed.query or parsed.fragment or "?" in value or "#" in value:
            raise ValueError(f"URL '{value}' must not contain a query or fragment")
        return value.strip().rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("Timeout must be larger than 0")
        return value
