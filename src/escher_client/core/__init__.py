# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from escher_client.core.decoding import (
    classify_response,
    decode_response,
    parse_json_body,
)

__all__ = ["classify_response", "decode_response", "parse_json_body"]
