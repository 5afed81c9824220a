# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from escher_client.adapters.rest import ACCESS_KEY_HEADER, EscherClient

__all__ = ["ACCESS_KEY_HEADER", "EscherClient"]
