# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from escher_client.interfaces.client import IEscherClient

__all__ = ["IEscherClient"]
