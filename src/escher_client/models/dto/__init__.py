# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Data Transfer objects

from escher_client.models.dto.configuration import ClientConfigDTO

__all__ = ["ClientConfigDTO"]
