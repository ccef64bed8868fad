# -*- coding: utf-8 -*-
"""FatSecret platform integration (OAuth1-signed REST calls)."""
