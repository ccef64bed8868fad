# -*- coding: utf-8 -*-
"""Recipe recommendations: dietary filtering, generation and stored entries."""
