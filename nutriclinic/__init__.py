# -*- coding: utf-8 -*-
"""Clinical nutrition backend: patients, intake forms and FatSecret recipes."""
