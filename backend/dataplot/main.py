# -*- coding: utf-8 -*-
"""ASGI entry point: ``uvicorn dataplot.main:app``.

Settings come from the environment only; use ``python -m dataplot`` to run
with a server config file.
"""

from dataplot.application import create_app
from dataplot.config import settings_from_env
from dataplot.utils.logging import configure_logging

settings = settings_from_env()
configure_logging(settings.log_level)

app = create_app(settings)
