import os
import logging
from logging.config import dictConfig
import json
from typing import Optional

import sentry_sdk

from me.uport.resolver.app.config import Settings


def configure_logging(debug: bool = True):
    logging_config_file = os.getenv("LOGGING_CONFIG_FILE", "")

    if len(logging_config_file) > 0:
        with open(logging_config_file) as fl:
            dictConfig(json.load(fl))
        return

    logging.basicConfig()
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)


def configure_sentry(settings: Settings) -> None:
    if settings.sentry_dsn is not None:
        sentry_sdk.init(dsn=settings.sentry_dsn, debug=settings.debug)


def bootstrap(settings: Optional[Settings] = None) -> Settings:
    if settings is None:
        settings = Settings()
    configure_logging(settings.debug)
    configure_sentry(settings)
    return settings
