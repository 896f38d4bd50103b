"""Logging setup."""

import logging

from farmstand.core.config import settings

_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once from settings.log_level."""
    global _CONFIGURED

    if _CONFIGURED:
        return

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _CONFIGURED = True
