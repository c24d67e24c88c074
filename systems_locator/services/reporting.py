"""Default sink for configuration-integrity warnings."""

from __future__ import annotations

import logging
from typing import Optional

from systems_locator.core.logging import get_logger


class LoggingReporter:
    """Forward locator warnings and errors to the structured logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("systems_locator.locator")

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


__all__ = ["LoggingReporter"]
