"""Shared helpers for Americano Pairing."""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "americanopairing"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV_VAR = "AMERICANO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def _level_from_env() -> int:
    """Read the log level from the environment, falling back to WARNING."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return DEFAULT_LOG_LEVEL
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a logger for ``name`` wired to the package root logger.

    The root ``americanopairing`` logger gets a single stream handler the
    first time this is called. Module loggers propagate to it, so the level
    can be changed in one place with :func:`set_log_level`.

    Args:
        name: Logger name, normally ``__name__``
        level: Optional level for this logger only

    Returns:
        The configured logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(_level_from_env())

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: int) -> None:
    """Change the level of the package root logger."""
    setup_logger(ROOT_LOGGER_NAME).setLevel(level)


__all__ = ["setup_logger", "set_log_level", "ROOT_LOGGER_NAME", "LOG_LEVEL_ENV_VAR"]
