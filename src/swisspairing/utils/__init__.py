"""Shared helpers for Swiss Pairing: logger setup and identifier generation."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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
import uuid
from typing import Optional, Union

ROOT_LOGGER_NAME = "swisspairing"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"

# Library code stays silent unless the application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logger(name: str) -> logging.Logger:
    """Return the named logger for a module.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger that propagates to the package root logger
    """
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package root logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level as int or name ("DEBUG", "INFO", ...)

    Returns:
        The configured package root logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


def generate_id(prefix: Optional[str] = None) -> str:
    """Generate a fresh unique identifier.

    Args:
        prefix: Optional label prepended as ``"<prefix>-<uuid>"``

    Returns:
        A random UUID4 string
    """
    identifier = str(uuid.uuid4())
    if prefix:
        return f"{prefix}-{identifier}"
    return identifier
