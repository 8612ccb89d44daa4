"""Shared utilities for Swiss Pairing."""

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
import os

from swisspairing.constants import LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger wired to the shared package handler.

    The handler is attached once to the ``swisspairing`` root logger, so
    every module logger propagates to it. The level comes from the
    ``SWISSPAIRING_LOG_LEVEL`` environment variable and defaults to WARNING.

    Args:
        name: Logger name, normally ``__name__`` of the calling module

    Returns:
        Configured logger
    """
    root = logging.getLogger("swisspairing")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))

    return logging.getLogger(name)
