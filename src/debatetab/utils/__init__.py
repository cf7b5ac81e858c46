"""Shared helpers: logger setup and identifier generation."""

# Debate Tab
# Copyright (C) 2025  Debate Tab developers
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
import uuid

from debatetab.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "debatetab"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package root logger.

    The root handler is installed once; its level comes from the
    ``DEBATETAB_LOG_LEVEL`` environment variable.
    """
    _configure_root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed (e.g. ``Team-...``)."""
    unique = uuid.uuid4().hex
    return f"{prefix}-{unique}" if prefix else unique
