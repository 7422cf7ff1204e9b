# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Storefront Contributors
#
# This file is part of Storefront.
#
# Storefront is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Storefront is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
import sys
from typing import TextIO

LOGGER_NAME = "storefront"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"

LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str = "warning", stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process (tests) don't duplicate lines.
    """
    if level.lower() not in LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
