# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

import logging
import os
from typing import Union

ROOT_LOGGER_NAME = "bind_operator"
LOG_LEVEL_ENV = "BIND_OPERATOR_LOG_LEVEL"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


class Logger(logging.LoggerAdapter):
    """
    Named logger for a bind_operator component.

    Usage mirrors the rest of the package:

        logger = Logger("Bindable")
        logger.debug("...")

    Records go to the ``bind_operator.<name>`` logger, so applications
    configure output through the standard logging tree.
    """

    def __init__(self, name: str):
        super().__init__(logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}"), {})

    @property
    def name(self) -> str:
        return self.logger.name


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of the package root logger.

    Args:
        level (int | str): A logging level number or name, e.g. ``logging.DEBUG`` or ``"DEBUG"``.

    Raises:
        ValueError: If ``level`` is a name logging does not know.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    _root.setLevel(level)


def _configure_from_env() -> None:
    level = os.environ.get(LOG_LEVEL_ENV)
    if not level:
        return
    try:
        set_log_level(level)
    except ValueError as e:
        _root.warning(f"Ignoring {LOG_LEVEL_ENV}: {e}")


_configure_from_env()
