# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from .bindable import BindableFunction, BoundFunction, support_bind_operator
from .config import BindConfig
from .errors import *
from .ignore import Equals, IgnorePolicy, Never, OneOf, Predicate
from .logger import Logger, set_log_level

__version__ = "2.0.0"

__all__ = [
    "support_bind_operator",
    "BindableFunction",
    "BoundFunction",
    "BindConfig",
    "IgnorePolicy",
    "Never",
    "Equals",
    "OneOf",
    "Predicate",
    "BindOperatorError",
    "InvalidConfigurationError",
    "Logger",
    "set_log_level",
]
