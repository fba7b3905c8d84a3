# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0


class BindOperatorError(Exception):
    """Base exception for bind operator support."""

    pass


class InvalidConfigurationError(BindOperatorError, ValueError):
    """Exception raised when a wrapper is given a configuration it cannot use."""

    pass
