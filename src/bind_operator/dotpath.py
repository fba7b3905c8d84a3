# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from typing import Any, Tuple

from .errors import InvalidConfigurationError


def parse_path(path: str) -> Tuple[str, ...]:
    """
    Split a dot path into its segments.

    Args:
        path (str): Dot-separated path, e.g. "options.context".

    Returns:
        tuple: Path segments, e.g. ("options", "context").

    Raises:
        InvalidConfigurationError: If path is not a string or has an empty segment.
    """
    if not isinstance(path, str):
        raise InvalidConfigurationError(f"Path must be a string, got {type(path).__name__}")

    segments = tuple(path.split("."))
    if not all(segments):
        raise InvalidConfigurationError(f"Invalid dot path: {path!r}")
    return segments


def build_nested(segments: Tuple[str, ...], value: Any) -> dict:
    """Build a new nested dict holding value at the given path segments."""
    leaf = value
    for key in reversed(segments):
        leaf = {key: leaf}
    return leaf
