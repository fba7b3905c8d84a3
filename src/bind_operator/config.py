# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from .dotpath import parse_path
from .errors import InvalidConfigurationError
from .ignore import IgnorePolicy, Never

# Mapping keys accepted by BindConfig.from_mapping, with their aliases
_MAPPING_KEYS = {
    "arg_position": "arg_position",
    "arg": "arg_position",
    "path": "path",
    "ignore_this": "ignore_this",
    "ignoreThis": "ignore_this",
}


@dataclass(frozen=True)
class BindConfig:
    """
    Describes where a bound receiver is spliced into the argument list.

    Attributes:
        arg_position (int): Zero-based index at which the receiver is inserted. Default: 0
        path (str, optional): Dot path; when set, a new nested dict holding the
            receiver at that path is inserted instead of the receiver itself.
        ignore_this (IgnorePolicy): Receivers matching this policy are treated as unbound.
            Any value accepted by IgnorePolicy.coerce may be passed. Default: Never()

    Raises:
        InvalidConfigurationError: If arg_position is not a non-negative int or path is malformed.
    """

    arg_position: int = 0
    path: Optional[str] = None
    ignore_this: IgnorePolicy = field(default_factory=Never)
    segments: Tuple[str, ...] = field(init=False, repr=False, compare=False, default=())

    def __post_init__(self):
        position = self.arg_position
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidConfigurationError(
                f"arg_position must be an int, got {type(position).__name__}"
            )
        if position < 0:
            raise InvalidConfigurationError(f"arg_position must be >= 0, got {position}")

        if self.path is not None:
            object.__setattr__(self, "segments", parse_path(self.path))
        object.__setattr__(self, "ignore_this", IgnorePolicy.coerce(self.ignore_this))

    @classmethod
    def from_legacy(cls, position: int, path: Optional[str] = None) -> "BindConfig":
        """Build a configuration from the positional (position, path) shorthand."""
        return cls(arg_position=position, path=path)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "BindConfig":
        """
        Build a configuration from a dict-like record.

        Args:
            mapping (Mapping): Keys arg_position (or arg), path and ignore_this (or ignoreThis).

        Returns:
            BindConfig: The normalised configuration.

        Raises:
            InvalidConfigurationError: On unknown or duplicated keys.
        """
        kwargs = {}
        for key, value in mapping.items():
            name = _MAPPING_KEYS.get(key)
            if name is None:
                raise InvalidConfigurationError(f"Unknown configuration key: {key!r}")
            if name in kwargs:
                raise InvalidConfigurationError(f"Configuration key given twice: {name!r}")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, value: Any) -> "BindConfig":
        """Normalise None, a BindConfig, a mapping or an int position into a BindConfig."""
        if value is None:
            return cls()
        if isinstance(value, BindConfig):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_legacy(value)
        raise InvalidConfigurationError(f"Unsupported configuration: {value!r}")
