# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

"""
Receiver ignore policies.

A wrapped function may be told to treat some receivers as if no receiver
were given at all. The policy is resolved once, when the function is
wrapped, into one of a closed set of variants:

    Never()          never ignore
    Equals(value)    ignore the receiver that strictly equals value
    OneOf(values)    ignore any receiver that strictly equals one of values
    Predicate(fn)    ignore the receiver when fn(receiver) is truthy

Strict equality matches by identity, and by value only for immutable
scalars of the same type. Two distinct empty dicts are not strictly equal,
and NaN never matches anything.
"""

from typing import Any, Callable, Iterable, Tuple

import numpy as np

from .errors import InvalidConfigurationError

_SCALAR_TYPES = (str, bytes, int, float, complex, np.generic)


def strictly_equal(a: Any, b: Any) -> bool:
    """Compare two values by identity, or by value when both are scalars of the same type."""
    if isinstance(a, _SCALAR_TYPES) and bool(a != a):
        # NaN is never equal to itself, not even the same object
        return False
    if a is b:
        return True
    if type(a) is not type(b) or not isinstance(a, _SCALAR_TYPES):
        return False
    return bool(a == b)


class IgnorePolicy:
    """Base class of the receiver ignore policies."""

    __slots__ = ()

    def matches(self, receiver: Any) -> bool:
        raise NotImplementedError

    @staticmethod
    def coerce(value: Any) -> "IgnorePolicy":
        """
        Resolve a loosely specified ignore setting into a policy.

        Args:
            value: None, an IgnorePolicy, a list/tuple/set/frozenset of values,
                a callable predicate, or a single value.

        Returns:
            IgnorePolicy: The resolved policy.
        """
        if value is None:
            return Never()
        if isinstance(value, IgnorePolicy):
            return value
        if isinstance(value, (list, tuple, set, frozenset)):
            return OneOf(value)
        if callable(value):
            return Predicate(value)
        return Equals(value)

    def _key(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, s) for s in self.__slots__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        mine, theirs = self._key(), other._key()
        return len(mine) == len(theirs) and all(a is b for a, b in zip(mine, theirs))

    def __hash__(self):
        return hash((type(self),) + tuple(id(k) for k in self._key()))


class Never(IgnorePolicy):
    __slots__ = ()

    def matches(self, receiver: Any) -> bool:
        return False

    def __repr__(self):
        return "Never()"


class Equals(IgnorePolicy):
    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def matches(self, receiver: Any) -> bool:
        return strictly_equal(receiver, self.value)

    def __repr__(self):
        return f"Equals({self.value!r})"


class OneOf(IgnorePolicy):
    __slots__ = ("values",)

    def __init__(self, values: Iterable[Any]):
        # Snapshot so later changes to the caller's collection have no effect
        self.values: Tuple[Any, ...] = tuple(values)

    def matches(self, receiver: Any) -> bool:
        return any(strictly_equal(receiver, v) for v in self.values)

    def _key(self) -> Tuple[Any, ...]:
        return self.values

    def __repr__(self):
        return f"OneOf({list(self.values)!r})"


class Predicate(IgnorePolicy):
    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[Any], Any]):
        if not callable(fn):
            raise InvalidConfigurationError(f"Predicate requires a callable, got {type(fn).__name__}")
        self.fn = fn

    def matches(self, receiver: Any) -> bool:
        return bool(self.fn(receiver))

    def __repr__(self):
        return f"Predicate({getattr(self.fn, '__name__', self.fn)!r})"
