# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

"""
Decorator for adding bind operator support to plain functions.

A bind operator passes a value to a function as its receiver, the way a
method receives the instance it is called on. This module wraps ordinary
functions so that a receiver, when one is given, is spliced into the
function's positional arguments instead.

Receivers can be given in several ways, all equivalent:

    fn.call(receiver, *args)
    fn.apply(receiver, args)
    fn.bind(receiver)(*args)
    (receiver | fn)(*args)
    obj.fn(*args)           # fn stored as a class attribute, obj is the receiver
"""

from functools import update_wrapper
from typing import Any, Callable, Mapping, Optional, Sequence

from .config import BindConfig
from .dotpath import build_nested
from .errors import InvalidConfigurationError
from .logger import Logger

logger = Logger("Bindable")


class BindableFunction:
    """
    Wrapper class that moves a bound receiver into a function's arguments.

    Calling the wrapper directly passes arguments through unchanged. When a
    receiver is supplied it is inserted at ``config.arg_position``, or nested
    in a new dict at ``config.path``, unless it is None or matched by
    ``config.ignore_this``.
    """

    # Make numpy defer to __ror__ so that `array | fn` binds instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, func: Callable, config: Optional[BindConfig] = None):
        """
        Initialize a bindable function.

        Args:
            func: The function to wrap
            config: How the receiver is spliced in. Anything accepted by BindConfig.coerce.

        Raises:
            InvalidConfigurationError: If func is not callable or config is invalid.
        """
        if not callable(func):
            raise InvalidConfigurationError(f"Cannot wrap non-callable {func!r}")

        update_wrapper(self, func, updated=())
        self.func = func
        self.config = BindConfig.coerce(config)
        logger.debug(f"Wrapped {self._name()} with {self.config}")

    def __call__(self, *args, **kwargs):
        """Call the wrapped function without a receiver."""
        return self.func(*args, **kwargs)

    def call(self, receiver: Any, /, *args, **kwargs):
        """
        Call the wrapped function with an explicit receiver.

        Args:
            receiver: The bound value. None means unbound.
            *args: Positional arguments for the wrapped function
            **kwargs: Keyword arguments, always passed through unchanged

        Returns:
            Whatever the wrapped function returns.
        """
        return self.apply(receiver, args, kwargs)

    def apply(self, receiver: Any, args: Sequence = (), kwargs: Optional[Mapping[str, Any]] = None):
        """
        Call the wrapped function with an explicit receiver and an argument sequence.

        The args sequence is never modified; a new list is built when the
        receiver has to be spliced in.

        Args:
            receiver: The bound value. None means unbound.
            args (Sequence): Positional arguments for the wrapped function
            kwargs (Mapping, optional): Keyword arguments for the wrapped function

        Returns:
            Whatever the wrapped function returns.
        """
        if kwargs is None:
            kwargs = {}
        if receiver is None or self.config.ignore_this.matches(receiver):
            return self.func(*args, **kwargs)
        return self.func(*self._splice(receiver, args), **kwargs)

    def bind(self, receiver: Any) -> "BoundFunction":
        """Attach a receiver without calling the function."""
        return BoundFunction(self, receiver)

    def _splice(self, receiver: Any, args: Sequence) -> list:
        config = self.config
        value = build_nested(config.segments, receiver) if config.segments else receiver

        spliced = list(args)
        position = config.arg_position
        if position > len(spliced):
            spliced.extend([None] * (position - len(spliced)))
        spliced.insert(position, value)
        return spliced

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return BoundFunction(self, instance)

    def __ror__(self, other):
        """
        Right-hand side of pipe operator (|), used as the bind operator.

        This allows: (receiver | bindable_function)(*args)

        Args:
            other: The value to bind as receiver

        Returns:
            BoundFunction: The function bound to the value
        """
        return self.bind(other)

    def _name(self) -> str:
        return getattr(self, "__qualname__", None) or repr(self.func)

    def __repr__(self):
        return f"<bindable {self._name()} {self.config}>"


class BoundFunction:
    """A BindableFunction with its receiver attached."""

    def __init__(self, bindable: BindableFunction, receiver: Any):
        self.bindable = bindable
        self.receiver = receiver

    def __call__(self, *args, **kwargs):
        return self.bindable.apply(self.receiver, args, kwargs)

    def __repr__(self):
        return f"<bound {self.bindable._name()} of {self.receiver!r}>"


def _resolve_config(head: Sequence, options: Mapping[str, Any]) -> BindConfig:
    if options:
        if head:
            raise InvalidConfigurationError("Pass configuration either positionally or as keywords, not both")
        try:
            return BindConfig(**options)
        except TypeError as e:
            raise InvalidConfigurationError(str(e)) from e

    if len(head) == 0:
        return BindConfig()
    if len(head) == 1:
        return BindConfig.coerce(head[0])
    if len(head) == 2:
        return BindConfig.from_legacy(*head)
    raise InvalidConfigurationError(f"Too many configuration arguments: {len(head)}")


def support_bind_operator(*args, **options):
    """
    Wrap a function so a bound receiver becomes one of its arguments.

    Accepted call shapes:
        support_bind_operator(func)
        support_bind_operator(config, func)          # config is a BindConfig or a dict
        support_bind_operator(position, func)        # legacy shorthand
        support_bind_operator(position, path, func)  # legacy shorthand

    Leaving out func returns a decorator, which also accepts the keyword
    form support_bind_operator(arg_position=..., path=..., ignore_this=...).

    Args:
        *args: Optional configuration followed by the function to wrap
        **options: BindConfig fields, when configuring by keyword

    Returns:
        BindableFunction, or a decorator producing one when func is omitted.

    Raises:
        InvalidConfigurationError: If the arguments do not match a supported shape.

    Examples:
        @support_bind_operator(arg_position=1, path="context")
        def render(template, options=None):
            ...

        (ctx | render)("page.html")  -> render("page.html", {"context": ctx})
    """
    if args and callable(args[-1]):
        func, head = args[-1], args[:-1]
    else:
        func, head = None, args

    config = _resolve_config(head, options)

    if func is None:
        def decorator(f: Callable) -> BindableFunction:
            return BindableFunction(f, config)

        return decorator
    return BindableFunction(func, config)
