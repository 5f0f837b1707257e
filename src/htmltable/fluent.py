#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltable/fluent.py
"""Chainable setters callable on a class or on an instance.

A setter decorated with :class:`fluentmethod` behaves like a normal method
when reached through an instance. Reached through the class, it builds a
default instance first and applies itself to it, so chains can start
anywhere::

    Table.set_header({"name": "Name"}).add_row({"name": "Jo"})
    Table().set_header({"name": "Name"}).add_row({"name": "Jo"})

Looking up an operation that does not exist raises
:class:`~htmltable.exceptions.UnknownOperationError` naming the class and the
attempted method, both for class-level and instance-level calls.

"""

from __future__ import annotations

from functools import update_wrapper, wraps
from types import MethodType
from typing import Any, Callable

from htmltable.exceptions import UnknownOperationError


def _unknown_operation(class_name: str, name: str) -> AttributeError:
    if name.startswith("__") and name.endswith("__"):
        return AttributeError(name)
    return UnknownOperationError(class_name, name)


class fluentmethod:  # noqa: N801 - used as a decorator like classmethod
    """Descriptor for setters that return ``self``.

    Parameters
    ----------
    func : callable
        The setter; it must accept the instance as first argument and
        return it

    """

    def __init__(self, func: Callable[..., Any]):
        self.func = func
        update_wrapper(self, func)  # type: ignore[arg-type]

    def __get__(self, instance: Any, owner: type | None = None) -> Callable[..., Any]:
        if instance is not None:
            return MethodType(self.func, instance)

        @wraps(self.func)
        def build(*args: Any, **kwargs: Any) -> Any:
            return self.func(owner(), *args, **kwargs)

        return build


class FluentMeta(type):
    """Metaclass reporting unknown class-level operations."""

    def __getattr__(cls, name: str) -> Any:
        raise _unknown_operation(cls.__name__, name)


class FluentMixin:
    """Mixin reporting unknown instance-level operations."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        raise _unknown_operation(type(self).__name__, name)
