"""
Array control-path manager for kind-specific dispatch.

This module defines a shared control-path manager used to register and resolve
kind-specific implementations of Array methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"kind"``. As a result, method
dispatch is performed based on the runtime value of ``self.kind`` on
Array objects.

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @array_control_path_manager(Mixin, Mixin.op, ElementKind.INT, kind_not_supported)
    def op_int(self, ...): ...

    @array_control_path_manager(Mixin, Mixin.op, ElementKind.DOUBLE, kind_not_supported)
    def op_double(self, ...): ...

At runtime, calling ``Array.op(...)`` dispatches to the implementation whose
registered kind matches ``self.kind``. Kinds without a registered path raise
:class:`TypeMismatchError` through :func:`kind_not_supported`.
"""

from typing import Any, Callable

from ...domain.utils._control_path import create_path_builder
from ...domain._errors import TypeMismatchError
from ...domain._kind import ElementKind

# Control-path manager that dispatches Array methods based on `self.kind`
array_control_path_manager = create_path_builder("kind")

NUMERIC_KINDS = (
    ElementKind.INT,
    ElementKind.LONG,
    ElementKind.DOUBLE,
    ElementKind.COMPLEX,
)
REAL_KINDS = (
    ElementKind.BOOLEAN,
    ElementKind.INT,
    ElementKind.LONG,
    ElementKind.DOUBLE,
)
ALL_KINDS = tuple(ElementKind)


def kind_not_supported(method: Callable[..., Any], kind: Any) -> TypeMismatchError:
    """Build the error raised when `method` has no control path for `kind`."""
    name = getattr(kind, "name", repr(kind))
    return TypeMismatchError(f"{method.__name__} is not supported for {name} arrays")


def register_kinds(cls: type, method: Callable[..., Any], kinds: tuple) -> Callable:
    """
    Register one implementation of `method` for every kind in `kinds`.

    Equivalent to stacking one ``array_control_path_manager`` decorator per
    kind.
    """

    def decorator(fn: Callable) -> Callable:
        for kind in kinds:
            array_control_path_manager(cls, method, kind, kind_not_supported)(fn)
        return fn

    return decorator
