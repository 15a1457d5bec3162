"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for dynamically routing a single method
call to one of several registered implementations based on the runtime value
of a named attribute on the receiver (for arrays, ``self.kind``).

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the state attribute of ``self`` and dispatches
  to the registered implementation that matches the current state.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Sub-methods are called as ordinary instance methods, i.e.
  ``sub_method(self, *args, **kwargs)``.
- Decorators may be stacked to register one implementation for several states.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapException = Optional[
    Union[Type[Exception], Callable[[Callable[..., Any], Any], Exception]]
]


def create_path_builder(state_attr: str) -> Callable[
    [Type, Callable[P, R], Hashable, TrapException],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            mode = "A"
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    When `MyClass().foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `self.mode`.

    Parameters
    ----------
    state_attr : str
        Name of the attribute read from ``self`` to select a control path.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control path
        and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )
    """Tuple-like key used to uniquely identify a control path."""

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    _missing = object()

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: TrapException = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
            The wrapper is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : optional
            Controls what happens when a dispatch target is missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception class, the wrapper raises ``trap_exception()``.
            - If another callable, it is invoked as
              ``trap_exception(method, state)`` and the exception it returns
              is raised.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering `sub_method` for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            )

        smk: MethodKey = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the state
                attribute of `self`.
                """
                cur_state = getattr(self, state_attr, _missing)
                if cur_state is _missing:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                key = MethodKey(cls.__name__, method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if not trap_exception:
                    raise NotImplementedError(
                        "Missing control path ({}={}) for {}".format(
                            state_attr, repr(cur_state), method.__name__
                        )
                    )
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception()
                raise trap_exception(method, cur_state)

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
