"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on a runtime state attribute of
the receiver (for tensors: the arithmetic family of the element kind).

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the state attribute of ``self`` and dispatches
  to the registered implementation that matches the current state.

Important notes
---------------
- The first registration for a method replaces the method on the class with a
  dispatch wrapper. Later registrations reuse the same wrapper.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- The selected implementation is called as ``sub_method(self, *args, **kwargs)``,
  so implementations are written like ordinary instance methods.
"""

from __future__ import annotations

from collections import namedtuple
from functools import wraps
from typing import Any, Callable, Dict, Hashable, Optional, Type, Union

from typing_extensions import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

TrapException = Optional[Union[Exception, Callable[[Callable[..., Any], Any], None]]]


MethodKey = namedtuple(
    "MethodKey",
    [
        "ClassName",
        "MethodName",
        "StateVal",
    ],
)
"""
Tuple-like key used to uniquely identify a control path.

Fields
------
ClassName : str
    The owning class name.
MethodName : str
    The base method name being templated.
StateVal : Hashable
    The state value that selects this implementation.
"""


def create_path_builder(state_attr: str = "_state") -> Callable[
    [Type, Callable[..., Any], Hashable, TrapException],
    Callable[[Callable[..., Any]], Callable[..., Any]],
]:
    """
    Create and return a "path builder" used to register stateful control paths.

    The returned function (`templator`) is used like this:

        family_path = create_path_builder("family")

        class MyTensor:
            def exp(self) -> "MyTensor": ...

        @family_path(MyTensor, MyTensor.exp, DTypeFamily.FIXED)
        def exp_fixed(self) -> "MyTensor":
            ...

    When ``MyTensor.exp()`` is called, it dispatches to `exp_fixed` if
    ``self.family == DTypeFamily.FIXED``.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute (usually a property) read from the receiver to
        select a control path. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator
    """

    methods_map: Dict[MethodKey, Callable[..., Any]] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[..., Any],
        state: Hashable,
        trap_exception: TrapException = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method is wrapped for state-based dispatch.
        method : Callable
            The base method being templated. Its metadata is copied onto the
            installed wrapper via `functools.wraps`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : optional
            Controls what happens when no path matches the runtime state:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception instance, the wrapper raises it.
            - If a callable, it is invoked as ``trap_exception(method, state)``;
              it is expected to raise. If it returns, `NotImplementedError`
              is raised.

        Returns
        -------
        Callable
            A decorator registering `sub_method` for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}")

        smk = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            # Re-registering on an existing wrapper keeps the original base method.
            base = getattr(method, "__control_path_base__", method)

            @wraps(base)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                """Dispatch to a registered implementation by the receiver's state."""
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {} (@property)".format(
                            type(self), repr(state_attr)
                        )
                    )
                cur = getattr(self, state_attr)
                sm = methods_map.get(MethodKey(cls.__name__, base.__name__, cur))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if isinstance(trap_exception, BaseException):
                    raise trap_exception
                if callable(trap_exception):
                    trap_exception(base, cur)
                raise NotImplementedError(
                    "Missing control path (state={}) for {}".format(repr(cur), repr(base))
                )

            wrapper.__control_path_base__ = base  # type: ignore[attr-defined]
            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
