"""Type erasure: one wrapper type over unrelated implementations of an interface.

An :class:`Interface` names a set of methods and says which of them every
implementation must provide. An :class:`Erased` value holds any object that
provides the required methods and forwards calls of the interface's methods
to it. Calling an optional method that the held object lacks raises
:class:`MethodNotImplementedError`.
"""

from __future__ import annotations

import copy as _copy
import sys
from typing import Any, Callable, FrozenSet, Iterable, Optional, Tuple

__all__ = [
    "Interface",
    "Erased",
    "MethodNotImplementedError",
    "ForwardPrinter",
    "ReversePrinter",
    "AllCapsPrinter",
    "PRINTER_INTERFACE",
]


class MethodNotImplementedError(NotImplementedError):
    """An optional interface method is missing from the held object."""

    def __init__(self, type_name: str, method: str) -> None:
        super().__init__(f"{type_name}::{method} not implemented")
        self.type_name = type_name
        self.method = method


class Interface:
    """A set of method names, some of which every implementation must have.

    When ``required`` is None, every method is required.
    """

    def __init__(
        self, methods: Iterable[str], required: Optional[Iterable[str]] = None
    ) -> None:
        names: Tuple[str, ...] = tuple(methods)
        seen = set()
        for name in names:
            if not isinstance(name, str) or not name.isidentifier():
                raise ValueError(f"invalid method name {name!r}")
            if name.startswith("_"):
                raise ValueError(f"method name {name!r} must not start with '_'")
            if name in seen:
                raise ValueError(f"duplicate method name {name!r}")
            seen.add(name)
        needed = frozenset(names if required is None else required)
        unknown = needed - seen
        if unknown:
            raise ValueError(
                "required methods not in interface: " + ", ".join(sorted(unknown))
            )
        self._methods = names
        self._required: FrozenSet[str] = needed

    @property
    def methods(self) -> Tuple[str, ...]:
        """The method names, in declaration order."""
        return self._methods

    @property
    def required(self) -> FrozenSet[str]:
        """The names of the methods every implementation must provide."""
        return self._required

    def __repr__(self) -> str:
        return (
            f"Interface(methods={list(self._methods)!r}, "
            f"required={sorted(self._required)!r})"
        )


class Erased:
    """Holds an object behind an interface and forwards the interface's calls."""

    def __init__(self, interface: Interface, concrete: Any = None) -> None:
        if concrete is not None:
            missing = [
                name
                for name in interface.methods
                if name in interface.required
                and not callable(getattr(concrete, name, None))
            ]
            if missing:
                raise TypeError(
                    f"{type(concrete).__name__} lacks required methods: "
                    + ", ".join(missing)
                )
        self._interface = interface
        self._concrete = concrete

    @classmethod
    def construct(
        cls, interface: Interface, impl_type: type, *args: Any, **kwargs: Any
    ) -> "Erased":
        """Build an ``impl_type`` from the arguments and wrap it."""
        return cls(interface, impl_type(*args, **kwargs))

    @property
    def interface(self) -> Interface:
        """The interface this value exposes."""
        return self._interface

    @property
    def concrete(self) -> Any:
        """The held object, or None when empty."""
        return self._concrete

    def copy(self) -> "Erased":
        """Return a wrapper around an independent copy of the held object."""
        if self._concrete is None:
            return Erased(self._interface)
        return Erased(self._interface, _copy.deepcopy(self._concrete))

    def has(self, method: str) -> bool:
        """Tell whether calling ``method`` will reach an implementation."""
        if method not in self._interface.methods:
            raise AttributeError(f"interface has no method {method!r}")
        if method in self._interface.required:
            return True
        if self._concrete is None:
            raise LookupError("the erased value is empty")
        return callable(getattr(self._concrete, method, None))

    def _call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        if self._concrete is None:
            raise LookupError("the erased value is empty")
        method = getattr(self._concrete, name, None)
        if not callable(method):
            raise MethodNotImplementedError(type(self._concrete).__name__, name)
        return method(*args, **kwargs)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._interface.methods:
            raise AttributeError(f"interface has no method {name!r}")

        def forward(*args: Any, **kwargs: Any) -> Any:
            return self._call(name, *args, **kwargs)

        forward.__name__ = name
        return forward

    def __bool__(self) -> bool:
        return self._concrete is not None

    def __repr__(self) -> str:
        held = "<empty>" if self._concrete is None else type(self._concrete).__name__
        return f"Erased({held})"


class ForwardPrinter:
    """Prints text as it is."""

    def print(self, text: str) -> None:
        sys.stdout.write(text + "\n")

    def save(self, filename: str, access: str) -> None:
        sys.stdout.write("ForwardPrinter.save called\n")


class ReversePrinter:
    """Prints text back to front."""

    def print(self, text: str) -> None:
        sys.stdout.write(text[::-1] + "\n")


class AllCapsPrinter:
    """Prints text in capitals."""

    def print(self, text: str) -> None:
        sys.stdout.write(text.upper() + "\n")


# Only print is required; save is optional.
PRINTER_INTERFACE = Interface(["print", "save"], required=["print"])