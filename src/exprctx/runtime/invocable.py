"""
Invocable functions for the evaluation context.

Two kinds of callable share one contract:

- DirectInvocable: a plain function plus its signature
- BoundInvocable: another invocable with some leading arguments captured

Binding never runs the function and never mutates the invocable it was
called on, so one parent can back any number of bound children.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, Tuple
import logging

from ..errors import error_argument_type, error_arity_mismatch
from ..signature import CallableSignature, signature_from_function
from ..types import is_sequence

logger = logging.getLogger(__name__)


class Invocable(ABC):
    """Something that can be called with an ordered argument list."""

    @property
    @abstractmethod
    def signature(self) -> CallableSignature:
        """The effective signature callers must satisfy."""
        pass

    @property
    def name(self) -> str:
        return self.signature.name

    @abstractmethod
    def invoke(self, args: Sequence[Any] = ()) -> Any:
        """Call with positional arguments and return the result."""
        pass

    @abstractmethod
    def bind(self, values: Sequence[Any]) -> "Invocable":
        """Capture leading argument values, returning a new invocable."""
        pass

    def __call__(self, *args: Any) -> Any:
        return self.invoke(args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.signature})"


class DirectInvocable(Invocable):
    """
    A function reference with an explicit signature.

    Arguments are matched positionally against the fixed parameters and any
    remaining ones are collected into the variadic tail. Every argument is
    checked against its declared type before the function runs.
    """

    def __init__(self, function: Callable[..., Any], signature: CallableSignature):
        self._function = function
        self._signature = signature

    @classmethod
    def from_function(cls, function: Callable[..., Any], name: Optional[str] = None) -> "DirectInvocable":
        """Build an invocable by reflecting over a Python function's signature."""
        return cls(function, signature_from_function(function, name))

    @property
    def function(self) -> Callable[..., Any]:
        return self._function

    @property
    def signature(self) -> CallableSignature:
        return self._signature

    def invoke(self, args: Sequence[Any] = ()) -> Any:
        args = tuple(args)
        sig = self._signature
        if not sig.accepts_count(len(args)):
            raise error_arity_mismatch(sig, len(args))

        fixed_args = args[:sig.fixed_arity]
        var_args = args[sig.fixed_arity:]

        # A sequence passed on its own where a typed tail is expected is the tail
        if (sig.varargs is not None and len(var_args) == 1 and is_sequence(var_args[0])
                and not sig.varargs.type.accepts(var_args[0])):
            var_args = tuple(var_args[0])

        return self._invoke_collected(fixed_args, var_args)

    def _invoke_collected(self, fixed_args: Tuple[Any, ...], var_args: Tuple[Any, ...]) -> Any:
        """Check and call with the variadic tail already collected, without spreading."""
        sig = self._signature
        if not sig.accepts_count(len(fixed_args) + len(var_args)):
            raise error_arity_mismatch(sig, len(fixed_args) + len(var_args))
        self._check_types(fixed_args, var_args)
        logger.debug("Invoking %s with %d argument(s)", sig.name, len(fixed_args) + len(var_args))
        return self._function(*fixed_args, *var_args)

    def _check_types(self, fixed_args: Tuple[Any, ...], var_args: Tuple[Any, ...]) -> None:
        sig = self._signature
        for param, value in zip(sig.params, fixed_args):
            if not param.type.accepts(value):
                raise error_argument_type(sig.name, param.name, param.type, value)
        if sig.varargs is None:
            return
        for i, value in enumerate(var_args):
            if not sig.varargs.type.accepts(value):
                raise error_argument_type(sig.name, f"{sig.varargs.name}[{i}]", sig.varargs.type, value)

    def bind(self, values: Sequence[Any]) -> Invocable:
        values = tuple(values)
        if not values:
            return self
        signature, prefix = self._signature.bind(values)
        logger.debug("Bound %d value(s) to %s", len(values), self._signature.name)
        return BoundInvocable(self, prefix, signature)


class BoundInvocable(Invocable):
    """
    An invocable with a captured argument prefix.

    Call arguments are appended after the prefix and the combined list is
    dispatched to the parent. Binding again extends the prefix against the
    same parent, so chained binds are equivalent to one bind of all values.

    A single sequence bound as the first variadic value is a pending tail:
    when the call adds no further arguments it is spread into the parent's
    variadic arguments, otherwise it is passed through as one value.
    """

    def __init__(self, parent: Invocable, bound_args: Sequence[Any], signature: CallableSignature):
        self._parent = parent
        self._bound_args = tuple(bound_args)
        self._signature = signature
        parent_sig = parent.signature
        self._pending_tail = (
            parent_sig.is_variadic
            and len(self._bound_args) == parent_sig.fixed_arity + 1
            and is_sequence(self._bound_args[-1])
        )

    @property
    def parent(self) -> Invocable:
        return self._parent

    @property
    def bound_args(self) -> Tuple[Any, ...]:
        return self._bound_args

    @property
    def signature(self) -> CallableSignature:
        return self._signature

    def invoke(self, args: Sequence[Any] = ()) -> Any:
        args = tuple(args)
        if not self._signature.accepts_count(len(args)):
            raise error_arity_mismatch(self._signature, len(args))
        if self._pending_tail and not args:
            head = self._bound_args[:-1]
            tail = tuple(self._bound_args[-1])
            if isinstance(self._parent, DirectInvocable):
                return self._parent._invoke_collected(head, tail)
            return self._parent.invoke(head + tail)
        return self._parent.invoke(self._bound_args + args)

    def bind(self, values: Sequence[Any]) -> Invocable:
        values = tuple(values)
        if not values:
            return self
        signature, prefix = self._signature.bind(values)
        logger.debug("Bound %d more value(s) to %s", len(values), self._signature.name)
        return BoundInvocable(self._parent, self._bound_args + prefix, signature)
