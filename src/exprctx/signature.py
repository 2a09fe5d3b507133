"""
Callable signatures for registered functions.

A signature records the fixed positional parameters of a function and, when
the function is variadic, the element type of its trailing parameter. It is
pure data: the only logic here is working out what a signature looks like
after some leading values have been bound.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Sequence, Tuple
import inspect
import typing

from .types import Type, OBJECT, resolve_annotation
from .errors import error_over_binding


@dataclass(frozen=True)
class Parameter:
    """A named, typed parameter."""
    name: str
    type: Type = OBJECT

    def __str__(self) -> str:
        return f"{self.name}: {self.type.name}"


@dataclass(frozen=True)
class CallableSignature:
    """Type signature for a registered function."""
    name: str
    params: Tuple[Parameter, ...] = ()
    varargs: Optional[Parameter] = None  # Element type of the variadic tail
    return_type: Type = OBJECT

    @property
    def fixed_arity(self) -> int:
        return len(self.params)

    @property
    def is_variadic(self) -> bool:
        return self.varargs is not None

    def accepts_count(self, count: int) -> bool:
        """Check whether a call with `count` arguments fits this signature."""
        if count < self.fixed_arity:
            return False
        return self.is_variadic or count == self.fixed_arity

    def bind(self, values: Sequence[Any]) -> Tuple["CallableSignature", Tuple[Any, ...]]:
        """
        Work out the effective signature after binding leading values.

        Returns the reduced signature together with the argument prefix to
        store. Values up to the fixed arity fill fixed parameters. Values past
        that land in the variadic tail, which stays open; whether a lone
        bound sequence is spread is decided at call time.

        Raises SignatureError when binding past a non-variadic signature.
        """
        values = tuple(values)
        fixed = self.fixed_arity

        if len(values) <= fixed:
            return replace(self, params=self.params[len(values):]), values

        if not self.is_variadic:
            raise error_over_binding(self, len(values))

        return replace(self, params=()), values

    def __str__(self) -> str:
        parts = [str(p) for p in self.params]
        if self.varargs is not None:
            parts.append(f"{self.varargs}...")
        return f"{self.name}({', '.join(parts)}) -> {self.return_type.name}"


def make_signature(name: str, param_types: Sequence[Type], return_type: Type = OBJECT,
                   varargs_type: Optional[Type] = None) -> CallableSignature:
    """
    Helper to create a CallableSignature from a simple list of parameter types.

    Generates synthetic parameter names (arg0, arg1, ...) and names the
    variadic tail "args".
    """
    params = tuple(Parameter(f"arg{i}", t) for i, t in enumerate(param_types))
    varargs = Parameter("args", varargs_type) if varargs_type is not None else None
    return CallableSignature(
        name=name,
        params=params,
        varargs=varargs,
        return_type=return_type,
    )


def signature_from_function(func: Callable[..., Any], name: Optional[str] = None) -> CallableSignature:
    """
    Reflect a CallableSignature from a Python function.

    Positional parameters become fixed parameters and `*args` becomes the
    variadic tail. Annotations are mapped through resolve_annotation; a
    missing annotation means `object`. Keyword-only parameters without
    defaults cannot be supplied positionally and are rejected.
    """
    sig = inspect.signature(func)
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        hints = {}

    params = []
    varargs = None
    for p in sig.parameters.values():
        ptype = resolve_annotation(hints.get(p.name, object))
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            params.append(Parameter(p.name, ptype))
        elif p.kind == inspect.Parameter.VAR_POSITIONAL:
            varargs = Parameter(p.name, ptype)
        elif p.kind == inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty:
            raise ValueError(
                f"cannot reflect '{func.__name__}': keyword-only parameter '{p.name}' has no default"
            )

    return_annotation = hints.get("return", object)
    return CallableSignature(
        name=name or func.__name__,
        params=tuple(params),
        varargs=varargs,
        return_type=resolve_annotation(return_annotation),
    )
