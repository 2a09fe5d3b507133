"""
Parameter type descriptors for registered functions.

Descriptors are what a CallableSignature records for each parameter. They
are deliberately small: the expression language owns coercion, this layer
only needs to answer "may this value be passed here?".

    Scalars: int, float, bool, string
    Generic: object (anything), list<T>, T?
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union, get_args, get_origin
from abc import ABC, abstractmethod
import collections.abc
import types as _pytypes


# =============================================================================
# Type Classes
# =============================================================================

@dataclass(frozen=True)
class Type(ABC):
    """Base class for all parameter types."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The type name for display/errors."""
        pass

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Check if a runtime value may be passed where this type is declared."""
        pass

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PrimitiveType(Type):
    """A scalar type (int, float, bool, string)."""
    _name: str
    python_types: Tuple[type, ...] = ()

    @property
    def name(self) -> str:
        return self._name

    def accepts(self, value: Any) -> bool:
        # bool is an int subclass in Python but not a number here
        if isinstance(value, bool) and self._name != "bool":
            return False
        return isinstance(value, self.python_types)


@dataclass(frozen=True)
class ObjectType(Type):
    """The top type: any value, including None."""

    @property
    def name(self) -> str:
        return "object"

    def accepts(self, value: Any) -> bool:
        return True


@dataclass(frozen=True)
class ListType(Type):
    """A generic list type: list<T>."""
    element_type: Type

    @property
    def name(self) -> str:
        return f"list<{self.element_type.name}>"

    def accepts(self, value: Any) -> bool:
        if not is_sequence(value):
            return False
        return all(self.element_type.accepts(item) for item in value)


@dataclass(frozen=True)
class OptionalType(Type):
    """An optional type: T?"""
    inner_type: Type

    @property
    def name(self) -> str:
        return f"{self.inner_type.name}?"

    def accepts(self, value: Any) -> bool:
        return value is None or self.inner_type.accepts(value)


# =============================================================================
# Built-in Type Instances
# =============================================================================

INT = PrimitiveType("int", (int,))
FLOAT = PrimitiveType("float", (int, float))
BOOL = PrimitiveType("bool", (bool,))
STRING = PrimitiveType("string", (str,))
OBJECT = ObjectType()

BUILTIN_TYPES: Dict[str, Type] = {
    "int": INT,
    "float": FLOAT,
    "bool": BOOL,
    "string": STRING,
    "object": OBJECT,
}

_ANNOTATION_TYPES: Dict[Any, Type] = {
    int: INT,
    float: FLOAT,
    bool: BOOL,
    str: STRING,
    object: OBJECT,
}


def resolve_type_name(name: str) -> Optional[Type]:
    """Look up a type by name."""
    return BUILTIN_TYPES.get(name)


def is_sequence(value: Any) -> bool:
    """True for list-like values; strings and bytes are scalars here."""
    return isinstance(value, (list, tuple))


def resolve_annotation(annotation: Any) -> Type:
    """
    Map a Python annotation onto a type descriptor.

    Unknown or missing annotations resolve to OBJECT so reflected functions
    stay callable with any argument.
    """
    for python_type, descriptor in _ANNOTATION_TYPES.items():
        if annotation is python_type:
            return descriptor

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Union or origin is _pytypes.UnionType:
        members = [a for a in args if a is not type(None)]
        if len(members) == 1 and len(args) == 2:
            return OptionalType(resolve_annotation(members[0]))
        return OBJECT

    if annotation in (list, tuple) or origin in (list, tuple, collections.abc.Sequence):
        if args:
            return ListType(resolve_annotation(args[0]))
        return ListType(OBJECT)

    return OBJECT


def type_name_of(value: Any) -> str:
    """Short display name for a runtime value's type, used in error messages."""
    if value is None:
        return "none"
    for descriptor in (BOOL, INT, FLOAT, STRING):
        if descriptor.accepts(value):
            return descriptor.name
    if is_sequence(value):
        return "list"
    return type(value).__name__
